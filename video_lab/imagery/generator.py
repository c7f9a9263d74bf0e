from typing import Optional, Sequence

from video_lab.config_manager import GenerationConfig
from video_lab.imagery.models import ImageryFacet, SectionPrompt
from video_lab.imagery.templates import (
    FRAMINGS,
    HERO_PROMPTS,
    PALETTES,
    SECTION_PROMPTS,
    STYLE_NOTES,
    THUMBNAIL_CONCEPTS,
)
from video_lab.planning.models import Brief, Section
from video_lab.planning.planner import brief_context
from video_lab.utils.text_utils import render_template
from video_lab.variation.source import VariationSource

THUMBNAIL_COUNT = 3


def synthesize_imagery(
    brief: Brief,
    sections: Sequence[Section],
    source: VariationSource,
    config: Optional[GenerationConfig] = None,
) -> ImageryFacet:
    context = brief_context(brief, config)
    framings = source.shuffled(FRAMINGS)

    section_prompts = tuple(
        SectionPrompt(
            section_id=section.id,
            prompt=render_template(source.pick(SECTION_PROMPTS[section.role]), context),
            framing=framings[position % len(framings)],
        )
        for position, section in enumerate(sections)
    )

    return ImageryFacet(
        hero_prompt=render_template(source.pick(HERO_PROMPTS), context),
        section_prompts=section_prompts,
        thumbnail_concepts=tuple(
            render_template(concept, context) for concept in source.sample(THUMBNAIL_CONCEPTS, THUMBNAIL_COUNT)
        ),
        style_notes=render_template(source.pick(STYLE_NOTES), context),
        palette=source.pick(PALETTES),
    )
