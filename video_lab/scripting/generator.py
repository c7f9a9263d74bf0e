from typing import Optional, Sequence

from video_lab.config_manager import GenerationConfig
from video_lab.planning.models import Brief, Section
from video_lab.planning.planner import brief_context
from video_lab.scripting.models import ScriptFacet, ScriptSection
from video_lab.scripting.templates import (
    CALLS_TO_ACTION,
    ENGAGEMENT_CUES,
    OPENINGS,
    OUTROS,
    SUPPORTING_DETAILS,
    TALKING_POINTS,
    TRANSITIONS,
)
from video_lab.utils.text_utils import render_template
from video_lab.variation.source import VariationSource

TALKING_POINT_COUNT = 3
SUPPORTING_DETAIL_COUNT = 4


def synthesize_script(
    brief: Brief,
    sections: Sequence[Section],
    source: VariationSource,
    config: Optional[GenerationConfig] = None,
) -> ScriptFacet:
    context = brief_context(brief, config)

    script_sections = []
    for section in sections:
        points = source.sample(TALKING_POINTS[section.role], TALKING_POINT_COUNT)
        script_sections.append(
            ScriptSection(
                id=section.id,
                label=section.label,
                objective=section.objective,
                talking_points=tuple(render_template(point, context) for point in points),
                engagement_cue=render_template(source.pick(ENGAGEMENT_CUES), context),
            )
        )

    # One bridge between each pair of consecutive sections
    transitions = source.sample(TRANSITIONS, max(1, len(sections) - 1))

    return ScriptFacet(
        opening=render_template(source.pick(OPENINGS), context),
        sections=tuple(script_sections),
        transitions=tuple(transitions),
        supporting_details=tuple(
            render_template(detail, context)
            for detail in source.sample(SUPPORTING_DETAILS, SUPPORTING_DETAIL_COUNT)
        ),
        outro=render_template(source.pick(OUTROS), context),
        call_to_action=render_template(source.pick(CALLS_TO_ACTION), context),
    )
