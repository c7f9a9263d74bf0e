from typing import Optional, Sequence

from video_lab.config_manager import GenerationConfig
from video_lab.ideation.models import IdeaFacet
from video_lab.ideation.templates import (
    AUDIENCE_PROMISES,
    DIFFERENTIATORS,
    ELEVATOR_PITCHES,
    HOOKS,
    WORKING_TITLES,
)
from video_lab.planning.models import Brief, Section
from video_lab.planning.planner import brief_context
from video_lab.utils.text_utils import render_template
from video_lab.variation.source import VariationSource

DIFFERENTIATOR_COUNT = 3


def synthesize_idea(
    brief: Brief,
    sections: Sequence[Section],
    source: VariationSource,
    config: Optional[GenerationConfig] = None,
) -> IdeaFacet:
    context = brief_context(brief, config)
    title_count = source.between(3, 4)

    return IdeaFacet(
        hook=render_template(source.pick(HOOKS), context),
        elevator_pitch=render_template(source.pick(ELEVATOR_PITCHES), context),
        audience_promise=render_template(source.pick(AUDIENCE_PROMISES), context),
        differentiators=tuple(
            render_template(line, context) for line in source.sample(DIFFERENTIATORS, DIFFERENTIATOR_COUNT)
        ),
        working_titles=tuple(
            render_template(title, context) for title in source.sample(WORKING_TITLES, title_count)
        ),
    )
