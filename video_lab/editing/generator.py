from typing import Optional, Sequence

from video_lab.config_manager import GenerationConfig
from video_lab.editing.models import Beat, EditingFacet
from video_lab.editing.templates import (
    BEAT_DESCRIPTIONS,
    DELIVERY_CHECKLIST,
    END_SCREEN_DESCRIPTIONS,
    LAYER_NOTES,
    MOTION_GRAPHICS,
    SOUND_DESIGN,
    TRANSITIONS,
)
from video_lab.planning.models import Brief, Section
from video_lab.planning.planner import brief_context, runtime_seconds, section_start_seconds
from video_lab.utils.text_utils import format_timecode, render_template
from video_lab.variation.source import VariationSource

TRANSITION_COUNT = 3
MOTION_GRAPHICS_COUNT = 3
SOUND_DESIGN_COUNT = 3
CHECKLIST_COUNT = 5


def synthesize_editing(
    brief: Brief,
    sections: Sequence[Section],
    source: VariationSource,
    config: Optional[GenerationConfig] = None,
) -> EditingFacet:
    config = config or GenerationConfig()
    context = brief_context(brief, config)
    total = runtime_seconds(brief, len(sections), config)
    starts = section_start_seconds(total, len(sections))

    beats = [
        Beat(
            timecode=format_timecode(start),
            description=f"{section.label}: {render_template(source.pick(BEAT_DESCRIPTIONS[section.role]), context)}",
            layer_notes=source.pick(LAYER_NOTES),
        )
        for section, start in zip(sections, starts)
    ]

    end_screen = max(starts[-1] + 1, total - config.end_screen_seconds)
    beats.append(
        Beat(
            timecode=format_timecode(end_screen),
            description=source.pick(END_SCREEN_DESCRIPTIONS),
            layer_notes=source.pick(LAYER_NOTES),
        )
    )

    return EditingFacet(
        structure_beats=tuple(beats),
        transitions=tuple(source.sample(TRANSITIONS, TRANSITION_COUNT)),
        motion_graphics=tuple(source.sample(MOTION_GRAPHICS, MOTION_GRAPHICS_COUNT)),
        sound_design=tuple(source.sample(SOUND_DESIGN, SOUND_DESIGN_COUNT)),
        delivery_checklist=tuple(source.sample(DELIVERY_CHECKLIST, CHECKLIST_COUNT)),
    )
