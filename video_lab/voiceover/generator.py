from typing import Optional, Sequence

from video_lab.config_manager import GenerationConfig
from video_lab.planning.models import Brief, Section
from video_lab.planning.planner import brief_context
from video_lab.utils.text_utils import casefold_key, dedupe, render_template, significant_words
from video_lab.variation.source import VariationSource
from video_lab.voiceover.models import VoiceoverFacet, VoiceSegment
from video_lab.voiceover.templates import CADENCES, DIRECTIONS, NARRATIONS, PACING_NOTES, POWER_WORDS

PACING_NOTE_COUNT = 3
MAX_TOPIC_EMPHASIS = 3
MAX_EMPHASIS_WORDS = 6


def synthesize_voiceover(
    brief: Brief,
    sections: Sequence[Section],
    source: VariationSource,
    config: Optional[GenerationConfig] = None,
) -> VoiceoverFacet:
    context = brief_context(brief, config)

    segments = tuple(
        VoiceSegment(
            section_id=section.id,
            narration=render_template(source.pick(NARRATIONS[section.role]), context),
            cadence=source.pick(CADENCES),
        )
        for section in sections
    )

    topic_words = significant_words(brief.topic)[:MAX_TOPIC_EMPHASIS]
    power_words = source.sample(POWER_WORDS, MAX_EMPHASIS_WORDS - len(topic_words))
    emphasis = dedupe([*topic_words, *power_words], key=casefold_key)[:MAX_EMPHASIS_WORDS]

    return VoiceoverFacet(
        direction=render_template(source.pick(DIRECTIONS), context),
        segments=segments,
        pacing_notes=tuple(source.sample(PACING_NOTES, PACING_NOTE_COUNT)),
        emphasis_words=tuple(emphasis),
    )
