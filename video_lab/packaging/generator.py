from typing import List, Optional, Sequence

from video_lab.config_manager import GenerationConfig
from video_lab.packaging.models import Chapter, MetadataFacet
from video_lab.packaging.templates import (
    CHAPTER_SUMMARIES,
    DESCRIPTION_CLOSERS,
    DESCRIPTIONS,
    HASHTAGS,
    TAGS,
    TITLES,
    UPLOAD_NOTES,
)
from video_lab.planning.models import Brief, Section
from video_lab.planning.planner import brief_context, runtime_seconds, section_start_seconds
from video_lab.utils.text_utils import casefold_key, dedupe, format_timecode, render_template, to_hashtag, to_tag
from video_lab.variation.source import VariationSource

MAX_TAGS = 12
CATALOG_TAG_COUNT = 5
MAX_HASHTAGS = 5
UPLOAD_NOTE_COUNT = 4


def _brief_tags(brief: Brief) -> List[str]:
    tags = [brief.topic, brief.target_audience, brief.production_style]
    if brief.topic:
        tags.append(f"{brief.topic} tutorial")
        if brief.target_audience:
            tags.append(f"{brief.topic} for {brief.target_audience}")
    return [to_tag(tag) for tag in tags]


def synthesize_metadata(
    brief: Brief,
    sections: Sequence[Section],
    source: VariationSource,
    config: Optional[GenerationConfig] = None,
) -> MetadataFacet:
    config = config or GenerationConfig()
    context = brief_context(brief, config)
    total = runtime_seconds(brief, len(sections), config)
    starts = section_start_seconds(total, len(sections))

    description = " ".join(
        [
            render_template(source.pick(DESCRIPTIONS), context),
            source.pick(DESCRIPTION_CLOSERS),
        ]
    )

    tags = [tag for tag in _brief_tags(brief) + source.sample(TAGS, CATALOG_TAG_COUNT) if tag]
    hashtags = [tag for tag in [to_hashtag(brief.topic), *source.shuffled(HASHTAGS)] if tag]

    chapters = tuple(
        Chapter(
            timestamp=format_timecode(start),
            label=section.label,
            summary=source.pick(CHAPTER_SUMMARIES[section.role]),
        )
        for section, start in zip(sections, starts)
    )

    return MetadataFacet(
        primary_title=render_template(source.pick(TITLES), context),
        description=description,
        tags=tuple(dedupe(tags, key=casefold_key)[:MAX_TAGS]),
        hashtags=tuple(dedupe(hashtags, key=casefold_key)[:MAX_HASHTAGS]),
        chapters=chapters,
        upload_notes=tuple(source.sample(UPLOAD_NOTES, UPLOAD_NOTE_COUNT)),
    )
