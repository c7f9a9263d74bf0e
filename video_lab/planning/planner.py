import math
from typing import Dict, List, Optional, Tuple

from loguru import logger

from video_lab.config_manager import GenerationConfig
from video_lab.planning.models import ArcRole, Brief, Section, section_id
from video_lab.planning.templates import (
    CORE_LABELS,
    CORE_OBJECTIVES,
    FOLDED_RESOLUTION_LABEL,
    FOLDED_RESOLUTION_OBJECTIVE,
    SECTION_LABELS,
    SECTION_OBJECTIVES,
)
from video_lab.utils.text_utils import format_runtime, lower_first, or_default, parse_runtime_minutes

DEFAULT_TOPIC = "your topic"
DEFAULT_AUDIENCE = "your audience"
DEFAULT_TONE = "conversational"
DEFAULT_STYLE = "modern explainer"
DEFAULT_RUNTIME_LABEL = "focused"


def section_count_for_runtime(minutes: Optional[float], config: GenerationConfig) -> int:
    """
    Maps a runtime to a section count. Non-decreasing in minutes.

    None -> default count; short (< short_max) -> short count; medium is split at
    medium_split; long (> long_min) adds one section per long_extra_every minutes.
    """
    if minutes is None:
        return config.default_section_count

    minutes = min(minutes, config.max_runtime_minutes)
    if minutes < config.short_max_minutes:
        count = config.short_section_count
    elif minutes < config.medium_split_minutes:
        count = config.medium_section_count
    elif minutes <= config.long_min_minutes:
        count = config.medium_long_section_count
    else:
        extra = math.floor((minutes - config.long_min_minutes) / config.long_extra_every_minutes)
        count = config.long_section_count + extra
    return min(count, config.max_section_count)


def arc_roles(count: int) -> List[ArcRole]:
    if count <= 1:
        return [ArcRole.CORE]
    if count == 2:
        return [ArcRole.HOOK, ArcRole.RESOLUTION]
    if count == 3:
        return [ArcRole.HOOK, ArcRole.CORE, ArcRole.RESOLUTION]
    if count == 4:
        return [ArcRole.HOOK, ArcRole.CONTEXT, ArcRole.CORE, ArcRole.RESOLUTION]
    cores = [ArcRole.CORE] * (count - 4)
    return [ArcRole.HOOK, ArcRole.CONTEXT, *cores, ArcRole.RESOLUTION, ArcRole.CALL_TO_ACTION]


def _core_entry(position: int) -> Tuple[str, str]:
    label = CORE_LABELS[position % len(CORE_LABELS)]
    objective = CORE_OBJECTIVES[position % len(CORE_OBJECTIVES)]
    cycle = position // len(CORE_LABELS)
    if cycle:
        label = f"{label} (Part {cycle + 1})"
    return label, objective


def plan_sections(brief: Brief, config: Optional[GenerationConfig] = None) -> Tuple[Section, ...]:
    """Builds the ordered section list. Depends on the brief only, never on the seed."""
    config = config or GenerationConfig()
    minutes = parse_runtime_minutes(brief.desired_length)
    roles = arc_roles(section_count_for_runtime(minutes, config))
    folds_call_to_action = ArcRole.CALL_TO_ACTION not in roles
    context = brief_context(brief, config)

    sections = []
    core_position = 0
    for position, role in enumerate(roles, start=1):
        if role is ArcRole.CORE:
            label, objective = _core_entry(core_position)
            core_position += 1
        elif role is ArcRole.RESOLUTION and folds_call_to_action:
            label, objective = FOLDED_RESOLUTION_LABEL, FOLDED_RESOLUTION_OBJECTIVE
        else:
            label, objective = SECTION_LABELS[role], SECTION_OBJECTIVES[role]
        sections.append(
            Section(
                id=section_id(position),
                label=label,
                objective=objective.format(**context),
                role=role,
            )
        )

    logger.debug(f"Planned {len(sections)} sections for runtime {brief.desired_length!r}")
    return tuple(sections)


def runtime_seconds(brief: Brief, section_count: int, config: Optional[GenerationConfig] = None) -> int:
    """Total runtime used for timing, long enough to give every section min_chapter_seconds."""
    config = config or GenerationConfig()
    minutes = parse_runtime_minutes(brief.desired_length) or config.default_runtime_minutes
    total = int(round(min(minutes, config.max_runtime_minutes) * 60))
    return max(total, section_count * config.min_chapter_seconds)


def section_start_seconds(total_seconds: int, count: int) -> Tuple[int, ...]:
    """Evenly spaced start offsets, first at 0. Strictly increasing when total_seconds >= count."""
    return tuple(position * total_seconds // count for position in range(count))


def brief_context(brief: Brief, config: Optional[GenerationConfig] = None) -> Dict[str, str]:
    """Substitution map for the template catalogs, with neutral defaults for empty fields."""
    config = config or GenerationConfig()
    minutes = parse_runtime_minutes(brief.desired_length)
    if minutes is None:
        runtime = DEFAULT_RUNTIME_LABEL
    else:
        runtime = format_runtime(min(minutes, config.max_runtime_minutes))
    return {
        "topic": or_default(brief.topic, DEFAULT_TOPIC),
        "audience": or_default(brief.target_audience, DEFAULT_AUDIENCE),
        "tone": lower_first(or_default(brief.tone, DEFAULT_TONE)),
        "style": lower_first(or_default(brief.production_style, DEFAULT_STYLE)),
        "runtime": runtime,
    }
