import json

import pytest
import yaml
from pydantic import ValidationError

from video_lab.config_manager import ConfigManager, GenerationConfig
from video_lab.engine import VideoPackageGenerator, generate_video_package, shuffle_video_package
from video_lab.errors import InvalidSeedError
from video_lab.packaging.assembler import section_id_sequences
from video_lab.planning.models import Brief
from video_lab.utils.text_utils import parse_timecode

SCENARIO_BRIEF = {
    "topic": "AI-Powered Notion Workflows",
    "targetAudience": "Solo creators",
    "desiredLength": "12 minutes",
    "tone": "High-energy",
    "productionStyle": "Documentary hybrid",
}

BRIEFS = [
    Brief.model_validate(SCENARIO_BRIEF),
    Brief(),
    Brief(topic="Sourdough baking", target_audience="Beginners", desired_length="3 min", tone="Calm"),
    Brief(topic="Rust async internals", desired_length="45 minutes", production_style="Whiteboard"),
    Brief(topic="Vlog", desired_length="90 seconds"),
]
SEEDS = [1, 2, 17, 10**12]

PLACEHOLDERS = ("undefined", "None", "null", "{", "}")


def _walk(value, path="package"):
    """Yields (path, value) for every leaf string and every list in a dumped package."""
    if isinstance(value, dict):
        for key, child in value.items():
            yield from _walk(child, f"{path}.{key}")
    elif isinstance(value, list):
        yield path, value
        for position, child in enumerate(value):
            yield from _walk(child, f"{path}[{position}]")
    else:
        yield path, value


@pytest.mark.parametrize("brief", BRIEFS)
@pytest.mark.parametrize("seed", SEEDS)
def test_generation_is_deterministic(brief, seed):
    first = generate_video_package(brief, seed)
    second = generate_video_package(brief, seed)
    assert first == second
    assert first.model_dump_json() == second.model_dump_json()


def test_seed_changes_output():
    brief = BRIEFS[0]
    assert generate_video_package(brief, 1) != generate_video_package(brief, 2)


@pytest.mark.parametrize("brief", BRIEFS)
@pytest.mark.parametrize("seed", SEEDS)
def test_section_ids_match_across_facets(brief, seed):
    package = generate_video_package(brief, seed)
    planned = tuple(section.id for section in package.sections)
    assert planned == tuple(f"section{n}" for n in range(1, len(planned) + 1))
    for ids in section_id_sequences(package).values():
        assert ids == planned


@pytest.mark.parametrize("brief", BRIEFS)
@pytest.mark.parametrize("seed", SEEDS)
def test_every_list_and_string_is_filled(brief, seed):
    dumped = generate_video_package(brief, seed).model_dump(mode="json", by_alias=True)
    for path, value in _walk(dumped):
        if isinstance(value, list):
            assert value, f"{path} is empty"
        # brief echoes the caller's input verbatim; context carries the defaulted values
        elif isinstance(value, str) and not path.startswith("package.brief"):
            assert value.strip(), f"{path} is blank"
            assert not any(marker in value for marker in PLACEHOLDERS), f"{path} = {value!r}"


@pytest.mark.parametrize("brief", BRIEFS)
@pytest.mark.parametrize("seed", SEEDS)
def test_timelines_start_at_zero_and_increase(brief, seed):
    package = generate_video_package(brief, seed)
    for timecodes in (
        [beat.timecode for beat in package.editing.structure_beats],
        [chapter.timestamp for chapter in package.metadata.chapters],
    ):
        seconds = [parse_timecode(code) for code in timecodes]
        assert timecodes[0] == "00:00"
        assert all(later > earlier for earlier, later in zip(seconds, seconds[1:]))


def test_empty_brief_degrades_gracefully():
    empty = {"topic": "", "targetAudience": "", "desiredLength": "", "tone": "", "productionStyle": ""}
    package = generate_video_package(empty, 1)
    assert len(package.sections) == 4
    assert "your topic" in package.metadata.primary_title.lower()
    assert package.metadata.hashtags
    assert package.brief == Brief()
    assert package.context.topic == "your topic"
    assert package.context.audience == "your audience"
    assert package.context.runtime == "focused"
    assert all(value.strip() for value in package.context.model_dump().values())


def test_scenario_medium_runtime():
    package = generate_video_package(SCENARIO_BRIEF, 1)
    assert len(package.script.sections) in (4, 5)
    assert [p.section_id for p in package.imagery.section_prompts] == [s.id for s in package.script.sections]
    assert [s.section_id for s in package.voiceover.segments] == [s.id for s in package.script.sections]
    assert package.metadata.chapters[0].timestamp == "00:00"
    assert "AI-Powered Notion Workflows" in package.metadata.primary_title


def test_seed_bump_keeps_sections():
    first = generate_video_package(SCENARIO_BRIEF, 1)
    second = generate_video_package(SCENARIO_BRIEF, 2)
    assert first.sections == second.sections
    assert first.idea != second.idea or first.script != second.script


def test_runtime_drives_section_count_monotonically():
    counts = [
        len(generate_video_package({"topic": "Chess", "desiredLength": length}, 1).sections)
        for length in ("2 minutes", "7 minutes", "12 minutes", "20 minutes", "40 minutes")
    ]
    assert counts == sorted(counts)
    assert counts[0] < counts[-1]


@pytest.mark.parametrize("seed", [0, -3, True, 2.5, "1"])
def test_invalid_seed(seed):
    with pytest.raises(InvalidSeedError):
        generate_video_package(BRIEFS[0], seed)


def test_mapping_and_model_briefs_are_equivalent():
    snake = {
        "topic": "AI-Powered Notion Workflows",
        "target_audience": "Solo creators",
        "desired_length": "12 minutes",
        "tone": "High-energy",
        "production_style": "Documentary hybrid",
    }
    assert generate_video_package(snake, 3) == generate_video_package(SCENARIO_BRIEF, 3)


def test_shuffle_increments_seed():
    next_seed, package = shuffle_video_package(SCENARIO_BRIEF, 4)
    assert next_seed == 5
    assert package == generate_video_package(SCENARIO_BRIEF, 5)
    assert package.seed == 5


def test_package_is_immutable():
    package = generate_video_package(SCENARIO_BRIEF, 1)
    with pytest.raises(ValidationError):
        package.seed = 2
    with pytest.raises(ValidationError):
        package.metadata.primary_title = "Edited"
    assert isinstance(package.metadata.tags, tuple)


def test_json_uses_presentation_field_names():
    payload = json.loads(generate_video_package(SCENARIO_BRIEF, 1).model_dump_json(by_alias=True))
    assert "primaryTitle" in payload["metadata"]
    assert "talkingPoints" in payload["script"]["sections"][0]
    assert "sectionId" in payload["imagery"]["sectionPrompts"][0]
    assert "structureBeats" in payload["editing"]
    assert payload["brief"]["targetAudience"] == "Solo creators"


def test_unusual_text_never_fails():
    brief = {"topic": "{0} {topic} %s 🚀" * 50, "desiredLength": "1" * 400 + " minutes", "tone": "\t\n"}
    package = generate_video_package(brief, 1)
    assert 1 <= len(package.sections) <= GenerationConfig().max_section_count


@pytest.mark.parametrize("topic", ["CO₂ Emissions Explained", "Pricing per m²", "Python 3 vs 3½", "²₂½", "ΐ straße ǅ"])
def test_unicode_digits_in_topic_never_fail(topic):
    package = generate_video_package({"topic": topic, "desiredLength": "12 minutes"}, 1)
    assert package.metadata.hashtags
    assert all(tag.startswith("#") and len(tag) > 1 for tag in package.metadata.hashtags)


@pytest.fixture
def config_manager(tmp_path):
    config_path = tmp_path / "settings.yaml"
    with open(config_path, "w") as f:
        yaml.dump({"generation": {"default_section_count": 3}}, f)
    return ConfigManager(config_path=str(config_path))


def test_generator_uses_configured_settings(config_manager):
    generator = VideoPackageGenerator(config_manager)
    package = generator.generate(Brief(topic="Chess"), 1)
    assert len(package.sections) == 3


def test_generator_defaults_without_config():
    package = VideoPackageGenerator().generate(SCENARIO_BRIEF)
    assert package.seed == 1


def test_generator_logs_each_package(mocker):
    mock_logger = mocker.patch("video_lab.engine.logger")
    generator = VideoPackageGenerator()
    next_seed, _ = generator.shuffle(SCENARIO_BRIEF, 1)
    assert next_seed == 2
    assert mock_logger.info.called
