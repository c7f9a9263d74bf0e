from typing import Any, Mapping, Optional, Tuple, Union

from loguru import logger

from video_lab.config_manager import ConfigManager, GenerationConfig
from video_lab.editing.generator import synthesize_editing
from video_lab.ideation.generator import synthesize_idea
from video_lab.imagery.generator import synthesize_imagery
from video_lab.packaging.assembler import assemble_package
from video_lab.packaging.generator import synthesize_metadata
from video_lab.packaging.models import VideoPackage
from video_lab.planning.models import Brief, BriefContext
from video_lab.planning.planner import brief_context, plan_sections
from video_lab.scripting.generator import synthesize_script
from video_lab.variation.source import VariationSource, validate_seed
from video_lab.voiceover.generator import synthesize_voiceover

BriefInput = Union[Brief, Mapping[str, Any]]


def _as_brief(brief: BriefInput) -> Brief:
    if isinstance(brief, Brief):
        return brief
    return Brief.model_validate(dict(brief))


def generate_video_package(
    brief: BriefInput, seed: int, config: Optional[GenerationConfig] = None
) -> VideoPackage:
    """
    Builds the full production package for a brief and seed.

    Pure: the same (brief, seed, config) always yields an equal package. Any brief text is
    accepted; only an out-of-domain seed raises (InvalidSeedError).
    """
    seed = validate_seed(seed)
    brief = _as_brief(brief)
    config = config or GenerationConfig()

    root = VariationSource.for_brief(brief, seed)
    sections = plan_sections(brief, config)
    logger.debug(f"Generating package: topic={brief.topic!r} seed={seed} sections={len(sections)}")

    return assemble_package(
        brief=brief,
        context=BriefContext(**brief_context(brief, config)),
        seed=seed,
        sections=sections,
        idea=synthesize_idea(brief, sections, root.fork("idea"), config),
        script=synthesize_script(brief, sections, root.fork("script"), config),
        imagery=synthesize_imagery(brief, sections, root.fork("imagery"), config),
        voiceover=synthesize_voiceover(brief, sections, root.fork("voiceover"), config),
        editing=synthesize_editing(brief, sections, root.fork("editing"), config),
        metadata=synthesize_metadata(brief, sections, root.fork("metadata"), config),
    )


def shuffle_video_package(
    brief: BriefInput, seed: int, config: Optional[GenerationConfig] = None
) -> Tuple[int, VideoPackage]:
    """Re-rolls the package for the same brief: returns (seed + 1, package for seed + 1)."""
    next_seed = validate_seed(seed) + 1
    return next_seed, generate_video_package(brief, next_seed, config)


class VideoPackageGenerator:
    """Engine bound to the generation settings of a ConfigManager."""

    def __init__(self, config_manager: Optional[ConfigManager] = None):
        self.cfg: GenerationConfig = config_manager.generation if config_manager else GenerationConfig()

    def generate(self, brief: BriefInput, seed: int = 1) -> VideoPackage:
        package = generate_video_package(brief, seed, self.cfg)
        logger.info(f"Generated package '{package.metadata.primary_title}' (seed {seed})")
        return package

    def shuffle(self, brief: BriefInput, seed: int) -> Tuple[int, VideoPackage]:
        next_seed, package = shuffle_video_package(brief, seed, self.cfg)
        logger.info(f"Shuffled to seed {next_seed}: '{package.metadata.primary_title}'")
        return next_seed, package
