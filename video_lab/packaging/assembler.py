from typing import Dict, Sequence, Tuple

from video_lab.editing.models import EditingFacet
from video_lab.ideation.models import IdeaFacet
from video_lab.imagery.models import ImageryFacet
from video_lab.packaging.models import MetadataFacet, VideoPackage
from video_lab.planning.models import Brief, BriefContext, Section
from video_lab.scripting.models import ScriptFacet
from video_lab.voiceover.models import VoiceoverFacet


def section_id_sequences(package: VideoPackage) -> Dict[str, Tuple[str, ...]]:
    """Ordered section ids referenced by each section-scoped facet."""
    return {
        "script": tuple(section.id for section in package.script.sections),
        "imagery": tuple(prompt.section_id for prompt in package.imagery.section_prompts),
        "voiceover": tuple(segment.section_id for segment in package.voiceover.segments),
    }


def assemble_package(
    brief: Brief,
    context: BriefContext,
    seed: int,
    sections: Sequence[Section],
    idea: IdeaFacet,
    script: ScriptFacet,
    imagery: ImageryFacet,
    voiceover: VoiceoverFacet,
    editing: EditingFacet,
    metadata: MetadataFacet,
) -> VideoPackage:
    package = VideoPackage(
        brief=brief,
        context=context,
        seed=seed,
        sections=tuple(sections),
        idea=idea,
        script=script,
        imagery=imagery,
        voiceover=voiceover,
        editing=editing,
        metadata=metadata,
    )

    # Holds by construction; checked only when assertions are enabled (not under python -O).
    planned = tuple(section.id for section in package.sections)
    for facet, ids in section_id_sequences(package).items():
        assert ids == planned, f"{facet} sections {ids} do not match planned sections {planned}"
    assert len(metadata.chapters) == len(planned), "chapters must map one-to-one onto sections"

    return package
