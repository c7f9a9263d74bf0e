from typing import Annotated, Tuple

from pydantic import AfterValidator, Field, model_validator

from video_lab.editing.models import EditingFacet
from video_lab.ideation.models import IdeaFacet
from video_lab.imagery.models import ImageryFacet
from video_lab.planning.models import Brief, BriefContext, PackageModel, Section, Text, TextList, Timecode, check_timeline
from video_lab.scripting.models import ScriptFacet
from video_lab.utils.text_utils import is_hashtag_char
from video_lab.voiceover.models import VoiceoverFacet


def _check_hashtag(value: str) -> str:
    if len(value) < 2 or not value.startswith("#") or not all(is_hashtag_char(char) for char in value[1:]):
        raise ValueError(f"Not a hashtag: {value!r}")
    return value


Hashtag = Annotated[str, AfterValidator(_check_hashtag)]


class Chapter(PackageModel):
    timestamp: Timecode
    label: Text
    summary: Text


class MetadataFacet(PackageModel):
    """Upload-ready publishing details."""

    primary_title: Text
    description: Text
    tags: TextList
    hashtags: Tuple[Hashtag, ...] = Field(..., min_length=1)
    chapters: Tuple[Chapter, ...] = Field(..., min_length=1)
    upload_notes: TextList

    @model_validator(mode="after")
    def _check_chapters(self) -> "MetadataFacet":
        check_timeline([chapter.timestamp for chapter in self.chapters])
        return self


class VideoPackage(PackageModel):
    """Complete production package for one (brief, seed) pair."""

    brief: Brief
    context: BriefContext
    seed: int = Field(..., ge=1)
    sections: Tuple[Section, ...] = Field(..., min_length=1)
    idea: IdeaFacet
    script: ScriptFacet
    imagery: ImageryFacet
    voiceover: VoiceoverFacet
    editing: EditingFacet
    metadata: MetadataFacet
