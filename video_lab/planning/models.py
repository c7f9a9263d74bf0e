from enum import Enum
from typing import Annotated, Sequence, Tuple

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints, field_validator
from pydantic.alias_generators import to_camel

from video_lab.utils.text_utils import normalize_text, parse_timecode


class PackageModel(BaseModel):
    """Immutable model with camelCase JSON aliases for the presentation layer."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("text must not be blank")
    return value


Text = Annotated[str, AfterValidator(_require_text)]
TextList = Annotated[Tuple[Text, ...], Field(min_length=1)]

# "section1", "section2", ... Correlates script, imagery and voiceover entries.
SectionId = Annotated[str, StringConstraints(pattern=r"^section[1-9][0-9]*$")]

# MM:SS, minutes may run past two digits for long videos
Timecode = Annotated[str, StringConstraints(pattern=r"^\d{2,}:[0-5]\d$")]


def check_timeline(timecodes: Sequence[str]) -> None:
    """Raises ValueError unless the timecodes start at 00:00 and strictly increase."""
    seconds = [parse_timecode(code) for code in timecodes]
    if seconds and seconds[0] != 0:
        raise ValueError(f"Timeline must start at 00:00, got {timecodes[0]}")
    for previous, current in zip(seconds, seconds[1:]):
        if current <= previous:
            raise ValueError("Timeline must be strictly increasing")


def section_id(position: int) -> SectionId:
    """Builds the id for the 1-based section position."""
    if position < 1:
        raise ValueError(f"Section positions start at 1, got {position}")
    return f"section{position}"


class Brief(PackageModel):
    """Free-text creative brief. Every field may be empty."""

    topic: str = Field(default="", description="Central topic of the video")
    target_audience: str = Field(default="", description="Who the video is for")
    desired_length: str = Field(default="", description="Desired runtime, e.g. '12 minutes'")
    tone: str = Field(default="", description="Voice and tone, e.g. 'High-energy'")
    production_style: str = Field(default="", description="Production style, e.g. 'Documentary hybrid'")

    @field_validator("topic", "target_audience", "desired_length", "tone", "production_style", mode="before")
    @classmethod
    def _normalize(cls, value: object) -> str:
        return normalize_text(value)


class BriefContext(PackageModel):
    """The brief as the catalogs see it: empty fields replaced by neutral defaults."""

    topic: Text
    audience: Text
    tone: Text
    style: Text
    runtime: Text


class ArcRole(str, Enum):
    HOOK = "hook"
    CONTEXT = "context"
    CORE = "core"
    RESOLUTION = "resolution"
    CALL_TO_ACTION = "call_to_action"


class Section(PackageModel):
    """A planned narrative unit shared by the script, imagery and voiceover facets."""

    id: SectionId
    label: Text
    objective: Text
    role: ArcRole
