from typing import Tuple

from pydantic import Field

from video_lab.planning.models import PackageModel, SectionId, Text, TextList


class VoiceSegment(PackageModel):
    section_id: SectionId
    narration: Text
    cadence: Text


class VoiceoverFacet(PackageModel):
    direction: Text = Field(..., description="Overall performance direction for the narrator")
    segments: Tuple[VoiceSegment, ...] = Field(..., min_length=1)
    pacing_notes: TextList
    emphasis_words: TextList
