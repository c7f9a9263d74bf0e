from typing import Tuple

from pydantic import Field

from video_lab.planning.models import PackageModel, SectionId, Text, TextList


class ScriptSection(PackageModel):
    """Script beat for one planned section; id, label and objective mirror the Section."""

    id: SectionId
    label: Text
    objective: Text
    talking_points: TextList
    engagement_cue: Text


class ScriptFacet(PackageModel):
    opening: Text = Field(..., description="Opening hook line read before the first section")
    sections: Tuple[ScriptSection, ...] = Field(..., min_length=1)
    transitions: TextList
    supporting_details: TextList
    outro: Text
    call_to_action: Text
