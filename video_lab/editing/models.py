from typing import Tuple

from pydantic import Field, model_validator

from video_lab.planning.models import PackageModel, Text, TextList, Timecode, check_timeline


class Beat(PackageModel):
    timecode: Timecode
    description: Text
    layer_notes: Text


class EditingFacet(PackageModel):
    structure_beats: Tuple[Beat, ...] = Field(..., min_length=1)
    transitions: TextList
    motion_graphics: TextList
    sound_design: TextList
    delivery_checklist: TextList

    @model_validator(mode="after")
    def _check_beats(self) -> "EditingFacet":
        check_timeline([beat.timecode for beat in self.structure_beats])
        return self
