from typing import Tuple

from pydantic import Field

from video_lab.planning.models import PackageModel, SectionId, Text, TextList


class SectionPrompt(PackageModel):
    section_id: SectionId
    prompt: Text
    framing: Text


class ImageryFacet(PackageModel):
    hero_prompt: Text
    section_prompts: Tuple[SectionPrompt, ...] = Field(..., min_length=1)
    thumbnail_concepts: TextList
    style_notes: Text
    palette: TextList = Field(..., description="Ordered 'Name #RRGGBB' tokens")
