from pydantic import Field

from video_lab.planning.models import PackageModel, Text, TextList


class IdeaFacet(PackageModel):
    """Positioning for the video: the pitch a creator signs off on before scripting."""

    hook: Text
    elevator_pitch: Text
    audience_promise: Text
    differentiators: TextList = Field(..., description="Ordered reasons this take stands out")
    working_titles: TextList = Field(..., description="Ordered title candidates, each naming the topic")
