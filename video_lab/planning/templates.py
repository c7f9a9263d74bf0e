from video_lab.planning.models import ArcRole

SECTION_LABELS = {
    ArcRole.HOOK: "Cold Open & Setup",
    ArcRole.CONTEXT: "Rising Context",
    ArcRole.RESOLUTION: "Resolution",
    ArcRole.CALL_TO_ACTION: "Call to Action",
}

# Successive core sections take the next label in order.
CORE_LABELS = (
    "Core Demonstration",
    "Deep Dive",
    "Advanced Playbook",
    "Case Study",
    "Pitfalls & Fixes",
)

# Used when the arc is too short for a dedicated call-to-action section.
FOLDED_RESOLUTION_LABEL = "Resolution & Next Step"

SECTION_OBJECTIVES = {
    ArcRole.HOOK: "Stop the scroll and frame why {topic} matters to {audience} right now.",
    ArcRole.CONTEXT: "Lay out the problem space and the stakes {audience} already feel around {topic}.",
    ArcRole.RESOLUTION: "Tie the walkthrough back to the opening promise and show the finished result.",
    ArcRole.CALL_TO_ACTION: "Convert attention into a subscribe, comment or next-video click.",
}

CORE_OBJECTIVES = (
    "Demonstrate the central {topic} workflow step by step.",
    "Go one layer deeper on the details that make {topic} work in practice.",
    "Show the advanced moves experienced {audience} use to push {topic} further.",
    "Walk through a concrete example of {topic} from start to finish.",
    "Call out the mistakes that trip up {audience} and how to avoid them.",
)

FOLDED_RESOLUTION_OBJECTIVE = (
    "Land the payoff for {audience} and point them to the single next step with {topic}."
)
