from video_lab.planning.models import ArcRole

OPENINGS = (
    "Here's the thing nobody tells {audience} about {topic}.",
    "In the next few minutes, you'll see {topic} go from messy to effortless.",
    "If {topic} has ever felt overwhelming, this is the video that changes that.",
    "Give me one {runtime} session and I'll show you the {topic} playbook I actually use.",
    "Quick question: what would you build if {topic} took half the time?",
)

TALKING_POINTS = {
    ArcRole.HOOK: (
        "Open on the end result of {topic} before explaining anything.",
        "Name the single frustration {audience} feel most often.",
        "Promise one concrete outcome the viewer will have by the end.",
        "Tease the surprising moment coming later in the video.",
        "State who this is for: {audience}, and who can skip it.",
    ),
    ArcRole.CONTEXT: (
        "Explain why the usual approach to {topic} breaks down.",
        "Share a quick story that shows the stakes for {audience}.",
        "Define the two or three terms the rest of the video depends on.",
        "Show what changed recently that makes {topic} worth revisiting.",
        "Contrast the slow way with the approach this video teaches.",
    ),
    ArcRole.CORE: (
        "Walk through the first step on screen, narrating each click.",
        "Pause on the decision point most people get wrong with {topic}.",
        "Show a real example, then the same example done better.",
        "Break the process into a numbered checklist viewers can follow.",
        "Highlight a shortcut that saves {audience} the most time.",
        "Explain why each step matters, not just what it is.",
        "Show the result after each stage so progress stays visible.",
    ),
    ArcRole.RESOLUTION: (
        "Recap the full {topic} system in under thirty seconds.",
        "Show the before-and-after side by side.",
        "Return to the opening promise and prove it was kept.",
        "Share the one habit that keeps the system working long term.",
        "Answer the most likely follow-up question from {audience}.",
    ),
    ArcRole.CALL_TO_ACTION: (
        "Point to the free template linked in the description.",
        "Ask viewers which step they'll try first in the comments.",
        "Tease the next video in the series about {topic}.",
        "Invite {audience} to subscribe for the follow-up deep dive.",
        "Recommend the single best next video to watch.",
    ),
}

ENGAGEMENT_CUES = (
    "Ask viewers to comment their biggest {topic} struggle.",
    "On-screen poll: which approach do you use today?",
    "Pin a comment with the resource mentioned here.",
    "Prompt viewers to pause and try this step themselves.",
    "Drop a quick like-reminder tied to the payoff just shown.",
    "Pop-up card linking the related tutorial.",
    "Challenge viewers to share their result with a timestamp.",
)

TRANSITIONS = (
    "Now that the groundwork is set, let's build.",
    "But that's only half the story.",
    "Here's where it gets interesting.",
    "Let's put that into practice.",
    "So what does this look like for real?",
    "With that in place, the next step is easy.",
    "Before we go further, one important detail.",
    "And this is the part most people skip.",
    "Let's zoom out for a second.",
    "Time to bring it all together.",
)

SUPPORTING_DETAILS = (
    "Cite one statistic or study that backs up the core claim about {topic}.",
    "Show a screenshot of the finished setup as proof.",
    "Mention the tools used and link them in the description.",
    "Include a quick comparison table of the options covered.",
    "Add a real viewer question to ground the explanation.",
    "Reference an expert or creator who popularized the approach.",
    "Note the time each step takes so {audience} can plan.",
    "List the prerequisites up front so nobody gets stuck.",
)

OUTROS = (
    "That's the full {topic} system. Build it once and it keeps paying off.",
    "You now have everything you need to make {topic} work for you.",
    "Start small, keep it simple, and let the system do the heavy lifting.",
    "Try one piece of this today and you'll feel the difference by next week.",
)

CALLS_TO_ACTION = (
    "Subscribe for the next {topic} breakdown and grab the free template below.",
    "Comment the step you'll try first and I'll reply with a tip.",
    "Watch the follow-up next, where we take {topic} even further.",
    "Hit subscribe if this saved you time, and share it with one friend who needs it.",
)
