from video_lab.planning.models import ArcRole

DIRECTIONS = (
    "Deliver with {tone} warmth: smile through the hook, then settle into a confident teaching voice.",
    "Sound like a trusted friend who has already solved {topic}, {tone} but never rushed.",
    "Keep a {tone}, documentary-style read: measured, curious and precise on the key terms.",
    "Open big and {tone}, then drop the energy slightly for the walkthrough so every step lands.",
)

NARRATIONS = {
    ArcRole.HOOK: (
        "If you've ever struggled with {topic}, stay with me, because the next few minutes will change how you work.",
        "Here's the result. Now let me show you exactly how to get there with {topic}.",
        "{audience}, this one's for you: the {topic} playbook I wish I'd had on day one.",
    ),
    ArcRole.CONTEXT: (
        "Before we build anything, let's look at why {topic} trips so many people up.",
        "Most guides skip this part, but understanding the why makes every step after it easier.",
        "Here's the situation most {audience} are in right now, and why it costs them time.",
    ),
    ArcRole.CORE: (
        "Let's walk through it step by step. Follow along and pause whenever you need.",
        "This is the heart of {topic}. Watch closely, because this detail makes the difference.",
        "Now we go deeper. Here's how the pieces connect in a real project.",
        "Here's the shortcut. Same result, a fraction of the effort.",
    ),
    ArcRole.RESOLUTION: (
        "And that's it. Look at where we started, and look at where we are now.",
        "Put together, these steps give you a {topic} system that runs itself.",
        "That's the promise from the start of the video, delivered.",
    ),
    ArcRole.CALL_TO_ACTION: (
        "If this helped, subscribe, and grab the free template in the description.",
        "Tell me in the comments which step you're trying first. I read every one.",
        "Your next move is the follow-up video on screen now. I'll see you there.",
    ),
}

CADENCES = (
    "Brisk, roughly 170 words per minute",
    "Conversational, about 150 words per minute",
    "Slow and deliberate on key terms",
    "Punchy short phrases with clean pauses",
    "Building intensity toward the final line",
    "Relaxed and warm, slight smile in the voice",
)

PACING_NOTES = (
    "Leave a half-second beat after every on-screen reveal.",
    "Speed up slightly during recaps, slow down for new concepts.",
    "Breathe before each section transition so edits stay clean.",
    "Record pickups for any line longer than two sentences.",
    "Hold the last word of the hook for an extra beat.",
    "Match the narration tempo to the music bed in each section.",
    "Keep the CTA under ten seconds.",
)

POWER_WORDS = (
    "instantly",
    "exactly",
    "proven",
    "simple",
    "free",
    "secret",
    "finally",
    "effortless",
    "step by step",
    "game-changing",
)
