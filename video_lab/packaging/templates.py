from video_lab.planning.models import ArcRole

TITLES = (
    "{topic}: The Complete Guide for {audience}",
    "How to Master {topic} (Step-by-Step)",
    "{topic} Made Simple: Everything You Need to Know",
    "The {topic} Playbook That Actually Works",
    "{topic} in One Video: From Zero to Results",
    "I Tested Every {topic} Trick. These Actually Work",
)

DESCRIPTIONS = (
    "In this {runtime} video we break down {topic} for {audience}. You'll see the full workflow on screen, "
    "the mistakes to avoid and the shortcuts that save the most time.",
    "Want {topic} to finally click? This {tone}, {style} walkthrough shows {audience} exactly how it works, "
    "step by step, with real examples you can copy.",
    "This is the {topic} guide built for {audience}: a {runtime} {style} breakdown covering the why, the how "
    "and a ready-to-use template.",
    "Everything {audience} need to get started with {topic}, explained in a {tone} {runtime} session with "
    "on-screen demos and a practical checklist.",
)

DESCRIPTION_CLOSERS = (
    "Chapters are below, and the free template is linked in the pinned comment.",
    "Subscribe for more breakdowns like this, and let me know what to cover next.",
    "Drop your questions in the comments and I'll answer them in a follow-up.",
)

TAGS = (
    "tutorial",
    "how to",
    "step by step",
    "beginner guide",
    "productivity",
    "workflow",
    "tips and tricks",
    "explained",
    "complete guide",
    "walkthrough",
)

HASHTAGS = (
    "#Tutorial",
    "#HowTo",
    "#Productivity",
    "#LearnOnYouTube",
    "#StepByStep",
    "#Workflow",
    "#CreatorTips",
)

CHAPTER_SUMMARIES = {
    ArcRole.HOOK: (
        "Why this matters and what you'll walk away with.",
        "The result first, then the plan to get there.",
    ),
    ArcRole.CONTEXT: (
        "The problem, the stakes and the key terms.",
        "Why the usual approach falls short.",
    ),
    ArcRole.CORE: (
        "The step-by-step walkthrough.",
        "Hands-on demo with real examples.",
        "Going deeper on the details that matter.",
    ),
    ArcRole.RESOLUTION: (
        "Recap and the before-and-after.",
        "Putting the whole system together.",
    ),
    ArcRole.CALL_TO_ACTION: (
        "Template, next steps and what to watch next.",
        "Where to go from here.",
    ),
}

UPLOAD_NOTES = (
    "Schedule the premiere for the audience's peak hours from analytics.",
    "Pin a comment with the template link and a question to spark replies.",
    "Add the video to the matching playlist and set it as the end-screen target.",
    "Upload the SRT captions instead of relying on auto-captions.",
    "Set the category and language fields before publishing.",
    "A/B test two thumbnails during the first 48 hours.",
    "Share a vertical teaser to Shorts within 24 hours of publishing.",
    "Reply to the first hour of comments to boost early engagement.",
)
