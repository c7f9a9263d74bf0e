from video_lab.planning.models import ArcRole

BEAT_DESCRIPTIONS = {
    ArcRole.HOOK: (
        "Cold open on the payoff, then smash-cut to the title card.",
        "Rapid three-shot montage teasing the {topic} result.",
        "Presenter to camera, tight framing, hook line lands on a hard cut.",
    ),
    ArcRole.CONTEXT: (
        "Slow the edit down; B-roll of the problem under narration.",
        "Animated explainer establishing the {topic} stakes.",
        "Interview-style framing with lower-third context cards.",
    ),
    ArcRole.CORE: (
        "Screen recording with zoom punch-ins on every click.",
        "Step-by-step sequence with numbered overlays per stage.",
        "Alternate presenter and screen capture every 20 to 30 seconds.",
        "Side-by-side comparison build with wipe reveals.",
    ),
    ArcRole.RESOLUTION: (
        "Before-and-after reveal with a slow push-in on the result.",
        "Recap montage of each stage, synced to the music swell.",
        "Hold on the finished {topic} system, minimal cuts.",
    ),
    ArcRole.CALL_TO_ACTION: (
        "Presenter to camera with subscribe animation and pinned-comment callout.",
        "CTA card over a soft background loop of earlier footage.",
        "Quick tease of the next video with a card linking to it.",
    ),
}

END_SCREEN_DESCRIPTIONS = (
    "End screen: two video cards and a subscribe element over a looping background.",
    "End screen: playlist card plus best-next-video card, music tail fades out.",
    "End screen: presenter thanks viewers while cards animate in.",
)

LAYER_NOTES = (
    "V1 A-roll, V2 screen capture, V3 captions; duck music -18 dB under voice.",
    "Add kinetic captions on V3; keep B-roll on V2 under 4 seconds per shot.",
    "Color-match screen recordings to the A-roll grade; subtle vignette on V1.",
    "Sound effects on A3 for each reveal; music bed on A2 at -20 dB.",
    "Track the callout arrows to the UI; light film grain adjustment layer on top.",
    "Lower-third on V4 for the first mention of each tool.",
    "J-cut the narration into the next shot to keep momentum.",
    "Freeze frame plus zoom for the key moment, whoosh on A3.",
)

TRANSITIONS = (
    "Hard cuts on the beat for high-energy stretches",
    "Whip pan between presenter and screen capture",
    "Match cut from the problem shot to the solution shot",
    "Zoom-through transition into screen recordings",
    "Light leak dissolve for reflective moments",
    "Jump cuts to tighten presenter delivery",
    "L-cut audio bridges between sections",
    "Glitch transition for the big reveal",
)

MOTION_GRAPHICS = (
    "Animated title card with the video name in brand colors",
    "Numbered step counters that build as each stage is covered",
    "Progress bar across the top showing section progress",
    "Callout arrows and circles tracked to on-screen UI",
    "Kinetic typography for the hook line",
    "Lower thirds introducing tools and resources",
    "Before/after slider graphic for the payoff",
    "Animated chapter markers between sections",
)

SOUND_DESIGN = (
    "Upbeat lo-fi music bed, ducked under narration",
    "Subtle whooshes on transitions and zooms",
    "Riser leading into the main reveal",
    "Soft UI click sounds synced to screen actions",
    "Bass hit on the title card",
    "Room tone fill to smooth jump cuts",
    "Music drop-out for the key insight, then back in",
    "Gentle ambient pad under reflective moments",
)

DELIVERY_CHECKLIST = (
    "Export 4K master in H.264 at high bitrate",
    "Loudness normalized to -14 LUFS integrated",
    "Burned-in captions version for social clips",
    "SRT caption file proofread against the final cut",
    "Thumbnail exported at 1280x720, under 2 MB",
    "Chapters verified against the final timeline",
    "End screen elements placed in the last 20 seconds",
    "Music licenses documented for every track",
    "Vertical cutdown exported for Shorts",
)
