from video_lab.planning.models import ArcRole

HERO_PROMPTS = (
    "Cinematic wide shot of a creator's desk built around {topic}, {style} look, soft rim light, shallow depth of field, 16:9.",
    "Bold editorial illustration representing {topic} for {audience}, {tone} energy, clean negative space for title text.",
    "Over-the-shoulder view of a glowing screen showing {topic} in action, {style} color grade, volumetric light.",
    "Isometric 3D scene visualizing the {topic} workflow as connected building blocks, {tone} mood, studio lighting.",
    "Split-frame composition: chaotic before on the left, calm organized {topic} result on the right, {style} finish.",
)

SECTION_PROMPTS = {
    ArcRole.HOOK: (
        "Punchy close-up reveal of the finished {topic} result, high contrast, motion blur accents.",
        "Extreme close-up of a frustrated face lit by a screen, setting up the {topic} problem.",
        "Fast push-in on a bold on-screen question about {topic}, {style} typography.",
    ),
    ArcRole.CONTEXT: (
        "Cluttered desktop collage showing the old way of handling {topic}, muted palette.",
        "Timeline graphic explaining how {topic} evolved, {style} treatment.",
        "Documentary-style B-roll of {audience} at work, natural window light.",
    ),
    ArcRole.CORE: (
        "Clean screen-capture frame of the key {topic} step with callout arrows.",
        "Diagram breaking the {topic} process into numbered stages, flat vector style.",
        "Hands-on-keyboard shot with UI overlay highlighting the critical setting.",
        "Side-by-side comparison panel of a weak and a strong {topic} example.",
    ),
    ArcRole.RESOLUTION: (
        "Satisfying overview shot of the complete {topic} system running smoothly.",
        "Before-and-after slider frame showing the transformation, warm tones.",
        "Calm, well-lit workspace with the finished project on screen.",
    ),
    ArcRole.CALL_TO_ACTION: (
        "End-screen layout with subscribe button and next-video card, {style} branding.",
        "Friendly presenter framing pointing toward the subscribe area, clean backdrop.",
        "Template preview mockup floating over a soft gradient, inviting click.",
    ),
}

FRAMINGS = (
    "Wide establishing shot",
    "Medium shot, eye level",
    "Close-up with shallow focus",
    "Over-the-shoulder",
    "Top-down flat lay",
    "Screen capture with zoom punch-ins",
    "Dutch angle for tension",
    "Slow dolly push-in",
    "Split screen",
    "Locked-off tripod shot",
)

THUMBNAIL_CONCEPTS = (
    "Shocked reaction face beside a giant '{topic}' label and a red arrow.",
    "Before vs after split with a bold 'FIXED' stamp.",
    "Big number overlay promising the time saved, minimal background.",
    "Single striking object symbolizing {topic} on a saturated backdrop.",
    "Screenshot of the result with one circled detail and three-word caption.",
    "Presenter pointing at a glowing '{topic}' dashboard, high contrast rim light.",
    "Question-mark composition: 'Are you doing {topic} wrong?'",
)

STYLE_NOTES = (
    "Keep the {style} look consistent: one font family, two accent colors, generous margins.",
    "Lean into {tone} energy with saturated accents, but keep screen recordings neutral for legibility.",
    "Favor natural light and real workspaces; reserve graphics for moments that explain {topic}.",
    "Match every visual to a spoken line, with no decorative B-roll that doesn't advance the {topic} story.",
)

# Palette families; the order within a family is foreground -> accent -> background.
PALETTES = (
    ("Midnight Navy #0F172A", "Electric Teal #14B8A6", "Signal Amber #F59E0B", "Cloud White #F8FAFC"),
    ("Charcoal #1F2937", "Coral Punch #F87171", "Soft Sand #FDE68A", "Ivory #FFFBEB", "Slate #64748B"),
    ("Deep Forest #14532D", "Mint #6EE7B7", "Paper #FAFAF9", "Graphite #44403C"),
    ("Ink Black #0A0A0A", "Neon Violet #8B5CF6", "Hot Pink #EC4899", "Frost #E0E7FF"),
    ("Ocean Blue #1D4ED8", "Sky #93C5FD", "Sunset Orange #FB923C", "Snow #FFFFFF", "Steel #334155"),
    ("Espresso #3F2A1D", "Terracotta #C2410C", "Cream #FEF3C7", "Olive #4D7C0F"),
)
