HOOKS = (
    "What if {topic} could save {audience} hours every single week?",
    "Most {audience} get {topic} wrong in the first five minutes. Here is the fix.",
    "I rebuilt my entire approach to {topic} from scratch, and the results surprised me.",
    "{topic} looks complicated until you see this one framework.",
    "Stop scrolling: this is the {topic} breakdown {audience} keep asking for.",
    "Everything you were told about {topic} is missing one crucial step.",
)

ELEVATOR_PITCHES = (
    "A {runtime}, {tone} walkthrough that turns {topic} into a repeatable system {audience} can copy today.",
    "A {style} piece that demystifies {topic} with real examples, clear visuals and zero fluff.",
    "A {tone} breakdown of {topic} that moves {audience} from curious to confident in one sitting.",
    "A {runtime} {style} story showing exactly how {topic} works, why it matters and where to start.",
)

AUDIENCE_PROMISES = (
    "By the end, {audience} will have a working {topic} setup they can reuse immediately.",
    "{audience} walk away with a checklist, a template and the confidence to ship their own {topic} project.",
    "No theory overload: {audience} get the exact steps, the common traps and a shortcut for each.",
    "{audience} will understand {topic} well enough to teach it back after one watch.",
)

DIFFERENTIATORS = (
    "Built around a real project instead of toy examples.",
    "Every step is shown on screen, not just described.",
    "Includes a free template viewers can duplicate.",
    "Covers the failure cases other tutorials skip.",
    "Paced for {audience}, not for experts.",
    "Blends {style} visuals with practical screen recordings.",
    "Ends with a 30-day action plan instead of a generic outro.",
    "Uses a before-and-after comparison to prove the payoff.",
)

WORKING_TITLES = (
    "{topic}: The Complete Guide for {audience}",
    "I Tried {topic} for 30 Days. Here's What Happened",
    "{topic} Explained in One Video",
    "The {topic} System Nobody Talks About",
    "{topic} for {audience}: Start Here",
    "Stop Doing {topic} the Hard Way",
    "{topic}: From Zero to Fully Automated",
    "The Only {topic} Tutorial You Need",
)
