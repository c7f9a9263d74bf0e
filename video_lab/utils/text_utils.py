import math
import re
from typing import Callable, Iterable, List, Mapping, Optional, TypeVar

T = TypeVar("T")

_CLOCK_RE = re.compile(r"(?<![\d:])(\d{1,3}):([0-5]\d)(?::([0-5]\d))?(?![\d:])")
_RUNTIME_RE = re.compile(
    r"(\d+(?:\.\d+)?)"
    r"(?:\s*(?:-|–|to)\s*\d+(?:\.\d+)?)?"
    r"(?:\s*(hours?|hrs?|h|minutes?|mins?|m|seconds?|secs?|s)\b)?",
    re.IGNORECASE,
)
_WORD_RE = re.compile(r"[^\W_]+(?:['\-][^\W_]+)*")
_STOPWORDS = frozenset(
    {"about", "after", "from", "into", "over", "that", "their", "them", "then", "this",
     "with", "without", "your", "what", "when", "where", "which", "will", "ways"}
)


def normalize_text(value: object) -> str:
    """Trims the value and collapses internal whitespace runs to a single space."""
    if value is None:
        return ""
    return " ".join(str(value).split())


def or_default(value: str, default: str) -> str:
    return value if value else default


def parse_runtime_minutes(text: str) -> Optional[float]:
    """
    Reads the leading runtime magnitude from free text and returns it in minutes.

    "12 minutes" -> 12.0, "90 seconds" -> 1.5, "1.5 hours" -> 90.0, "8-10 min" -> 8.0,
    "12:30" -> 12.5, "1:05:00" -> 65.0. Returns None when nothing positive is readable.
    """
    text = normalize_text(text)
    if not text:
        return None

    clock = _CLOCK_RE.search(text)
    number = _RUNTIME_RE.search(text)
    if clock and (not number or clock.start() <= number.start()):
        first, second, third = clock.groups()
        if third is not None:
            minutes = int(first) * 60 + int(second) + int(third) / 60
        else:
            minutes = int(first) + int(second) / 60
    elif number:
        magnitude = float(number.group(1))
        unit = (number.group(2) or "m").lower()
        if unit.startswith("h"):
            minutes = magnitude * 60
        elif unit.startswith("s"):
            minutes = magnitude / 60
        else:
            minutes = magnitude
    else:
        return None

    if not math.isfinite(minutes) or minutes <= 0:
        return None
    return minutes


def format_timecode(total_seconds: int) -> str:
    """Formats seconds as MM:SS. Minutes keep growing past 99 rather than rolling into hours."""
    minutes, seconds = divmod(max(int(total_seconds), 0), 60)
    return f"{minutes:02d}:{seconds:02d}"


def parse_timecode(timecode: str) -> int:
    minutes, seconds = timecode.split(":")
    return int(minutes) * 60 + int(seconds)


def format_runtime(minutes: float) -> str:
    """Human label for a runtime, e.g. 12 -> "12-minute", 1.5 -> "90-second"."""
    if minutes < 1:
        return f"{max(int(round(minutes * 60)), 1)}-second"
    if minutes == int(minutes):
        return f"{int(minutes)}-minute"
    return f"{minutes:.1f}-minute"


def dedupe(items: Iterable[T], key: Callable[[T], object] = lambda item: item) -> List[T]:
    """Drops repeated items, keeping the first occurrence."""
    seen = set()
    unique = []
    for item in items:
        marker = key(item)
        if marker in seen:
            continue
        seen.add(marker)
        unique.append(item)
    return unique


def casefold_key(text: str) -> str:
    return text.casefold()


def words(text: str) -> List[str]:
    return _WORD_RE.findall(text)


def significant_words(text: str, min_length: int = 4) -> List[str]:
    """Words worth stressing: acronyms and longer non-stopwords, deduplicated."""
    picked = []
    for word in words(text):
        is_acronym = len(word) >= 2 and word.isupper()
        if is_acronym or (len(word) >= min_length and word.casefold() not in _STOPWORDS):
            picked.append(word)
    return dedupe(picked, key=casefold_key)


def is_hashtag_char(char: str) -> bool:
    """Letters and decimal digits only. Superscripts, subscripts and fractions (²₂½) are left out."""
    return char.isalpha() or char.isdecimal()


def to_hashtag(text: str) -> str:
    """CamelCases the words into a hashtag. Returns "" when no letters or digits remain."""
    parts = re.findall(r"[^\W_]+", text)
    camel = "".join(part[:1].upper() + part[1:] for part in parts)
    # upper() can emit combining marks, so filter after casing
    body = "".join(char for char in camel if is_hashtag_char(char))
    return f"#{body}" if body else ""


def to_tag(text: str) -> str:
    return normalize_text(re.sub(r"[#,]", " ", text)).lower()


def lower_first(text: str) -> str:
    """Lowercases a leading capital for mid-sentence use, leaving acronyms ("ASMR") alone."""
    if len(text) > 1 and text[1].isupper():
        return text
    return text[:1].lower() + text[1:]


def render_template(template: str, context: Mapping[str, str]) -> str:
    """Fills a catalog template and capitalizes the first character of the result."""
    text = template.format(**context)
    return text[:1].upper() + text[1:]
