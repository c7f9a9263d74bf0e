import hashlib
import numbers
from typing import List, Sequence, TypeVar

from video_lab.errors import InvalidSeedError
from video_lab.planning.models import Brief
from video_lab.utils.text_utils import dedupe

T = TypeVar("T")

_FIELD_SEPARATOR = "\x1f"


def validate_seed(seed: object) -> int:
    """Returns the seed as an int, or raises InvalidSeedError for anything outside integers >= 1."""
    if isinstance(seed, bool) or not isinstance(seed, numbers.Integral):
        raise InvalidSeedError(seed)
    if seed < 1:
        raise InvalidSeedError(seed)
    return int(seed)


def variation_value(key: str, seed: int, index: int) -> int:
    """Deterministic 64-bit value for the (key, seed, index) triple. Python's hash() is salted per process."""
    digest = hashlib.sha256(f"{key}:{seed}:{index}".encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big")


def brief_fingerprint(brief: Brief) -> str:
    fields = [
        brief.topic,
        brief.target_audience,
        brief.desired_length,
        brief.tone,
        brief.production_style,
    ]
    return hashlib.sha256(_FIELD_SEPARATOR.join(fields).encode("utf-8")).hexdigest()


class VariationSource:
    """
    Reproducible stream of choices for one generation call.

    The n-th draw is variation_value(key, seed, n), so two streams with the same key and
    seed produce the same sequence. Streams are never shared between calls; each facet
    works on its own fork so the order in which facets run does not matter.
    """

    def __init__(self, key: str, seed: int):
        self.key = key
        self.seed = validate_seed(seed)
        self._index = 0

    @classmethod
    def for_brief(cls, brief: Brief, seed: int) -> "VariationSource":
        return cls(brief_fingerprint(brief), seed)

    @property
    def draws(self) -> int:
        return self._index

    def fork(self, namespace: str) -> "VariationSource":
        return VariationSource(f"{self.key}/{namespace}", self.seed)

    def next_value(self) -> int:
        value = variation_value(self.key, self.seed, self._index)
        self._index += 1
        return value

    def index(self, size: int) -> int:
        if size <= 0:
            raise ValueError("Cannot draw an index from an empty range")
        return self.next_value() % size

    def between(self, low: int, high: int) -> int:
        """Inclusive integer in [low, high]."""
        if low > high:
            raise ValueError(f"Empty range: {low} > {high}")
        return low + self.index(high - low + 1)

    def pick(self, options: Sequence[T]) -> T:
        if not options:
            raise ValueError("Cannot pick from an empty catalog")
        return options[self.index(len(options))]

    def sample(self, options: Sequence[T], count: int) -> List[T]:
        """Up to `count` distinct options in drawn order (partial Fisher-Yates)."""
        pool = dedupe(options)
        if not pool:
            raise ValueError("Cannot sample from an empty catalog")
        count = max(1, min(count, len(pool)))
        for position in range(count):
            swap = position + self.index(len(pool) - position)
            pool[position], pool[swap] = pool[swap], pool[position]
        return pool[:count]

    def shuffled(self, options: Sequence[T]) -> List[T]:
        return self.sample(options, len(options))
