class GenerationError(Exception):
    """Base error for the package generation engine."""


class InvalidSeedError(GenerationError, ValueError):
    """Raised when a seed falls outside the accepted domain (integers >= 1)."""

    def __init__(self, seed: object):
        self.seed = seed
        super().__init__(f"Seed must be an integer >= 1, got {seed!r}")
