"""Exceptions raised (or warned) when a card cannot be built as requested."""


class ValidationError(ValueError):
    """Base class for invalid card identities."""


class InvalidRank(ValidationError):
    def __init__(self, rank):
        self.rank = rank
        super().__init__(f"Rank must be between 1 and 13, got {rank!r}")


class InvalidSuitOrdinal(ValidationError, UserWarning):
    """
    Suit ordinal outside 1..4. Usually emitted through ``warnings.warn`` while
    the card falls back to a joker; raised only in strict mode.
    """

    def __init__(self, ordinal):
        self.ordinal = ordinal
        super().__init__(f"Suit ordinal must be between 1 and 4, got {ordinal!r}")


class FormatFailure(ValueError):
    """A display template could not be applied. Logged, never raised to callers."""

    def __init__(self, template, cause=None):
        self.template = template
        self.cause = cause
        super().__init__(f"Could not format card with template {template!r}: {cause}")
