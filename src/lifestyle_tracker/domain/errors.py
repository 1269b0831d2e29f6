"""Domain errors surfaced to API callers."""


class NotFoundError(LookupError):
    """Raised when a requested resource does not exist for the user."""


class InvalidRangeError(ValueError):
    """Raised when a date range is inverted or malformed."""
