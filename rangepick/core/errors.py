"""Exception types raised by rangepick."""


class RangePickError(Exception):
    """Base class for all rangepick errors."""


class InvalidRange(RangePickError, ValueError):
    """Raised when a date interval is inverted or a range is malformed."""


class InvalidConfiguration(RangePickError, ValueError):
    """Raised when picker options or quick-jump picks are out of bounds."""
