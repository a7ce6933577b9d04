"""
rangepick: A date-range picker core with a text front-end.

- Computes multi-month calendar grids for any first-day-of-week
- Drives start/end selection from day clicks with live hover preview
- Tracks month navigation and month/year quick-jump modes
- Can be used as a library or as a CLI (via `python -m rangepick` or `rangepick` if installed as a package)
"""

from .core import (
    DateRange,
    DateRangePicker,
    InvalidConfiguration,
    InvalidRange,
    QuickJumpMode,
    RangePickError,
    WeekStart,
    initialize,
)

__version__ = "0.1.0"

__all__ = [
    'DateRange', 'DateRangePicker', 'InvalidConfiguration', 'InvalidRange',
    'QuickJumpMode', 'RangePickError', 'WeekStart', 'initialize', '__version__'
]
