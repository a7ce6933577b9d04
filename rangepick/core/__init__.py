"""Selection state machine and calendar grid engine."""

from .errors import RangePickError, InvalidRange, InvalidConfiguration
from .models import (
    DateRange, DayCell, MonthGrid, MonthView, NavState, PickerSelectionState,
    QuickJumpMode, WeekRow, WeekStart,
)
from .picker import DateRangePicker, initialize

__all__ = [
    'RangePickError', 'InvalidRange', 'InvalidConfiguration',
    'DateRange', 'DayCell', 'MonthGrid', 'MonthView', 'NavState', 'PickerSelectionState',
    'QuickJumpMode', 'WeekRow', 'WeekStart',
    'DateRangePicker', 'initialize'
]
