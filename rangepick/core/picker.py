"""DateRangePicker: the event/data surface a UI layer binds to.

Composes the selection state machine, the navigation state and the grid
builder, and applies the two week policies on top of them:

- ``highlight_full_week_on_hover`` widens the hover preview to whole weeks
- ``default_to_week_start_and_end_dates`` snaps a committed range outward to
  the first and last day of its weeks
"""
import logging
from datetime import date, datetime
from typing import Any, Callable, List, Optional, Tuple, Union

from .calendar_math import week_bounds, weekday_labels
from .errors import InvalidConfiguration
from .grid_builder import build_month
from .models import (
    DateRange, MonthGrid, MonthView, NavState, PickerSelectionState, QuickJumpMode, WeekStart,
)
from .navigation import NavigationState
from .range_selector import CommitListener, RangeSelector

logger = logging.getLogger(__name__)

DEFAULT_NUMBER_OF_MONTHS = 2
DEFAULT_WEEK_START = WeekStart.SUNDAY

RangeLike = Union[DateRange, Tuple[Optional[date], Optional[date]], None]


def to_day(value: Any) -> Optional[date]:
    """Truncate a datetime to its calendar day; pass dates and None through."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidConfiguration(f"Expected a date, got {value!r}")


def _coerce_range(value: RangeLike) -> DateRange:
    if value is None:
        return DateRange()
    if isinstance(value, DateRange):
        return value
    try:
        start, end = value
    except (TypeError, ValueError) as err:
        raise InvalidConfiguration(f"Initial range must be a DateRange or (start, end), got {value!r}") from err
    return DateRange(start=to_day(start), end=to_day(end))


def _check_flag(name: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise InvalidConfiguration(f"{name} must be a bool, got {value!r}")
    return value


class DateRangePicker:
    """A multi-month date-range picker without any rendering."""

    def __init__(self, initial_range: RangeLike = None, week_start: Any = DEFAULT_WEEK_START,
                 number_of_months: int = DEFAULT_NUMBER_OF_MONTHS, show_week_numbers: bool = False,
                 highlight_full_week_on_hover: bool = False,
                 default_to_week_start_and_end_dates: bool = False,
                 today: Optional[date] = None, today_provider: Optional[Callable[[], date]] = None,
                 on_range_committed: Optional[CommitListener] = None):
        """Initialize a DateRangePicker.

        Args:
            initial_range: Pre-selected range (optional)
            week_start: First weekday of each grid row (WeekStart, 0-6 or weekday name)
            number_of_months: How many consecutive months are displayed
            show_week_numbers: Whether grid rows carry a week number
            highlight_full_week_on_hover: Widen the hover preview to whole weeks
            default_to_week_start_and_end_dates: Snap committed ranges to whole weeks
            today: Fixed current date (optional, mostly for tests)
            today_provider: Callable returning the current date (optional, defaults to date.today)
            on_range_committed: Listener called with each committed range (optional)

        Raises:
            InvalidConfiguration: If any option is malformed
        """
        self.week_start = WeekStart.parse(week_start)
        if isinstance(number_of_months, bool) or not isinstance(number_of_months, int) or number_of_months < 1:
            raise InvalidConfiguration(f"number_of_months must be a positive integer, got {number_of_months!r}")
        self.number_of_months = number_of_months
        self.show_week_numbers = _check_flag("show_week_numbers", show_week_numbers)
        self.highlight_full_week_on_hover = _check_flag(
            "highlight_full_week_on_hover", highlight_full_week_on_hover)
        self.default_to_week_start_and_end_dates = _check_flag(
            "default_to_week_start_and_end_dates", default_to_week_start_and_end_dates)

        fixed_today = to_day(today)
        if fixed_today is not None:
            self._today_provider = lambda: fixed_today
        else:
            self._today_provider = today_provider or date.today

        initial = _coerce_range(initial_range)
        policy = self._snap_to_weeks if self.default_to_week_start_and_end_dates else None
        self._selector = RangeSelector(initial, commit_policy=policy)
        self._nav = NavigationState(self._today(), initial.start, window=self.number_of_months)
        if on_range_committed is not None:
            self._selector.subscribe(on_range_committed)
        logger.debug("Picker initialized: week_start=%s months=%d anchor=%s",
                     self.week_start.name, self.number_of_months, self._nav.anchor_month)

    def _today(self) -> date:
        return to_day(self._today_provider())

    def _snap_to_weeks(self, rng: DateRange) -> DateRange:
        start, _ = week_bounds(rng.start, self.week_start)
        _, end = week_bounds(rng.end, self.week_start)
        return DateRange(start=start, end=end)

    # --- State ---
    @property
    def selection(self) -> PickerSelectionState:
        return self._selector.state

    @property
    def range(self) -> DateRange:
        return self._selector.range

    @property
    def nav_state(self) -> NavState:
        return self._nav.state

    def subscribe(self, listener: CommitListener) -> Callable[[], None]:
        """Register a listener for committed ranges; returns an unsubscribe callable."""
        return self._selector.subscribe(listener)

    def visible_months(self) -> List[MonthView]:
        return self._nav.visible_months(self.number_of_months)

    def is_selectable(self, day: date) -> bool:
        """Return True if ``day`` is an in-month day of a displayed month."""
        return any((day.year, day.month) == (view.year, view.month) for view in self.visible_months())

    # --- Selection events ---
    def on_day_click(self, day: date) -> PickerSelectionState:
        """Handle a click; days outside the displayed months are ignored."""
        day = to_day(day)
        if not self.is_selectable(day):
            logger.debug("Ignoring click on non-interactive day %s", day)
            return self.selection
        return self._selector.on_day_click(day)

    def on_day_hover(self, day: date) -> PickerSelectionState:
        """Handle a hover; moving onto a non-interactive day clears the preview."""
        day = to_day(day)
        if not self.is_selectable(day):
            return self._selector.on_hover_leave()
        return self._selector.on_day_hover(day)

    def on_hover_leave(self) -> PickerSelectionState:
        return self._selector.on_hover_leave()

    def on_clear(self) -> PickerSelectionState:
        return self._selector.on_clear()

    # --- Navigation events ---
    def on_prev_month(self) -> NavState:
        return self._nav.prev()

    def on_next_month(self) -> NavState:
        return self._nav.next()

    def on_prev_year(self) -> NavState:
        return self._nav.prev_year()

    def on_next_year(self) -> NavState:
        return self._nav.next_year()

    def on_today(self) -> NavState:
        """Bring the current month back into view."""
        return self._nav.go_to(self._today())

    def on_pick_month(self, month: int) -> NavState:
        return self._nav.pick_month(month)

    def on_pick_year(self, year: int) -> NavState:
        return self._nav.pick_year(year)

    def on_toggle_quick_jump(self, mode: Union[QuickJumpMode, str]) -> NavState:
        return self._nav.toggle_quick_jump(mode)

    def month_choices(self) -> List[date]:
        return self._nav.month_choices()

    def year_choices(self) -> List[int]:
        return self._nav.year_choices()

    # --- Derived data ---
    def get_visible_grids(self, today: Optional[date] = None) -> List[MonthGrid]:
        """Build the grid of every displayed month from the current state.

        Args:
            today: Current date (optional); read from the provider once per call otherwise

        Returns:
            One MonthGrid per displayed month, in order
        """
        current = to_day(today) if today is not None else self._today()
        selection = self.selection
        return [
            build_month(view, self.week_start, selection, current,
                        highlight_full_week_on_hover=self.highlight_full_week_on_hover,
                        show_week_numbers=self.show_week_numbers)
            for view in self.visible_months()
        ]

    def weekday_labels(self) -> List[str]:
        return weekday_labels(self.week_start)

    def display_text(self) -> str:
        from ..utils.format_utils import format_display_text
        return format_display_text(self.range)

    def header_text(self) -> str:
        from ..utils.format_utils import format_header
        return format_header(self.visible_months())


def initialize(initial_range: RangeLike = None, week_start: Any = DEFAULT_WEEK_START,
               number_of_months: int = DEFAULT_NUMBER_OF_MONTHS, today: Optional[date] = None,
               **options: Any) -> Tuple[DateRangePicker, PickerSelectionState, NavState]:
    """Create a picker and return it together with its initial selection and nav state.

    Extra keyword options are passed to DateRangePicker.
    """
    picker = DateRangePicker(initial_range=initial_range, week_start=week_start,
                             number_of_months=number_of_months, today=today, **options)
    return picker, picker.selection, picker.nav_state
