"""Displayed-month navigation and the month/year quick-jump toggle."""
import logging
from datetime import date
from typing import List, Optional

from .calendar_math import add_months, month_start
from .errors import InvalidConfiguration
from .models import MonthView, NavState, QuickJumpMode

logger = logging.getLogger(__name__)

# Grids pad each month to whole weeks, so the first and last representable
# years are kept out of reach to stay inside date.min and date.max
MIN_YEAR = 2
MAX_YEAR = 9998

# Years offered by the year quick-jump grid, starting YEAR_CHOICES_BACK before the anchor year
YEAR_CHOICES = 12
YEAR_CHOICES_BACK = 10


def _check_count(count: int) -> int:
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise InvalidConfiguration(f"Number of months must be a positive integer, got {count!r}")
    return count


def _in_bounds(first: date, count: int) -> bool:
    last_index = first.year * 12 + first.month - 1 + count - 1
    return first.year >= MIN_YEAR and last_index // 12 <= MAX_YEAR


class NavigationState:
    """Tracks the first displayed month and which quick-jump picker is open."""

    def __init__(self, today: date, initial_start: Optional[date] = None, window: int = 1):
        """Initialize a NavigationState.

        Args:
            today: Current date; its month is the default anchor
            initial_start: Start of a pre-selected range; overrides ``today`` as anchor (optional)
            window: Number of months displayed from the anchor, used to keep navigation in bounds

        Raises:
            InvalidConfiguration: If the seeded months fall outside MIN_YEAR..MAX_YEAR
        """
        self._window = _check_count(window)
        seed = initial_start if initial_start is not None else today
        self._state = NavState(anchor_month=self._check_anchor(month_start(seed)))

    @property
    def state(self) -> NavState:
        return self._state

    @property
    def anchor_month(self) -> date:
        return self._state.anchor_month

    @property
    def quick_jump_mode(self) -> QuickJumpMode:
        return self._state.quick_jump_mode

    def visible_months(self, count: int) -> List[MonthView]:
        """Return ``count`` consecutive months starting at the anchor."""
        _check_count(count)
        if not _in_bounds(self.anchor_month, count):
            raise InvalidConfiguration(
                f"{count} months from {self.anchor_month:%Y-%m} leave the supported years {MIN_YEAR}-{MAX_YEAR}")
        return [MonthView(anchor=add_months(self.anchor_month, i)) for i in range(count)]

    def _check_anchor(self, anchor: date) -> date:
        if not _in_bounds(anchor, self._window):
            raise InvalidConfiguration(
                f"Cannot display {self._window} month(s) from {anchor:%Y-%m}; "
                f"supported years are {MIN_YEAR}-{MAX_YEAR}")
        return anchor

    def _set(self, anchor: Optional[date] = None, mode: Optional[QuickJumpMode] = None) -> NavState:
        self._state = NavState(
            anchor_month=self._check_anchor(anchor) if anchor is not None else self._state.anchor_month,
            quick_jump_mode=mode if mode is not None else self._state.quick_jump_mode,
        )
        logger.debug("Navigation: anchor=%s mode=%s", self._state.anchor_month, self._state.quick_jump_mode.value)
        return self._state

    def shift(self, months: int) -> NavState:
        return self._set(anchor=add_months(self.anchor_month, months))

    def next(self) -> NavState:
        return self.shift(1)

    def prev(self) -> NavState:
        return self.shift(-1)

    def next_year(self) -> NavState:
        return self.shift(12)

    def prev_year(self) -> NavState:
        return self.shift(-12)

    def go_to(self, day: date) -> NavState:
        """Anchor on the month containing ``day``."""
        return self._set(anchor=month_start(day))

    def toggle_quick_jump(self, mode: QuickJumpMode) -> NavState:
        """Open ``mode``, or close it if it is already open.

        Requesting a different mode than the open one switches to it;
        requesting NONE always closes.
        """
        try:
            mode = QuickJumpMode(mode)
        except ValueError as err:
            raise InvalidConfiguration(f"Unknown quick-jump mode: {mode!r}") from err
        if mode is self.quick_jump_mode:
            mode = QuickJumpMode.NONE
        return self._set(mode=mode)

    def pick_month(self, month: int) -> NavState:
        """Jump to ``month`` (1-12) of the anchor's year and close the picker."""
        if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
            raise InvalidConfiguration(f"Month must be 1-12, got {month!r}")
        return self._set(anchor=self.anchor_month.replace(month=month), mode=QuickJumpMode.NONE)

    def pick_year(self, year: int) -> NavState:
        """Jump to ``year`` keeping the month, then drill down to the month picker."""
        if isinstance(year, bool) or not isinstance(year, int) or not MIN_YEAR <= year <= MAX_YEAR:
            raise InvalidConfiguration(f"Year must be {MIN_YEAR}-{MAX_YEAR}, got {year!r}")
        return self._set(anchor=self.anchor_month.replace(year=year), mode=QuickJumpMode.MONTH)

    def month_choices(self) -> List[date]:
        year = self.anchor_month.year
        return [date(year, m, 1) for m in range(1, 13)]

    def year_choices(self) -> List[int]:
        first = max(MIN_YEAR, self.anchor_month.year - YEAR_CHOICES_BACK)
        return list(range(first, min(first + YEAR_CHOICES, MAX_YEAR + 1)))
