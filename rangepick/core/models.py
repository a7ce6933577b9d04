"""Value types shared by the calendar engine and the selection state machine."""
from dataclasses import dataclass, field
from datetime import date
from enum import Enum, IntEnum
from typing import Any, List, Optional, Tuple

from .errors import InvalidConfiguration, InvalidRange


class WeekStart(IntEnum):
    """First day of the week, numbered like ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, value: Any) -> "WeekStart":
        """Coerce a config value into a WeekStart.

        Args:
            value: A WeekStart, an int 0-6 (0=Monday), a digit string or an
                English weekday name / abbreviation ("sun", "Sunday")

        Returns:
            The matching WeekStart

        Raises:
            InvalidConfiguration: If the value names no weekday
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidConfiguration(f"Invalid week start: {value!r}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError as err:
                raise InvalidConfiguration(
                    f"Week start must be 0-6 (0=Mon, 6=Sun), got {value!r}"
                ) from err
        if isinstance(value, str):
            text = value.strip()
            if text.isdigit():
                return cls.parse(int(text))
            name = text.upper()
            for member in cls:
                if len(name) >= 2 and member.name.startswith(name):
                    return member
        raise InvalidConfiguration(f"Invalid week start: {value!r}")


class QuickJumpMode(Enum):
    """Which quick-jump picker, if any, is open."""

    NONE = "none"
    MONTH = "month"
    YEAR = "year"


@dataclass(frozen=True)
class DateRange:
    """A possibly open date range.

    ``end`` is never set without ``start`` and ``start <= end`` when both are
    set; a range with ``start == end`` covers one day.
    """

    start: Optional[date] = None
    end: Optional[date] = None

    def __post_init__(self):
        if self.end is not None and self.start is None:
            raise InvalidRange(f"Range end {self.end} set without a start")
        if self.start is not None and self.end is not None and self.start > self.end:
            raise InvalidRange(f"Range start {self.start} is after end {self.end}")

    @property
    def is_empty(self) -> bool:
        return self.start is None

    @property
    def is_partial(self) -> bool:
        return self.start is not None and self.end is None

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None

    def contains(self, day: date) -> bool:
        """Return True if a complete range covers ``day`` (inclusive)."""
        return self.is_complete and self.start <= day <= self.end

    @property
    def days(self) -> int:
        """Number of days covered by a complete range, else 0."""
        if not self.is_complete:
            return 0
        return (self.end - self.start).days + 1


EMPTY_RANGE = DateRange()


@dataclass(frozen=True)
class PickerSelectionState:
    """The committed range plus the day currently under the pointer."""

    range: DateRange = EMPTY_RANGE
    hover: Optional[date] = None


@dataclass(frozen=True)
class MonthView:
    """A displayed month, identified by its first day."""

    anchor: date

    @property
    def year(self) -> int:
        return self.anchor.year

    @property
    def month(self) -> int:
        return self.anchor.month


@dataclass(frozen=True)
class NavState:
    anchor_month: date
    quick_jump_mode: QuickJumpMode = QuickJumpMode.NONE


@dataclass(frozen=True)
class DayCell:
    date: date
    in_current_month: bool = False
    is_today: bool = False
    is_range_start: bool = False
    is_range_end: bool = False
    is_in_range: bool = False
    is_in_preview: bool = False


@dataclass(frozen=True)
class WeekRow:
    """Seven consecutive cells, optionally labelled with a week number."""

    cells: Tuple[DayCell, ...]
    week_number: Optional[int] = None

    def __post_init__(self):
        if len(self.cells) != 7:
            raise InvalidRange(f"A week row holds 7 cells, got {len(self.cells)}")

    @property
    def first_day(self) -> date:
        return self.cells[0].date


@dataclass(frozen=True)
class MonthGrid:
    """A MonthView paired with its week rows."""

    view: MonthView
    rows: List[WeekRow] = field(default_factory=list)

    def cells(self) -> List[DayCell]:
        return [cell for row in self.rows for cell in row.cells]
