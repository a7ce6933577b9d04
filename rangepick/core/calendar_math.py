"""Pure calendar calculations for a configurable first day of week."""
import calendar
from datetime import date, timedelta
from typing import List, Tuple

from .errors import InvalidRange
from .models import WeekStart

# Two-letter headers in date.weekday() order
DAY_ABBR = ['Mo', 'Tu', 'We', 'Th', 'Fr', 'Sa', 'Su']


def month_start(day: date) -> date:
    """Return the first day of the month containing ``day``."""
    return day.replace(day=1)


def month_bounds(day: date) -> Tuple[date, date]:
    """Get the first and last day of the month containing ``day``.

    Args:
        day: Date within the month

    Returns:
        Tuple of (first_day, last_day)
    """
    last_day = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last_day)


def week_bounds(day: date, week_start: WeekStart = WeekStart.SUNDAY) -> Tuple[date, date]:
    """Get the first and last day of the week containing ``day``.

    Args:
        day: Date within the week
        week_start: Weekday the week starts on

    Returns:
        Tuple of (first_day, last_day), six days apart
    """
    offset = (day.weekday() - int(week_start)) % 7
    first = day - timedelta(days=offset)
    return first, first + timedelta(days=6)


def days_between(start: date, end: date) -> List[date]:
    """Enumerate every day from ``start`` to ``end`` inclusive.

    Raises:
        InvalidRange: If ``start`` is after ``end``
    """
    if start > end:
        raise InvalidRange(f"Cannot enumerate days from {start} back to {end}")
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def week_number(day: date, week_start: WeekStart = WeekStart.SUNDAY) -> int:
    """Return the week-of-year index of ``day``.

    Week 1 is the week (starting on ``week_start``) that contains January 1st,
    so the number never decreases within a year and restarts at 1 every
    January 1st. A week spanning New Year keeps the December number for its
    December days.
    """
    new_year = date(day.year, 1, 1)
    lead = (new_year.weekday() - int(week_start)) % 7
    return ((day - new_year).days + lead) // 7 + 1


def add_months(day: date, months: int) -> date:
    """Return the first day of the month ``months`` away from ``day``'s month."""
    index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(index, 12)
    return date(year, month + 1, 1)


def weekday_labels(week_start: WeekStart = WeekStart.SUNDAY) -> List[str]:
    """Return the weekday column headers rotated to begin at ``week_start``."""
    start = int(week_start)
    return DAY_ABBR[start:] + DAY_ABBR[:start]
