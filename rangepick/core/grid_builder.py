"""Builds the day-cell matrix for a displayed month."""
import logging
from datetime import date
from typing import List, Optional, Tuple

from .calendar_math import days_between, month_bounds, week_bounds, week_number
from .models import DayCell, MonthGrid, MonthView, PickerSelectionState, WeekRow, WeekStart

logger = logging.getLogger(__name__)


def preview_interval(selection: PickerSelectionState, week_start: WeekStart,
                     full_weeks: bool = False) -> Optional[Tuple[date, date]]:
    """Return the hover preview interval, or None when no preview applies.

    A preview needs an open start, no committed end and a hover strictly after
    the start. With ``full_weeks`` the interval widens to whole weeks.
    """
    rng = selection.range
    hover = selection.hover
    if not rng.is_partial or hover is None or hover <= rng.start:
        return None
    if full_weeks:
        return week_bounds(rng.start, week_start)[0], week_bounds(hover, week_start)[1]
    return rng.start, hover


def build_cell(day: date, month_anchor: date, selection: PickerSelectionState, today: date,
               preview: Optional[Tuple[date, date]] = None) -> DayCell:
    """Derive every flag of a single cell from the selection state."""
    rng = selection.range
    return DayCell(
        date=day,
        in_current_month=(day.year, day.month) == (month_anchor.year, month_anchor.month),
        is_today=day == today,
        is_range_start=rng.start is not None and day == rng.start,
        is_range_end=rng.end is not None and day == rng.end,
        is_in_range=rng.contains(day),
        is_in_preview=preview is not None and preview[0] <= day <= preview[1],
    )


def build_grid(month_anchor: date, week_start: WeekStart, selection: PickerSelectionState,
               today: date, highlight_full_week_on_hover: bool = False) -> List[WeekRow]:
    """Return the week rows covering ``month_anchor``'s month.

    The grid starts on the ``week_start`` weekday on or before the 1st and
    ends on the last day of the week containing the month's last day, so
    leading and trailing days of the neighbouring months are included.

    Args:
        month_anchor: Any day in the month to lay out
        week_start: First weekday of each row
        selection: Current range and hover
        today: The current date, supplied by the caller
        highlight_full_week_on_hover: Widen the hover preview to whole weeks

    Returns:
        List of WeekRow, each holding exactly seven cells
    """
    first, last = month_bounds(month_anchor)
    grid_start, _ = week_bounds(first, week_start)
    _, grid_end = week_bounds(last, week_start)
    preview = preview_interval(selection, week_start, highlight_full_week_on_hover)

    cells = [build_cell(d, month_anchor, selection, today, preview)
             for d in days_between(grid_start, grid_end)]
    rows = []
    for i in range(0, len(cells), 7):
        week = tuple(cells[i:i + 7])
        rows.append(WeekRow(cells=week, week_number=week_number(week[0].date, week_start)))
    logger.debug("Built %d rows for %04d-%02d starting %s", len(rows), first.year, first.month, grid_start)
    return rows


def build_month(view: MonthView, week_start: WeekStart, selection: PickerSelectionState,
                today: date, highlight_full_week_on_hover: bool = False,
                show_week_numbers: bool = True) -> MonthGrid:
    """Build a MonthGrid for ``view``; week labels are dropped unless shown."""
    rows = build_grid(view.anchor, week_start, selection, today, highlight_full_week_on_hover)
    if not show_week_numbers:
        rows = [WeekRow(cells=row.cells, week_number=None) for row in rows]
    return MonthGrid(view=view, rows=rows)
