"""Formatting utility functions for rangepick."""
import calendar
from typing import List

from ..core.models import DateRange, DayCell, MonthView

PLACEHOLDER_TEXT = "Select date range"
END_PLACEHOLDER_TEXT = "Select end date"

def format_display_text(rng: DateRange) -> str:
    """Format a range the way the picker's input box shows it.
    
    Args:
        rng: Range to format
        
    Returns:
        "dd/mm/yyyy - dd/mm/yyyy", "dd/mm/yyyy - Select end date" or the placeholder
    """
    if rng.is_complete:
        return f"{rng.start:%d/%m/%Y} - {rng.end:%d/%m/%Y}"
    if rng.is_partial:
        return f"{rng.start:%d/%m/%Y} - {END_PLACEHOLDER_TEXT}"
    return PLACEHOLDER_TEXT

def format_month(view: MonthView, full: bool = False) -> str:
    names = calendar.month_name if full else calendar.month_abbr
    return f"{names[view.month]} {view.year}"

def format_header(months: List[MonthView]) -> str:
    """Format the navigation header spanning the displayed months.
    
    Args:
        months: Displayed months, in order
        
    Returns:
        "Mar 2024 - Apr 2024" style label
    """
    if not months:
        return ""
    return f"{format_month(months[0])} - {format_month(months[-1])}"

def format_range_summary(rng: DateRange) -> str:
    """Summarize a complete range with its length in weeks and days.
    
    Args:
        rng: Range to summarize
        
    Returns:
        e.g. "10.03 -> 23.03: 14 days (2 weeks)", or "" for an incomplete range
    """
    if not rng.is_complete:
        return ""
    total_days = rng.days
    full_weeks, rem_days = divmod(total_days, 7)
    parts = []
    if full_weeks:
        parts.append(f"{full_weeks} week{'s' if full_weeks != 1 else ''}")
    if rem_days:
        parts.append(f"{rem_days} day{'s' if rem_days != 1 else ''}")
    day_word = "day" if total_days == 1 else "days"
    return f"{rng.start:%d.%m} -> {rng.end:%d.%m}: {total_days} {day_word} ({', '.join(parts)})"

def format_cell(cell: DayCell) -> str:
    """Render a day cell as short text.
    
    Out-of-month days are blank. Range bounds are bracketed, in-range days
    starred, preview days wrapped in tildes and today suffixed with "!".
    
    Args:
        cell: Cell to render
        
    Returns:
        Cell text
    """
    if not cell.in_current_month:
        return ""
    text = str(cell.date.day)
    if cell.is_range_start or cell.is_range_end:
        text = f"[{text}]"
    elif cell.is_in_range:
        text = f"*{text}*"
    elif cell.is_in_preview:
        text = f"~{text}~"
    if cell.is_today:
        text += "!"
    return text
