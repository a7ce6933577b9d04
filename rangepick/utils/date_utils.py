"""Date parsing and display helpers for rangepick."""
from datetime import datetime, date

from ..core.calendar_math import DAY_ABBR

def parse_day(text: str) -> date:
    """Parse a YYYY-MM-DD string into a date.
    
    Args:
        text: Date string
        
    Returns:
        Parsed date
        
    Raises:
        ValueError: If the string is not a valid YYYY-MM-DD date
    """
    return datetime.strptime(text.strip(), "%Y-%m-%d").date()

def parse_month(text: str) -> date:
    """Parse a YYYY-MM string into the first day of that month.
    
    Args:
        text: Month string
        
    Returns:
        First day of the month
        
    Raises:
        ValueError: If the string is not a valid YYYY-MM month
    """
    return datetime.strptime(text.strip(), "%Y-%m").date()

def day_str(dt: date) -> str:
    """Format a date as a string with day of week.
    
    Args:
        dt: Date to format
        
    Returns:
        Formatted date string, e.g. "(Mo)2024-03-11"
    """
    return f"({DAY_ABBR[dt.weekday()]}){dt}"
