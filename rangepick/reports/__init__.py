"""Text report modules for rangepick."""

from .calendar_report import CalendarReport

__all__ = ['CalendarReport']
