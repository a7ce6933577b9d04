"""Utility modules for rangepick."""

from .date_utils import parse_day, parse_month, day_str
from .format_utils import format_display_text, format_header, format_range_summary, format_cell
from .file_utils import write_markdown
from .config import PickerConfig, load_environment

__all__ = [
    'parse_day', 'parse_month', 'day_str',
    'format_display_text', 'format_header', 'format_range_summary', 'format_cell',
    'write_markdown',
    'PickerConfig', 'load_environment'
]
