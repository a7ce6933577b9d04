"""Picker settings loaded from the environment (and an optional rangepick.env file)."""
import os
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv

from ..core.errors import InvalidConfiguration
from ..core.models import WeekStart

ENV_FILE_NAME = 'rangepick.env'

ENV_WEEK_START = 'RANGEPICK_WEEK_START'
ENV_NUMBER_OF_MONTHS = 'RANGEPICK_NUMBER_OF_MONTHS'
ENV_SHOW_WEEK_NUMBERS = 'RANGEPICK_SHOW_WEEK_NUMBERS'
ENV_HIGHLIGHT_FULL_WEEK = 'RANGEPICK_HIGHLIGHT_FULL_WEEK'
ENV_SNAP_TO_WEEKS = 'RANGEPICK_SNAP_TO_WEEKS'

_TRUE = {'1', 'true', 'yes', 'on'}
_FALSE = {'0', 'false', 'no', 'off', ''}

def default_env_file() -> str:
    """Return the path of rangepick.env next to the package directory."""
    return os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), ENV_FILE_NAME)

def load_environment(env_file: Optional[str] = None) -> bool:
    """Load environment variables from the rangepick.env file, if present.
    
    Args:
        env_file: Path to the env file (optional, defaults to rangepick.env beside the package)
        
    Returns:
        True if a file was found and loaded
    """
    path = env_file or default_env_file()
    if not os.path.exists(path):
        return False
    return load_dotenv(path)

def parse_bool(key: str, value: str) -> bool:
    text = value.strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise InvalidConfiguration(f"{key} must be a boolean (1/0, true/false, yes/no, on/off), got {value!r}")

def parse_positive_int(key: str, value: str) -> int:
    try:
        number = int(value.strip())
    except ValueError as err:
        raise InvalidConfiguration(f"{key} must be an integer, got {value!r}") from err
    if number < 1:
        raise InvalidConfiguration(f"{key} must be at least 1, got {number}")
    return number

@dataclass(frozen=True)
class PickerConfig:
    """Options recognized when a picker is created."""
    
    week_start: WeekStart = WeekStart.SUNDAY
    number_of_months: int = 2
    show_week_numbers: bool = False
    highlight_full_week_on_hover: bool = False
    default_to_week_start_and_end_dates: bool = False
    
    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PickerConfig":
        """Build a config from RANGEPICK_* environment variables.
        
        Args:
            environ: Mapping to read from (optional, defaults to os.environ)
            
        Returns:
            PickerConfig with unset keys left at their defaults
            
        Raises:
            InvalidConfiguration: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        if env.get(ENV_WEEK_START):
            values['week_start'] = WeekStart.parse(env[ENV_WEEK_START])
        if env.get(ENV_NUMBER_OF_MONTHS):
            values['number_of_months'] = parse_positive_int(ENV_NUMBER_OF_MONTHS, env[ENV_NUMBER_OF_MONTHS])
        if ENV_SHOW_WEEK_NUMBERS in env:
            values['show_week_numbers'] = parse_bool(ENV_SHOW_WEEK_NUMBERS, env[ENV_SHOW_WEEK_NUMBERS])
        if ENV_HIGHLIGHT_FULL_WEEK in env:
            values['highlight_full_week_on_hover'] = parse_bool(ENV_HIGHLIGHT_FULL_WEEK, env[ENV_HIGHLIGHT_FULL_WEEK])
        if ENV_SNAP_TO_WEEKS in env:
            values['default_to_week_start_and_end_dates'] = parse_bool(ENV_SNAP_TO_WEEKS, env[ENV_SNAP_TO_WEEKS])
        return cls(**values)
    
    def override(self, **changes: Any) -> "PickerConfig":
        """Return a copy with every non-None keyword applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
    
    def to_picker_kwargs(self) -> Dict[str, Any]:
        return {
            'week_start': self.week_start,
            'number_of_months': self.number_of_months,
            'show_week_numbers': self.show_week_numbers,
            'highlight_full_week_on_hover': self.highlight_full_week_on_hover,
            'default_to_week_start_and_end_dates': self.default_to_week_start_and_end_dates,
        }
