"""Natural-language due-date extraction for task titles."""

from .services import CalendarConfig, ParsedDateResult, Weekday, apply_to_task, parse

__all__ = ["parse", "apply_to_task", "CalendarConfig", "ParsedDateResult", "Weekday"]

__version__ = "0.1.0"
