"""Business logic services."""

from .calendar_config import CalendarConfig, Weekday
from .date_parser import TaskDueFields, apply_to_task, parse
from .formatting import describe, relative_label, time_label
from .phrases import match_phrases
from .recognizer import DateparserRecognizer, Detection, NullRecognizer, Recognizer
from .results import MatchSource, ParsedDateResult

__all__ = [
    "parse",
    "apply_to_task",
    "match_phrases",
    "describe",
    "relative_label",
    "time_label",
    "CalendarConfig",
    "Weekday",
    "ParsedDateResult",
    "MatchSource",
    "TaskDueFields",
    "Recognizer",
    "Detection",
    "DateparserRecognizer",
    "NullRecognizer",
]
