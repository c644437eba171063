"""Natural-language due-date extraction for task titles."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time

from .calendar_config import CalendarConfig
from .phrases import match_phrases
from .recognizer import Recognizer, default_recognizer, recognize
from .results import ParsedDateResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskDueFields:
    """Task fields after applying a detected date."""

    title: str
    due_date: date | None = None
    due_time: time | None = None


def parse(
    text: str,
    reference_now: datetime | None = None,
    calendar: CalendarConfig | None = None,
    recognizer: Recognizer | None = None,
) -> ParsedDateResult | None:
    """
    Find a due date/time expression in free-form text.

    The recognizer runs first and its leftmost match wins. Only when it finds
    nothing are the fixed phrases ("tonight", "end of week", ...) and the
    "next <weekday>" grammar tried.

    Args:
        text: Task title like "Lunch with Sam tomorrow at 3pm"
        reference_now: Moment relative expressions resolve against (default: now)
        calendar: Week definition (default: from settings)
        recognizer: Date/time recognizer (default: from settings)

    Returns:
        ParsedDateResult, or None when the text holds no date expression
    """
    if not text or not text.strip():
        return None

    if reference_now is None:
        reference_now = datetime.now()
    if calendar is None:
        calendar = CalendarConfig.from_settings()
    if recognizer is None:
        recognizer = default_recognizer()

    result = recognize(text, reference_now, calendar, recognizer)
    if result is not None:
        logger.debug(f"Recognizer matched {result.matched_text!r}")
        return result

    result = match_phrases(text, reference_now, calendar)
    if result is not None:
        logger.debug(f"Phrase fallback matched {result.matched_text!r}")
    return result


def apply_to_task(title: str, result: ParsedDateResult | None) -> TaskDueFields:
    """
    Move a detected date out of a task title into due date/time fields.

    A title that would be left empty is kept as typed.
    """
    if result is None:
        return TaskDueFields(title=title)

    cleaned = result.cleaned_title(title) or title
    return TaskDueFields(
        title=cleaned,
        due_date=result.date.date(),
        due_time=result.time.time().replace(microsecond=0) if result.time else None,
    )
