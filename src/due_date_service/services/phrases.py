"""Fallback matcher for relative date phrases the recognizer misses."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from ..config import settings
from .calendar_config import CalendarConfig
from .results import MatchSource, ParsedDateResult, find_phrase

logger = logging.getLogger(__name__)

END_OF_WEEK = "end of week"


@dataclass(frozen=True)
class Phrase:
    """A fixed phrase and the day offset it stands for."""

    text: str
    day_offset: int | None  # None is computed per call
    evening: bool = False


# Searched in this order; the first phrase present anywhere in the text wins,
# even if another phrase appears earlier in it.
PHRASE_TABLE: tuple[Phrase, ...] = (
    Phrase("today", 0),
    Phrase("tonight", 0, evening=True),
    Phrase("tomorrow", 1),
    Phrase("day after tomorrow", 2),
    Phrase("next week", 7),
    Phrase("in a week", 7),
    Phrase(END_OF_WEEK, None),
)


def end_of_week_offset(reference_now: datetime, calendar: CalendarConfig) -> int:
    """Days from ``reference_now`` to the "end of week" target."""
    if calendar.is_last_day_of_week(reference_now):
        return 0
    return 8 - calendar.weekday_ordinal(reference_now)


def next_weekday_offset(target_ordinal: int, reference_now: datetime, calendar: CalendarConfig) -> int:
    """
    Days from ``reference_now`` to "next <weekday>".

    The nearest upcoming occurrence is always skipped, so "next Monday" said on
    a Monday is 14 days out and said on a Sunday is 8 days out.
    """
    days_to_add = target_ordinal - calendar.weekday_ordinal(reference_now)
    if days_to_add <= 0:
        days_to_add += 7
    return days_to_add + 7


def match_fixed_phrase(
    text: str,
    reference_now: datetime,
    calendar: CalendarConfig,
    tonight_hour: int | None = None,
) -> ParsedDateResult | None:
    """Try each entry of ``PHRASE_TABLE`` in order."""
    if tonight_hour is None:
        tonight_hour = settings.tonight_hour

    lowered = text.lower()
    for phrase in PHRASE_TABLE:
        span = find_phrase(text, phrase.text, lowered)
        if span is None:
            continue

        offset = phrase.day_offset
        if offset is None:
            offset = end_of_week_offset(reference_now, calendar)

        date = calendar.add_days(reference_now, offset)
        time = calendar.at_time(date, tonight_hour) if phrase.evening else None

        logger.debug(f"Matched phrase {phrase.text!r} at {span}")
        return ParsedDateResult.from_span(
            text, span[0], span[1], date=date, time=time, source=MatchSource.PHRASE
        )

    return None


def match_next_weekday(
    text: str,
    reference_now: datetime,
    calendar: CalendarConfig,
) -> ParsedDateResult | None:
    """Match "next <weekday>", trying weekdays in calendar order."""
    lowered = text.lower()
    for index, name in enumerate(calendar.weekday_names()):
        span = find_phrase(text, f"next {name}", lowered)
        if span is None:
            continue

        days_to_add = next_weekday_offset(index + 1, reference_now, calendar)
        date = calendar.add_days(reference_now, days_to_add)

        logger.debug(f"Matched 'next {name}' at {span}, {days_to_add} days out")
        return ParsedDateResult.from_span(
            text, span[0], span[1], date=date, time=None, source=MatchSource.WEEKDAY
        )

    return None


def match_phrases(
    text: str,
    reference_now: datetime,
    calendar: CalendarConfig,
) -> ParsedDateResult | None:
    """Run the fixed phrase table, then the "next <weekday>" grammar."""
    return match_fixed_phrase(text, reference_now, calendar) or match_next_weekday(
        text, reference_now, calendar
    )
