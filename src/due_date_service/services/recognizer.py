"""Generic date/time recognition backed by dateparser."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, Sequence

from dateparser.date import DateDataParser
from dateparser.search import search_dates

from ..config import settings
from .calendar_config import WEEKDAY_NAMES, CalendarConfig
from .results import MatchSource, ParsedDateResult

logger = logging.getLogger(__name__)

# Words dateparser happily reads as dates on their own ("a" -> 1 unit,
# "now", "second", month/day names that are also ordinary words).
DEFAULT_IGNORED_TOKENS: frozenset[str] = frozenset(
    {
        "a",
        "an",
        "at",
        "by",
        "in",
        "of",
        "on",
        "to",
        "the",
        "now",
        "second",
        "may",
        "march",
        "mon",
        "sat",
        "sun",
    }
)

# "3pm", "at 8:00am", "noon": a clock time with no date words
_TIME_ONLY = re.compile(
    r"(?:at\s+|@\s*)?(?:\d{1,2}(?::\d{2})?\s*(?:[ap]\.?m\.?)?|noon|midnight)",
    re.IGNORECASE,
)
_DIGITS_ONLY = re.compile(r"\d+")


@dataclass(frozen=True)
class Detection:
    """One date/time expression found by a recognizer."""

    start: int
    end: int
    moment: datetime


class Recognizer(Protocol):
    """Anything that can find date/time expressions in text."""

    def detect(self, text: str, reference_now: datetime) -> list[Detection]:
        """Return detections ordered by position in ``text``."""
        ...


class NullRecognizer:
    """Recognizer that never finds anything."""

    def detect(self, text: str, reference_now: datetime) -> list[Detection]:
        return []


class DateparserRecognizer:
    """Recognizer wrapping ``dateparser.search.search_dates``."""

    def __init__(
        self,
        languages: Sequence[str] = ("en",),
        prefer_dates_from: str = "future",
        ignored_tokens: frozenset[str] = DEFAULT_IGNORED_TOKENS,
    ) -> None:
        self.languages = list(languages)
        self.prefer_dates_from = prefer_dates_from
        self.ignored_tokens = ignored_tokens

    def _settings(self, base: datetime) -> dict:
        return {
            "RELATIVE_BASE": base,
            "PREFER_DATES_FROM": self.prefer_dates_from,
            "RETURN_AS_TIMEZONE_AWARE": False,
        }

    def _is_filler(self, substring: str) -> bool:
        stripped = substring.strip()
        if _DIGITS_ONLY.fullmatch(stripped):
            return True
        words = stripped.lower().split()
        return all(word.strip(".,") in self.ignored_tokens for word in words)

    def _leaves_weekday_to_grammar(self, text: str, start: int, substring: str) -> bool:
        """True for "next <weekday>", which the phrase fallback resolves."""
        word = substring.strip().lower()
        if word.startswith("next "):
            return word[5:].strip() in WEEKDAY_NAMES
        return word in WEEKDAY_NAMES and text[:start].lower().endswith("next ")

    def _resolve(
        self, parser: DateDataParser, substring: str, found: datetime, base: datetime
    ) -> datetime:
        """
        Re-read one substring on its own.

        ``search_dates`` misreads short clock times in context ("7am" as July),
        so each hit is parsed again. Without a written clock time the moment is
        truncated to midnight; a bare time is pinned to the base day.
        """
        data = parser.get_date_data(substring)
        if data.date_obj is None:
            logger.debug(f"Could not re-read {substring!r}, keeping {found.isoformat()}")
            return found

        moment = data.date_obj.replace(tzinfo=None)
        if data.period != "time":
            return moment.replace(hour=0, minute=0, second=0, microsecond=0)
        if _TIME_ONLY.fullmatch(substring.strip()):
            return base.replace(
                hour=moment.hour, minute=moment.minute, second=0, microsecond=0
            )
        return moment

    def detect(self, text: str, reference_now: datetime) -> list[Detection]:
        """
        Find date/time expressions in ``text``.

        Args:
            text: Free-form user input
            reference_now: Moment relative expressions are resolved against

        Returns:
            Detections in left-to-right order. Library failures yield [].
        """
        if not text.strip():
            return []

        base = reference_now.replace(tzinfo=None)
        try:
            found = search_dates(text, languages=self.languages, settings=self._settings(base))
        except Exception as e:
            logger.warning(f"dateparser failed on {text!r}: {e}")
            return []
        if not found:
            return []

        parser = DateDataParser(
            languages=self.languages,
            settings={**self._settings(base), "RETURN_TIME_AS_PERIOD": True},
        )

        detections: list[Detection] = []
        cursor = 0
        for substring, moment in found:
            start = text.find(substring, cursor)
            if start < 0:
                logger.debug(f"Could not locate {substring!r} in {text!r}")
                continue
            end = start + len(substring)
            cursor = end

            if not substring.strip() or self._is_filler(substring):
                continue
            if self._leaves_weekday_to_grammar(text, start, substring):
                continue

            try:
                moment = self._resolve(parser, substring, moment, base)
            except Exception as e:
                logger.warning(f"dateparser failed on {substring!r}: {e}")
                continue

            detections.append(
                Detection(start=start, end=end, moment=moment.replace(tzinfo=reference_now.tzinfo))
            )

        return detections


def default_recognizer() -> Recognizer:
    """Build the recognizer selected by the application settings."""
    if not settings.recognizer_enabled:
        return NullRecognizer()
    return DateparserRecognizer(
        languages=settings.languages,
        prefer_dates_from=settings.prefer_dates_from,
    )


def resolve_detection(
    text: str,
    detection: Detection,
    reference_now: datetime,
    calendar: CalendarConfig,
) -> ParsedDateResult | None:
    """
    Classify a detection as time-only or a full date.

    A moment on the reference day with a clock time is a time for today and is
    re-anchored to ``reference_now``. Anything else is a date, with a time only
    when the moment has a nonzero hour or minute.
    """
    if not 0 <= detection.start < detection.end <= len(text):
        return None

    moment = detection.moment
    has_clock_time = moment.hour != 0 or moment.minute != 0

    if has_clock_time and calendar.is_same_day(moment, reference_now):
        date, time = reference_now, moment
    else:
        date, time = moment, moment if has_clock_time else None

    return ParsedDateResult.from_span(
        text,
        detection.start,
        detection.end,
        date=date,
        time=time,
        source=MatchSource.RECOGNIZER,
    )


def recognize(
    text: str,
    reference_now: datetime,
    calendar: CalendarConfig,
    recognizer: Recognizer,
) -> ParsedDateResult | None:
    """Resolve the leftmost usable detection, or None when nothing is found."""
    for detection in recognizer.detect(text, reference_now):
        result = resolve_detection(text, detection, reference_now, calendar)
        if result is not None:
            return result
    return None
