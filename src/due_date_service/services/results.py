"""Parsed date results and the span helpers shared by both matching stages."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

_SPACE_RUN = re.compile(r" {2,}")


class MatchSource(str, Enum):
    """Which stage produced a result."""

    RECOGNIZER = "recognizer"
    PHRASE = "phrase"
    WEEKDAY = "weekday"


@dataclass(frozen=True)
class ParsedDateResult:
    """A date/time expression found in a piece of text."""

    date: datetime
    time: datetime | None
    matched_range: tuple[int, int]  # half-open [start, end)
    matched_text: str
    source: MatchSource = MatchSource.RECOGNIZER

    def __post_init__(self) -> None:
        start, end = self.matched_range
        if not 0 <= start < end:
            raise ValueError(f"Invalid matched range: {self.matched_range}")

    @classmethod
    def from_span(
        cls,
        text: str,
        start: int,
        end: int,
        date: datetime,
        time: datetime | None = None,
        source: MatchSource = MatchSource.RECOGNIZER,
    ) -> ParsedDateResult:
        """Build a result whose matched text is sliced from ``text``."""
        if end > len(text):
            raise ValueError(f"Range ({start}, {end}) exceeds text length {len(text)}")
        return cls(
            date=date,
            time=time,
            matched_range=(start, end),
            matched_text=text[start:end],
            source=source,
        )

    @property
    def start(self) -> int:
        return self.matched_range[0]

    @property
    def end(self) -> int:
        return self.matched_range[1]

    @property
    def has_time(self) -> bool:
        return self.time is not None

    def cleaned_title(self, original: str) -> str:
        """
        Return ``original`` with the matched expression removed.

        Space runs left behind are collapsed to one space and the ends trimmed,
        so "Lunch tomorrow with Sam" becomes "Lunch with Sam".
        """
        start, end = self.matched_range
        cleaned = original[:start] + original[end:]
        return _SPACE_RUN.sub(" ", cleaned).strip()


def translate_span(original: str, lowered: str, start: int, end: int) -> tuple[int, int]:
    """
    Map a span found in ``lowered`` back onto ``original``.

    ``lowered`` must be ``original.lower()``. Lower-casing a handful of
    characters (e.g. "İ") yields more than one code point, so when the lengths
    differ each original character is expanded to find where the span lies.
    """
    if len(lowered) == len(original):
        return start, end

    positions: list[int] = []
    for index, char in enumerate(original):
        positions.extend([index] * len(char.lower()))

    return positions[start], positions[end - 1] + 1


def find_phrase(text: str, phrase: str, lowered: str | None = None) -> tuple[int, int] | None:
    """
    Case-insensitive search for ``phrase`` in ``text``.

    Returns the span of the first occurrence in ``text`` coordinates, or None.
    """
    if lowered is None:
        lowered = text.lower()
    index = lowered.find(phrase)
    if index < 0:
        return None
    return translate_span(text, lowered, index, index + len(phrase))
