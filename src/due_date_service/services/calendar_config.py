"""Calendar primitives injected into the date parser.

The parser never reads process-wide locale or calendar state. Everything it
needs to know about weeks (where they start, how weekdays are numbered) comes
from a ``CalendarConfig`` passed in by the caller, so results are reproducible
in tests and across servers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import IntEnum

from ..config import settings

logger = logging.getLogger(__name__)

# Fixed English names, indexed like datetime.weekday(). The stdlib
# calendar.day_name follows LC_TIME and can't be used for phrase matching.
WEEKDAY_NAMES: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


class Weekday(IntEnum):
    """Days of the week, numbered like ``datetime.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


@dataclass(frozen=True)
class CalendarConfig:
    """Week definition and day arithmetic used when resolving dates."""

    first_weekday: Weekday = Weekday.SUNDAY

    def __post_init__(self) -> None:
        # Accept plain ints; Weekday() raises ValueError outside 0..6
        object.__setattr__(self, "first_weekday", Weekday(self.first_weekday))

    @classmethod
    def from_settings(cls) -> CalendarConfig:
        """Build a config from the application settings."""
        return cls(first_weekday=Weekday(settings.first_weekday))

    def weekday_ordinal(self, moment: datetime) -> int:
        """Return the 1-based position of ``moment``'s weekday in the week."""
        return (moment.weekday() - self.first_weekday) % 7 + 1

    def is_last_day_of_week(self, moment: datetime) -> bool:
        return self.weekday_ordinal(moment) == 7

    def weekday_names(self) -> list[str]:
        """Lower-case weekday names, starting at the first day of the week."""
        return [WEEKDAY_NAMES[(self.first_weekday + i) % 7] for i in range(7)]

    def add_days(self, moment: datetime, days: int) -> datetime:
        """
        Offset ``moment`` by a number of days.

        Out-of-range results fall back to ``moment`` unchanged.
        """
        try:
            return moment + timedelta(days=days)
        except OverflowError:
            logger.warning(f"Day offset {days} overflows from {moment.isoformat()}")
            return moment

    def is_same_day(self, first: datetime, second: datetime) -> bool:
        return first.date() == second.date()

    def at_time(self, moment: datetime, hour: int, minute: int = 0, second: int = 0) -> datetime:
        """Return the same calendar day at the given clock time."""
        return moment.replace(hour=hour, minute=minute, second=second, microsecond=0)

    def start_of_day(self, moment: datetime) -> datetime:
        return self.at_time(moment, 0)

    def start_of_week(self, moment: datetime) -> datetime:
        """Midnight on the first day of ``moment``'s week."""
        return self.add_days(self.start_of_day(moment), 1 - self.weekday_ordinal(moment))
