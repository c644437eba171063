"""Tests for detected-date labels."""

from datetime import datetime

import pytest

from due_date_service.services.calendar_config import CalendarConfig
from due_date_service.services.formatting import describe, relative_label, time_label
from due_date_service.services.results import ParsedDateResult


@pytest.mark.parametrize(
    ("moment", "expected"),
    [
        (datetime(2025, 1, 13, 18, 0), "Today"),
        (datetime(2025, 1, 14), "Tomorrow"),
        (datetime(2025, 1, 12), "Yesterday"),
        (datetime(2025, 1, 16), "Thursday"),
        (datetime(2025, 1, 18), "Saturday"),
        (datetime(2025, 1, 20), "Jan 20, 2025"),
        (datetime(2024, 12, 25), "Dec 25, 2024"),
    ],
)
def test_relative_label(
    moment: datetime, expected: str, monday: datetime, sunday_first: CalendarConfig
) -> None:
    assert relative_label(moment, monday, sunday_first) == expected


def test_relative_label_uses_week_definition(monday: datetime, monday_first: CalendarConfig) -> None:
    sunday = datetime(2025, 1, 19)
    assert relative_label(sunday, monday, monday_first) == "Sunday"


@pytest.mark.parametrize(
    ("moment", "expected"),
    [
        (datetime(2025, 1, 13, 15, 30), "3:30 PM"),
        (datetime(2025, 1, 13, 0, 5), "12:05 AM"),
        (datetime(2025, 1, 13, 12, 0), "12:00 PM"),
        (datetime(2025, 1, 13, 9, 0), "9:00 AM"),
    ],
)
def test_time_label(moment: datetime, expected: str) -> None:
    assert time_label(moment) == expected


def test_describe(monday: datetime, sunday_first: CalendarConfig) -> None:
    with_time = ParsedDateResult.from_span(
        "Lunch tomorrow at 3pm",
        6,
        21,
        date=datetime(2025, 1, 14, 15, 0),
        time=datetime(2025, 1, 14, 15, 0),
    )
    date_only = ParsedDateResult.from_span("Dentist tomorrow", 8, 16, date=datetime(2025, 1, 14))

    assert describe(with_time, monday, sunday_first) == "Tomorrow at 3:00 PM"
    assert describe(date_only, monday, sunday_first) == "Tomorrow"
