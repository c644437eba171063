"""Tests for calendar primitives."""

from datetime import datetime

import pytest

from due_date_service.services.calendar_config import CalendarConfig, Weekday

SUNDAY = datetime(2025, 1, 12, 18, 0)
SATURDAY = datetime(2025, 1, 18, 18, 0)


def test_weekday_ordinal_sunday_first(sunday_first: CalendarConfig, monday: datetime) -> None:
    assert sunday_first.weekday_ordinal(SUNDAY) == 1
    assert sunday_first.weekday_ordinal(monday) == 2
    assert sunday_first.weekday_ordinal(SATURDAY) == 7


def test_weekday_ordinal_monday_first(monday_first: CalendarConfig, monday: datetime) -> None:
    assert monday_first.weekday_ordinal(monday) == 1
    assert monday_first.weekday_ordinal(SATURDAY) == 6
    assert monday_first.weekday_ordinal(SUNDAY) == 7


def test_last_day_of_week_follows_first_weekday(
    sunday_first: CalendarConfig, monday_first: CalendarConfig
) -> None:
    assert sunday_first.is_last_day_of_week(SATURDAY)
    assert not sunday_first.is_last_day_of_week(SUNDAY)
    assert monday_first.is_last_day_of_week(SUNDAY)


def test_weekday_names_start_at_first_weekday(
    sunday_first: CalendarConfig, monday_first: CalendarConfig
) -> None:
    assert sunday_first.weekday_names()[:2] == ["sunday", "monday"]
    assert monday_first.weekday_names()[0] == "monday"
    assert monday_first.weekday_names()[-1] == "sunday"
    assert len(set(sunday_first.weekday_names())) == 7


def test_plain_int_first_weekday_is_accepted() -> None:
    assert CalendarConfig(first_weekday=0).first_weekday is Weekday.MONDAY


def test_invalid_first_weekday_raises() -> None:
    with pytest.raises(ValueError):
        CalendarConfig(first_weekday=7)


def test_add_days(sunday_first: CalendarConfig, monday: datetime) -> None:
    assert sunday_first.add_days(monday, 14) == datetime(2025, 1, 27, 9, 30)
    assert sunday_first.add_days(monday, -1) == datetime(2025, 1, 12, 9, 30)


def test_add_days_overflow_returns_moment_unchanged(sunday_first: CalendarConfig) -> None:
    last = datetime(9999, 12, 31, 12, 0)
    assert sunday_first.add_days(last, 1) == last
    assert sunday_first.add_days(last, 10**12) == last


def test_is_same_day(sunday_first: CalendarConfig, monday: datetime) -> None:
    assert sunday_first.is_same_day(monday, datetime(2025, 1, 13, 23, 59))
    assert not sunday_first.is_same_day(monday, datetime(2025, 1, 14, 0, 0))


def test_at_time_and_start_of_day(sunday_first: CalendarConfig) -> None:
    moment = datetime(2025, 1, 13, 9, 30, 15, 500)
    assert sunday_first.at_time(moment, 20) == datetime(2025, 1, 13, 20, 0)
    assert sunday_first.start_of_day(moment) == datetime(2025, 1, 13)


def test_start_of_week(
    sunday_first: CalendarConfig, monday_first: CalendarConfig, monday: datetime
) -> None:
    assert sunday_first.start_of_week(monday) == datetime(2025, 1, 12)
    assert monday_first.start_of_week(monday) == datetime(2025, 1, 13)
    assert monday_first.start_of_week(SUNDAY) == datetime(2025, 1, 6)


def test_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    from due_date_service.config import settings

    monkeypatch.setattr(settings, "first_weekday", 0)
    assert CalendarConfig.from_settings().first_weekday is Weekday.MONDAY
