"""Human-readable labels for detected dates."""

from datetime import datetime

from .calendar_config import WEEKDAY_NAMES, CalendarConfig
from .results import ParsedDateResult

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def relative_label(moment: datetime, reference_now: datetime, calendar: CalendarConfig) -> str:
    """Label like "Today", "Tomorrow", "Friday" or "Jan 15, 2025"."""
    days = (moment.date() - reference_now.date()).days
    if days == 0:
        return "Today"
    if days == 1:
        return "Tomorrow"
    if days == -1:
        return "Yesterday"

    if calendar.start_of_week(moment) == calendar.start_of_week(reference_now):
        return WEEKDAY_NAMES[moment.weekday()].capitalize()

    return f"{_MONTHS[moment.month - 1]} {moment.day}, {moment.year}"


def time_label(moment: datetime) -> str:
    """12-hour clock time, e.g. "3:30 PM"."""
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {suffix}"


def describe(result: ParsedDateResult, reference_now: datetime, calendar: CalendarConfig) -> str:
    """Summary shown next to a detected date, e.g. "Tomorrow at 3:00 PM"."""
    label = relative_label(result.date, reference_now, calendar)
    if result.time is not None:
        return f"{label} at {time_label(result.time)}"
    return label
