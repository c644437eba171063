"""Due-date detection endpoints."""

from datetime import datetime

from fastapi import APIRouter

from ..models.dates import DateParseRequest, DateParseResponse, TaskDueFieldsResponse
from ..services.calendar_config import CalendarConfig
from ..services.date_parser import apply_to_task, parse
from ..services.formatting import describe
from ..services.recognizer import NullRecognizer, default_recognizer
from ..services.results import ParsedDateResult

router = APIRouter(tags=["dates"])


def _run_parse(request: DateParseRequest) -> tuple[ParsedDateResult | None, datetime, CalendarConfig]:
    reference_now = request.reference_now or datetime.now()
    calendar = (
        CalendarConfig(first_weekday=request.first_weekday)
        if request.first_weekday is not None
        else CalendarConfig.from_settings()
    )
    recognizer = default_recognizer() if request.use_recognizer else NullRecognizer()
    return parse(request.text, reference_now, calendar, recognizer), reference_now, calendar


@router.post("/parse", response_model=DateParseResponse)
async def parse_date(request: DateParseRequest) -> DateParseResponse:
    """
    Detect a due date in task text.

    Understands anything the recognizer does ("Jan 15", "3pm", "tomorrow at 9")
    plus fixed phrases such as "tonight", "in a week", "end of week" and
    "next Friday".

    Example input: "Lunch with Sam tomorrow at 3pm"
    """
    result, reference_now, calendar = _run_parse(request)
    if result is None:
        return DateParseResponse(found=False)

    return DateParseResponse(
        found=True,
        date=result.date,
        time=result.time,
        matched_text=result.matched_text,
        start=result.start,
        end=result.end,
        source=result.source.value,
        cleaned_title=result.cleaned_title(request.text),
        label=describe(result, reference_now, calendar),
    )


@router.post("/apply", response_model=TaskDueFieldsResponse)
async def apply_date(request: DateParseRequest) -> TaskDueFieldsResponse:
    """
    Detect a due date and split it out of the title.

    Returns the cleaned title with due date and time fields. Text without a
    date comes back unchanged.
    """
    result, _, _ = _run_parse(request)
    fields = apply_to_task(request.text, result)

    return TaskDueFieldsResponse(
        title=fields.title,
        due_date=fields.due_date,
        due_time=fields.due_time,
        matched_text=result.matched_text if result else None,
    )
