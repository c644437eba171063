"""Date parsing Pydantic models."""

from datetime import date, datetime, time

from pydantic import BaseModel, Field


class DateParseRequest(BaseModel):
    """Request to detect a due date in task text."""

    text: str = Field(
        ...,
        description="Task title like 'Lunch with Sam tomorrow at 3pm'",
        min_length=1,
        max_length=1000,
    )
    reference_now: datetime | None = Field(
        None, description="Moment relative dates resolve against (defaults to server time)"
    )
    first_weekday: int | None = Field(
        None, ge=0, le=6, description="First day of the week, 0 = Monday ... 6 = Sunday"
    )
    use_recognizer: bool = Field(True, description="Set false to use only the phrase fallback")


class DateParseResponse(BaseModel):
    """Detected date expression, if any."""

    found: bool
    date: datetime | None = Field(None, description="Resolved date")
    time: datetime | None = Field(None, description="Resolved time, when a clock time was given")
    matched_text: str | None = Field(None, description="Text that expressed the date")
    start: int | None = Field(None, description="Start offset of the match (inclusive)")
    end: int | None = Field(None, description="End offset of the match (exclusive)")
    source: str | None = Field(None, description="recognizer, phrase or weekday")
    cleaned_title: str | None = Field(None, description="Input with the match removed")
    label: str | None = Field(None, description="Display summary like 'Tomorrow at 3:00 PM'")


class TaskDueFieldsResponse(BaseModel):
    """Task fields after applying a detected date."""

    title: str = Field(..., description="Title with the date expression removed")
    due_date: date | None = Field(None, description="Due date")
    due_time: time | None = Field(None, description="Due time of day")
    matched_text: str | None = Field(None, description="Text that was removed")
