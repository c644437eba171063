"""Pydantic models for request/response schemas."""

from .dates import DateParseRequest, DateParseResponse, TaskDueFieldsResponse

__all__ = [
    "DateParseRequest",
    "DateParseResponse",
    "TaskDueFieldsResponse",
]
