"""Shared fixtures for the test suite."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from due_date_service.main import app
from due_date_service.services.calendar_config import CalendarConfig, Weekday
from due_date_service.services.recognizer import Detection


class StubRecognizer:
    """Recognizer returning canned detections and recording calls."""

    def __init__(self, *detections: Detection) -> None:
        self.detections = list(detections)
        self.calls: list[str] = []

    def detect(self, text: str, reference_now: datetime) -> list[Detection]:
        self.calls.append(text)
        return self.detections


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def monday() -> datetime:
    """Monday 2025-01-13, 09:30."""
    return datetime(2025, 1, 13, 9, 30)


@pytest.fixture
def sunday_first() -> CalendarConfig:
    return CalendarConfig(first_weekday=Weekday.SUNDAY)


@pytest.fixture
def monday_first() -> CalendarConfig:
    return CalendarConfig(first_weekday=Weekday.MONDAY)


@pytest.fixture
def stub() -> type[StubRecognizer]:
    return StubRecognizer
