"""Tests for the command line interface."""

import pytest
from typer.testing import CliRunner

from due_date_service.cli import app
from due_date_service.config import settings

runner = CliRunner()


def test_parse_prints_detected_date() -> None:
    result = runner.invoke(
        app, ["parse", "Call mom tonight", "--now", "2025-01-13T09:30", "--no-recognizer"]
    )

    assert result.exit_code == 0
    assert "tonight" in result.output
    assert "2025-01-13" in result.output
    assert "8:00 PM" in result.output
    assert "phrase" in result.output


def test_parse_without_date() -> None:
    result = runner.invoke(app, ["parse", "Buy milk", "--no-recognizer"])

    assert result.exit_code == 0
    assert "No date detected" in result.output


def test_parse_rejects_bad_reference_time() -> None:
    result = runner.invoke(app, ["parse", "today", "--now", "yesterday-ish"])

    assert result.exit_code == 1
    assert "Invalid --now" in result.output


def test_parse_first_weekday_option() -> None:
    result = runner.invoke(
        app,
        [
            "parse",
            "Report end of week",
            "--now",
            "2025-01-12T09:00",
            "--first-weekday",
            "0",
            "--no-recognizer",
        ],
    )

    assert result.exit_code == 0
    assert "2025-01-12" in result.output


def test_clean(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "recognizer_enabled", False)
    result = runner.invoke(app, ["clean", "Renew passport next week"])

    assert result.exit_code == 0
    assert result.output.strip() == "Renew passport"


def test_config() -> None:
    result = runner.invoke(app, ["config"])

    assert result.exit_code == 0
    assert "First weekday" in result.output
    assert "Recognizer enabled" in result.output
