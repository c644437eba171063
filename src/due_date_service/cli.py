"""CLI for trying out due-date detection."""

from datetime import datetime

import typer
from rich.console import Console
from rich.table import Table

from .config import settings
from .services.calendar_config import CalendarConfig
from .services.date_parser import parse
from .services.formatting import describe, time_label
from .services.recognizer import NullRecognizer, default_recognizer

app = typer.Typer(help="Natural-language due-date detection")
console = Console()


def _reference_now(now: str | None) -> datetime:
    if not now:
        return datetime.now()
    try:
        return datetime.fromisoformat(now)
    except ValueError:
        console.print(f"[red]Invalid --now value: {now}[/red]")
        console.print("Use ISO format, e.g. 2025-01-13T09:30")
        raise typer.Exit(1)


def _calendar(first_weekday: int | None) -> CalendarConfig:
    if first_weekday is None:
        return CalendarConfig.from_settings()
    return CalendarConfig(first_weekday=first_weekday)


@app.command("parse")
def parse_command(
    text: str = typer.Argument(..., help="Task text, e.g. 'Lunch tomorrow at 3pm'"),
    now: str = typer.Option(None, "--now", "-n", help="Reference time (ISO format)"),
    first_weekday: int = typer.Option(
        None, "--first-weekday", "-w", min=0, max=6, help="0 = Monday ... 6 = Sunday"
    ),
    no_recognizer: bool = typer.Option(
        False, "--no-recognizer", help="Only use the phrase fallback"
    ),
):
    """Detect a due date in TEXT."""
    reference_now = _reference_now(now)
    calendar = _calendar(first_weekday)
    recognizer = NullRecognizer() if no_recognizer else default_recognizer()

    result = parse(text, reference_now, calendar, recognizer)
    if result is None:
        console.print("[yellow]No date detected[/yellow]")
        return

    table = Table(title=f'Date detected: "{result.matched_text}"')
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("Span", f"{result.start}-{result.end}")
    table.add_row("Date", result.date.strftime("%Y-%m-%d"))
    table.add_row("Time", time_label(result.time) if result.time else "-")
    table.add_row("Source", result.source.value)
    table.add_row("Title", result.cleaned_title(text))
    table.add_row("Summary", f"[green]{describe(result, reference_now, calendar)}[/green]")

    console.print(table)


@app.command()
def clean(
    text: str = typer.Argument(..., help="Task text"),
    now: str = typer.Option(None, "--now", "-n", help="Reference time (ISO format)"),
):
    """Print TEXT with any date expression removed."""
    result = parse(text, _reference_now(now))
    console.print(result.cleaned_title(text) if result else text.strip())


@app.command()
def config():
    """Show current configuration."""
    console.print("\n[bold]Configuration[/bold]")
    console.print(f"  Service: {settings.service_name}")
    console.print(f"  Environment: {settings.environment}")
    console.print(f"  First weekday: {CalendarConfig.from_settings().first_weekday.name.title()}")
    console.print(f"  Recognizer enabled: {settings.recognizer_enabled}")
    console.print(f"  Languages: {', '.join(settings.languages)}")
    console.print(f"  Prefer dates from: {settings.prefer_dates_from}")
    console.print(f"  Tonight hour: {settings.tonight_hour}:00")


if __name__ == "__main__":
    app()
