"""CLI commands for extracting durations from text."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer
from dateutil import parser as dateutil_parser
from rich.console import Console
from rich.table import Table

from duraspan.configuration.settings import (
    DEFAULT_CONFIG_PATH,
    ExtractionSettings,
    Settings,
    build_extractor,
    load_settings,
)
from duraspan.errors import (
    DuraspanError,
    ExtractionError,
    InvalidConfigError,
    UnsupportedCultureError,
    format_error_for_cli,
)
from duraspan.extraction.duration import SUPPORTED_CULTURES, Span, normalize_culture

logger = logging.getLogger(__name__)

console = Console()


def _resolve_settings(
    config_path: Path,
    culture: Optional[str],
    merge: Optional[bool],
    calendar_mode: Optional[bool],
) -> Settings:
    """Load settings from disk when present, then apply command line options."""
    settings = load_settings(config_path) if config_path.exists() else Settings()

    extraction = settings.extraction.model_dump()
    if culture is not None:
        if normalize_culture(culture) not in SUPPORTED_CULTURES:
            raise UnsupportedCultureError(culture, SUPPORTED_CULTURES)
        extraction["culture"] = culture
    if merge is not None:
        extraction["merge"] = merge
    if calendar_mode is not None:
        extraction["calendar_mode"] = calendar_mode

    try:
        return Settings(extraction=ExtractionSettings.model_validate(extraction))
    except ValueError as exc:
        raise InvalidConfigError(str(exc), details={"culture": extraction["culture"]}) from exc


def _read_text(text: Optional[str], file: Optional[Path]) -> str:
    if file is not None:
        try:
            text = file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ExtractionError(
                f"Cannot read {file}: {exc}",
                details={"path": str(file), "reason": type(exc).__name__},
            ) from exc
    if not text or not text.strip():
        raise ExtractionError("No input text given")
    return text


def _parse_reference_time(value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return dateutil_parser.parse(value)
    except (ValueError, OverflowError) as exc:
        raise typer.BadParameter(f"Cannot parse reference time {value!r}") from exc


def _render_table(spans: List[Span]) -> None:
    table = Table(title="Durations")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Text")
    table.add_column("Type")
    table.add_column("Modifier")

    for span in spans:
        table.add_row(
            str(span.start),
            str(span.end),
            span.text,
            span.payload.value if span.payload else "-",
            "yes" if span.modifier else "",
        )

    console.print(table)


def extract_command(
    text: Optional[str] = typer.Argument(None, help="Text to scan for durations"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read text from a UTF-8 file"),
    culture: Optional[str] = typer.Option(None, "--culture", "-c", help="Culture code, e.g. en-us or zh-cn"),
    merge: Optional[bool] = typer.Option(None, "--merge/--no-merge", help="Merge connected durations"),
    calendar_mode: Optional[bool] = typer.Option(
        None, "--calendar-mode/--no-calendar-mode", help="Recognize 'during the week' phrases"
    ),
    reference_time: Optional[str] = typer.Option(None, "--reference-time", help="Reference timestamp"),
    output_json: bool = typer.Option(False, "--json", help="Output as JSON"),
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="Path to config file"),
) -> None:
    """Extract duration expressions from text.

    Examples:
        duraspan extract "It took 2 hours and 30 minutes"
        duraspan extract --culture zh-cn "我等了1小时30分钟" --json
    """
    reference = _parse_reference_time(reference_time)

    try:
        settings = _resolve_settings(config_path, culture, merge, calendar_mode)
        source = _read_text(text, file)
        extractor = build_extractor(settings)
        spans = extractor.extract(source, reference)
    except DuraspanError as exc:
        console.print(format_error_for_cli(exc), style="red", markup=False)
        raise typer.Exit(code=1)

    logger.debug(f"Extracted {len(spans)} durations ({settings.extraction.culture})")

    if output_json:
        typer.echo(json.dumps([span.to_dict() for span in spans], ensure_ascii=False))
        return

    if not spans:
        console.print("[yellow]No durations found[/yellow]")
        return

    _render_table(spans)


def cultures_command() -> None:
    """List cultures with a duration configuration."""
    for culture in sorted(SUPPORTED_CULTURES):
        typer.echo(culture)
