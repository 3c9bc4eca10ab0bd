"""CLI commands for managing duraspan settings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from duraspan.configuration.settings import (
    DEFAULT_CONFIG_PATH,
    Settings,
    bootstrap_settings,
    load_settings,
    save_settings,
)
from duraspan.errors import DuraspanError, InvalidConfigError, format_error_for_cli


config_app = typer.Typer(help="Manage duraspan configuration")


@config_app.command("init")
def init_config(
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, help="Path to config file"),
    culture: Optional[str] = typer.Option(None, help="Override culture, e.g. zh-cn"),
    merge: Optional[bool] = typer.Option(None, "--merge/--no-merge", help="Override duration merging"),
    calendar_mode: Optional[bool] = typer.Option(
        None, "--calendar-mode/--no-calendar-mode", help="Override calendar mode"
    ),
    force: bool = typer.Option(False, "--force", help="Replace an existing config file"),
) -> None:
    """Initialize the duraspan settings file."""

    overrides = {}
    if culture is not None:
        overrides.setdefault("extraction", {})["culture"] = culture
    if merge is not None:
        overrides.setdefault("extraction", {})["merge"] = merge
    if calendar_mode is not None:
        overrides.setdefault("extraction", {})["calendar_mode"] = calendar_mode

    if force and config_path.exists():
        save_settings(Settings(), config_path)

    try:
        settings = bootstrap_settings(path=config_path, overrides=overrides)
    except DuraspanError as exc:
        typer.echo(format_error_for_cli(exc), err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Configuration initialized at {config_path}")
    typer.echo(_summarize_settings(settings))


@config_app.command("show")
def show_config(config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, help="Path to config")) -> None:
    """Display effective configuration."""

    try:
        settings = load_settings(config_path)
    except DuraspanError as exc:
        typer.echo(format_error_for_cli(exc), err=True)
        raise typer.Exit(code=1)
    typer.echo(_summarize_settings(settings))


@config_app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Configuration key, e.g. extraction.culture"),
    value: str = typer.Argument(..., help="New value"),
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, help="Path to config"),
) -> None:
    """Update a configuration value."""

    try:
        settings = load_settings(config_path)
        payload = settings.model_dump(mode="python")
        _assign(payload, key.split("."), value)
        updated = Settings.model_validate(payload)
    except DuraspanError as exc:
        typer.echo(format_error_for_cli(exc), err=True)
        raise typer.Exit(code=1)
    except ValueError as exc:
        typer.echo(format_error_for_cli(InvalidConfigError(str(exc))), err=True)
        raise typer.Exit(code=1)
    save_settings(updated, config_path)
    typer.echo(f"Updated {key}")


def _summarize_settings(settings: Settings) -> str:
    data = settings.model_dump(mode="json")
    return json.dumps(data, indent=2)


def _assign(payload: dict, keys: list[str], value: str) -> None:
    current = payload
    for key in keys[:-1]:
        current = current.setdefault(key, {})
    current[keys[-1]] = value
