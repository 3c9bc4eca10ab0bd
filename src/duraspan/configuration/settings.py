"""Typed settings management for duraspan.

This module wraps user configuration in Pydantic models so the command line
and library callers can rely on validated settings, and builds configured
extractors from them.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from duraspan.errors import InvalidConfigError, MissingConfigError
from duraspan.extraction.duration import (
    SUPPORTED_CULTURES,
    DateTimeOptions,
    DurationExtractor,
    get_configuration,
    normalize_culture,
)

logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = Path.home() / ".duraspan" / "config.json"


class ExtractionSettings(BaseModel):
    """Options for the duration extractor."""

    culture: str = Field("en-us", description="Culture code of the text")
    merge: bool = Field(True, description="Merge connected durations and filter ambiguous forms")
    calendar_mode: bool = Field(False, description="Recognize 'during the week' style phrases")

    @field_validator("culture")
    def _validate_culture(cls, value: str) -> str:
        culture = normalize_culture(value)
        if culture not in SUPPORTED_CULTURES:
            raise ValueError(
                f"culture must be one of {', '.join(sorted(SUPPORTED_CULTURES))}"
            )
        return culture

    @property
    def options(self) -> DateTimeOptions:
        return DateTimeOptions.CALENDAR if self.calendar_mode else DateTimeOptions.NONE


class Settings(BaseModel):
    """Root configuration state."""

    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)


def load_settings(path: Path = DEFAULT_CONFIG_PATH) -> Settings:
    """Load settings from disk or raise if missing or invalid."""

    if not path.exists():
        raise MissingConfigError(f"Settings file not found at {path}", details={"path": str(path)})
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
        return Settings.model_validate(payload)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise InvalidConfigError(f"Invalid configuration: {exc}", details={"path": str(path)}) from exc


def save_settings(settings: Settings, path: Path = DEFAULT_CONFIG_PATH) -> None:
    """Persist settings to disk."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(settings.model_dump(mode="json"), indent=2), encoding="utf-8")


def bootstrap_settings(
    *,
    path: Path = DEFAULT_CONFIG_PATH,
    overrides: Optional[Dict[str, Any]] = None,
) -> Settings:
    """Create or load settings respecting overrides and environment."""

    overrides = overrides or {}

    if path.exists():
        settings = load_settings(path)
    else:
        settings = Settings()
        save_settings(settings, path)
        logger.info(f"Created default settings at {path}")

    merged = settings.model_dump(mode="python")
    merged = _apply_overrides(merged, overrides)
    merged = _apply_env_overrides(merged)

    try:
        resolved = Settings.model_validate(merged)
    except ValidationError as exc:
        raise InvalidConfigError(f"Invalid configuration: {exc}") from exc
    save_settings(resolved, path)
    return resolved


def build_extractor(settings: Settings) -> DurationExtractor:
    """Create a duration extractor from settings."""

    extraction = settings.extraction
    config = get_configuration(extraction.culture, extraction.options)
    return DurationExtractor(config, merge=extraction.merge)


def _apply_overrides(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = base.copy()
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    extraction = data.setdefault("extraction", {})
    _set_env_override(extraction, "culture", "DURASPAN_CULTURE")
    _set_env_override(extraction, "merge", "DURASPAN_MERGE", cast_bool=True)
    _set_env_override(extraction, "calendar_mode", "DURASPAN_CALENDAR_MODE", cast_bool=True)
    return data


def _set_env_override(
    mapping: Dict[str, Any],
    key: str,
    env_name: str,
    *,
    cast_bool: bool = False,
) -> None:
    raw = os.getenv(env_name)
    if raw is None:
        return
    if cast_bool:
        mapping[key] = raw.lower() in {"1", "true", "yes"}
    else:
        mapping[key] = raw
