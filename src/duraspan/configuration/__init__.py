"""Configuration helpers for duraspan."""

from .settings import (
    DEFAULT_CONFIG_PATH,
    ExtractionSettings,
    Settings,
    bootstrap_settings,
    build_extractor,
    load_settings,
    save_settings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ExtractionSettings",
    "Settings",
    "bootstrap_settings",
    "build_extractor",
    "load_settings",
    "save_settings",
]
