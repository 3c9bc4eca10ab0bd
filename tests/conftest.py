"""Shared test configuration."""

from __future__ import annotations

import pytest


ENV_OVERRIDES = ("DURASPAN_CULTURE", "DURASPAN_MERGE", "DURASPAN_CALENDAR_MODE")


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Keep settings overrides from the developer's shell out of tests."""
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)
