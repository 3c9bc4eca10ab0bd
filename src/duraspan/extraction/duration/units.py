"""Locale-independent duration units.

Surface unit strings ("days", "小时") are mapped by each culture onto the
identifiers below; the scale table orders them by magnitude.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class DurationUnit(Enum):
    """Duration unit identifier."""

    SECOND = "S"
    MINUTE = "M"
    HOUR = "H"
    DAY = "D"
    WEEK = "W"
    MONTH = "MON"
    YEAR = "Y"


# Size of each unit in seconds, used only for magnitude comparison
UNIT_VALUE_MAP: Mapping[DurationUnit, int] = MappingProxyType({
    DurationUnit.YEAR: 31536000,
    DurationUnit.MONTH: 2592000,
    DurationUnit.WEEK: 604800,
    DurationUnit.DAY: 86400,
    DurationUnit.HOUR: 3600,
    DurationUnit.MINUTE: 60,
    DurationUnit.SECOND: 1,
})

TIME_DURATION_UNITS = frozenset({
    DurationUnit.HOUR,
    DurationUnit.MINUTE,
    DurationUnit.SECOND,
})


def is_time_duration_unit(unit: DurationUnit) -> bool:
    """Return True for sub-day units (hour, minute, second)."""
    return unit in TIME_DURATION_UNITS
