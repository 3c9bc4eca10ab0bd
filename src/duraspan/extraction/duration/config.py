"""Capability configuration for the duration extractor.

A configuration bundles everything culture-specific the extractor needs:
pattern matchers, unit tables, the ambiguity dictionary, caller options and
the inner number+unit extractor. Cultures build instances through factory
functions in :mod:`duraspan.extraction.duration.cultures`; nothing in a
configuration changes after construction, so one instance can be shared by
any number of threads.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Flag
from typing import FrozenSet, List, Mapping, Pattern, Protocol

from duraspan.extraction.duration.models import Span
from duraspan.extraction.duration.units import DurationUnit


UNIT_GROUP_NAME = "unit"


class DateTimeOptions(Flag):
    """Caller-supplied options bitset shared by the date/time extractors."""

    NONE = 0
    SKIP_FROM_TO_MERGE = 1
    SPLIT_DATE_AND_TIME = 2
    CALENDAR = 4
    EXTENDED_TYPES = 8


class UnitExtractor(Protocol):
    """Inner extractor producing raw number+unit spans."""

    def extract(self, text: str) -> List[Span]:
        ...


@dataclass(frozen=True)
class DurationExtractorConfiguration:
    """Read-only capabilities consumed by :class:`DurationExtractor`."""

    culture: str
    internal_extractor: UnitExtractor

    year_regex: Pattern[str]
    duration_unit_regex: Pattern[str]       # must define the "unit" group
    duration_connector_regex: Pattern[str]

    # Implicit duration phrases
    all_regex: Pattern[str]
    half_regex: Pattern[str]
    relative_duration_unit_regex: Pattern[str]
    more_or_less_regex: Pattern[str]
    some_regex: Pattern[str]
    during_regex: Pattern[str]

    unit_map: Mapping[str, DurationUnit]
    unit_value_map: Mapping[DurationUnit, int]
    ambiguity_filters: Mapping[Pattern[str], FrozenSet[str]]

    options: DateTimeOptions = DateTimeOptions.NONE

    def __post_init__(self) -> None:
        if UNIT_GROUP_NAME not in self.duration_unit_regex.groupindex:
            raise ValueError(
                f"duration_unit_regex for {self.culture} lacks the '{UNIT_GROUP_NAME}' group"
            )

    @property
    def calendar_mode(self) -> bool:
        return bool(self.options & DateTimeOptions.CALENDAR)
