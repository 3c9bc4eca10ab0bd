"""English (en-us) duration extraction configuration."""

from __future__ import annotations

import re
from types import MappingProxyType

from duraspan.extraction.duration.config import (
    DateTimeOptions,
    DurationExtractorConfiguration,
)
from duraspan.extraction.duration.number_with_unit import NumberWithUnitExtractor
from duraspan.extraction.duration.units import UNIT_VALUE_MAP, DurationUnit


CULTURE = "en-us"


# ---------------------------------------------------------------------------
# Regular Expression Building Blocks
# ---------------------------------------------------------------------------

DIGIT_WORDS = r"one|two|three|four|five|six|seven|eight|nine"

TEEN_WORDS = (
    r"ten|eleven|twelve|thirteen|fourteen|fifteen|sixteen|seventeen"
    r"|eighteen|nineteen"
)

TENS_WORDS = r"twenty|thirty|forty|fifty|sixty|seventy|eighty|ninety"

# "a hundred", "twenty-five", "thirty one" must match whole or the span
# starts mid-number
NUMBER_WORDS = (
    rf"(?:(?:an?|one)\s+)?hundred"
    rf"|(?:{TENS_WORDS})(?:[\s-](?:{DIGIT_WORDS}))?"
    rf"|{TEEN_WORDS}|{DIGIT_WORDS}|an?"
)

# Longer spellings first so "minutes" wins over "min"
UNITS = (
    r"years?|yrs?|months?|weeks?|wks?|days?|hours?|hrs?"
    r"|minutes?|mins?|seconds?|secs?"
)

SINGULAR_UNITS = r"year|month|week|day|hour|minute|second"
PLURAL_UNITS = r"years|months|weeks|days|hours|minutes|seconds"


# ---------------------------------------------------------------------------
# Regular Expression Patterns
# ---------------------------------------------------------------------------

NUMBER_WITH_UNIT_PATTERN = re.compile(
    rf"\b(?:\d+(?:\.\d+)?(?:\s*|-)|(?:{NUMBER_WORDS})(?:\s+|-))(?:{UNITS})\b",
    re.IGNORECASE,
)

# "the 2019 year plan" names a year, "2000 years" is a duration
YEAR_PATTERN = re.compile(r"^(?:1\d|20)\d{2}(?:\s+|-)(?:year|yr)$", re.IGNORECASE)

DURATION_UNIT_PATTERN = re.compile(rf"\b(?P<unit>{UNITS})\b", re.IGNORECASE)

DURATION_CONNECTOR_PATTERN = re.compile(r"^\s*(?:,\s*)?(?:(?:and|or)\s*)?$", re.IGNORECASE)

ALL_PATTERN = re.compile(
    r"\b(?:all(?:\s+the)?|(?:the\s+)?(?:whole|entire))\s+(?:year|month|week|day|hour|minute)\b",
    re.IGNORECASE,
)

HALF_PATTERN = re.compile(
    r"\bhalf(?:\s+an?\s+|\s+|-)(?:year|month|week|day|hour|minute)\b",
    re.IGNORECASE,
)

RELATIVE_DURATION_UNIT_PATTERN = re.compile(
    rf"\b(?:next|last|past|previous|coming|following)\s+(?:{SINGULAR_UNITS})\b",
    re.IGNORECASE,
)

MORE_OR_LESS_PATTERN = re.compile(rf"\b(?:more|less|fewer)\s+(?:{PLURAL_UNITS})\b", re.IGNORECASE)

SOME_PATTERN = re.compile(
    rf"\b(?:a\s+)?(?:few|several|couple\s+of)\s+(?:{PLURAL_UNITS})\b",
    re.IGNORECASE,
)

DURING_PATTERN = re.compile(
    r"\b(?:during|for|throughout)\s+the\s+(?:year|month|week|day)\b",
    re.IGNORECASE,
)


# ---------------------------------------------------------------------------
# Lookup Tables
# ---------------------------------------------------------------------------

UNIT_MAP = MappingProxyType({
    "year": DurationUnit.YEAR,
    "years": DurationUnit.YEAR,
    "yr": DurationUnit.YEAR,
    "yrs": DurationUnit.YEAR,
    "month": DurationUnit.MONTH,
    "months": DurationUnit.MONTH,
    "week": DurationUnit.WEEK,
    "weeks": DurationUnit.WEEK,
    "wk": DurationUnit.WEEK,
    "wks": DurationUnit.WEEK,
    "day": DurationUnit.DAY,
    "days": DurationUnit.DAY,
    "hour": DurationUnit.HOUR,
    "hours": DurationUnit.HOUR,
    "hr": DurationUnit.HOUR,
    "hrs": DurationUnit.HOUR,
    "minute": DurationUnit.MINUTE,
    "minutes": DurationUnit.MINUTE,
    "min": DurationUnit.MINUTE,
    "mins": DurationUnit.MINUTE,
    "second": DurationUnit.SECOND,
    "seconds": DurationUnit.SECOND,
    "sec": DurationUnit.SECOND,
    "secs": DurationUnit.SECOND,
})

# "a last minute change", "at the last second"; forms are matched case-insensitively
AMBIGUITY_FILTERS = MappingProxyType({
    re.compile(r"^(?:last|next)\s+(?:second|minute)$", re.IGNORECASE): frozenset({
        "last second",
        "last minute",
    }),
})


def english_configuration(options: DateTimeOptions = DateTimeOptions.NONE) -> DurationExtractorConfiguration:
    """Build the en-us duration configuration."""
    return DurationExtractorConfiguration(
        culture=CULTURE,
        internal_extractor=NumberWithUnitExtractor(NUMBER_WITH_UNIT_PATTERN),
        year_regex=YEAR_PATTERN,
        duration_unit_regex=DURATION_UNIT_PATTERN,
        duration_connector_regex=DURATION_CONNECTOR_PATTERN,
        all_regex=ALL_PATTERN,
        half_regex=HALF_PATTERN,
        relative_duration_unit_regex=RELATIVE_DURATION_UNIT_PATTERN,
        more_or_less_regex=MORE_OR_LESS_PATTERN,
        some_regex=SOME_PATTERN,
        during_regex=DURING_PATTERN,
        unit_map=UNIT_MAP,
        unit_value_map=UNIT_VALUE_MAP,
        ambiguity_filters=AMBIGUITY_FILTERS,
        options=options,
    )
