"""Duration expression extraction.

Recognizes duration expressions ("3 days", "all day", "half a year",
"2 hours and 30 minutes") in free text and returns non-overlapping spans
with exact character offsets. Connected durations are merged into
multi-unit spans tagged as date, time or date-time durations.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from duraspan.extraction.duration.config import (
    DateTimeOptions,
    DurationExtractorConfiguration,
    UnitExtractor,
)
from duraspan.extraction.duration.cultures import (
    SUPPORTED_CULTURES,
    get_configuration,
    normalize_culture,
)
from duraspan.extraction.duration.extractor import DurationExtractor
from duraspan.extraction.duration.merging import filter_ambiguity, merge_all_results
from duraspan.extraction.duration.models import (
    MultipleDurationType,
    Span,
    SpanKind,
)
from duraspan.extraction.duration.number_with_unit import NumberWithUnitExtractor
from duraspan.extraction.duration.units import (
    UNIT_VALUE_MAP,
    DurationUnit,
    is_time_duration_unit,
)


def extract_durations(
    text: str,
    culture: str = "en-us",
    options: DateTimeOptions = DateTimeOptions.NONE,
    merge: bool = True,
    reference_time: Optional[datetime] = None,
) -> List[Span]:
    """Convenience function for one-off extraction.

    Args:
        text: Input text
        culture: Culture code, e.g. "en-us" or "zh-cn"
        options: Extractor options (``DateTimeOptions.CALENDAR`` enables
            "during the week" style phrases)
        merge: Merge connected durations and filter ambiguous forms
        reference_time: Accepted for parity with the other extractors

    Returns:
        Duration spans ordered by start offset
    """
    extractor = DurationExtractor(get_configuration(culture, options), merge=merge)
    return extractor.extract(text, reference_time)


__all__ = [
    # Models
    "Span",
    "SpanKind",
    "MultipleDurationType",
    "DurationUnit",
    "UNIT_VALUE_MAP",
    "is_time_duration_unit",
    # Configuration
    "DateTimeOptions",
    "DurationExtractorConfiguration",
    "UnitExtractor",
    "SUPPORTED_CULTURES",
    "get_configuration",
    "normalize_culture",
    # Pipeline
    "DurationExtractor",
    "NumberWithUnitExtractor",
    "merge_all_results",
    "filter_ambiguity",
    "extract_durations",
]
