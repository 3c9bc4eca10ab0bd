"""Duration expression extraction.

This module implements the duration extraction pipeline:
- Raw number+unit extraction with year false positives removed
- Implicit durations ("all day", "half a year", "more days", "a few weeks")
- Consolidation of overlapping spans
- Merging of connected durations ("2 hours and 30 minutes") into
  multi-unit spans classified as date, time or date-time
- Removal of known ambiguous surface forms

Example:
    >>> from duraspan.extraction.duration import DurationExtractor, get_configuration
    >>> extractor = DurationExtractor(get_configuration("en-us"))
    >>> [span.text for span in extractor.extract("it took 2 hours and 30 minutes")]
    ['2 hours and 30 minutes']
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from duraspan.extraction.duration.config import (
    UNIT_GROUP_NAME,
    DurationExtractorConfiguration,
)
from duraspan.extraction.duration.merging import filter_ambiguity, merge_all_results
from duraspan.extraction.duration.models import (
    MultipleDurationType,
    Span,
    SpanKind,
)
from duraspan.extraction.duration.units import is_time_duration_unit

logger = logging.getLogger(__name__)


EXTRACTOR_NAME = SpanKind.DURATION


class DurationExtractor:
    """Extract duration expressions from text.

    Stateless between calls: all culture-specific behaviour comes from the
    immutable configuration, so a single instance may serve concurrent
    callers.

    Args:
        config: Culture capability configuration
        merge: Merge connected durations and apply the ambiguity filter
    """

    def __init__(self, config: DurationExtractorConfiguration, merge: bool = True):
        self.config = config
        self.merge = merge

    def extract(
        self,
        text: str,
        reference_time: Optional[datetime] = None,
    ) -> List[Span]:
        """Extract all duration spans from text.

        Args:
            text: Input text
            reference_time: Accepted for parity with the other date/time
                extractors; durations do not depend on it (defaults to now)

        Returns:
            Non-overlapping spans ordered by start offset
        """
        if reference_time is None:
            reference_time = datetime.now()

        results = self.filter_raw_results(text)

        # "all day", "more days", "few days"
        results.extend(self.implicit_duration(text))

        results = merge_all_results(results)

        if self.merge:
            results = self.merge_multiple_duration(text, results)
            results = filter_ambiguity(results, text, self.config.ambiguity_filters)

        return sorted(results, key=lambda span: span.start)

    def filter_raw_results(self, text: str) -> List[Span]:
        """Run the inner unit extractor and drop year expressions."""
        results = []
        for span in self.config.internal_extractor.extract(text):
            if self.config.year_regex.search(span.text):
                logger.debug(f"Dropped year expression {span.text!r} at {span.start}")
                continue
            results.append(span)
        return results

    def implicit_duration(self, text: str) -> List[Span]:
        """Extract durations expressed without an explicit quantity."""
        config = self.config
        patterns = [
            config.all_regex,                     # "all day", "all year"
            config.half_regex,                    # "half day", "half a year"
            config.relative_duration_unit_regex,  # "next day", "last year"
            config.more_or_less_regex,            # "more days", "fewer hours"
            config.some_regex,                    # "few days", "several months"
        ]

        # "during/for the day/week/month/year"
        if config.calendar_mode:
            patterns.append(config.during_regex)

        return [
            Span.from_source(text, match.start(), match.end(), kind=EXTRACTOR_NAME, modifier=True)
            for pattern in patterns
            for match in pattern.finditer(text)
            if match.end() > match.start()
        ]

    def merge_multiple_duration(self, text: str, spans: List[Span]) -> List[Span]:
        """Merge runs of connected duration spans into multi-unit spans.

        A run starts at a span carrying a known unit and extends while the
        text between consecutive spans is a duration connector and the next
        span carries a unit of a different scale. The run's reference unit
        is always the smallest scale seen so far. A modifier span inside a
        run ends it: "4 days or more and 1 week or less" stays two spans.

        Args:
            text: Source text
            spans: Consolidated spans, sorted and non-overlapping

        Returns:
            New span list; the input list unchanged when offsets are inverted
        """
        if len(spans) <= 1:
            return spans

        merged: List[Span] = []
        first = 0
        while first < len(spans):
            current_unit = self._match_unit(spans[first].text)
            if current_unit is None:
                merged.append(spans[first])
                first += 1
                continue

            time_units = 0
            total_units = 1
            if is_time_duration_unit(self.config.unit_map[current_unit]):
                time_units += 1

            second = first + 1
            while second < len(spans):
                valid = False
                previous = spans[second - 1]
                if previous.end > spans[second].start:
                    logger.warning(
                        f"Duration spans out of order at offset {spans[second].start}; "
                        "skipping multiple duration merge"
                    )
                    return spans

                connector = text[previous.end:spans[second].start]
                if not self.config.duration_connector_regex.search(connector):
                    break

                # A modifier span never extends further
                if second > first + 1 and previous.modifier:
                    break

                next_unit = self._match_unit(spans[second].text)
                if next_unit is not None:
                    next_value = self._unit_value(next_unit)
                    current_value = self._unit_value(current_unit)
                    if next_value != current_value:
                        valid = True
                        if next_value < current_value:
                            current_unit = next_unit

                    total_units += 1
                    if is_time_duration_unit(self.config.unit_map[next_unit]):
                        time_units += 1

                if not valid:
                    break

                second += 1

            last = spans[second - 1]
            if second - 1 > first:
                if time_units == total_units:
                    payload = MultipleDurationType.TIME
                elif time_units == 0:
                    payload = MultipleDurationType.DATE
                else:
                    payload = MultipleDurationType.DATETIME

                node = Span.from_source(
                    text,
                    spans[first].start,
                    last.end,
                    kind=spans[first].kind,
                    payload=payload,
                )
                logger.debug(f"Merged {second - first} durations into {node.text!r} ({payload.value})")
                merged.append(node)
            else:
                merged.append(spans[first])

            first = second

        return merged

    # -----------------------------------------------------------------------
    # Private: Unit Lookup
    # -----------------------------------------------------------------------

    def _match_unit(self, span_text: str) -> Optional[str]:
        """Return the surface unit found in ``span_text`` if it is known."""
        match = self.config.duration_unit_regex.search(span_text)
        if not match:
            return None

        unit = match.group(UNIT_GROUP_NAME)
        if unit is None:
            return None
        unit = unit.lower()
        if unit not in self.config.unit_map:
            logger.debug(f"Unknown duration unit {unit!r} in {span_text!r}")
            return None
        return unit

    def _unit_value(self, unit: str) -> int:
        return self.config.unit_value_map[self.config.unit_map[unit]]
