"""Test fixtures for duration extraction tests.

Provides:
- Extractors for each supported culture
- Granularity classification cases
- Sample texts for span invariant checks
"""

from typing import List

import pytest

from duraspan.extraction.duration import (
    DateTimeOptions,
    DurationExtractor,
    MultipleDurationType,
    Span,
    get_configuration,
)


# ---------------------------------------------------------------------------
# Extractors
# ---------------------------------------------------------------------------


@pytest.fixture
def english_extractor():
    """en-us extractor with merging enabled."""
    return DurationExtractor(get_configuration("en-us"))


@pytest.fixture
def english_calendar_extractor():
    """en-us extractor in calendar mode."""
    return DurationExtractor(get_configuration("en-us", DateTimeOptions.CALENDAR))


@pytest.fixture
def english_unmerged_extractor():
    """en-us extractor with merging and ambiguity filtering disabled."""
    return DurationExtractor(get_configuration("en-us"), merge=False)


@pytest.fixture
def chinese_extractor():
    """zh-cn extractor with merging enabled."""
    return DurationExtractor(get_configuration("zh-cn"))


@pytest.fixture
def chinese_calendar_extractor():
    """zh-cn extractor in calendar mode."""
    return DurationExtractor(get_configuration("zh-cn", DateTimeOptions.CALENDAR))


# ---------------------------------------------------------------------------
# Test Cases
# ---------------------------------------------------------------------------


@pytest.fixture
def granularity_test_cases():
    """Connected durations and the payload their merged span must carry.

    Returns:
        List of (text, expected_span_text, expected_payload) tuples
    """
    return [
        ("2 hours and 30 minutes", "2 hours and 30 minutes", MultipleDurationType.TIME),
        ("2 days and 3 years", "2 days and 3 years", MultipleDurationType.DATE),
        ("2 days and 3 hours", "2 days and 3 hours", MultipleDurationType.DATETIME),
        ("It ran for 1 minute, 20 seconds.", "1 minute, 20 seconds", MultipleDurationType.TIME),
        ("a week or two days", "a week or two days", MultipleDurationType.DATE),
    ]


@pytest.fixture
def sample_texts():
    """Mixed English texts used for span invariant checks."""
    return [
        "It took 2 hours and 30 minutes, then all day to recover.",
        "Half a year later, after 3 weeks and a few days and 2 hours, we stopped.",
        "The 2019 year budget covered 3 years and 6 months of work.",
        "She waited more days than expected, roughly 4 days or more and 1 week or less.",
        "Over the next week and the whole month, 10 mins, 5 secs.",
        "A last minute change took 1 hour and 2 days and 3 minutes.",
        "No durations in this sentence.",
        "",
    ]


# ---------------------------------------------------------------------------
# Test Utilities
# ---------------------------------------------------------------------------


@pytest.fixture
def assert_span_invariants():
    """Check that spans are verbatim, ordered and non-overlapping."""

    def _check(text: str, spans: List[Span]) -> None:
        for span in spans:
            assert span.start >= 0
            assert span.end <= len(text)
            assert span.text == text[span.start:span.end]

        for previous, current in zip(spans, spans[1:]):
            assert previous.start <= current.start
            assert previous.end <= current.start, f"{previous.text!r} overlaps {current.text!r}"

    return _check
