"""Span list utilities shared by the extraction pipeline.

- ``merge_all_results`` consolidates overlapping spans into a sorted,
  non-overlapping list.
- ``filter_ambiguity`` drops spans whose text is a known false positive.
"""

from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, List, Mapping, Pattern

from duraspan.extraction.duration.models import Span

logger = logging.getLogger(__name__)


def _union(first: Span, second: Span) -> Span:
    """Combine two overlapping spans, keeping ``first``'s kind and payload."""
    if second.end <= first.end:
        text = first.text
    else:
        text = first.text + second.text[first.end - second.start:]
    return Span(
        start=first.start,
        length=len(text),
        text=text,
        kind=first.kind,
        payload=first.payload,
        modifier=first.modifier or second.modifier,
    )


def merge_all_results(spans: Iterable[Span]) -> List[Span]:
    """Merge overlapping spans into a sorted, non-overlapping list.

    Overlapping spans are replaced by one span covering their union. The
    earliest-starting contributor (longest on ties) supplies ``kind`` and
    ``payload``; the union is a modifier span when any contributor is.
    Spans that only touch are left apart. Applying the function to its own
    output returns the same list.

    Args:
        spans: Spans in any order

    Returns:
        New list sorted by ascending start
    """
    ordered = sorted(spans, key=lambda span: (span.start, -span.length))

    merged: List[Span] = []
    for span in ordered:
        if merged and merged[-1].overlaps(span):
            merged[-1] = _union(merged[-1], span)
        else:
            merged.append(span)

    return merged


def filter_ambiguity(
    spans: Iterable[Span],
    text: str,
    ambiguity_filters: Mapping[Pattern[str], FrozenSet[str]],
) -> List[Span]:
    """Drop spans whose text is listed as ambiguous.

    A span is dropped when a trigger pattern matches its text and the text,
    lower-cased, appears in that trigger's forbidden set. Forbidden forms are
    stored in lower case.

    Args:
        spans: Candidate spans
        text: Source text the spans were extracted from
        ambiguity_filters: Trigger pattern -> lower-case forbidden surface strings

    Returns:
        Spans that survived, in their original order
    """
    kept: List[Span] = []
    for span in spans:
        ambiguous = any(
            trigger.search(span.text) and span.text.lower() in forbidden
            for trigger, forbidden in ambiguity_filters.items()
        )
        if ambiguous:
            logger.debug(f"Dropped ambiguous span {span.text!r} at {span.start}")
            continue
        kept.append(span)

    return kept
