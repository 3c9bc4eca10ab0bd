"""Duration extraction data models.

This module defines the value types that flow through the duration
extraction pipeline:
- Span kinds and multiple-duration payload tags
- The immutable ``Span`` record addressing a region of the source text

Spans are constructed fully formed and never mutated; every pipeline stage
returns a fresh list of spans.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class SpanKind(Enum):
    """Stage that produced a span."""

    DURATION = "duration"


class MultipleDurationType(Enum):
    """Granularity tag attached to merged multi-unit duration spans."""

    DATE = "MultipleDuration-Date"          # every unit is a day or larger
    TIME = "MultipleDuration-Time"          # every unit is sub-day
    DATETIME = "MultipleDuration-DateTime"  # mixed granularity


# ---------------------------------------------------------------------------
# Span
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Span:
    """Recognized region of the source text.

    ``text`` is always the verbatim substring ``source[start:start + length]``.
    Use :meth:`from_source` to build spans from offsets so the invariant holds
    by construction.
    """

    start: int
    length: int
    text: str
    kind: SpanKind = SpanKind.DURATION
    payload: Optional[MultipleDurationType] = None
    modifier: bool = False              # synthesized from an implicit phrase

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"Span start must be non-negative, got {self.start}")
        if self.length != len(self.text):
            raise ValueError(
                f"Span length {self.length} does not match text {self.text!r}"
            )

    @classmethod
    def from_source(
        cls,
        source: str,
        start: int,
        end: int,
        kind: SpanKind = SpanKind.DURATION,
        payload: Optional[MultipleDurationType] = None,
        modifier: bool = False,
    ) -> "Span":
        """Build a span covering ``source[start:end]``."""
        if end > len(source) or end < start:
            raise ValueError(f"Invalid span [{start}, {end}) for text of length {len(source)}")
        return cls(
            start=start,
            length=end - start,
            text=source[start:end],
            kind=kind,
            payload=payload,
            modifier=modifier,
        )

    @property
    def end(self) -> int:
        """Offset one past the last covered character."""
        return self.start + self.length

    def overlaps(self, other: "Span") -> bool:
        return self.start < other.end and other.start < self.end

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for storage."""
        return {
            "start": self.start,
            "length": self.length,
            "end": self.end,
            "text": self.text,
            "kind": self.kind.value,
            "payload": self.payload.value if self.payload else None,
            "modifier": self.modifier,
        }
