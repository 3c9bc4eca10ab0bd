"""Raw number+unit extraction.

Finds explicit quantity+unit pairs ("3 days", "1小时") with a single
culture-supplied pattern. No filtering or merging happens here.
"""

from __future__ import annotations

import logging
from typing import List, Pattern

from duraspan.extraction.duration.models import Span, SpanKind

logger = logging.getLogger(__name__)


class NumberWithUnitExtractor:
    """Extract number+unit spans matching ``pattern``."""

    def __init__(self, pattern: Pattern[str], kind: SpanKind = SpanKind.DURATION):
        self.pattern = pattern
        self.kind = kind

    def extract(self, text: str) -> List[Span]:
        spans = [
            Span.from_source(text, match.start(), match.end(), kind=self.kind)
            for match in self.pattern.finditer(text)
            if match.end() > match.start()
        ]
        logger.debug(f"Extracted {len(spans)} number+unit spans")
        return spans
