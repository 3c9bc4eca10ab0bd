"""Per-culture duration configurations.

Each culture is an independent factory function returning an immutable
:class:`DurationExtractorConfiguration`; configurations are cached per
(culture, options) pair.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Callable, Dict

from duraspan.errors import UnsupportedCultureError
from duraspan.extraction.duration.config import (
    DateTimeOptions,
    DurationExtractorConfiguration,
)
from duraspan.extraction.duration.cultures.chinese import chinese_configuration
from duraspan.extraction.duration.cultures.english import english_configuration


SUPPORTED_CULTURES: Dict[str, Callable[[DateTimeOptions], DurationExtractorConfiguration]] = {
    "en-us": english_configuration,
    "zh-cn": chinese_configuration,
}


def normalize_culture(culture: str) -> str:
    """Normalize a culture code ("en_US" -> "en-us")."""
    return culture.strip().lower().replace("_", "-")


@lru_cache(maxsize=None)
def get_configuration(
    culture: str = "en-us",
    options: DateTimeOptions = DateTimeOptions.NONE,
) -> DurationExtractorConfiguration:
    """Return the duration configuration for ``culture``.

    Raises:
        UnsupportedCultureError: No configuration exists for the culture
    """
    factory = SUPPORTED_CULTURES.get(normalize_culture(culture))
    if factory is None:
        raise UnsupportedCultureError(culture, SUPPORTED_CULTURES)
    return factory(options)


__all__ = [
    "SUPPORTED_CULTURES",
    "normalize_culture",
    "get_configuration",
    "english_configuration",
    "chinese_configuration",
]
