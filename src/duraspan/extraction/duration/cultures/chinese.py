"""Simplified Chinese (zh-cn) duration extraction configuration.

Chinese writes durations without spaces, so adjacent spans such as
"1小时" + "30分钟" are joined by an empty connector.
"""

from __future__ import annotations

import re
from types import MappingProxyType

from duraspan.extraction.duration.config import (
    DateTimeOptions,
    DurationExtractorConfiguration,
)
from duraspan.extraction.duration.number_with_unit import NumberWithUnitExtractor
from duraspan.extraction.duration.units import UNIT_VALUE_MAP, DurationUnit


CULTURE = "zh-cn"

CHINESE_NUMERALS = r"零〇一二两三四五六七八九十百千万"

NUMBER = rf"(?:\d+(?:\.\d+)?|[{CHINESE_NUMERALS}]+)"

# A bare 月 or 日 after a number names a calendar month or day, not a duration
UNITS = r"个月|个?(?:小时|钟头|星期|礼拜)|年|周|天|分钟|分|秒钟|秒"


# "一个半小时" is one and a half hours
NUMBER_WITH_UNIT_PATTERN = re.compile(rf"{NUMBER}\s*(?:个半)?(?:{UNITS})")

# "2016年" is a year
YEAR_PATTERN = re.compile(r"^(?:\d{4}|[零〇一二三四五六七八九]{4})\s*年$")

DURATION_UNIT_PATTERN = re.compile(r"(?P<unit>个月|小时|钟头|星期|礼拜|年|周|天|分钟|秒钟|分|秒)")

DURATION_CONNECTOR_PATTERN = re.compile(r"^\s*(?:又|和|与|及|或者?|零|、|，|,)?\s*$")

ALL_PATTERN = re.compile(r"(?:全|整)个?(?:年|月|星期|周|天|小时)")

HALF_PATTERN = re.compile(r"半个?(?:年|月|星期|天|小时|钟头)")

RELATIVE_DURATION_UNIT_PATTERN = re.compile(
    r"(?:(?:前|后)几|(?:过去|未来|最近)(?:几|这)?)(?:天|周|个?星期|个月|年)"
)

MORE_OR_LESS_PATTERN = re.compile(r"(?:多|少)几?(?:天|周|个?星期|个月|年|小时|分钟)")

SOME_PATTERN = re.compile(r"几个?(?:天|周|星期|月|年|小时|分钟)")

DURING_PATTERN = re.compile(r"(?:这|整个)?(?:星期|周|月|年)(?:内|里|期间)")


UNIT_MAP = MappingProxyType({
    "年": DurationUnit.YEAR,
    "个月": DurationUnit.MONTH,
    "周": DurationUnit.WEEK,
    "星期": DurationUnit.WEEK,
    "礼拜": DurationUnit.WEEK,
    "天": DurationUnit.DAY,
    "小时": DurationUnit.HOUR,
    "钟头": DurationUnit.HOUR,
    "分钟": DurationUnit.MINUTE,
    "分": DurationUnit.MINUTE,
    "秒钟": DurationUnit.SECOND,
    "秒": DurationUnit.SECOND,
})

# "十分" reads as "very"
AMBIGUITY_FILTERS = MappingProxyType({
    re.compile(rf"^[{CHINESE_NUMERALS}]+分$"): frozenset({"十分"}),
})


def chinese_configuration(options: DateTimeOptions = DateTimeOptions.NONE) -> DurationExtractorConfiguration:
    """Build the zh-cn duration configuration."""
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
