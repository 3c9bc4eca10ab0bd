"""Tests for the culture registry and the zh-cn configuration."""

import dataclasses
import re

import pytest

from duraspan.errors import UnsupportedCultureError
from duraspan.extraction.duration import (
    SUPPORTED_CULTURES,
    DateTimeOptions,
    DurationExtractor,
    MultipleDurationType,
    get_configuration,
    normalize_culture,
)
from duraspan.extraction.duration.cultures.english import english_configuration


def texts(spans):
    return [span.text for span in spans]


# ---------------------------------------------------------------------------
# Registry Tests
# ---------------------------------------------------------------------------


class TestCultureRegistry:
    """Tests for configuration lookup."""

    def test_supported_cultures(self):
        assert set(SUPPORTED_CULTURES) == {"en-us", "zh-cn"}

    @pytest.mark.parametrize("raw,expected", [
        ("en-us", "en-us"),
        ("EN-US", "en-us"),
        (" zh_CN ", "zh-cn"),
    ])
    def test_normalize_culture(self, raw, expected):
        assert normalize_culture(raw) == expected

    def test_configuration_cached(self):
        assert get_configuration("en-us") is get_configuration("en-us")

    def test_options_select_distinct_configuration(self):
        plain = get_configuration("en-us")
        calendar = get_configuration("en-us", DateTimeOptions.CALENDAR)

        assert plain is not calendar
        assert not plain.calendar_mode
        assert calendar.calendar_mode

    def test_unsupported_culture(self):
        with pytest.raises(UnsupportedCultureError) as exc_info:
            get_configuration("fr-fr")

        error = exc_info.value
        assert error.code == "UNSUPPORTED_CULTURE"
        assert error.details["culture"] == "fr-fr"
        assert "en-us" in error.details["supported"]

    def test_configuration_is_frozen(self):
        config = get_configuration("zh-cn")

        with pytest.raises(AttributeError):
            config.culture = "en-us"  # type: ignore[misc]

    def test_unit_group_required(self):
        with pytest.raises(ValueError, match="unit"):
            dataclasses.replace(english_configuration(), duration_unit_regex=re.compile(r"days?"))


# ---------------------------------------------------------------------------
# Chinese Extraction Tests
# ---------------------------------------------------------------------------


class TestChineseExtraction:
    """Tests for zh-cn durations."""

    def test_adjacent_units_merge(self, chinese_extractor):
        spans = chinese_extractor.extract("我等了1小时30分钟")

        assert texts(spans) == ["1小时30分钟"]
        assert spans[0].start == 3
        assert spans[0].payload == MultipleDurationType.TIME

    def test_ling_connector(self, chinese_extractor):
        spans = chinese_extractor.extract("他在那里住了3年零2个月")

        assert texts(spans) == ["3年零2个月"]
        assert spans[0].payload == MultipleDurationType.DATE

    def test_chinese_numerals(self, chinese_extractor):
        assert texts(chinese_extractor.extract("休息了三天")) == ["三天"]

    def test_one_and_a_half(self, chinese_extractor):
        spans = chinese_extractor.extract("我等了一个半小时")

        assert texts(spans) == ["一个半小时"]
        assert spans[0].start == 3

    def test_one_and_a_half_merges(self, chinese_extractor):
        spans = chinese_extractor.extract("用了两个半小时和10分钟")

        assert texts(spans) == ["两个半小时和10分钟"]
        assert spans[0].payload == MultipleDurationType.TIME

    def test_year_dropped(self, chinese_extractor):
        assert chinese_extractor.extract("2016年我去了北京") == []

    def test_chinese_numeral_year_dropped(self, chinese_extractor):
        assert chinese_extractor.extract("二零一六年我去了北京") == []

    def test_shifen_dropped(self, chinese_extractor):
        assert chinese_extractor.extract("这个方法十分有效") == []

    def test_shifen_kept_without_merge(self):
        extractor = DurationExtractor(get_configuration("zh-cn"), merge=False)

        assert texts(extractor.extract("这个方法十分有效")) == ["十分"]

    def test_other_minute_counts_kept(self, chinese_extractor):
        assert texts(chinese_extractor.extract("考了五分")) == ["五分"]

    @pytest.mark.parametrize("text,expected", [
        ("他全天都在工作", "全天"),
        ("半年后我们搬家了", "半年"),
        ("前几天我去了", "前几天"),
        ("连续多天下雨", "多天"),
        ("过了几个月", "几个月"),
    ])
    def test_implicit_phrase(self, chinese_extractor, text, expected):
        spans = chinese_extractor.extract(text)

        assert texts(spans) == [expected]
        assert spans[0].modifier is True

    def test_during_requires_calendar_mode(self, chinese_extractor, chinese_calendar_extractor):
        text = "我这周内完成"

        assert chinese_extractor.extract(text) == []
        assert texts(chinese_calendar_extractor.extract(text)) == ["这周内"]
