"""
Unit tests for date helpers
"""

from datetime import date

import pytest

from clickup_mcp.exceptions import InvalidDateError
from clickup_mcp.utils.dates import (
    day_bounds_ms,
    epoch_ms_to_sgt,
    epoch_ms_to_sgt_locale,
    parse_day,
    parse_epoch_ms,
)

# 2025-05-05 00:00:00 SGT
MAY_5_SGT_MS = 1746374400000


class TestParseDay:
    """Tests for parse_day."""

    def test_human_date(self):
        assert parse_day("5 May 2025") == date(2025, 5, 5)

    def test_iso_date(self):
        assert parse_day("2025-05-11") == date(2025, 5, 11)

    def test_time_of_day_ignored(self):
        assert parse_day("2025-05-05 18:30") == date(2025, 5, 5)

    def test_unparseable(self):
        with pytest.raises(InvalidDateError) as exc_info:
            parse_day("zzzz")
        assert exc_info.value.message == "could not parse date 'zzzz'"

    def test_empty(self):
        with pytest.raises(InvalidDateError):
            parse_day("  ")


class TestDayBounds:
    """Tests for day_bounds_ms."""

    def test_single_day(self):
        start, end = day_bounds_ms(date(2025, 5, 5), date(2025, 5, 5))
        assert start == MAY_5_SGT_MS
        assert end == MAY_5_SGT_MS + 86_400_000 - 1

    def test_week(self):
        start, end = day_bounds_ms(date(2025, 5, 5), date(2025, 5, 11))
        assert end - start == 7 * 86_400_000 - 1


class TestParseEpochMs:
    """Tests for parse_epoch_ms."""

    def test_int(self):
        assert parse_epoch_ms(1746374400000) == 1746374400000

    def test_numeric_string(self):
        assert parse_epoch_ms("1746374400000") == 1746374400000

    def test_rejects_non_numeric(self):
        assert parse_epoch_ms("soon") is None
        assert parse_epoch_ms(None) is None
        assert parse_epoch_ms(True) is None


class TestFormatting:
    """Tests for SGT formatting."""

    def test_iso_like(self):
        assert epoch_ms_to_sgt(MAY_5_SGT_MS) == "2025-05-05 00:00:00"

    def test_locale_afternoon(self):
        ms = MAY_5_SGT_MS + (15 * 3600 + 4 * 60 + 5) * 1000
        assert epoch_ms_to_sgt_locale(ms) == "05/05/2025, 03:04:05 pm"

    def test_locale_midnight(self):
        assert epoch_ms_to_sgt_locale(MAY_5_SGT_MS) == "05/05/2025, 12:00:00 am"
