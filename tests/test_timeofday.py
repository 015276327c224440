"""Tests for clock-time arithmetic."""

from datetime import date, datetime

import pytest

from houkoku.core.timeofday import (
    TimeInterval,
    TimeOfDay,
    adjust_time_text,
    apply_offset,
    enforce_minimum_gap,
    format_date,
    format_range,
    parse_time,
    preset_interval,
    to_time_of_day,
)


@pytest.fixture
def now():
    return datetime(2025, 1, 15, 9, 41, 37)


class TestTimeOfDay:
    def test_format_zero_pads(self):
        assert TimeOfDay(7, 5).format() == "07:05"

    def test_rejects_out_of_range(self):
        with pytest.raises(ValueError):
            TimeOfDay(24, 0)
        with pytest.raises(ValueError):
            TimeOfDay(12, 60)

    def test_from_minutes_wraps(self):
        assert TimeOfDay.from_minutes(24 * 60 + 15) == TimeOfDay(0, 15)
        assert TimeOfDay.from_minutes(-30) == TimeOfDay(23, 30)

    def test_ordering(self):
        assert TimeOfDay(9, 0) < TimeOfDay(9, 30) < TimeOfDay(10, 0)


class TestToTimeOfDay:
    def test_truncates_seconds(self, now):
        assert to_time_of_day(now) == TimeOfDay(9, 41)


class TestParseTime:
    def test_valid(self):
        assert parse_time("09:00") == TimeOfDay(9, 0)
        assert parse_time("9:05") == TimeOfDay(9, 5)

    @pytest.mark.parametrize("text", ["", None, "9", "25:00", "12:60", "ab:cd", "12:5"])
    def test_invalid_returns_none(self, text):
        assert parse_time(text) is None


class TestApplyOffset:
    def test_forward(self):
        assert apply_offset(TimeOfDay(9, 50), 15) == TimeOfDay(10, 5)

    def test_backward(self):
        assert apply_offset(TimeOfDay(9, 10), -15) == TimeOfDay(8, 55)

    def test_wraps_past_midnight(self):
        assert apply_offset(TimeOfDay(23, 45), 30) == TimeOfDay(0, 15)

    def test_wraps_before_midnight(self):
        assert apply_offset(TimeOfDay(0, 10), -30) == TimeOfDay(23, 40)


class TestEnforceMinimumGap:
    def test_scenario_equal_times(self):
        assert enforce_minimum_gap(TimeOfDay(9, 0), TimeOfDay(9, 0)) == TimeOfDay(9, 30)

    def test_end_before_start(self):
        assert enforce_minimum_gap(TimeOfDay(14, 0), TimeOfDay(13, 0)) == TimeOfDay(14, 30)

    def test_end_after_start_unchanged(self):
        assert enforce_minimum_gap(TimeOfDay(9, 0), TimeOfDay(9, 1)) == TimeOfDay(9, 1)

    def test_wraps_near_midnight(self):
        assert enforce_minimum_gap(TimeOfDay(23, 50), TimeOfDay(0, 10)) == TimeOfDay(0, 20)

    @pytest.mark.parametrize("start_min", range(0, 24 * 60, 97))
    @pytest.mark.parametrize("end_min", range(0, 24 * 60, 89))
    def test_gap_over_the_clock(self, start_min, end_min):
        start = TimeOfDay.from_minutes(start_min)
        end = TimeOfDay.from_minutes(end_min)
        if end > start:
            assert enforce_minimum_gap(start, end) == end
        else:
            assert enforce_minimum_gap(start, end) == apply_offset(start, 30)

    @pytest.mark.parametrize("start_min", range(0, 24 * 60, 97))
    def test_equal_times_get_thirty_minutes(self, start_min):
        start = TimeOfDay.from_minutes(start_min)
        assert enforce_minimum_gap(start, start) == apply_offset(start, 30)


class TestPresetInterval:
    def test_from_now(self, now):
        assert preset_interval(now, 45) == TimeInterval(TimeOfDay(9, 41), TimeOfDay(10, 26))

    def test_interval_format(self, now):
        assert preset_interval(now, 60).format() == "09:41〜10:41"


class TestAdjustTimeText:
    def test_adjusts(self):
        assert adjust_time_text("09:00", -5) == "08:55"

    def test_unparseable_unchanged(self):
        assert adjust_time_text("", 15) == ""
        assert adjust_time_text("soon", 15) == "soon"


class TestFormatting:
    def test_format_date_default(self):
        assert format_date(date(2025, 1, 5)) == "2025/01/05"

    def test_format_date_custom(self):
        assert format_date(date(2025, 1, 5), "%d.%m.%Y") == "05.01.2025"

    def test_format_range(self):
        assert format_range(date(2025, 1, 15), "09:00", "10:00") == "2025/01/15 09:00〜10:00"

    def test_format_range_incomplete(self):
        assert format_range(date(2025, 1, 15), "09:00", "") == ""
        assert format_range(date(2025, 1, 15), "", "10:00") == ""
