"""Tests for scalar tick counting."""

import math
from datetime import datetime, timedelta, timezone

import pytest

from tdt import EPOCH, FixedClock, UnsupportedUnit, count_ticks

START = datetime(1997, 6, 15, 0, 0, 0, tzinfo=timezone.utc)
END = datetime(2025, 9, 6, 0, 0, 0, tzinfo=timezone.utc)


def test_seconds_match_floored_elapsed_seconds():
    """Test that seconds is the floored elapsed time in seconds."""
    expected = math.floor((END - START).total_seconds())
    assert count_ticks(START, END, "seconds") == expected
    assert isinstance(count_ticks(START, END, "seconds"), int)


def test_seconds_is_default_unit():
    """Test that seconds is used when no unit is given."""
    assert count_ticks(START, END) == count_ticks(START, END, "seconds")


def test_coarse_units_floor():
    """Test days, hours and minutes for a 36.5 hour span."""
    start = datetime(2025, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
    end = start + timedelta(hours=36, minutes=30)

    assert count_ticks(start, end, "days") == 1
    assert count_ticks(start, end, "hours") == 36
    assert count_ticks(start, end, "minutes") == 36 * 60 + 30


def test_sub_second_units_scale_up():
    """Test milliseconds, microseconds and nanoseconds for 1.5 seconds."""
    start = datetime(2025, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
    end = datetime(2025, 1, 1, 0, 0, 1, 500000, tzinfo=timezone.utc)

    assert count_ticks(start, end, "seconds") == 1
    assert count_ticks(start, end, "milliseconds") == 1_500
    assert count_ticks(start, end, "microseconds") == 1_500_000
    assert count_ticks(start, end, "nanoseconds") == 1_500_000_000


def test_negative_deltas_floor_toward_negative_infinity():
    """Test that reversed instants floor rather than truncate."""
    start = datetime(2025, 1, 1, 0, 1, 30, tzinfo=timezone.utc)
    end = datetime(2025, 1, 1, 0, 0, 0, tzinfo=timezone.utc)

    assert count_ticks(start, end, "minutes") == -2
    assert count_ticks(start, end, "hours") == -1
    assert count_ticks(start, end, "days") == -1
    assert count_ticks(start, end, "seconds") == -90


def test_years_and_months_use_calendar_fields():
    """Test fractional years and months from field differences."""
    start = datetime(2020, 1, 1, tzinfo=timezone.utc)
    end = datetime(2021, 7, 1, tzinfo=timezone.utc)

    assert count_ticks(start, end, "years") == 1.5
    assert count_ticks(start, end, "months") == 18.0


def test_years_and_months_include_day_fraction():
    """Test that the day difference adds days/365 and days/30."""
    start = datetime(2024, 3, 10, tzinfo=timezone.utc)
    end = datetime(2024, 3, 20, tzinfo=timezone.utc)

    assert count_ticks(start, end, "years") == pytest.approx(10 / 365)
    assert count_ticks(start, end, "months") == pytest.approx(10 / 30)


def test_years_and_months_for_long_span():
    """Test that a 28 year span counts more than 20 years and 200 months."""
    assert count_ticks(START, END, "years") > 20
    assert count_ticks(START, END, "months") > 200


def test_start_defaults_to_epoch():
    """Test that omitting start counts from the Unix epoch."""
    end = datetime(1970, 1, 2, tzinfo=timezone.utc)
    assert count_ticks(end=end, unit="days") == 1
    assert count_ticks(None, EPOCH) == 0


def test_end_defaults_to_clock():
    """Test that omitting end reads the injected clock."""
    clock = FixedClock(datetime(2025, 1, 1, 1, 0, 0, tzinfo=timezone.utc))
    start = datetime(2025, 1, 1, tzinfo=timezone.utc)

    assert count_ticks(start, unit="minutes", clock=clock) == 60


def test_accepts_timestamps_and_iso_strings():
    """Test that ints and ISO strings are accepted as instants."""
    assert count_ticks(0, 86400, "hours") == 24
    assert count_ticks("2025-01-01", "2025-01-02T00:00:00Z", "hours") == 24


def test_zone_offsets_are_normalized():
    """Test that the same instant in two zones has no elapsed time."""
    pacific = timezone(timedelta(hours=-8))
    start = datetime(2025, 1, 1, 0, 0, 0, tzinfo=pacific)
    end = datetime(2025, 1, 1, 8, 0, 0, tzinfo=timezone.utc)

    assert count_ticks(start, end, "seconds") == 0


def test_unsupported_unit_raises():
    """Test that an unknown unit raises UnsupportedUnit with the value."""
    with pytest.raises(UnsupportedUnit, match="fortnights") as exc_info:
        count_ticks(START, END, "fortnights")  # type: ignore[arg-type]

    assert exc_info.value.unit == "fortnights"
    assert isinstance(exc_info.value, ValueError)
    assert "Valid units" in str(exc_info.value)
