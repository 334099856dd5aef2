"""Unit tests for formatting."""

from datetime import datetime, timedelta, timezone

from clock_display.application.services.formatting import (
    reading_from_timestamp,
    render_clock,
    two_digits,
)
from clock_display.domain.entities import ClockReading, ClockState


def test_two_digits():
    """Test zero padding."""
    assert two_digits(0) == "00"
    assert two_digits(7) == "07"
    assert two_digits(59) == "59"


def test_render_clock():
    """Test rendering state as HH:MM:SS."""
    state = ClockState("07", "05", "09")

    assert render_clock(state) == "07:05:09"


def test_render_reading():
    """Test rendering a reading."""
    assert render_clock(ClockReading("12", "22", "00")) == "12:22:00"


def test_reading_from_timestamp():
    """Test extracting calendar fields."""
    reading = reading_from_timestamp(datetime(2025, 1, 15, 14, 3, 7))

    assert reading == ClockReading("14", "03", "07")


def test_reading_converts_aware_timestamp_to_zone():
    """Test that an aware timestamp is read in the target zone."""
    ts = datetime(2025, 1, 15, 14, 3, 7, tzinfo=timezone(timedelta(hours=-3)))

    assert reading_from_timestamp(ts, timezone(timedelta(hours=2))) == ClockReading("19", "03", "07")
    assert reading_from_timestamp(ts, timezone.utc) == ClockReading("17", "03", "07")


def test_reading_converts_aware_timestamp_to_local_time():
    """Test that an aware timestamp is read in local time by default."""
    ts = datetime(2025, 1, 15, 0, 0, 0, tzinfo=timezone.utc)
    local = ts.astimezone()

    reading = reading_from_timestamp(ts)

    assert reading == ClockReading(f"{local.hour:02d}", f"{local.minute:02d}", f"{local.second:02d}")


def test_reading_keeps_naive_timestamp_fields():
    """Test that a naive timestamp is already wall-clock time."""
    ts = datetime(2025, 1, 15, 14, 3, 7)

    assert reading_from_timestamp(ts, timezone.utc) == ClockReading("14", "03", "07")


def test_reading_ignores_microseconds():
    """Test that sub-second precision does not round up."""
    ts = datetime(2025, 1, 15, 23, 59, 59, 999999)

    assert reading_from_timestamp(ts) == ClockReading("23", "59", "59")
