"""Unit tests for clock."""

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from clock_display.infrastructure.runtime.clock import SystemClock


def test_now():
    """Test getting current time."""
    clock = SystemClock()
    now = clock.now()

    assert isinstance(now, datetime)
    assert now.tzinfo is not None
    assert clock.timezone is None


def test_now_is_local_time():
    """Test that the default clock reads the local wall clock."""
    clock = SystemClock()
    before = datetime.now().astimezone()
    now = clock.now()
    after = datetime.now().astimezone()

    assert before <= now <= after
    assert now.utcoffset() == before.utcoffset()


def test_now_with_timezone():
    """Test getting current time in a configured zone."""
    try:
        ZoneInfo("UTC")
    except ZoneInfoNotFoundError:
        pytest.skip("tz database not available")

    clock = SystemClock("UTC")
    now = clock.now()

    assert clock.timezone == "UTC"
    assert now.utcoffset() == timedelta(0)
