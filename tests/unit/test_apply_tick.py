"""Unit tests for apply_tick use case."""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from clock_display.application.services.observable_state import ObservableClockState
from clock_display.application.services.updaters import SystemClockUpdater
from clock_display.application.use_cases.apply_tick import run as apply_tick
from clock_display.application.use_cases.apply_tick import run_shared as apply_shared_tick
from clock_display.domain.entities import ClockState
from clock_display.domain.ports import ClockDisplayPort, ClockPort


@pytest.fixture
def mock_clock():
    """Create mock clock at 14:03:07."""
    clock = MagicMock(spec=ClockPort)
    clock.now.return_value = datetime(2025, 1, 15, 14, 3, 7)
    return clock


def test_apply_tick(mock_clock):
    """Test one tick over a value-type state."""
    display = MagicMock(spec=ClockDisplayPort)
    updater = SystemClockUpdater(mock_clock)

    state = apply_tick(ClockState("00", "11", "30"), updater, mock_clock, display)

    assert state == ClockState("14", "03", "07")
    display.show.assert_called_once_with(ClockState("14", "03", "07"))


def test_apply_tick_without_display(mock_clock):
    """Test one tick with nothing rendering it."""
    updater = SystemClockUpdater(mock_clock)

    state = apply_tick(ClockState(), updater, mock_clock)

    assert state == ClockState("14", "03", "07")


def test_apply_shared_tick(mock_clock):
    """Test one tick over the shared state."""
    shared = ObservableClockState(ClockState("00", "11", "30"))
    received = []
    shared.subscribe(received.append)

    changed = apply_shared_tick(shared, SystemClockUpdater(mock_clock), mock_clock)

    assert changed is True
    assert shared.state == ClockState("14", "03", "07")
    assert received == [ClockState("14", "03", "07")]
