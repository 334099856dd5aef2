"""Apply one clock tick."""

from clock_display.application.services.observable_state import ObservableClockState
from clock_display.domain.entities import ClockState
from clock_display.domain.ports import ClockDisplayPort, ClockPort, ClockUpdaterPort


def run(
    state: ClockState,
    updater: ClockUpdaterPort,
    clock: ClockPort,
    display: ClockDisplayPort | None = None,
) -> ClockState:
    """Refresh a value-type state for the clock's now and render it."""
    new_state = updater.apply(state, clock.now())
    if display is not None:
        display.show(new_state)
    return new_state


def run_shared(
    shared: ObservableClockState,
    updater: ClockUpdaterPort,
    clock: ClockPort,
) -> bool:
    """Refresh a shared state in place; subscribers render on change."""
    return shared.refresh(updater, clock.now())
