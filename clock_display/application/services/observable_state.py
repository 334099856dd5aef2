"""Shared clock state that notifies subscribers on change."""

from collections.abc import Callable
from dataclasses import replace

import structlog

from clock_display.domain.entities import ClockState
from clock_display.domain.ports import ClockUpdaterPort
from clock_display.domain.types import Timestamp

logger = structlog.get_logger()

StateSubscriber = Callable[[ClockState], None]


class ObservableClockState:
    """Clock state shared between the app root and its displays.

    Every mutation that changes at least one field calls each subscriber
    once, in subscription order, with the new state. A subscriber that
    raises does not stop the others from being notified; the first error is
    re-raised once every subscriber has run.
    """

    def __init__(self, initial: ClockState | None = None) -> None:
        self._state = initial if initial is not None else ClockState()
        self._subscribers: list[StateSubscriber] = []

    @property
    def state(self) -> ClockState:
        return self._state

    @property
    def hours(self) -> str:
        return self._state.hours

    @hours.setter
    def hours(self, value: str) -> None:
        self.set_state(replace(self._state, hours=value))

    @property
    def minutes(self) -> str:
        return self._state.minutes

    @minutes.setter
    def minutes(self, value: str) -> None:
        self.set_state(replace(self._state, minutes=value))

    @property
    def seconds(self) -> str:
        return self._state.seconds

    @seconds.setter
    def seconds(self, value: str) -> None:
        self.set_state(replace(self._state, seconds=value))

    def subscribe(self, subscriber: StateSubscriber) -> Callable[[], None]:
        """Register a subscriber and return a callable that removes it."""
        self._subscribers.append(subscriber)
        return lambda: self.unsubscribe(subscriber)

    def unsubscribe(self, subscriber: StateSubscriber) -> None:
        """Remove a subscriber; unknown subscribers are ignored."""
        if subscriber in self._subscribers:
            self._subscribers.remove(subscriber)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def set_state(self, state: ClockState) -> bool:
        """Replace the state, notifying subscribers if it changed."""
        if state == self._state:
            return False
        self._state = state
        first_error: Exception | None = None
        for subscriber in list(self._subscribers):
            try:
                subscriber(state)
            except Exception as e:
                logger.error(
                    "subscriber_failed",
                    subscriber=repr(subscriber),
                    error=str(e),
                    exc_info=True,
                )
                if first_error is None:
                    first_error = e
        if first_error is not None:
            raise first_error
        return True

    def refresh(self, updater: ClockUpdaterPort, now: Timestamp | None = None) -> bool:
        """Apply an updater to the shared state in place."""
        return self.set_state(updater.apply(self._state, now))
