"""Ports (interfaces) for clock adapters and strategies."""

from abc import ABC, abstractmethod

from clock_display.domain.entities import ClockState
from clock_display.domain.types import Timestamp


class ClockPort(ABC):
    """Port for time operations."""

    @abstractmethod
    def now(self) -> Timestamp:
        """Get current timestamp."""


class ClockUpdaterPort(ABC):
    """Port for clock update strategies.

    Any strategy can be handed to a display without changing the display.
    """

    @abstractmethod
    def apply(self, state: ClockState, now: Timestamp | None = None) -> ClockState:
        """Return the state refreshed for the given instant."""


class ClockDisplayPort(ABC):
    """Port for rendering clock state."""

    @abstractmethod
    def show(self, state: ClockState) -> None:
        """Render the given state."""
