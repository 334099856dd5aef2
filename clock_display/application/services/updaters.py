"""Clock update strategies."""

from dataclasses import replace
from zoneinfo import ZoneInfo

import structlog

from clock_display.application.services.formatting import reading_from_timestamp
from clock_display.domain.entities import HOURS_UPPER_BOUND, ClockReading, ClockState, validate_field
from clock_display.domain.enums import UpdaterKind
from clock_display.domain.errors import UnknownUpdaterError
from clock_display.domain.ports import ClockPort, ClockUpdaterPort
from clock_display.domain.types import Timestamp

logger = structlog.get_logger()

DEFAULT_FIXED_READING = ClockReading(hours="12", minutes="22", seconds="00")


class SystemClockUpdater(ClockUpdaterPort):
    """Reads hour, minute and second from wall-clock time.

    Aware instants are read in the configured zone, or in local time when no
    zone is configured.
    """

    def __init__(self, clock: ClockPort, timezone: str | None = None) -> None:
        self._clock = clock
        self._tz = ZoneInfo(timezone) if timezone else None

    def update(self, now: Timestamp | None = None) -> ClockReading:
        """Get the reading for an instant, defaulting to the clock's now."""
        if now is None:
            now = self._clock.now()
        return reading_from_timestamp(now, self._tz)

    def apply(self, state: ClockState, now: Timestamp | None = None) -> ClockState:
        """Replace all three fields with the current reading."""
        return state.with_reading(self.update(now))


class FixedClockUpdater(ClockUpdaterPort):
    """Always yields the same reading, whatever the instant."""

    def __init__(self, reading: ClockReading = DEFAULT_FIXED_READING) -> None:
        self._reading = reading

    def update(self, now: Timestamp | None = None) -> ClockReading:
        """Get the fixed reading."""
        return self._reading

    def apply(self, state: ClockState, now: Timestamp | None = None) -> ClockState:
        """Replace all three fields with the fixed reading."""
        return state.with_reading(self._reading)


class FixedHoursUpdater(ClockUpdaterPort):
    """Sets only the hours field, leaving minutes and seconds untouched."""

    def __init__(self, hours: str = DEFAULT_FIXED_READING.hours) -> None:
        validate_field("hours", hours, HOURS_UPPER_BOUND)
        self._hours = hours

    def apply(self, state: ClockState, now: Timestamp | None = None) -> ClockState:
        """Replace the hours field only."""
        return replace(state, hours=self._hours)


def build_updater(
    kind: UpdaterKind | str,
    clock: ClockPort,
    fixed_reading: ClockReading = DEFAULT_FIXED_READING,
    timezone: str | None = None,
) -> ClockUpdaterPort:
    """Build the update strategy registered for a kind."""
    try:
        kind = UpdaterKind(kind)
    except ValueError as e:
        raise UnknownUpdaterError(f"Unknown updater kind: {kind}") from e

    if kind == UpdaterKind.SYSTEM:
        updater: ClockUpdaterPort = SystemClockUpdater(clock, timezone)
    elif kind == UpdaterKind.FIXED:
        updater = FixedClockUpdater(fixed_reading)
    elif kind == UpdaterKind.FIXED_HOURS:
        updater = FixedHoursUpdater(fixed_reading.hours)
    else:
        raise UnknownUpdaterError(f"Unknown updater kind: {kind}")

    logger.debug("updater_built", kind=kind.value, updater=type(updater).__name__)
    return updater
