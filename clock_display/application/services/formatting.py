"""Clock field formatting and rendering."""

from datetime import tzinfo

from clock_display.domain.entities import ClockReading, ClockState
from clock_display.domain.types import Timestamp

SEPARATOR = ":"


def two_digits(value: int) -> str:
    """Zero-pad a time component to two decimal digits."""
    return f"{value:02d}"


def reading_from_timestamp(ts: Timestamp, tz: tzinfo | None = None) -> ClockReading:
    """Build a reading from the calendar fields of a timestamp.

    An aware timestamp is an absolute instant: it is converted to ``tz``, or
    to the system's local zone when ``tz`` is None, before its fields are
    read. A naive timestamp is already wall-clock time and is read as-is.
    """
    if ts.tzinfo is not None:
        ts = ts.astimezone(tz)
    return ClockReading(
        hours=two_digits(ts.hour),
        minutes=two_digits(ts.minute),
        seconds=two_digits(ts.second),
    )


def render_clock(state: ClockState | ClockReading) -> str:
    """Render clock fields as HH:MM:SS."""
    return SEPARATOR.join((state.hours, state.minutes, state.seconds))
