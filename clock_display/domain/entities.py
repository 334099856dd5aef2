"""Domain entities."""

from dataclasses import dataclass, replace

from clock_display.domain.errors import InvalidClockFieldError
from clock_display.domain.types import ClockFields

HOURS_UPPER_BOUND = 23
MINUTES_UPPER_BOUND = 59
SECONDS_UPPER_BOUND = 59


def validate_field(name: str, value: str, upper: int) -> None:
    """Check that a clock field is two digits within [00, upper]."""
    if not isinstance(value, str) or len(value) != 2 or not (value.isascii() and value.isdigit()):
        raise InvalidClockFieldError(f"{name} must be a two-digit string, got {value!r}")
    if int(value) > upper:
        raise InvalidClockFieldError(f"{name} must be between 00 and {upper:02d}, got {value!r}")


class _ClockFieldsMixin:
    """Shared invariant and conversion for hour, minute and second triples."""

    hours: str
    minutes: str
    seconds: str

    def __post_init__(self) -> None:
        validate_field("hours", self.hours, HOURS_UPPER_BOUND)
        validate_field("minutes", self.minutes, MINUTES_UPPER_BOUND)
        validate_field("seconds", self.seconds, SECONDS_UPPER_BOUND)

    def to_dict(self) -> ClockFields:
        """Convert to a fields dictionary."""
        return {"hours": self.hours, "minutes": self.minutes, "seconds": self.seconds}


@dataclass(frozen=True)
class ClockReading(_ClockFieldsMixin):
    """Formatted hour, minute and second produced by an updater."""

    hours: str
    minutes: str
    seconds: str


@dataclass(frozen=True)
class ClockState(_ClockFieldsMixin):
    """State rendered by a clock display.

    Defaults are the placeholder shown before the first tick.
    """

    hours: str = "00"
    minutes: str = "11"
    seconds: str = "30"

    def with_reading(self, reading: ClockReading) -> "ClockState":
        """Return a new state carrying all three fields of a reading."""
        return replace(
            self,
            hours=reading.hours,
            minutes=reading.minutes,
            seconds=reading.seconds,
        )
