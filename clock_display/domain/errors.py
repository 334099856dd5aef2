"""Domain errors."""


class ClockDisplayError(Exception):
    """Base clock display error."""


class InvalidClockFieldError(ClockDisplayError):
    """Clock field is not a two-digit value in range."""


class TickerStateError(ClockDisplayError):
    """Ticker lifecycle misuse."""


class UnknownUpdaterError(ClockDisplayError):
    """No update strategy registered for the requested kind."""
