"""Clock implementation."""

from datetime import datetime
from zoneinfo import ZoneInfo

from clock_display.domain.ports import ClockPort
from clock_display.domain.types import Timestamp


class SystemClock(ClockPort):
    """System clock implementation.

    Without a zone, returns local time with the system's offset attached.
    """

    def __init__(self, timezone: str | None = None) -> None:
        self._tz = ZoneInfo(timezone) if timezone else None

    @property
    def timezone(self) -> str | None:
        return self._tz.key if self._tz is not None else None

    def now(self) -> Timestamp:
        """Get current timestamp."""
        if self._tz is None:
            return datetime.now().astimezone()
        return datetime.now(self._tz)
