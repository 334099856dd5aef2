"""Terminal clock displays."""

import sys
from typing import TextIO

from clock_display.application.dto.snapshot import ClockSnapshot
from clock_display.application.services.formatting import render_clock
from clock_display.domain.entities import ClockState
from clock_display.domain.enums import DisplayFormat
from clock_display.domain.ports import ClockDisplayPort, ClockPort
from clock_display.infrastructure.observability.metrics import renders_total


class TerminalClockDisplay(ClockDisplayPort):
    """Writes HH:MM:SS to a text stream.

    On a TTY the same line is rewritten in place, otherwise each render is
    written on its own line. Nothing is written when the text is unchanged.
    """

    def __init__(self, stream: TextIO | None = None, rewrite: bool | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._rewrite = self._stream.isatty() if rewrite is None else rewrite
        self._last_text: str | None = None

    @property
    def last_text(self) -> str | None:
        return self._last_text

    def show(self, state: ClockState) -> None:
        """Render the given state."""
        text = render_clock(state)
        if text == self._last_text:
            return
        if self._rewrite:
            self._stream.write(f"\r{text}")
        else:
            self._stream.write(f"{text}\n")
        self._stream.flush()
        self._last_text = text
        renders_total.inc()

    def close(self) -> None:
        """Terminate the rewritten line."""
        if self._rewrite and self._last_text is not None:
            self._stream.write("\n")
            self._stream.flush()


class JsonLinesClockDisplay(ClockDisplayPort):
    """Writes one JSON snapshot per changed state."""

    def __init__(self, stream: TextIO | None = None, clock: ClockPort | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._clock = clock
        self._last_state: ClockState | None = None

    def show(self, state: ClockState) -> None:
        """Render the given state."""
        if state == self._last_state:
            return
        rendered_at = self._clock.now().isoformat() if self._clock is not None else None
        snapshot = ClockSnapshot.from_state(state, rendered_at=rendered_at)
        self._stream.write(snapshot.model_dump_json(by_alias=True, exclude_none=True) + "\n")
        self._stream.flush()
        self._last_state = state
        renders_total.inc()

    def close(self) -> None:
        """Nothing to terminate."""


def build_display(
    display_format: DisplayFormat | str,
    stream: TextIO | None = None,
    clock: ClockPort | None = None,
) -> TerminalClockDisplay | JsonLinesClockDisplay:
    """Build the display for an output format."""
    if DisplayFormat(display_format) == DisplayFormat.JSON:
        return JsonLinesClockDisplay(stream, clock)
    return TerminalClockDisplay(stream)
