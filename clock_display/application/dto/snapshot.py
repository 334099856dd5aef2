"""Clock snapshot DTO."""

from pydantic import BaseModel, ConfigDict, Field

from clock_display.application.services.formatting import render_clock
from clock_display.domain.entities import ClockState


class ClockSnapshot(BaseModel):
    """Clock state as written by the JSON lines display."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    hours: str = Field(pattern=r"^([01][0-9]|2[0-3])$")
    minutes: str = Field(pattern=r"^[0-5][0-9]$")
    seconds: str = Field(pattern=r"^[0-5][0-9]$")
    text: str
    rendered_at: str | None = Field(default=None, alias="renderedAt")  # ISO 8601 string

    @classmethod
    def from_state(cls, state: ClockState, rendered_at: str | None = None) -> "ClockSnapshot":
        """Build a snapshot from a clock state."""
        return cls(
            hours=state.hours,
            minutes=state.minutes,
            seconds=state.seconds,
            text=render_clock(state),
            rendered_at=rendered_at,
        )
