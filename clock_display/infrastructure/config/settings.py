"""Application settings."""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from clock_display.domain.entities import (
    HOURS_UPPER_BOUND,
    MINUTES_UPPER_BOUND,
    SECONDS_UPPER_BOUND,
    ClockReading,
    ClockState,
    validate_field,
)
from clock_display.domain.enums import DisplayFormat, UpdaterKind
from clock_display.domain.errors import InvalidClockFieldError

_UPPER_BOUNDS = {
    "hours": HOURS_UPPER_BOUND,
    "minutes": MINUTES_UPPER_BOUND,
    "seconds": SECONDS_UPPER_BOUND,
}


class Settings(BaseSettings):
    """Application settings."""

    updater: UpdaterKind = UpdaterKind.SYSTEM
    tick_interval_seconds: float = Field(default=1.0, gt=0)
    max_ticks: int | None = Field(default=None, ge=1)
    # IANA zone name, unset means the system's local time
    timezone: str | None = None
    shared_state: bool = True
    display_format: DisplayFormat = DisplayFormat.TEXT

    # Placeholder shown before the first tick
    initial_hours: str = "00"
    initial_minutes: str = "11"
    initial_seconds: str = "30"

    # Value used by the fixed strategies
    fixed_hours: str = "12"
    fixed_minutes: str = "22"
    fixed_seconds: str = "00"

    log_level: str = "INFO"
    log_json: bool = False
    metrics_enabled: bool = False
    prometheus_port: int = 9300

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="CLOCK_",
        extra="ignore",
    )

    @field_validator(
        "initial_hours",
        "initial_minutes",
        "initial_seconds",
        "fixed_hours",
        "fixed_minutes",
        "fixed_seconds",
    )
    @classmethod
    def _check_clock_field(cls, value: str, info: ValidationInfo) -> str:
        field = info.field_name.split("_", 1)[1]
        try:
            validate_field(field, value, _UPPER_BOUNDS[field])
        except InvalidClockFieldError as e:
            raise ValueError(str(e)) from e
        return value

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: str | None) -> str | None:
        if not value:
            return None
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {value}") from e
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    def initial_state(self) -> ClockState:
        """Build the placeholder state."""
        return ClockState(
            hours=self.initial_hours,
            minutes=self.initial_minutes,
            seconds=self.initial_seconds,
        )

    def fixed_reading(self) -> ClockReading:
        """Build the reading used by the fixed strategies."""
        return ClockReading(
            hours=self.fixed_hours,
            minutes=self.fixed_minutes,
            seconds=self.fixed_seconds,
        )
