"""Domain enums for update strategies and output formats."""

from enum import Enum


class UpdaterKind(str, Enum):
    """Clock update strategy enum."""

    SYSTEM = "system"
    FIXED = "fixed"
    FIXED_HOURS = "fixed_hours"  # Only touches the hours field


class DisplayFormat(str, Enum):
    """Display output format enum."""

    TEXT = "text"
    JSON = "json"
