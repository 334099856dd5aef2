"""Domain types and aliases."""

from datetime import datetime
from typing import TypedDict

Timestamp = datetime


class ClockFields(TypedDict):
    """Clock fields dictionary structure."""
    hours: str
    minutes: str
    seconds: str
