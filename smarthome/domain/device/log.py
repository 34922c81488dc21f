"""
Device Log
==========
Timestamped entries recording what happened to a device.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from smarthome.constants import DEVICE_LOG_TIME_FORMAT


@dataclass(frozen=True)
class LogEntry:
    """One event in a device's history."""

    time: datetime
    message: str

    def __post_init__(self) -> None:
        if not isinstance(self.time, datetime):
            raise ValueError("Log time cannot be null")
        if not isinstance(self.message, str) or not self.message.strip():
            raise ValueError("Log message cannot be null or empty")

    def __str__(self) -> str:
        return f"{self.time.strftime(DEVICE_LOG_TIME_FORMAT)} - {self.message}\n"
