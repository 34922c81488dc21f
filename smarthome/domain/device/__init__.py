"""
Device
======
"""

from smarthome.domain.device.device import Device
from smarthome.domain.device.log import LogEntry

__all__ = ["Device", "LogEntry"]
