"""
Devices by Functionality
========================

Groups every device of a house under the functionalities of its sensors.

Two early exits are kept as they are:

- no rooms at all gives ``None``;
- a room without devices anywhere in the house gives ``None`` for the whole
  report.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from smarthome.constants import WITHOUT_FUNCTIONALITY
from smarthome.domain.room import Room
from smarthome.enums import SensorFunctionality

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeviceRoom:
    """A device name paired with the name of the room holding it."""

    device: str
    room: str


class DevicesByFunctionality:
    """Read-only scan over a snapshot of rooms."""

    def __init__(self, rooms: Iterable[Room]) -> None:
        self._rooms = list(rooms) if rooms is not None else []

    def get_grouped_result(self) -> dict[str, list[DeviceRoom]] | None:
        """
        Build the report.

        Returns:
            Functionality name (plus ``"Without functionality"``) to the
            ordered device/room pairs, omitting empty groups; None when
            there are no rooms or any room has no devices
        """
        if not self._rooms:
            return None

        result: dict[str, list[DeviceRoom]] = {}
        for functionality in SensorFunctionality:
            bucket: list[DeviceRoom] = []
            for room in self._rooms:
                devices = room.get_devices()
                if not devices:
                    logger.debug(f"Room '{room.name}' has no devices; report unavailable")
                    return None
                for device in devices:
                    for sensor in device.get_sensors():
                        if sensor.functionality == functionality:
                            bucket.append(DeviceRoom(device.name, room.name))
            if bucket:
                result[functionality.value] = bucket

        without = [
            DeviceRoom(device.name, room.name)
            for room in self._rooms
            for device in room.get_devices()
            if not device.get_sensors()
        ]
        if without:
            result[WITHOUT_FUNCTIONALITY] = without

        return result
