"""
Room
====
A named room on a floor, holding uniquely named devices.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from smarthome.domain.device import Device
from smarthome.domain.room.dimensions import Dimensions

logger = logging.getLogger(__name__)

DeviceFactory = Callable[[str, str], Device]


class Room:
    def __init__(
        self,
        name: str,
        floor: str,
        height: float,
        width: float,
        length: float,
        device_factory: DeviceFactory = Device,
    ) -> None:
        """
        Args:
            name: Room name, unique within its house
            floor: Floor label
            height: Height, strictly positive
            width: Width, strictly positive
            length: Length, strictly positive
            device_factory: Callable building a device from ``(name, model)``

        Raises:
            ValueError: On a blank name or floor, or invalid dimensions
        """
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Room name cannot be null or empty")
        if not isinstance(floor, str) or not floor.strip():
            raise ValueError("Room floor cannot be null or empty")
        self._name = name
        self._floor = floor
        self._dimensions = Dimensions(height, width, length)
        self._device_factory = device_factory
        self._devices: list[Device] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def floor(self) -> str:
        return self._floor

    @property
    def dimensions(self) -> Dimensions:
        return self._dimensions

    def add_device(self, name: str, model: str) -> bool:
        """
        Create a device and add it to the room.

        Returns:
            False if a device with the same name (ignoring case) exists

        Raises:
            ValueError: If the device rejects ``name`` or ``model``
        """
        if self.get_device(name) is not None:
            logger.debug(f"Room '{self._name}' already has a device named '{name}'")
            return False
        device = self._device_factory(name, model)
        self._devices.append(device)
        logger.info(f"Device '{name}' added to room '{self._name}'")
        return True

    def get_device(self, name: str) -> Device | None:
        if not isinstance(name, str):
            return None
        wanted = name.casefold()
        for device in self._devices:
            if device.name.casefold() == wanted:
                return device
        return None

    def get_devices(self) -> list[Device]:
        return list(self._devices)

    def __repr__(self) -> str:
        return f"Room(name={self._name!r}, floor={self._floor!r}, devices={len(self._devices)})"
