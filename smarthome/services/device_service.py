"""
Device Service
==============

Device lifecycle and component attachment.

Devices are addressed by name across the whole house, ignoring case. Every
operation reports expected failures (unknown room or device, duplicate
name, unknown model) through its return value.
"""

from __future__ import annotations

import logging

from smarthome.domain.actuators import ActuatorCatalogue
from smarthome.domain.device import Device
from smarthome.domain.house import House
from smarthome.domain.sensors import SensorCatalogue
from smarthome.domain.values import ValueFactory
from smarthome.enums import ActuatorFunctionality, SensorFunctionality
from smarthome.schemas import DeviceSchema, RoomSchema

logger = logging.getLogger(__name__)


class DeviceService:
    def __init__(
        self,
        house: House,
        sensor_catalogue: SensorCatalogue,
        actuator_catalogue: ActuatorCatalogue,
        value_factory: ValueFactory,
    ) -> None:
        self.house = house
        self.sensor_catalogue = sensor_catalogue
        self.actuator_catalogue = actuator_catalogue
        self.value_factory = value_factory

    # ------------------------------------------------------------------
    # Devices
    # ------------------------------------------------------------------

    def add_device_to_room(self, room: RoomSchema | None, device: DeviceSchema | None) -> bool:
        """
        Create a device in an existing room.

        Returns:
            False for an unknown room, invalid device data or a duplicate
            device name
        """
        if room is None or device is None:
            return False
        target = self.house.get_room(room.name)
        if target is None:
            logger.debug(f"Room '{room.name}' not found")
            return False
        try:
            return target.add_device(device.name, device.model)
        except ValueError as exc:
            logger.debug(f"Device '{device.name}' rejected: {exc}")
            return False

    def get_devices_in_room(self, room: RoomSchema | None) -> list[DeviceSchema]:
        target = self.house.get_room(room.name) if room is not None else None
        if target is None:
            return []
        return [DeviceSchema.from_domain(device) for device in target.get_devices()]

    def get_devices_from_house(self) -> list[DeviceSchema]:
        return [
            DeviceSchema.from_domain(device)
            for room in self.house.get_rooms()
            for device in room.get_devices()
        ]

    def deactivate(self, device: DeviceSchema | None) -> bool:
        """
        Deactivate a device.

        Returns:
            True only if the device was found and was active
        """
        target = self._find_device(device)
        if target is None:
            return False
        return target.switch_device(False)

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    def get_sensor_functionalities(self, device: DeviceSchema | None) -> list[SensorFunctionality]:
        target = self._find_device(device)
        return target.get_sensor_functionalities() if target else []

    def get_actuator_functionalities(self, device: DeviceSchema | None) -> list[ActuatorFunctionality]:
        target = self._find_device(device)
        return target.get_actuator_functionalities() if target else []

    def add_sensor_to_device(self, device: DeviceSchema | None, model: str, name: str) -> bool:
        target = self._find_device(device)
        if target is None:
            return False
        return target.add_sensor(model, name, self.sensor_catalogue, self.value_factory) is not None

    def add_actuator_to_device(self, device: DeviceSchema | None, model: str, name: str) -> bool:
        target = self._find_device(device)
        if target is None:
            return False
        return target.add_actuator(model, name, self.actuator_catalogue, self.value_factory) is not None

    def _find_device(self, device: DeviceSchema | None) -> Device | None:
        if device is None:
            return None
        for room in self.house.get_rooms():
            found = room.get_device(device.name)
            if found is not None:
                return found
        logger.debug(f"Device '{device.name}' not found in house")
        return None
