"""
House
=====
Root aggregate: an optional location and uniquely named rooms.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from smarthome.domain.house.devices_by_functionality import DeviceRoom, DevicesByFunctionality
from smarthome.domain.house.location import Location
from smarthome.domain.room import Room

logger = logging.getLogger(__name__)


class House:
    def __init__(
        self,
        room_factory: Callable[..., Room] = Room,
        location_factory: Callable[..., Location] = Location,
    ) -> None:
        self._room_factory = room_factory
        self._location_factory = location_factory
        self._location: Location | None = None
        self._rooms: list[Room] = []

    @property
    def location(self) -> Location | None:
        return self._location

    def configure_location(
        self,
        street: str,
        door_number: str,
        zip_code: str,
        city: str,
        country: str,
        latitude: float,
        longitude: float,
    ) -> Location:
        """
        Set the house location, replacing any previous one.

        Raises:
            ValueError: If an address field is blank or the coordinates are
                out of range; the previous location is kept
        """
        location = self._location_factory(street, door_number, zip_code, city, country, latitude, longitude)
        self._location = location
        logger.info(f"House location set to {city}, {country}")
        return location

    def add_room(self, name: str, floor: str, height: float, width: float, length: float) -> bool:
        """
        Add a room.

        Returns:
            False when a room with that name (ignoring case) exists or the
            arguments are invalid
        """
        if self.get_room(name) is not None:
            logger.debug(f"House already has a room named '{name}'")
            return False
        try:
            room = self._room_factory(name, floor, height, width, length)
        except ValueError as exc:
            logger.debug(f"Room '{name}' rejected: {exc}")
            return False
        self._rooms.append(room)
        logger.info(f"Room '{name}' added on floor '{floor}'")
        return True

    def get_room(self, name: str) -> Room | None:
        if not isinstance(name, str):
            return None
        wanted = name.casefold()
        for room in self._rooms:
            if room.name.casefold() == wanted:
                return room
        return None

    def get_rooms(self) -> list[Room]:
        return list(self._rooms)

    def get_devices_by_room_and_functionality(
        self, report: DevicesByFunctionality | None = None
    ) -> dict[str, list[DeviceRoom]] | None:
        """Run ``report``, or a fresh report over the current rooms."""
        if report is None:
            report = DevicesByFunctionality(self._rooms)
        return report.get_grouped_result()
