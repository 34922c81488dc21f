"""
House Service
=============
Location configuration and room management.
"""

from __future__ import annotations

import logging

from smarthome.domain.house import House
from smarthome.schemas import LocationSchema, RoomSchema

logger = logging.getLogger(__name__)


class HouseService:
    def __init__(self, house: House) -> None:
        self.house = house

    def configure_location(
        self,
        street: str,
        door_number: str,
        zip_code: str,
        city: str,
        country: str,
        latitude: float,
        longitude: float,
    ) -> LocationSchema | None:
        """
        Configure the house location.

        Returns:
            The stored location, or None when the arguments are invalid
        """
        try:
            location = self.house.configure_location(
                street, door_number, zip_code, city, country, latitude, longitude
            )
        except ValueError as exc:
            logger.warning(f"Location not configured: {exc}")
            return None
        return LocationSchema.from_domain(location)

    def add_room(self, room: RoomSchema | None) -> bool:
        if room is None:
            return False
        return self.house.add_room(room.name, room.floor, room.height, room.width, room.length)

    def get_existing_rooms(self) -> list[RoomSchema]:
        return [RoomSchema.from_domain(room) for room in self.house.get_rooms()]
