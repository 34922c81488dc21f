"""
Report Service
==============
"""

from __future__ import annotations

from smarthome.domain.house import DevicesByFunctionality, House
from smarthome.schemas import DeviceRoomSchema


class ReportService:
    def __init__(self, house: House) -> None:
        self.house = house

    def get_devices_by_room_and_functionality(self) -> dict[str, list[DeviceRoomSchema]] | None:
        """Group the house's devices by sensor functionality."""
        report = DevicesByFunctionality(self.house.get_rooms())
        result = self.house.get_devices_by_room_and_functionality(report)
        if result is None:
            return None
        return {key: [DeviceRoomSchema.from_domain(pair) for pair in pairs] for key, pairs in result.items()}
