"""
House
=====
"""

from smarthome.domain.house.devices_by_functionality import DeviceRoom, DevicesByFunctionality
from smarthome.domain.house.gps import GPS
from smarthome.domain.house.house import House
from smarthome.domain.house.location import Location

__all__ = ["GPS", "DeviceRoom", "DevicesByFunctionality", "House", "Location"]
