"""
Room
====
"""

from smarthome.domain.room.dimensions import Dimensions
from smarthome.domain.room.room import Room

__all__ = ["Dimensions", "Room"]
