"""
Schemas
=======
Pydantic models for catalogue configuration and the flat shapes returned by
the application services.
"""

from smarthome.schemas.catalogue import CatalogueConfigSchema, CatalogueEntrySchema
from smarthome.schemas.house import DeviceRoomSchema, DeviceSchema, GpsSchema, LocationSchema, RoomSchema

__all__ = [
    "CatalogueConfigSchema",
    "CatalogueEntrySchema",
    "DeviceRoomSchema",
    "DeviceSchema",
    "GpsSchema",
    "LocationSchema",
    "RoomSchema",
]
