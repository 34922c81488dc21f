"""
House Schemas
=============

Pydantic models for the flat shapes the application services return and
accept. Each ``from_domain`` classmethod reads the matching domain object.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GpsSchema(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90, description="Degrees north")
    longitude: float = Field(..., ge=-180, le=180, description="Degrees east")

    @classmethod
    def from_domain(cls, gps: Any) -> GpsSchema:
        return cls(latitude=gps.latitude, longitude=gps.longitude)


class LocationSchema(BaseModel):
    model_config = ConfigDict(frozen=True)

    street: str = Field(..., min_length=1)
    door_number: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)
    gps: GpsSchema

    @classmethod
    def from_domain(cls, location: Any) -> LocationSchema:
        return cls(
            street=location.street,
            door_number=location.door_number,
            zip_code=location.zip_code,
            city=location.city,
            country=location.country,
            gps=GpsSchema.from_domain(location.gps),
        )


class RoomSchema(BaseModel):
    """Room name, floor and dimensions."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Room name")
    floor: str = Field(..., description="Floor label")
    height: float
    width: float
    length: float

    @classmethod
    def from_domain(cls, room: Any) -> RoomSchema:
        dimensions = room.dimensions
        return cls(
            name=room.name,
            floor=room.floor,
            height=dimensions.height,
            width=dimensions.width,
            length=dimensions.length,
        )


class DeviceSchema(BaseModel):
    """Device name, model and activation flag."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Device name")
    model: str = Field(..., description="Device model")
    is_active: bool = Field(default=False)

    @field_validator("name", "model")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @classmethod
    def from_domain(cls, device: Any) -> DeviceSchema:
        return cls(name=device.name, model=device.model, is_active=device.is_active)


class DeviceRoomSchema(BaseModel):
    model_config = ConfigDict(frozen=True)

    device: str
    room: str

    @classmethod
    def from_domain(cls, pair: Any) -> DeviceRoomSchema:
        return cls(device=pair.device, room=pair.room)
