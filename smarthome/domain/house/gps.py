"""
GPS Coordinates
===============
"""

from __future__ import annotations

from smarthome.utils.solar import GPS_RANGE_MESSAGE, coordinates_valid


class GPS:
    """Latitude and longitude in decimal degrees."""

    def __init__(self, latitude: float, longitude: float) -> None:
        if not coordinates_valid(latitude, longitude):
            raise ValueError(GPS_RANGE_MESSAGE)
        self._latitude = float(latitude)
        self._longitude = float(longitude)

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    def configure_gps(self, latitude: float, longitude: float) -> bool:
        """Replace both coordinates; False leaves them unchanged."""
        if not coordinates_valid(latitude, longitude):
            return False
        self._latitude = float(latitude)
        self._longitude = float(longitude)
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GPS):
            return NotImplemented
        return (self._latitude, self._longitude) == (other._latitude, other._longitude)

    def __hash__(self) -> int:
        return hash((self._latitude, self._longitude))

    def __repr__(self) -> str:
        return f"GPS({self._latitude}, {self._longitude})"
