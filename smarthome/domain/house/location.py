"""
Location
========
Postal address of the house together with its GPS coordinates.
"""

from __future__ import annotations

from smarthome.domain.house.gps import GPS

_FIELDS = ("street", "door_number", "zip_code", "city", "country")


def _all_filled(*values: object) -> bool:
    return all(isinstance(value, str) and value.strip() for value in values)


class Location:
    def __init__(
        self,
        street: str,
        door_number: str,
        zip_code: str,
        city: str,
        country: str,
        latitude: float,
        longitude: float,
    ) -> None:
        """
        Raises:
            ValueError: If an address field is blank or the coordinates are
                out of range
        """
        if not _all_filled(street, door_number, zip_code, city, country):
            raise ValueError("Address fields cannot be null or empty")
        self._gps = GPS(latitude, longitude)
        self._street = street
        self._door_number = door_number
        self._zip_code = zip_code
        self._city = city
        self._country = country

    @property
    def street(self) -> str:
        return self._street

    @property
    def door_number(self) -> str:
        return self._door_number

    @property
    def zip_code(self) -> str:
        return self._zip_code

    @property
    def city(self) -> str:
        return self._city

    @property
    def country(self) -> str:
        return self._country

    @property
    def gps(self) -> GPS:
        return self._gps

    def configure_location(
        self,
        street: str,
        door_number: str,
        zip_code: str,
        city: str,
        country: str,
        latitude: float,
        longitude: float,
    ) -> bool:
        """Replace the whole location at once; False changes nothing."""
        if not _all_filled(street, door_number, zip_code, city, country):
            return False
        try:
            gps = GPS(latitude, longitude)
        except ValueError:
            return False
        self._street = street
        self._door_number = door_number
        self._zip_code = zip_code
        self._city = city
        self._country = country
        self._gps = gps
        return True

    def as_dict(self) -> dict:
        data = {name: getattr(self, name) for name in _FIELDS}
        data["latitude"] = self._gps.latitude
        data["longitude"] = self._gps.longitude
        return data

    def __repr__(self) -> str:
        return f"Location({self._street!r}, {self._door_number!r}, {self._city!r}, {self._gps!r})"
