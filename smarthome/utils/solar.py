"""
Solar Events
============

Sunrise and sunset times for a date and a pair of coordinates, computed with
the ``astral`` package. Coordinate checks live here so that the GPS value
object and the sun sensors share them.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time, timezone, tzinfo

from astral import Observer
from astral.sun import sunrise, sunset

GPS_RANGE_MESSAGE = "Latitude must be between -90 and 90, and Longitude must be between -180 and 180."


def coordinates_valid(latitude: object, longitude: object) -> bool:
    """True when both coordinates are real numbers within their ranges."""
    for value in (latitude, longitude):
        if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
            return False
    return -90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0


def validate_coordinates(latitude: object, longitude: object) -> None:
    """Raise ValueError unless both coordinates are numbers and in range."""
    if not coordinates_valid(latitude, longitude):
        raise ValueError(GPS_RANGE_MESSAGE)


def _event(day: date, latitude: float, longitude: float, rising: bool) -> datetime | None:
    validate_coordinates(latitude, longitude)
    if abs(latitude) == 90.0:
        return None
    observer = Observer(latitude=float(latitude), longitude=float(longitude))
    try:
        if rising:
            return sunrise(observer, date=day, tzinfo=timezone.utc)
        return sunset(observer, date=day, tzinfo=timezone.utc)
    except ValueError:
        # Midnight sun or polar night
        return None


def sunrise_utc(day: date, latitude: float, longitude: float) -> datetime | None:
    """
    Sunrise for ``day`` at the given coordinates, as an aware UTC datetime.

    Returns:
        The instant, or None when the sun does not rise that day

    Raises:
        ValueError: If a coordinate is not a number or out of range
    """
    return _event(day, latitude, longitude, rising=True)


def sunset_utc(day: date, latitude: float, longitude: float) -> datetime | None:
    """Sunset counterpart of :func:`sunrise_utc`."""
    return _event(day, latitude, longitude, rising=False)


def to_local_time(moment: datetime | None, tz: tzinfo | None = None) -> time | None:
    """Wall-clock time of ``moment`` in ``tz`` (UTC when omitted)."""
    if moment is None:
        return None
    return moment.astimezone(tz or timezone.utc).time().replace(tzinfo=None)
