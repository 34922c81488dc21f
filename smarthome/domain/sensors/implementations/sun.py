"""
Sun Sensors
===========
Sunrise and sunset times for a date and a pair of coordinates.
"""

from __future__ import annotations

import logging
from datetime import date, time, tzinfo

from smarthome.domain.sensors.sensor import Sensor
from smarthome.enums import SensorFunctionality
from smarthome.utils.solar import sunrise_utc, sunset_utc, to_local_time

logger = logging.getLogger(__name__)


class _SunEventSensor(Sensor):
    def __init__(self, catalogue, name, value_factory) -> None:
        super().__init__(catalogue, name, value_factory)
        self._current_time: time | None = None

    def _store(self, moment, tz: tzinfo | None) -> time | None:
        local = to_local_time(moment, tz)
        if local is None:
            logger.debug(f"Sensor '{self.name}': no {self.functionality} on this date at these coordinates")
            return None
        self._current_time = local
        return local

    def get_reading(self) -> str | None:
        if self._current_time is None:
            return None
        return self._current_time.isoformat()


class SunriseSensor(_SunEventSensor):
    _functionality = SensorFunctionality.SUNRISE

    def calculate_sunrise(self, day: date, latitude: float, longitude: float, tz: tzinfo | None = None) -> time | None:
        """
        Compute and store the sunrise time.

        Args:
            day: Calendar date
            latitude: Degrees north, in [-90, 90]
            longitude: Degrees east, in [-180, 180]
            tz: Time zone of the returned wall-clock time; UTC when omitted

        Returns:
            Sunrise time, or None when the sun does not rise (the stored
            reading is then left unchanged)

        Raises:
            ValueError: If a coordinate is not a number or out of range
        """
        return self._store(sunrise_utc(day, latitude, longitude), tz)


class SunsetSensor(_SunEventSensor):
    _functionality = SensorFunctionality.SUNSET

    def calculate_sunset(self, day: date, latitude: float, longitude: float, tz: tzinfo | None = None) -> time | None:
        """Sunset counterpart of :meth:`SunriseSensor.calculate_sunrise`."""
        return self._store(sunset_utc(day, latitude, longitude), tz)
