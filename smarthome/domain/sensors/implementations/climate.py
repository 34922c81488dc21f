"""
Climate Sensors
===============
Temperature, humidity, dew point, wind and solar irradiance.
"""

from __future__ import annotations

import logging

from smarthome.domain.sensors.sensor import ValueSensor
from smarthome.domain.values import CelsiusValue, KmhCardinalValue, PercentageValue, Wm2Value
from smarthome.enums import SensorFunctionality, WindDirection
from smarthome.utils.psychrometrics import calculate_dew_point_c

logger = logging.getLogger(__name__)


class TemperatureSensor(ValueSensor):
    """Air temperature in ºC."""

    _functionality = SensorFunctionality.TEMPERATURE

    def _create_value(self) -> CelsiusValue:
        return self._value_factory.create_celsius_temperature()


class HumiditySensor(ValueSensor):
    """Relative humidity as a whole percentage."""

    _functionality = SensorFunctionality.HUMIDITY

    def _create_value(self) -> PercentageValue:
        return self._value_factory.create_percentage()


class SolarIrradianceSensor(ValueSensor):
    _functionality = SensorFunctionality.SOLAR_IRRADIANCE

    def _create_value(self) -> Wm2Value:
        return self._value_factory.create_wm2_value()


class DewPointSensor(ValueSensor):
    """Dew point derived from a temperature and a relative humidity."""

    _functionality = SensorFunctionality.DEW_POINT

    def _create_value(self) -> CelsiusValue:
        return self._value_factory.create_celsius_temperature()

    def calculate_dew_point(self, temperature_c: float, relative_humidity: float) -> float | None:
        """
        Compute the dew point and store it as the current reading.

        Args:
            temperature_c: Air temperature in Celsius
            relative_humidity: Relative humidity percentage (0-100)

        Returns:
            Dew point in Celsius, or None when the inputs cannot produce one;
            the stored reading is left unchanged in that case
        """
        dew_point = calculate_dew_point_c(temperature_c, relative_humidity)
        if dew_point is None or not self._value().set_value(repr(dew_point)):
            logger.debug(f"Dew point sensor '{self.name}' ignored T={temperature_c}, RH={relative_humidity}")
            return None
        return dew_point


class WindSensor(ValueSensor):
    """Wind speed in km/h with a compass direction."""

    _functionality = SensorFunctionality.WIND

    def _create_value(self) -> KmhCardinalValue:
        return self._value_factory.create_kmh_cardinal_value()

    def set_reading(self, speed: str, direction: WindDirection | str | None = None) -> bool:
        """
        Assign speed and, optionally, direction.

        Both are validated before either is applied.
        """
        candidate = self._create_value()
        if not candidate.set_value(speed):
            return False
        if direction is not None and not candidate.set_direction(direction):
            return False
        value = self._value()
        value.set_value(speed)
        if direction is not None:
            value.set_direction(direction)
        return True

    def get_reading(self) -> str | None:
        rendered = str(self._value())
        return rendered or None
