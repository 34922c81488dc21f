"""
Scale Sensor
============
"""

from __future__ import annotations

from smarthome.domain.sensors.sensor import ValueSensor
from smarthome.domain.values import PercentageValue
from smarthome.enums import SensorFunctionality


class ScaleSensor(ValueSensor):
    """Load of a scale as a percentage of its capacity."""

    _functionality = SensorFunctionality.SCALE

    def _create_value(self) -> PercentageValue:
        return self._value_factory.create_percentage()
