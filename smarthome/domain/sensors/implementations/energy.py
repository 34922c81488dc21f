"""
Energy Sensors
==============
Instant power, average power over a window and energy consumed between two
meter readings.
"""

from __future__ import annotations

import logging
from datetime import time

from smarthome.domain.sensors.sensor import Sensor, ValueSensor
from smarthome.domain.values import WhValue, WValue
from smarthome.enums import SensorFunctionality

logger = logging.getLogger(__name__)

NO_READINGS = "No readings to show"
EXACTLY_TWO_READINGS = "There should be exactly two readings"
INVALID_TIME_PERIOD = "Invalid time period"


class InstantPowerConsumptionSensor(ValueSensor):
    """Instant power draw in W."""

    _functionality = SensorFunctionality.POWER_CONSUMPTION

    def _create_value(self) -> WValue:
        return self._value_factory.create_w_value()


class AveragePowerConsumptionSensor(Sensor):
    """
    Averages timestamped power readings.

    Zero readings are rejected. Readings are keyed by time of day; a second
    reading at the same time replaces the first.
    """

    _functionality = SensorFunctionality.POWER_CONSUMPTION

    def __init__(self, catalogue, name, value_factory) -> None:
        super().__init__(catalogue, name, value_factory)
        self._readings: dict[time, WValue] = {}

    @property
    def measurement_unit(self) -> str:
        return self._value_factory.create_w_value().measurement_unit

    def add_reading(self, reading: WValue | None, at: time | None) -> bool:
        if not isinstance(reading, WValue) or not isinstance(at, time):
            return False
        if reading.numeric == 0.0:
            logger.debug(f"Sensor '{self.name}' ignored a zero power reading at {at}")
            return False
        self._readings[at] = reading
        return True

    def get_reading(self, start: time | None = None, end: time | None = None) -> str:
        """
        Average power of the readings strictly between ``start`` and ``end``.

        With no window every reading is averaged.

        Returns:
            ``"<average> W"`` or ``"No readings to show"``
        """
        if start is None and end is None:
            selected = list(self._readings.values())
        elif start is None or end is None:
            return NO_READINGS
        else:
            selected = [reading for at, reading in self._readings.items() if start < at < end]

        if not selected:
            return NO_READINGS
        average = sum(reading.numeric for reading in selected) / len(selected)
        return f"{average} {selected[0].measurement_unit}"


class ElectricEnergyConsumptionSensor(Sensor):
    """Energy consumed between exactly two meter readings."""

    _functionality = SensorFunctionality.ENERGY_CONSUMPTION

    def __init__(self, catalogue, name, value_factory) -> None:
        super().__init__(catalogue, name, value_factory)
        self._unit = value_factory.create_wh_value().measurement_unit
        self._readings: dict[time, WhValue] = {}

    @property
    def measurement_unit(self) -> str:
        return self._unit

    def add_reading(self, reading: WhValue | None, at: time | None) -> bool:
        if not isinstance(reading, WhValue) or not isinstance(at, time):
            return False
        if reading.numeric == 0.0:
            return False
        self._readings[at] = reading
        return True

    def get_reading(self, start: time | None = None, end: time | None = None) -> str:
        """
        Difference between the readings taken at ``end`` and at ``start``.

        Returns:
            ``"<consumption> Wh"``, or an explanation when the sensor does
            not hold exactly two readings or the period is invalid
        """
        if len(self._readings) != 2:
            return EXACTLY_TWO_READINGS
        if start is None or end is None or start > end:
            return INVALID_TIME_PERIOD

        def _at(moment: time) -> float:
            reading = self._readings.get(moment)
            return reading.numeric if reading is not None else 0.0

        return f"{_at(end) - _at(start)} {self._unit}"
