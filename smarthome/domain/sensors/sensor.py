"""
Sensor Interface
================
"""

from __future__ import annotations

from abc import abstractmethod

from smarthome.domain.component import Component
from smarthome.enums import SensorFunctionality


class Sensor(Component):
    """A component that measures something."""

    _functionality: SensorFunctionality

    @property
    def functionality(self) -> SensorFunctionality:
        return self._functionality

    @abstractmethod
    def get_reading(self) -> str | None:
        """Current reading rendered with its unit, or None when unavailable."""


class ValueSensor(Sensor):
    """
    Sensor holding a single measurement value.

    The value is created through the value factory the first time it is
    needed.
    """

    def __init__(self, catalogue, name, value_factory) -> None:
        super().__init__(catalogue, name, value_factory)
        self._current_value = None

    @abstractmethod
    def _create_value(self):
        """Build the empty value from the value factory."""

    def _value(self):
        if self._current_value is None:
            self._current_value = self._create_value()
        return self._current_value

    @property
    def measurement_unit(self) -> str:
        return self._value().measurement_unit

    def set_reading(self, measured: str) -> bool:
        """Assign a new reading; False leaves the previous one in place."""
        return self._value().set_value(measured)

    def get_reading(self) -> str | None:
        return str(self._value())
