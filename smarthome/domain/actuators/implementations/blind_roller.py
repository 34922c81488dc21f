"""
Blind Roller
============
"""

from __future__ import annotations

from smarthome.domain.actuators.actuator import Actuator
from smarthome.domain.values import PercentageValue
from smarthome.enums import ActuatorFunctionality


class BlindRollerActuator(Actuator):
    """Blind position as a percentage; 0 is fully open."""

    _functionality = ActuatorFunctionality.BLIND_ROLLER

    def __init__(self, catalogue, name, value_factory) -> None:
        super().__init__(catalogue, name, value_factory)
        self._position: PercentageValue | None = None

    def _value(self) -> PercentageValue:
        if self._position is None:
            self._position = self._value_factory.create_percentage()
        return self._position

    @property
    def measurement_unit(self) -> str:
        return self._value().measurement_unit

    def set_position(self, measured: str) -> bool:
        return self._value().set_value(measured)

    def get_reading(self) -> str:
        return str(self._value())
