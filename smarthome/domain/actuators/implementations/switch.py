"""
On/Off Switch
=============
"""

from __future__ import annotations

from smarthome.domain.actuators.actuator import Actuator
from smarthome.enums import ActuatorFunctionality


class SwitchOnOffActuator(Actuator):
    """Two-state switch, off when created."""

    _functionality = ActuatorFunctionality.ON_OFF

    def __init__(self, catalogue, name, value_factory) -> None:
        super().__init__(catalogue, name, value_factory)
        self._is_on = False

    @property
    def is_on(self) -> bool:
        return self._is_on

    def switch_actuator(self) -> bool:
        """Toggle the switch and return the new state."""
        self._is_on = not self._is_on
        return self._is_on

    def get_reading(self) -> str:
        return "true" if self._is_on else "false"
