"""
Binary Switch Sensor
====================
Reports the state of an on/off actuator it is attached to.
"""

from __future__ import annotations

from smarthome.domain.actuators.implementations.switch import SwitchOnOffActuator
from smarthome.domain.sensors.sensor import Sensor
from smarthome.enums import SensorFunctionality


class BinarySwitch(Sensor):
    _functionality = SensorFunctionality.BINARY_SWITCH

    def __init__(self, catalogue, name, value_factory) -> None:
        super().__init__(catalogue, name, value_factory)
        self._actuator: SwitchOnOffActuator | None = None

    def configure_sensor(self, actuator: SwitchOnOffActuator | None) -> bool:
        if not isinstance(actuator, SwitchOnOffActuator):
            return False
        self._actuator = actuator
        return True

    def read_status(self) -> bool | None:
        """State of the attached switch, or None before configuration."""
        if self._actuator is None:
            return None
        return self._actuator.is_on

    def get_reading(self) -> str | None:
        status = self.read_status()
        if status is None:
            return None
        return "true" if status else "false"
