"""
Actuator Implementations
========================
Every shipped actuator; :data:`ACTUATOR_IMPLEMENTATIONS` feeds the default
component registry.
"""

from smarthome.domain.actuators.implementations.blind_roller import BlindRollerActuator
from smarthome.domain.actuators.implementations.range import RangeActuatorDecimal, RangeActuatorInt
from smarthome.domain.actuators.implementations.switch import SwitchOnOffActuator

ACTUATOR_IMPLEMENTATIONS = (
    SwitchOnOffActuator,
    RangeActuatorInt,
    RangeActuatorDecimal,
    BlindRollerActuator,
)

__all__ = [
    "ACTUATOR_IMPLEMENTATIONS",
    "BlindRollerActuator",
    "RangeActuatorDecimal",
    "RangeActuatorInt",
    "SwitchOnOffActuator",
]
