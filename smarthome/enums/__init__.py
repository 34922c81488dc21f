"""
Enumerations
============

Closed enumerations shared across the domain, schemas and services.
"""

from smarthome.enums.device import (
    ActuatorFunctionality,
    ComponentKind,
    SensorFunctionality,
    WindDirection,
)

__all__ = [
    "ActuatorFunctionality",
    "ComponentKind",
    "SensorFunctionality",
    "WindDirection",
]
