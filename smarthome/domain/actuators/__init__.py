"""
Actuators
=========
Actuator interface, catalogue and shipped implementations.
"""

from smarthome.domain.actuators.actuator import Actuator
from smarthome.domain.actuators.catalogue import ActuatorCatalogue

__all__ = ["Actuator", "ActuatorCatalogue"]
