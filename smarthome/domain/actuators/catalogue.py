"""
Actuator Catalogue
==================
"""

from __future__ import annotations

from smarthome.constants import ACTUATOR_PATH
from smarthome.domain.actuators.actuator import Actuator
from smarthome.domain.catalogue import ComponentCatalogue
from smarthome.enums import ActuatorFunctionality, ComponentKind


class ActuatorCatalogue(ComponentCatalogue):
    """Catalogue of actuator models."""

    functionality_type = ActuatorFunctionality
    kind = ComponentKind.ACTUATOR
    default_path = ACTUATOR_PATH

    def get_actuator(self, model: str, path: str | None, name: str, value_factory) -> Actuator | None:
        return self.instantiate(model, path, name, value_factory)

    def get_actuator_functionality(self, functionality: ActuatorFunctionality | str) -> ActuatorFunctionality:
        return self.resolve_functionality(functionality)
