"""
Sensor Catalogue
================
"""

from __future__ import annotations

from smarthome.constants import SENSOR_PATH
from smarthome.domain.catalogue import ComponentCatalogue
from smarthome.domain.sensors.sensor import Sensor
from smarthome.enums import ComponentKind, SensorFunctionality


class SensorCatalogue(ComponentCatalogue):
    """Catalogue of sensor models."""

    functionality_type = SensorFunctionality
    kind = ComponentKind.SENSOR
    default_path = SENSOR_PATH

    def get_sensor(self, model: str, path: str | None, name: str, value_factory) -> Sensor | None:
        return self.instantiate(model, path, name, value_factory)

    def get_sensor_functionality(self, functionality: SensorFunctionality | str) -> SensorFunctionality:
        return self.resolve_functionality(functionality)
