"""
Component Registry
==================

Maps implementation identifiers to component constructors.

Every constructor honours the same contract,
``constructor(catalogue, name, value_factory)``, so a catalogue can build any
registered component without knowing its concrete class. Identifiers are
namespaced with :data:`~smarthome.constants.SENSOR_PATH` or
:data:`~smarthome.constants.ACTUATOR_PATH`, e.g. ``"sensors.TemperatureSensor"``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

ComponentConstructor = Callable[[Any, str, Any], Any]


class ComponentRegistry:
    """Registry of component constructors keyed by implementation identifier."""

    def __init__(self) -> None:
        self._constructors: dict[str, ComponentConstructor] = {}

    def register(self, key: str, constructor: ComponentConstructor) -> None:
        """
        Register a constructor under ``key``.

        Args:
            key: Namespaced implementation identifier
            constructor: Callable taking ``(catalogue, name, value_factory)``

        Raises:
            ValueError: If the key is blank or the constructor is not callable
        """
        if not key or not key.strip():
            raise ValueError("Registry key cannot be null or empty")
        if not callable(constructor):
            raise ValueError(f"Constructor for '{key}' must be callable")
        if key in self._constructors:
            logger.debug(f"Replacing constructor registered under '{key}'")
        self._constructors[key] = constructor

    def unregister(self, key: str) -> bool:
        return self._constructors.pop(key, None) is not None

    def get(self, key: str) -> ComponentConstructor | None:
        return self._constructors.get(key)

    def is_registered(self, key: str) -> bool:
        return key in self._constructors

    def registered_keys(self) -> list[str]:
        return sorted(self._constructors)

    def __len__(self) -> int:
        return len(self._constructors)


def build_default_registry() -> ComponentRegistry:
    """Create a registry holding every shipped sensor and actuator."""
    # Imported here; the component modules import the catalogue, which imports this module.
    from smarthome.constants import ACTUATOR_PATH, SENSOR_PATH
    from smarthome.domain.actuators.implementations import ACTUATOR_IMPLEMENTATIONS
    from smarthome.domain.sensors.implementations import SENSOR_IMPLEMENTATIONS

    registry = ComponentRegistry()
    for implementation in SENSOR_IMPLEMENTATIONS:
        registry.register(SENSOR_PATH + implementation.__name__, implementation)
    for implementation in ACTUATOR_IMPLEMENTATIONS:
        registry.register(ACTUATOR_PATH + implementation.__name__, implementation)

    logger.debug(f"Default component registry built with {len(registry)} implementations")
    return registry
