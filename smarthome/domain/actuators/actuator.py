"""
Actuator Interface
==================
"""

from __future__ import annotations

from abc import abstractmethod

from smarthome.domain.component import Component
from smarthome.enums import ActuatorFunctionality


class Actuator(Component):
    """A component that controls something."""

    _functionality: ActuatorFunctionality

    @property
    def functionality(self) -> ActuatorFunctionality:
        return self._functionality

    @abstractmethod
    def get_reading(self) -> str | None:
        """Current setting rendered as text."""
