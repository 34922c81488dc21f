"""
Component Base
==============
State shared by every sensor and actuator: a name, a functionality resolved
through the catalogue, and the value factory used to build readings.
"""

from __future__ import annotations

from abc import ABC
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from smarthome.domain.catalogue import ComponentCatalogue
    from smarthome.domain.values import ValueFactory


class Component(ABC):
    """
    Base for catalogue-built components.

    Subclasses set ``_functionality`` and keep the uniform constructor
    signature ``(catalogue, name, value_factory)``.

    Raises:
        ValueError: On a missing catalogue, name or value factory
        NotFoundError: When the catalogue does not enable the functionality
    """

    _functionality: Enum

    def __init__(self, catalogue: ComponentCatalogue, name: str, value_factory: ValueFactory) -> None:
        if catalogue is None:
            raise ValueError("Catalogue cannot be null")
        if name is None or not isinstance(name, str) or not name.strip():
            raise ValueError("Name cannot be null or empty")
        if value_factory is None:
            raise ValueError("ValueFactory cannot be null")
        self._name = name
        self._value_factory = value_factory
        self._functionality = catalogue.resolve_functionality(type(self)._functionality)

    @property
    def name(self) -> str:
        return self._name

    @property
    def functionality(self) -> Any:
        return self._functionality

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, functionality={self._functionality!s})"
