"""
Component Catalogue
===================

Configuration-driven mapping from a component *model* to the implementation
that builds it and the functionality it provides.

The catalogue is the single extension point of the model: a new sensor or
actuator type needs a registry entry and a line in the catalogue file,
nothing else. Configuration is read once, at construction, and never
changes afterwards.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar

from pydantic import ValidationError as PydanticValidationError

from smarthome.constants import INVALID_ARGUMENTS
from smarthome.domain.exceptions import ConfigurationError, NotFoundError
from smarthome.domain.registry import ComponentRegistry, build_default_registry
from smarthome.enums import ComponentKind
from smarthome.schemas.catalogue import CatalogueConfigSchema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogueEntry:
    """A model's implementation identifier and declared functionality."""

    model: str
    implementation: str
    functionality: Enum


class ComponentCatalogue:
    """
    Base catalogue shared by sensors and actuators.

    Subclasses pin the functionality enumeration, the component family and
    the default registry namespace.
    """

    functionality_type: ClassVar[type[Enum]]
    kind: ClassVar[ComponentKind]
    default_path: ClassVar[str]

    def __init__(
        self,
        config: Mapping[str, Any] | CatalogueConfigSchema | None,
        registry: ComponentRegistry | None = None,
    ) -> None:
        """
        Load a catalogue from an already parsed configuration.

        Args:
            config: Configuration mapping or validated schema
            registry: Constructors to build components with; the shipped
                implementations are used when omitted

        Raises:
            ValueError: If ``config`` is None
            ConfigurationError: If the configuration is malformed or names
                an unknown functionality
        """
        if config is None:
            raise ValueError(INVALID_ARGUMENTS)

        schema = self._validate(config)
        self._registry = registry if registry is not None else build_default_registry()
        self._functionalities = self._load_functionalities(schema.functionalities)
        self._entries: dict[str, CatalogueEntry] = {
            model: CatalogueEntry(
                model=model,
                implementation=entry.implementation,
                functionality=self._coerce_functionality(entry.functionality),
            )
            for model, entry in schema.models.items()
        }

        logger.info(
            f"{self.kind.value.capitalize()} catalogue loaded with {len(self._entries)} models "
            f"and {len(self._functionalities)} functionalities"
        )

    @classmethod
    def from_file(cls, path: str | Path | None, registry: ComponentRegistry | None = None):
        """
        Load a catalogue from a JSON configuration file.

        Raises:
            ValueError: If ``path`` is None or blank
            ConfigurationError: If the file cannot be read or parsed
        """
        if path is None or not str(path).strip():
            raise ValueError(INVALID_ARGUMENTS)

        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ConfigurationError(
                f"Error occurred while reading the configuration file '{path}': {exc}",
                detail={"path": str(path)},
            ) from exc

        if not isinstance(raw, Mapping):
            raise ConfigurationError(
                f"Error occurred while reading the configuration file '{path}': expected a JSON object",
                detail={"path": str(path)},
            )

        logger.debug(f"Read {cls.kind.value} catalogue configuration from {path}")
        return cls(raw, registry=registry)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def models(self) -> list[str]:
        return list(self._entries)

    @property
    def functionalities(self) -> list[Enum]:
        return list(self._functionalities)

    @property
    def registry(self) -> ComponentRegistry:
        return self._registry

    def get_model_functionality(self, model: str) -> Enum | None:
        entry = self._entries.get(model)
        return entry.functionality if entry else None

    def resolve_functionality(self, functionality: Enum | str) -> Enum:
        """
        Confirm the catalogue declares ``functionality``.

        Args:
            functionality: Enum member or its value

        Returns:
            The enum member

        Raises:
            NotFoundError: If the functionality is unknown or disabled
        """
        try:
            member = self.functionality_type(functionality)
        except ValueError:
            member = None
        if member is None or member not in self._functionalities:
            raise NotFoundError(
                f"Functionality '{functionality}' is not available in the {self.kind.value} catalogue",
                detail={"functionality": str(functionality)},
            )
        return member

    # ------------------------------------------------------------------
    # Instantiation
    # ------------------------------------------------------------------

    def instantiate(self, model: str, path_hint: str | None, name: str, value_factory: Any) -> Any | None:
        """
        Build a new component for ``model``.

        Args:
            model: Catalogue model name
            path_hint: Registry namespace; the catalogue default when None
            name: Component name
            value_factory: Factory handed to the component

        Returns:
            A new component, or None when the model is unknown or its
            implementation is not registered

        Raises:
            ValueError: If the component rejects its constructor arguments
            NotFoundError: If the component's functionality is not enabled
            ConfigurationError: If the component reports a functionality
                other than the one declared for the model
        """
        entry = self._entries.get(model) if isinstance(model, str) else None
        if entry is None:
            logger.debug(f"Unknown {self.kind.value} model '{model}'")
            return None

        key = (path_hint if path_hint is not None else self.default_path) + entry.implementation
        constructor = self._registry.get(key)
        if constructor is None:
            logger.warning(f"Model '{model}' maps to '{key}', which is not registered")
            return None

        component = constructor(self, name, value_factory)

        if component.functionality != entry.functionality:
            logger.error(
                f"Model '{model}' declares {entry.functionality} but '{key}' provides {component.functionality}"
            )
            raise ConfigurationError(
                f"Functionality mismatch for model '{model}'",
                detail={
                    "model": model,
                    "declared": str(entry.functionality),
                    "actual": str(component.functionality),
                },
            )

        logger.info(f"Created {self.kind.value} '{name}' of model '{model}'")
        return component

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _validate(self, config: Mapping[str, Any] | CatalogueConfigSchema) -> CatalogueConfigSchema:
        if isinstance(config, CatalogueConfigSchema):
            return config
        if not isinstance(config, Mapping):
            raise ValueError(INVALID_ARGUMENTS)
        try:
            return CatalogueConfigSchema.model_validate(dict(config))
        except PydanticValidationError as exc:
            raise ConfigurationError(
                f"Invalid {self.kind.value} catalogue configuration: {exc}",
                detail={"errors": exc.errors(include_url=False)},
            ) from exc

    def _coerce_functionality(self, name: str) -> Enum:
        try:
            return self.functionality_type(name)
        except ValueError:
            raise ConfigurationError(
                f"Unknown {self.kind.value} functionality '{name}'",
                detail={"functionality": name},
            ) from None

    def _load_functionalities(self, table: dict[str, bool] | None) -> list[Enum]:
        if table is None:
            return list(self.functionality_type)
        flags = {self._coerce_functionality(name): flag for name, flag in table.items()}
        enabled = {member for member, flag in flags.items() if flag}
        # Keep enumeration order
        return [member for member in self.functionality_type if member in enabled]
