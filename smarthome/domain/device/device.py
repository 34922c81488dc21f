"""
Device Aggregate
================

A named device of a given model that owns sensors and actuators.

Components are only ever created through a catalogue, so a device never
knows which concrete sensor or actuator classes exist. Component names are
unique per device, compared case-insensitively; :meth:`Device.get_sensor`
and :meth:`Device.get_actuator` match the exact name.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from datetime import datetime

from smarthome.constants import ACTUATOR_PATH, DEFAULT_DEVICE_LOG_LIMIT, INVALID_CONSTRUCTOR_ARGUMENTS, SENSOR_PATH
from smarthome.domain.actuators import Actuator, ActuatorCatalogue
from smarthome.domain.device.log import LogEntry
from smarthome.domain.exceptions import SmartHomeError
from smarthome.domain.sensors import Sensor, SensorCatalogue
from smarthome.domain.values import ValueFactory
from smarthome.enums import ActuatorFunctionality, SensorFunctionality

logger = logging.getLogger(__name__)


def _is_blank(value: object) -> bool:
    return not isinstance(value, str) or not value.strip()


class Device:
    """Device owning uniquely named sensors and actuators."""

    def __init__(
        self,
        name: str,
        model: str,
        *,
        log_limit: int = DEFAULT_DEVICE_LOG_LIMIT,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """
        Args:
            name: Device name
            model: Device model
            log_limit: Maximum number of log entries kept
            clock: Source of log timestamps

        Raises:
            ValueError: If the name or model is blank
        """
        if _is_blank(name) or _is_blank(model):
            raise ValueError(INVALID_CONSTRUCTOR_ARGUMENTS)
        self._name = name
        self._model = model
        self._is_active = False
        self._sensors: dict[str, Sensor] = {}
        self._actuators: dict[str, Actuator] = {}
        self._clock = clock
        self._log: deque[LogEntry] = deque(maxlen=max(1, log_limit))

    @property
    def name(self) -> str:
        return self._name

    @property
    def model(self) -> str:
        return self._model

    @property
    def is_active(self) -> bool:
        return self._is_active

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    def add_sensor(
        self,
        model: str,
        name: str,
        catalogue: SensorCatalogue | None,
        value_factory: ValueFactory | None,
    ) -> Sensor | None:
        """
        Create a sensor through the catalogue and attach it.

        Returns:
            The new sensor, or None when the model is unknown, the sensor
            cannot be built or the name is already taken
        """
        if catalogue is None or self.sensor_exists(name):
            return None
        sensor = self._create(catalogue, model, SENSOR_PATH, name, value_factory)
        if sensor is None:
            return None
        self._sensors[sensor.name] = sensor
        self._record(f"Sensor '{sensor.name}' ({model}) added")
        return sensor

    def add_actuator(
        self,
        model: str,
        name: str,
        catalogue: ActuatorCatalogue | None,
        value_factory: ValueFactory | None,
    ) -> Actuator | None:
        """Actuator counterpart of :meth:`add_sensor`."""
        if catalogue is None or self.actuator_exists(name):
            return None
        actuator = self._create(catalogue, model, ACTUATOR_PATH, name, value_factory)
        if actuator is None:
            return None
        self._actuators[actuator.name] = actuator
        self._record(f"Actuator '{actuator.name}' ({model}) added")
        return actuator

    def _create(self, catalogue, model, path, name, value_factory):
        try:
            return catalogue.instantiate(model, path, name, value_factory)
        except (ValueError, SmartHomeError) as exc:
            logger.debug(f"Device '{self._name}' could not create '{name}' of model '{model}': {exc}")
            return None

    def get_sensor(self, name: str) -> Sensor | None:
        return self._sensors.get(name)

    def get_actuator(self, name: str) -> Actuator | None:
        return self._actuators.get(name)

    def sensor_exists(self, name: str) -> bool:
        return self._contains(self._sensors, name)

    def actuator_exists(self, name: str) -> bool:
        return self._contains(self._actuators, name)

    @staticmethod
    def _contains(components: dict, name: str) -> bool:
        if not isinstance(name, str):
            return False
        wanted = name.casefold()
        return any(existing.casefold() == wanted for existing in components)

    def get_sensors(self) -> list[Sensor]:
        return list(self._sensors.values())

    def get_actuators(self) -> list[Actuator]:
        return list(self._actuators.values())

    # ------------------------------------------------------------------
    # Capabilities
    # ------------------------------------------------------------------

    def get_sensor_functionalities(self) -> list[SensorFunctionality]:
        """Every sensor functionality the system defines, whatever is attached."""
        return list(SensorFunctionality)

    def get_actuator_functionalities(self) -> list[ActuatorFunctionality]:
        """Every actuator functionality the system defines, whatever is attached."""
        return list(ActuatorFunctionality)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def switch_device(self, target_state: bool) -> bool:
        """
        Set the activation flag.

        Returns:
            True only if the flag changed
        """
        target_state = bool(target_state)
        if self._is_active == target_state:
            return False
        self._is_active = target_state
        self._record("Device activated" if target_state else "Device deactivated")
        logger.info(f"Device '{self._name}' {'activated' if target_state else 'deactivated'}")
        return True

    # ------------------------------------------------------------------
    # Log
    # ------------------------------------------------------------------

    def _record(self, message: str) -> None:
        self._log.append(LogEntry(self._clock(), message))

    def get_log(self) -> list[str]:
        return [str(entry) for entry in self._log]

    def get_log_entries(self) -> list[LogEntry]:
        return list(self._log)

    def __repr__(self) -> str:
        return f"Device(name={self._name!r}, model={self._model!r}, active={self._is_active})"
