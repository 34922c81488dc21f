"""
Application Wiring
==================
Builds the catalogues, the house and the services from an :class:`AppConfig`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from smarthome.config import AppConfig, load_config, setup_logging_from_config, validate_config
from smarthome.domain.actuators import ActuatorCatalogue
from smarthome.domain.device import Device
from smarthome.domain.house import House
from smarthome.domain.registry import ComponentRegistry, build_default_registry
from smarthome.domain.room import Room
from smarthome.domain.sensors import SensorCatalogue
from smarthome.domain.values import DefaultValueFactory, ValueFactory
from smarthome.services import DeviceService, HouseService, ReportService

logger = logging.getLogger(__name__)


@dataclass
class SmartHomeApp:
    """Everything one application run needs, created once."""

    config: AppConfig
    sensor_catalogue: SensorCatalogue
    actuator_catalogue: ActuatorCatalogue
    value_factory: ValueFactory
    house: House
    house_service: HouseService
    device_service: DeviceService
    report_service: ReportService


def create_app(
    config: AppConfig | None = None,
    *,
    registry: ComponentRegistry | None = None,
    configure_logging: bool = True,
) -> SmartHomeApp:
    """
    Create the application.

    Args:
        config: Configuration; read from the environment when omitted
        registry: Component constructors; the shipped ones when omitted
        configure_logging: Install the logging handlers

    Raises:
        ValueError: If a catalogue path is blank
        ConfigurationError: If a catalogue file cannot be read or is invalid
    """
    config = config or load_config()
    if configure_logging:
        setup_logging_from_config(config)
    for warning in validate_config(config):
        logger.warning(warning)

    if registry is None:
        registry = build_default_registry()
    sensor_catalogue = SensorCatalogue.from_file(config.sensor_catalogue_path, registry=registry)
    actuator_catalogue = ActuatorCatalogue.from_file(config.actuator_catalogue_path, registry=registry)
    value_factory = DefaultValueFactory()

    def device_factory(name: str, model: str) -> Device:
        return Device(name, model, log_limit=config.device_log_limit)

    def room_factory(name: str, floor: str, height: float, width: float, length: float) -> Room:
        return Room(name, floor, height, width, length, device_factory=device_factory)

    house = House(room_factory=room_factory)
    logger.info(f"SmartHome application created ({config.environment})")

    return SmartHomeApp(
        config=config,
        sensor_catalogue=sensor_catalogue,
        actuator_catalogue=actuator_catalogue,
        value_factory=value_factory,
        house=house,
        house_service=HouseService(house),
        device_service=DeviceService(house, sensor_catalogue, actuator_catalogue, value_factory),
        report_service=ReportService(house),
    )
