"""
Shared test fixtures for the SmartHome test suite.

Provides:
- The default value factory
- Sensor and actuator catalogues loaded from the packaged JSON files
- Fresh device and house aggregates

Usage:
    def test_example(device, sensor_catalogue, value_factory):
        sensor = device.add_sensor("TemperatureSensor", "T1", sensor_catalogue, value_factory)
        assert sensor is not None
"""

from __future__ import annotations

import logging

import pytest

from smarthome.constants import DEFAULT_ACTUATOR_CATALOGUE, DEFAULT_SENSOR_CATALOGUE
from smarthome.domain.actuators import ActuatorCatalogue
from smarthome.domain.device import Device
from smarthome.domain.house import House
from smarthome.domain.sensors import SensorCatalogue
from smarthome.domain.values import DefaultValueFactory

# ---------------------------------------------------------------------------
# Logging: keep test output clean
# ---------------------------------------------------------------------------
logging.getLogger("smarthome").setLevel(logging.WARNING)


# ========================== Catalogue Fixtures =============================


@pytest.fixture()
def value_factory():
    return DefaultValueFactory()


@pytest.fixture()
def sensor_catalogue():
    """Sensor catalogue backed by the packaged configuration."""
    return SensorCatalogue.from_file(DEFAULT_SENSOR_CATALOGUE)


@pytest.fixture()
def actuator_catalogue():
    """Actuator catalogue backed by the packaged configuration."""
    return ActuatorCatalogue.from_file(DEFAULT_ACTUATOR_CATALOGUE)


# ========================== Aggregate Fixtures =============================


@pytest.fixture()
def device():
    return Device("Thermostat", "TH-200")


@pytest.fixture()
def house():
    return House()
