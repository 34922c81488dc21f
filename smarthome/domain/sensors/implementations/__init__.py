"""
Sensor Implementations
======================
Every shipped sensor; :data:`SENSOR_IMPLEMENTATIONS` feeds the default
component registry.
"""

from smarthome.domain.sensors.implementations.climate import (
    DewPointSensor,
    HumiditySensor,
    SolarIrradianceSensor,
    TemperatureSensor,
    WindSensor,
)
from smarthome.domain.sensors.implementations.energy import (
    AveragePowerConsumptionSensor,
    ElectricEnergyConsumptionSensor,
    InstantPowerConsumptionSensor,
)
from smarthome.domain.sensors.implementations.scale import ScaleSensor
from smarthome.domain.sensors.implementations.sun import SunriseSensor, SunsetSensor
from smarthome.domain.sensors.implementations.switch import BinarySwitch

SENSOR_IMPLEMENTATIONS = (
    TemperatureSensor,
    HumiditySensor,
    BinarySwitch,
    ScaleSensor,
    WindSensor,
    DewPointSensor,
    InstantPowerConsumptionSensor,
    AveragePowerConsumptionSensor,
    SolarIrradianceSensor,
    ElectricEnergyConsumptionSensor,
    SunriseSensor,
    SunsetSensor,
)

__all__ = [
    "SENSOR_IMPLEMENTATIONS",
    "AveragePowerConsumptionSensor",
    "BinarySwitch",
    "DewPointSensor",
    "ElectricEnergyConsumptionSensor",
    "HumiditySensor",
    "InstantPowerConsumptionSensor",
    "ScaleSensor",
    "SolarIrradianceSensor",
    "SunriseSensor",
    "SunsetSensor",
    "TemperatureSensor",
    "WindSensor",
]
