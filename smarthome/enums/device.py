"""
Device-related Enumerations
============================

This module contains all enums related to devices (sensors and actuators).

Member values double as the names used in catalogue configuration files and
as the keys of the functionality report, so they keep their historical
spelling (``Binary_Switch``, ``Power_Consumption``...).
"""

from enum import Enum


class SensorFunctionality(str, Enum):
    """What a sensor measures. Declaration order is the report order."""

    TEMPERATURE = "Temperature"
    HUMIDITY = "Humidity"
    BINARY_SWITCH = "Binary_Switch"
    SCALE = "Scale"
    WIND = "Wind"
    DEW_POINT = "DewPoint"
    POWER_CONSUMPTION = "Power_Consumption"
    SOLAR_IRRADIANCE = "SolarIrradiance"
    ENERGY_CONSUMPTION = "Energy_Consumption"
    SUNRISE = "Sunrise"
    SUNSET = "Sunset"

    def __str__(self) -> str:
        return self.value


class ActuatorFunctionality(str, Enum):
    """What an actuator controls."""

    ON_OFF = "On_Off"
    RANGE = "Range"
    BLIND_ROLLER = "BlindRoller"

    def __str__(self) -> str:
        return self.value


class WindDirection(str, Enum):
    """Eight-point compass rose."""

    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"

    def __str__(self) -> str:
        return self.value


class ComponentKind(str, Enum):
    """Component families handled by the catalogue."""

    SENSOR = "sensor"
    ACTUATOR = "actuator"

    def __str__(self) -> str:
        return self.value
