"""
Unit tests for the shipped sensor implementations.
"""

from datetime import date, time, timedelta, timezone

import pytest

from smarthome.domain.exceptions import NotFoundError
from smarthome.domain.sensors import SensorCatalogue
from smarthome.domain.sensors.implementations import (
    AveragePowerConsumptionSensor,
    BinarySwitch,
    DewPointSensor,
    ElectricEnergyConsumptionSensor,
    HumiditySensor,
    InstantPowerConsumptionSensor,
    ScaleSensor,
    SolarIrradianceSensor,
    SunriseSensor,
    SunsetSensor,
    TemperatureSensor,
    WindSensor,
)
from smarthome.enums import SensorFunctionality, WindDirection

LISBON = (38.72, -9.14)
SUMMER_SOLSTICE = date(2023, 6, 21)


def _watts(value_factory, text):
    value = value_factory.create_w_value()
    assert value.set_value(text)
    return value


def _watt_hours(value_factory, text):
    value = value_factory.create_wh_value()
    assert value.set_value(text)
    return value


class TestConstructorContract:
    @pytest.mark.parametrize(
        "sensor_class",
        [TemperatureSensor, WindSensor, AveragePowerConsumptionSensor, SunriseSensor, BinarySwitch],
    )
    def test_catalogue_required(self, sensor_class, value_factory):
        with pytest.raises(ValueError, match="Catalogue cannot be null"):
            sensor_class(None, "s1", value_factory)

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_name_required(self, name, sensor_catalogue, value_factory):
        with pytest.raises(ValueError, match="Name cannot be null or empty"):
            HumiditySensor(sensor_catalogue, name, value_factory)

    def test_value_factory_required(self, sensor_catalogue):
        with pytest.raises(ValueError, match="ValueFactory cannot be null"):
            ScaleSensor(sensor_catalogue, "scale", None)

    def test_functionality_must_be_enabled(self, value_factory):
        catalogue = SensorCatalogue({"models": {}, "functionalities": {"Humidity": True}})
        with pytest.raises(NotFoundError):
            TemperatureSensor(catalogue, "t", value_factory)

    @pytest.mark.parametrize(
        "sensor_class, functionality",
        [
            (TemperatureSensor, SensorFunctionality.TEMPERATURE),
            (HumiditySensor, SensorFunctionality.HUMIDITY),
            (BinarySwitch, SensorFunctionality.BINARY_SWITCH),
            (ScaleSensor, SensorFunctionality.SCALE),
            (WindSensor, SensorFunctionality.WIND),
            (DewPointSensor, SensorFunctionality.DEW_POINT),
            (InstantPowerConsumptionSensor, SensorFunctionality.POWER_CONSUMPTION),
            (AveragePowerConsumptionSensor, SensorFunctionality.POWER_CONSUMPTION),
            (SolarIrradianceSensor, SensorFunctionality.SOLAR_IRRADIANCE),
            (ElectricEnergyConsumptionSensor, SensorFunctionality.ENERGY_CONSUMPTION),
            (SunriseSensor, SensorFunctionality.SUNRISE),
            (SunsetSensor, SensorFunctionality.SUNSET),
        ],
    )
    def test_functionality(self, sensor_class, functionality, sensor_catalogue, value_factory):
        sensor = sensor_class(sensor_catalogue, "s1", value_factory)
        assert sensor.functionality is functionality
        assert sensor.name == "s1"


class TestValueSensors:
    def test_temperature_reading(self, sensor_catalogue, value_factory):
        sensor = TemperatureSensor(sensor_catalogue, "t", value_factory)
        assert sensor.get_reading() == "0.0 ºC"
        assert sensor.set_reading("21.5") is True
        assert sensor.get_reading() == "21.5 ºC"
        assert sensor.measurement_unit == "ºC"

    def test_invalid_reading_is_ignored(self, sensor_catalogue, value_factory):
        sensor = HumiditySensor(sensor_catalogue, "h", value_factory)
        sensor.set_reading("45")
        assert sensor.set_reading("145") is False
        assert sensor.get_reading() == "45 %"

    def test_scale_and_power_units(self, sensor_catalogue, value_factory):
        assert ScaleSensor(sensor_catalogue, "s", value_factory).measurement_unit == "%"
        assert InstantPowerConsumptionSensor(sensor_catalogue, "p", value_factory).measurement_unit == "W"
        assert SolarIrradianceSensor(sensor_catalogue, "i", value_factory).measurement_unit == "W/m2"


class TestWindSensor:
    def test_no_reading_until_complete(self, sensor_catalogue, value_factory):
        sensor = WindSensor(sensor_catalogue, "w", value_factory)
        assert sensor.get_reading() is None
        assert sensor.measurement_unit == "km/h"

    def test_speed_and_direction(self, sensor_catalogue, value_factory):
        sensor = WindSensor(sensor_catalogue, "w", value_factory)
        assert sensor.set_reading("10", WindDirection.N) is True
        assert sensor.get_reading() == "10.0 km/h pointing to: N"

    def test_invalid_direction_changes_nothing(self, sensor_catalogue, value_factory):
        sensor = WindSensor(sensor_catalogue, "w", value_factory)
        sensor.set_reading("10", "E")
        assert sensor.set_reading("25", "Q") is False
        assert sensor.get_reading() == "10.0 km/h pointing to: E"

    def test_negative_speed(self, sensor_catalogue, value_factory):
        sensor = WindSensor(sensor_catalogue, "w", value_factory)
        assert sensor.set_reading("-3", "N") is False


class TestDewPointSensor:
    def test_saturated_air(self, sensor_catalogue, value_factory):
        sensor = DewPointSensor(sensor_catalogue, "dp", value_factory)
        dew_point = sensor.calculate_dew_point(25, 100)
        assert dew_point == pytest.approx(25, abs=0.5)
        assert sensor.get_reading() == f"{dew_point} ºC"

    def test_dry_air_keeps_previous_reading(self, sensor_catalogue, value_factory):
        sensor = DewPointSensor(sensor_catalogue, "dp", value_factory)
        sensor.calculate_dew_point(20, 50)
        before = sensor.get_reading()
        assert sensor.calculate_dew_point(20, 0) is None
        assert sensor.get_reading() == before

    def test_temperature_without_dew_point(self, sensor_catalogue, value_factory):
        sensor = DewPointSensor(sensor_catalogue, "dp", value_factory)
        sensor.calculate_dew_point(20, 50)
        before = sensor.get_reading()
        assert sensor.calculate_dew_point(-237.3, 50) is None
        assert sensor.get_reading() == before


class TestAveragePowerConsumptionSensor:
    def test_average_inside_window(self, sensor_catalogue, value_factory):
        sensor = AveragePowerConsumptionSensor(sensor_catalogue, "avg", value_factory)
        assert sensor.add_reading(_watts(value_factory, "100"), time(10, 0)) is True
        assert sensor.add_reading(_watts(value_factory, "200"), time(11, 0)) is True
        assert sensor.get_reading(time(9, 0), time(12, 0)) == "150.0 W"

    def test_window_bounds_are_exclusive(self, sensor_catalogue, value_factory):
        sensor = AveragePowerConsumptionSensor(sensor_catalogue, "avg", value_factory)
        sensor.add_reading(_watts(value_factory, "100"), time(10, 0))
        assert sensor.get_reading(time(10, 0), time(12, 0)) == "No readings to show"

    def test_zero_reading_rejected(self, sensor_catalogue, value_factory):
        sensor = AveragePowerConsumptionSensor(sensor_catalogue, "avg", value_factory)
        assert sensor.add_reading(value_factory.create_w_value(), time(10, 0)) is False
        assert sensor.add_reading(None, time(10, 0)) is False
        assert sensor.get_reading() == "No readings to show"

    def test_without_window_averages_everything(self, sensor_catalogue, value_factory):
        sensor = AveragePowerConsumptionSensor(sensor_catalogue, "avg", value_factory)
        sensor.add_reading(_watts(value_factory, "50"), time(1, 0))
        sensor.add_reading(_watts(value_factory, "150"), time(23, 0))
        assert sensor.get_reading() == "100.0 W"


class TestElectricEnergyConsumptionSensor:
    def test_consumption_between_two_readings(self, sensor_catalogue, value_factory):
        sensor = ElectricEnergyConsumptionSensor(sensor_catalogue, "meter", value_factory)
        sensor.add_reading(_watt_hours(value_factory, "100"), time(8, 0))
        sensor.add_reading(_watt_hours(value_factory, "250"), time(9, 0))
        assert sensor.get_reading(time(8, 0), time(9, 0)) == "150.0 Wh"

    def test_requires_exactly_two_readings(self, sensor_catalogue, value_factory):
        sensor = ElectricEnergyConsumptionSensor(sensor_catalogue, "meter", value_factory)
        sensor.add_reading(_watt_hours(value_factory, "100"), time(8, 0))
        assert sensor.get_reading(time(8, 0), time(9, 0)) == "There should be exactly two readings"

    def test_invalid_period(self, sensor_catalogue, value_factory):
        sensor = ElectricEnergyConsumptionSensor(sensor_catalogue, "meter", value_factory)
        sensor.add_reading(_watt_hours(value_factory, "100"), time(8, 0))
        sensor.add_reading(_watt_hours(value_factory, "250"), time(9, 0))
        assert sensor.get_reading(time(9, 0), time(8, 0)) == "Invalid time period"
        assert sensor.get_reading(None, time(8, 0)) == "Invalid time period"

    def test_zero_reading_rejected(self, sensor_catalogue, value_factory):
        sensor = ElectricEnergyConsumptionSensor(sensor_catalogue, "meter", value_factory)
        assert sensor.add_reading(value_factory.create_wh_value(), time(8, 0)) is False
        assert sensor.measurement_unit == "Wh"


class TestSunSensors:
    def test_no_reading_before_calculation(self, sensor_catalogue, value_factory):
        assert SunriseSensor(sensor_catalogue, "rise", value_factory).get_reading() is None

    def test_sunrise_in_utc(self, sensor_catalogue, value_factory):
        sensor = SunriseSensor(sensor_catalogue, "rise", value_factory)
        sunrise = sensor.calculate_sunrise(SUMMER_SOLSTICE, *LISBON)
        assert time(5, 0) <= sunrise <= time(5, 25)
        assert sensor.get_reading() == sunrise.isoformat()

    def test_sunrise_in_local_time(self, sensor_catalogue, value_factory):
        sensor = SunriseSensor(sensor_catalogue, "rise", value_factory)
        sunrise = sensor.calculate_sunrise(SUMMER_SOLSTICE, *LISBON, tz=timezone(timedelta(hours=1)))
        assert time(6, 0) <= sunrise <= time(6, 25)

    def test_sunset(self, sensor_catalogue, value_factory):
        sensor = SunsetSensor(sensor_catalogue, "set", value_factory)
        sunset = sensor.calculate_sunset(SUMMER_SOLSTICE, *LISBON)
        assert time(19, 50) <= sunset <= time(20, 15)

    def test_midnight_sun_leaves_reading_unchanged(self, sensor_catalogue, value_factory):
        sensor = SunsetSensor(sensor_catalogue, "set", value_factory)
        sensor.calculate_sunset(SUMMER_SOLSTICE, *LISBON)
        before = sensor.get_reading()
        assert sensor.calculate_sunset(SUMMER_SOLSTICE, 80.0, 0.0) is None
        assert sensor.get_reading() == before

    def test_invalid_coordinates(self, sensor_catalogue, value_factory):
        sensor = SunriseSensor(sensor_catalogue, "rise", value_factory)
        with pytest.raises(ValueError, match="Latitude must be between -90 and 90"):
            sensor.calculate_sunrise(SUMMER_SOLSTICE, 95.0, 0.0)


class TestBinarySwitch:
    def test_unconfigured(self, sensor_catalogue, value_factory):
        sensor = BinarySwitch(sensor_catalogue, "bs", value_factory)
        assert sensor.read_status() is None
        assert sensor.get_reading() is None

    def test_follows_the_switch(self, sensor_catalogue, actuator_catalogue, value_factory):
        switch = actuator_catalogue.get_actuator("SwitchOnOffActuator", None, "sw", value_factory)
        sensor = BinarySwitch(sensor_catalogue, "bs", value_factory)
        assert sensor.configure_sensor(switch) is True
        assert sensor.read_status() is False
        switch.switch_actuator()
        assert sensor.read_status() is True
        assert sensor.get_reading() == "true"

    def test_rejects_other_objects(self, sensor_catalogue, value_factory):
        sensor = BinarySwitch(sensor_catalogue, "bs", value_factory)
        assert sensor.configure_sensor(None) is False
        assert sensor.configure_sensor("switch") is False
