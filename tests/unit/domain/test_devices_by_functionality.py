"""
Unit tests for the DevicesByFunctionality report.
"""

import pytest

from smarthome.constants import WITHOUT_FUNCTIONALITY
from smarthome.domain.house import DeviceRoom, DevicesByFunctionality, House


@pytest.fixture()
def furnished_house(sensor_catalogue, value_factory):
    """r1: d1 (temperature), d2 (humidity); r2: d3 (humidity); r3: d4 (no sensor)."""
    house = House()
    for room in ("r1", "r2", "r3"):
        house.add_room(room, "0", 2.5, 4, 5)
    layout = {
        "r1": [("d1", "TemperatureSensor"), ("d2", "HumiditySensor")],
        "r2": [("d3", "HumiditySensor")],
        "r3": [("d4", None)],
    }
    for room_name, devices in layout.items():
        room = house.get_room(room_name)
        for device_name, sensor_model in devices:
            room.add_device(device_name, "generic")
            if sensor_model:
                room.get_device(device_name).add_sensor(sensor_model, f"{device_name}-s", sensor_catalogue, value_factory)
    return house


class TestGroupedResult:
    def test_reference_scenario(self, furnished_house):
        result = DevicesByFunctionality(furnished_house.get_rooms()).get_grouped_result()
        assert result == {
            "Temperature": [DeviceRoom("d1", "r1")],
            "Humidity": [DeviceRoom("d2", "r1"), DeviceRoom("d3", "r2")],
            WITHOUT_FUNCTIONALITY: [DeviceRoom("d4", "r3")],
        }

    def test_key_order_follows_enumeration(self, furnished_house):
        result = furnished_house.get_devices_by_room_and_functionality()
        assert list(result) == ["Temperature", "Humidity", "Without functionality"]

    def test_fresh_result_on_every_call(self, furnished_house):
        report = DevicesByFunctionality(furnished_house.get_rooms())
        first = report.get_grouped_result()
        second = report.get_grouped_result()
        assert first == second
        assert first is not second

    def test_no_rooms(self):
        assert DevicesByFunctionality([]).get_grouped_result() is None
        assert House().get_devices_by_room_and_functionality() is None

    def test_any_empty_room_voids_the_report(self, furnished_house):
        furnished_house.add_room("empty", "1", 2.5, 4, 5)
        assert furnished_house.get_devices_by_room_and_functionality() is None

    def test_device_listed_once_per_matching_sensor(self, sensor_catalogue, value_factory):
        house = House()
        house.add_room("lab", "0", 3, 3, 3)
        room = house.get_room("lab")
        room.add_device("station", "WS-1")
        station = room.get_device("station")
        station.add_sensor("TemperatureSensor", "indoor", sensor_catalogue, value_factory)
        station.add_sensor("TemperatureSensor", "outdoor", sensor_catalogue, value_factory)
        station.add_sensor("InstantPowerConsumptionSensor", "power", sensor_catalogue, value_factory)
        result = house.get_devices_by_room_and_functionality()
        assert result == {
            "Temperature": [DeviceRoom("station", "lab"), DeviceRoom("station", "lab")],
            "Power_Consumption": [DeviceRoom("station", "lab")],
        }

    def test_explicit_report_is_used(self, furnished_house):
        only_r2 = DevicesByFunctionality([furnished_house.get_room("r2")])
        result = furnished_house.get_devices_by_room_and_functionality(only_r2)
        assert result == {"Humidity": [DeviceRoom("d3", "r2")]}

    def test_actuators_do_not_count_as_functionality(self, actuator_catalogue, value_factory):
        house = House()
        house.add_room("hall", "0", 3, 3, 3)
        room = house.get_room("hall")
        room.add_device("blind", "BR-1")
        room.get_device("blind").add_actuator("BlindRollerActuator", "motor", actuator_catalogue, value_factory)
        assert house.get_devices_by_room_and_functionality() == {WITHOUT_FUNCTIONALITY: [DeviceRoom("blind", "hall")]}
