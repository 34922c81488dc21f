"""
Unit tests for Room and Dimensions.
"""

import math

import pytest

from smarthome.domain.device import Device
from smarthome.domain.room import Dimensions, Room


class TestDimensions:
    def test_valid(self):
        dimensions = Dimensions(2.5, 4, 5)
        assert dimensions.area == 20
        assert dimensions.volume == 50

    @pytest.mark.parametrize("values", [(0, 1, 1), (1, -1, 1), (1, 1, math.nan), (1, "2", 1), (True, 1, 1)])
    def test_invalid(self, values):
        with pytest.raises(ValueError, match="Invalid arguments passed to constructor."):
            Dimensions(*values)


class TestRoom:
    @pytest.mark.parametrize("name, floor", [("", "1"), ("Kitchen", " "), (None, "1")])
    def test_blank_name_or_floor(self, name, floor):
        with pytest.raises(ValueError):
            Room(name, floor, 2.5, 4, 5)

    def test_invalid_dimensions(self):
        with pytest.raises(ValueError):
            Room("Kitchen", "0", 2.5, 0, 5)

    def test_add_device(self):
        room = Room("Kitchen", "0", 2.5, 4, 5)
        assert room.add_device("Fridge", "F-1") is True
        assert [device.name for device in room.get_devices()] == ["Fridge"]

    def test_duplicate_device_ignoring_case(self):
        room = Room("Kitchen", "0", 2.5, 4, 5)
        room.add_device("Fridge", "F-1")
        assert room.add_device("FRIDGE", "F-2") is False
        assert len(room.get_devices()) == 1

    def test_malformed_device_propagates(self):
        room = Room("Kitchen", "0", 2.5, 4, 5)
        with pytest.raises(ValueError, match="Invalid arguments passed to constructor."):
            room.add_device("Fridge", "")

    def test_get_device_ignores_case(self):
        room = Room("Kitchen", "0", 2.5, 4, 5)
        room.add_device("Fridge", "F-1")
        assert room.get_device("fridge").name == "Fridge"
        assert room.get_device("Oven") is None

    def test_devices_are_a_copy(self):
        room = Room("Kitchen", "0", 2.5, 4, 5)
        room.add_device("Fridge", "F-1")
        room.get_devices().clear()
        assert len(room.get_devices()) == 1

    def test_custom_device_factory(self):
        built = []

        def factory(name, model):
            device = Device(name, model, log_limit=5)
            built.append(device)
            return device

        room = Room("Kitchen", "0", 2.5, 4, 5, device_factory=factory)
        room.add_device("Fridge", "F-1")
        assert room.get_devices() == built
