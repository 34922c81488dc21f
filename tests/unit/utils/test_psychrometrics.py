"""
Unit tests for smarthome.utils.psychrometrics.
"""

import pytest

from smarthome.utils.psychrometrics import MAGNUS_B, calculate_dew_point_c


class TestDewPoint:
    def test_dew_point_100_percent_humidity_equals_temp(self):
        assert calculate_dew_point_c(25, 100) == pytest.approx(25, abs=0.5)

    def test_dew_point_lower_than_temp(self):
        assert calculate_dew_point_c(25, 60) < 25

    def test_typical_conditions(self):
        assert 9 < calculate_dew_point_c(20, 50) < 10

    @pytest.mark.parametrize("temperature, humidity", [(None, 50), (20, None), (20, 0), (20, -5)])
    def test_missing_or_dry(self, temperature, humidity):
        assert calculate_dew_point_c(temperature, humidity) is None

    def test_humidity_clamped(self):
        assert calculate_dew_point_c(20, 120) == calculate_dew_point_c(20, 100)

    def test_temperature_at_formula_pole(self):
        assert calculate_dew_point_c(-MAGNUS_B, 50) is None
