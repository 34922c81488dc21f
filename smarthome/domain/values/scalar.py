"""
Scalar Values
=============
Single-number readings: temperature, percentage, power, energy and
irradiance.
"""

from __future__ import annotations

from smarthome.domain.values.base import Value, parse_decimal, parse_int

ABSOLUTE_ZERO_C = -273.15


class _DecimalValue(Value):
    """Decimal reading bounded below by ``_minimum`` (inclusive)."""

    _unit: str = ""
    _minimum: float | None = None

    def __init__(self) -> None:
        self._current = 0.0

    @property
    def measurement_unit(self) -> str:
        return self._unit

    @property
    def numeric(self) -> float:
        return self._current

    def set_value(self, measured: str) -> bool:
        value = parse_decimal(measured)
        if value is None:
            return False
        if self._minimum is not None and value < self._minimum:
            return False
        self._current = value
        return True

    def __str__(self) -> str:
        return f"{self._current} {self._unit}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._current!r})"


class CelsiusValue(_DecimalValue):
    """Temperature in degrees Celsius; nothing below absolute zero."""

    _unit = "ºC"
    _minimum = ABSOLUTE_ZERO_C


class WValue(_DecimalValue):
    """Instant power in watts."""

    _unit = "W"
    _minimum = 0.0


class WhValue(_DecimalValue):
    """Energy in watt-hours."""

    _unit = "Wh"
    _minimum = 0.0


class Wm2Value(_DecimalValue):
    """Solar irradiance in W/m2."""

    _unit = "W/m2"


class PercentageValue(Value):
    """Whole percentage between 0 and 100 inclusive."""

    def __init__(self) -> None:
        self._current = 0

    @property
    def measurement_unit(self) -> str:
        return "%"

    @property
    def numeric(self) -> int:
        return self._current

    def set_value(self, measured: str) -> bool:
        value = parse_int(measured)
        if value is None or not 0 <= value <= 100:
            return False
        self._current = value
        return True

    def __str__(self) -> str:
        return f"{self._current} %"

    def __repr__(self) -> str:
        return f"PercentageValue({self._current!r})"
