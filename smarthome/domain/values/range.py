"""
Range Values
============
Actuator settings bounded by an inclusive ``[lower, upper]`` interval.
Rendered without a unit.
"""

from __future__ import annotations

import math

from smarthome.domain.values.base import Value, parse_decimal, parse_int


class RangeIntValue(Value):
    """Whole-number setting within inclusive limits."""

    def __init__(self, lower_limit: int = -1, upper_limit: int = 1) -> None:
        if lower_limit > upper_limit:
            raise ValueError("Lower limit cannot be greater than upper limit")
        self._lower = lower_limit
        self._upper = upper_limit
        self._current = 0

    @property
    def measurement_unit(self) -> str:
        return "Integer"

    @property
    def lower_limit(self) -> int:
        return self._lower

    @property
    def upper_limit(self) -> int:
        return self._upper

    @property
    def numeric(self) -> int:
        return self._current

    def set_value(self, measured: str) -> bool:
        value = parse_int(measured)
        if value is None or not self._lower <= value <= self._upper:
            return False
        self._current = value
        return True

    def __str__(self) -> str:
        return str(self._current)


class RangeDecimalValue(Value):
    """Decimal setting within inclusive limits."""

    def __init__(self, lower_limit: float = -1.0, upper_limit: float = 1.0) -> None:
        if math.isnan(lower_limit) or math.isnan(upper_limit):
            raise ValueError("Limits must be numbers")
        if lower_limit > upper_limit:
            raise ValueError("Lower limit cannot be greater than upper limit")
        self._lower = float(lower_limit)
        self._upper = float(upper_limit)
        self._current = 0.0

    @property
    def measurement_unit(self) -> str:
        return "Double precision"

    @property
    def lower_limit(self) -> float:
        return self._lower

    @property
    def upper_limit(self) -> float:
        return self._upper

    @property
    def numeric(self) -> float:
        return self._current

    def set_value(self, measured: str) -> bool:
        value = parse_decimal(measured)
        if value is None or not self._lower <= value <= self._upper:
            return False
        self._current = value
        return True

    def __str__(self) -> str:
        return str(self._current)
