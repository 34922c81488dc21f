"""
Wind Value
==========
Wind speed in km/h paired with a compass direction.
"""

from __future__ import annotations

from smarthome.domain.values.base import Value, parse_decimal
from smarthome.enums import WindDirection


class KmhCardinalValue(Value):
    """Speed and direction; renders empty until both have been set."""

    def __init__(self) -> None:
        self._speed: float | None = None
        self._direction: WindDirection | None = None

    @property
    def measurement_unit(self) -> str:
        return "km/h"

    @property
    def speed(self) -> float | None:
        return self._speed

    @property
    def direction(self) -> WindDirection | None:
        return self._direction

    @property
    def is_complete(self) -> bool:
        return self._speed is not None and self._direction is not None

    def set_value(self, measured: str) -> bool:
        value = parse_decimal(measured)
        if value is None or value < 0:
            return False
        self._speed = value
        return True

    def set_direction(self, direction: WindDirection | str | None) -> bool:
        if direction is None:
            return False
        try:
            self._direction = WindDirection(direction)
        except ValueError:
            return False
        return True

    def __str__(self) -> str:
        if not self.is_complete:
            return ""
        return f"{self._speed} km/h pointing to: {self._direction}"
