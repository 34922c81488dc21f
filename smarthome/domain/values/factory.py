"""
Value Factory
=============
Capability object handed to components so they can create their readings
lazily. Components never instantiate value classes directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from smarthome.domain.values.range import RangeDecimalValue, RangeIntValue
from smarthome.domain.values.scalar import CelsiusValue, PercentageValue, WhValue, Wm2Value, WValue
from smarthome.domain.values.wind import KmhCardinalValue


class ValueFactory(ABC):
    """Creates each measurement value variant."""

    @abstractmethod
    def create_celsius_temperature(self) -> CelsiusValue: ...

    @abstractmethod
    def create_percentage(self) -> PercentageValue: ...

    @abstractmethod
    def create_w_value(self) -> WValue: ...

    @abstractmethod
    def create_wh_value(self) -> WhValue: ...

    @abstractmethod
    def create_wm2_value(self) -> Wm2Value: ...

    @abstractmethod
    def create_kmh_cardinal_value(self) -> KmhCardinalValue: ...

    @abstractmethod
    def create_range_int(self, lower_limit: int, upper_limit: int) -> RangeIntValue: ...

    @abstractmethod
    def create_range_decimal(self, lower_limit: float, upper_limit: float) -> RangeDecimalValue: ...


class DefaultValueFactory(ValueFactory):
    """Returns a fresh value instance on every call."""

    def create_celsius_temperature(self) -> CelsiusValue:
        return CelsiusValue()

    def create_percentage(self) -> PercentageValue:
        return PercentageValue()

    def create_w_value(self) -> WValue:
        return WValue()

    def create_wh_value(self) -> WhValue:
        return WhValue()

    def create_wm2_value(self) -> Wm2Value:
        return Wm2Value()

    def create_kmh_cardinal_value(self) -> KmhCardinalValue:
        return KmhCardinalValue()

    def create_range_int(self, lower_limit: int, upper_limit: int) -> RangeIntValue:
        return RangeIntValue(lower_limit, upper_limit)

    def create_range_decimal(self, lower_limit: float, upper_limit: float) -> RangeDecimalValue:
        return RangeDecimalValue(lower_limit, upper_limit)
