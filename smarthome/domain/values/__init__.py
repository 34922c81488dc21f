"""
Measurement Values
==================
Unit-tagged readings and the factory that creates them.
"""

from smarthome.domain.values.base import Value, parse_decimal, parse_int
from smarthome.domain.values.factory import DefaultValueFactory, ValueFactory
from smarthome.domain.values.range import RangeDecimalValue, RangeIntValue
from smarthome.domain.values.scalar import CelsiusValue, PercentageValue, WhValue, Wm2Value, WValue
from smarthome.domain.values.wind import KmhCardinalValue

__all__ = [
    "CelsiusValue",
    "DefaultValueFactory",
    "KmhCardinalValue",
    "PercentageValue",
    "RangeDecimalValue",
    "RangeIntValue",
    "Value",
    "ValueFactory",
    "WValue",
    "WhValue",
    "Wm2Value",
    "parse_decimal",
    "parse_int",
]
