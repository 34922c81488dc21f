"""
Range Actuators
===============

Actuators whose setting must stay within configurable limits. Both start
with limits ``[-1, 1]`` until :meth:`configure_actuator` is called.
Reconfiguring replaces the current setting with a fresh one.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal, InvalidOperation

from smarthome.domain.actuators.actuator import Actuator
from smarthome.domain.values import RangeDecimalValue, RangeIntValue
from smarthome.enums import ActuatorFunctionality

logger = logging.getLogger(__name__)


class RangeActuatorInt(Actuator):
    _functionality = ActuatorFunctionality.RANGE

    def __init__(self, catalogue, name, value_factory) -> None:
        super().__init__(catalogue, name, value_factory)
        self._measurement: RangeIntValue = value_factory.create_range_int(-1, 1)

    def configure_actuator(self, lower_limit: int, upper_limit: int, value_factory=None) -> bool:
        """
        Set new limits.

        Args:
            lower_limit: Smallest accepted setting
            upper_limit: Largest accepted setting
            value_factory: Factory for the new setting; the one given at
                construction when omitted

        Returns:
            False when the limits are not integers or are inverted
        """
        if isinstance(lower_limit, bool) or isinstance(upper_limit, bool):
            return False
        if not isinstance(lower_limit, int) or not isinstance(upper_limit, int) or lower_limit > upper_limit:
            return False
        factory = value_factory or self._value_factory
        self._measurement = factory.create_range_int(lower_limit, upper_limit)
        logger.debug(f"Actuator '{self.name}' limits set to [{lower_limit}, {upper_limit}]")
        return True

    @property
    def lower_limit(self) -> int:
        return self._measurement.lower_limit

    @property
    def upper_limit(self) -> int:
        return self._measurement.upper_limit

    @property
    def measurement_unit(self) -> str:
        return self._measurement.measurement_unit

    def set_measurement(self, measured: str) -> bool:
        return self._measurement.set_value(measured)

    def get_reading(self) -> str:
        return str(self._measurement)


class RangeActuatorDecimal(Actuator):
    """
    Decimal range actuator.

    ``precision`` is the maximum number of decimal places a setting may
    carry; None accepts any.
    """

    _functionality = ActuatorFunctionality.RANGE

    def __init__(self, catalogue, name, value_factory) -> None:
        super().__init__(catalogue, name, value_factory)
        self._measurement: RangeDecimalValue = value_factory.create_range_decimal(-1.0, 1.0)
        self._precision: int | None = None

    def configure_actuator(
        self,
        lower_limit: float,
        upper_limit: float,
        precision: int | None = None,
        value_factory=None,
    ) -> bool:
        try:
            lower, upper = float(lower_limit), float(upper_limit)
        except (TypeError, ValueError):
            return False
        if math.isnan(lower) or math.isnan(upper) or lower > upper:
            return False
        if precision is not None and (isinstance(precision, bool) or not isinstance(precision, int) or precision < 0):
            return False
        factory = value_factory or self._value_factory
        self._measurement = factory.create_range_decimal(lower, upper)
        self._precision = precision
        logger.debug(f"Actuator '{self.name}' limits set to [{lower}, {upper}], precision {precision}")
        return True

    @property
    def lower_limit(self) -> float:
        return self._measurement.lower_limit

    @property
    def upper_limit(self) -> float:
        return self._measurement.upper_limit

    @property
    def precision(self) -> int | None:
        return self._precision

    @property
    def measurement_unit(self) -> str:
        return self._measurement.measurement_unit

    def set_measurement(self, measured: str) -> bool:
        if self._precision is not None and not self._within_precision(measured):
            return False
        return self._measurement.set_value(measured)

    def _within_precision(self, measured: str) -> bool:
        try:
            exponent = Decimal(measured).normalize().as_tuple().exponent
        except (InvalidOperation, TypeError):
            return False
        if not isinstance(exponent, int):
            return False
        return max(0, -exponent) <= self._precision

    def get_reading(self) -> str:
        return str(self._measurement)
