"""
Measurement Value
=================
Base contract for unit-tagged readings and the strict parsers they share.

A value is assigned from its textual form with :meth:`Value.set_value`.
Anything that does not parse, or falls outside the accepted range, leaves
the previous value in place and reports ``False``.
"""

from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod

_INT_PATTERN = re.compile(r"[+-]?\d+")
_DECIMAL_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def parse_int(measured: object) -> int | None:
    """Parse a plain base-10 integer, or return None."""
    if not isinstance(measured, str) or not _INT_PATTERN.fullmatch(measured):
        return None
    return int(measured)


def parse_decimal(measured: object) -> float | None:
    """Parse a finite decimal number, or return None."""
    if not isinstance(measured, str) or not _DECIMAL_PATTERN.fullmatch(measured):
        return None
    value = float(measured)
    if not math.isfinite(value):
        return None
    return value


class Value(ABC):
    """A scalar or composite reading with a fixed measurement unit."""

    @property
    @abstractmethod
    def measurement_unit(self) -> str:
        """Unit label rendered next to the value."""

    @abstractmethod
    def set_value(self, measured: str) -> bool:
        """
        Replace the current value with the parsed ``measured`` text.

        Args:
            measured: Textual representation of the new value

        Returns:
            True when the value was accepted, False otherwise
        """

    @abstractmethod
    def __str__(self) -> str: ...
