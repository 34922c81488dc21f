"""
Room Dimensions
===============
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from smarthome.constants import INVALID_CONSTRUCTOR_ARGUMENTS


@dataclass(frozen=True)
class Dimensions:
    """Height, width and length of a room; each strictly positive."""

    height: float
    width: float
    length: float

    def __post_init__(self) -> None:
        for value in (self.height, self.width, self.length):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(INVALID_CONSTRUCTOR_ARGUMENTS)
            if math.isnan(value) or value <= 0:
                raise ValueError(INVALID_CONSTRUCTOR_ARGUMENTS)

    @property
    def area(self) -> float:
        return self.width * self.length

    @property
    def volume(self) -> float:
        return self.height * self.width * self.length
