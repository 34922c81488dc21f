"""
Psychrometric Calculations
==========================

Dew point temperature from temperature and relative humidity, using the
Magnus-Tetens approximation.
"""

from __future__ import annotations

import math

MAGNUS_A = 17.27
MAGNUS_B = 237.3


def calculate_dew_point_c(temperature_c: float | None, relative_humidity: float | None) -> float | None:
    """
    Calculate dew point temperature in Celsius.

    Formula:
        gamma = (a * T) / (b + T) + ln(RH/100)
        Td = (b * gamma) / (a - gamma)

    Args:
        temperature_c: Temperature in Celsius
        relative_humidity: Relative humidity percentage (0-100)

    Returns:
        Dew point in Celsius rounded to 2 decimals, or None if an input is
        missing, the humidity is not positive, or the formula has no finite
        result for the temperature
    """
    if temperature_c is None or relative_humidity is None:
        return None

    temp_c = float(temperature_c)
    humidity = float(relative_humidity)
    if math.isnan(temp_c) or math.isnan(humidity) or humidity <= 0:
        return None
    humidity = min(humidity, 100.0)

    if MAGNUS_B + temp_c == 0:
        return None
    gamma = (MAGNUS_A * temp_c) / (MAGNUS_B + temp_c) + math.log(humidity / 100.0)
    if MAGNUS_A - gamma == 0:
        return None
    dew_point = (MAGNUS_B * gamma) / (MAGNUS_A - gamma)

    if not math.isfinite(dew_point):
        return None
    return round(dew_point, 2)
