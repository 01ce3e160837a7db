"""
Sea-surface temperature from latitude.

T = -2 + 32 cos(lat): about 30 °C at the equator and -2 °C at the poles.
Longitude, season and currents are ignored.
"""

from typing import Union

import numpy as np

from .config import COLD_WATER_C, WARM_WATER_C

Number = Union[float, np.ndarray]

POLAR_TEMP_C = -2.0
EQUATOR_RISE_C = 32.0


def sea_surface_temperature(lat: Number) -> Number:
    """
    Surface temperature in °C at latitude ``lat`` (degrees).

    Accepts a scalar or a numpy array.
    """
    temp = POLAR_TEMP_C + EQUATOR_RISE_C * np.cos(np.radians(lat))
    return float(temp) if np.ndim(temp) == 0 else temp


def is_cold(temp: Number):
    """True (elementwise for arrays) below COLD_WATER_C."""
    return temp < COLD_WATER_C


def is_warm(temp: Number):
    """True (elementwise for arrays) above WARM_WATER_C."""
    return temp > WARM_WATER_C
