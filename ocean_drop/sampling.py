"""
Uniform random sampling of points on the sphere.

Latitude is drawn through the inverse of the area CDF (asin of a uniform
value in [-1, 1]) so every patch of the surface is equally likely. Drawing
latitude uniformly in degrees would crowd samples toward the poles.
"""

import numpy as np
from typing import Optional, Tuple


def point_from_uniform(u: float, v: float) -> Tuple[float, float]:
    """
    Map two uniform values in [0, 1) to a point on the sphere.

    Args:
        u: Uniform value controlling latitude
        v: Uniform value controlling longitude

    Returns:
        Tuple of (lon, lat) in degrees, lon in [-180, 180), lat in [-90, 90]
    """
    lat = np.degrees(np.arcsin(2.0 * u - 1.0))
    lon = np.degrees(2.0 * np.pi * v - np.pi)
    return float(lon), float(lat)


def sample_point(rng: np.random.Generator) -> Tuple[float, float]:
    """Draw one uniformly distributed (lon, lat) pair."""
    u, v = rng.random(2)
    return point_from_uniform(u, v)


def sample_points(
    n: int,
    rng: Optional[np.random.Generator] = None
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Draw ``n`` uniformly distributed points.

    Returns:
        Tuple of (lons, lats) arrays in degrees
    """
    if rng is None:
        rng = np.random.default_rng()
    u = rng.random(n)
    v = rng.random(n)
    lats = np.degrees(np.arcsin(2.0 * u - 1.0))
    lons = np.degrees(2.0 * np.pi * v - np.pi)
    return lons, lats
