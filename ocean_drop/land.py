"""
Land classification by ray casting against polygon rings.
"""

import numpy as np

from .config import POLAR_CAP_LAT
from .geometry import LandGeometry


def _edge_crossings(
    lon: float,
    lat: float,
    start: np.ndarray,
    end: np.ndarray
) -> np.ndarray:
    """
    Flag the edges crossed by a ray cast from (lon, lat) toward +lon.

    An edge counts when the query latitude lies between its endpoint
    latitudes (half-open, so a shared vertex is counted once) and the
    edge's longitude at that latitude is east of the query point.
    """
    xi, yi = start[:, 0], start[:, 1]
    xj, yj = end[:, 0], end[:, 1]

    straddles = (yi > lat) != (yj > lat)
    # Horizontal edges never straddle; give them a dummy denominator
    dy = np.where(straddles, yj - yi, 1.0)
    x_cross = (xj - xi) * (lat - yi) / dy + xi
    return straddles & (lon < x_cross)


def point_in_ring(lon: float, lat: float, ring) -> bool:
    """
    Ray-casting point-in-polygon test for a single ring.

    Args:
        lon: Query longitude (degrees)
        lat: Query latitude (degrees)
        ring: Sequence of (lon, lat) vertices, implicitly closed

    Returns:
        True if the ray crosses the ring an odd number of times
    """
    ring = np.asarray(ring, dtype=np.float64)
    if len(ring) == 0:
        return False
    crossings = _edge_crossings(lon, lat, ring, np.roll(ring, -1, axis=0))
    return bool(np.count_nonzero(crossings) % 2)


def is_land(lon: float, lat: float, geometry: LandGeometry) -> bool:
    """
    Decide whether a point is on land.

    Points south of POLAR_CAP_LAT are land regardless of the geometry.
    Otherwise the point is land if it lies inside any ring; rings are
    tested independently, with no hole semantics.

    Args:
        lon: Longitude (degrees)
        lat: Latitude (degrees)
        geometry: Land polygon rings

    Returns:
        True for land, False for ocean
    """
    if lat < POLAR_CAP_LAT:
        return True
    if geometry.is_empty():
        return False

    start, end, ring_ids = geometry.edges
    crossings = _edge_crossings(lon, lat, start, end)
    if not crossings.any():
        return False
    per_ring = np.bincount(ring_ids[crossings], minlength=len(geometry))
    return bool(np.any(per_ring % 2 == 1))
