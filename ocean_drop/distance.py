"""
Great-circle distances and nearest-coastline estimation.

Distances use the haversine formula on a sphere of radius EARTH_RADIUS_KM.
The distance to the coast is an estimate: only every ``stride``-th pair of
coastline points is tested as a segment, which bounds the cost of a query
to ``len(stream) / stride`` segment evaluations.
"""

from typing import Union

import numpy as np

from .config import COAST_SAMPLE_STRIDE, EARTH_RADIUS_KM, MIN_SEGMENT_KM

Number = Union[float, np.ndarray]

KM_PER_DEG = EARTH_RADIUS_KM * np.pi / 180.0


def haversine_km(lat1: Number, lon1: Number, lat2: Number, lon2: Number) -> Number:
    """Haversine distance in km between two points (or paired arrays of points)."""
    phi1, phi2 = np.radians(lat1), np.radians(lat2)
    dphi = phi2 - phi1
    dlmb = np.radians(np.asarray(lon2) - np.asarray(lon1))
    a = np.sin(dphi / 2) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(dlmb / 2) ** 2
    # Rounding can push a a hair outside [0, 1] for antipodal points
    a = np.clip(a, 0.0, 1.0)
    return EARTH_RADIUS_KM * 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))


def _wrap_lon(dlon: Number) -> Number:
    return (np.asarray(dlon) + 180.0) % 360.0 - 180.0


def _point_to_segments(
    p_lat: float,
    p_lon: float,
    a_lat: np.ndarray,
    a_lon: np.ndarray,
    b_lat: np.ndarray,
    b_lon: np.ndarray,
    seg_len: np.ndarray,
    lon_scale: np.ndarray
) -> np.ndarray:
    # Local equirectangular frame in km, origin at the segment start
    ab_x = _wrap_lon(b_lon - a_lon) * lon_scale * KM_PER_DEG
    ab_y = (b_lat - a_lat) * KM_PER_DEG
    ap_x = _wrap_lon(p_lon - a_lon) * lon_scale * KM_PER_DEG
    ap_y = (p_lat - a_lat) * KM_PER_DEG

    degenerate = seg_len < MIN_SEGMENT_KM
    denom = np.where(degenerate, 1.0, seg_len * seg_len)
    t = np.clip((ap_x * ab_x + ap_y * ab_y) / denom, 0.0, 1.0)
    t = np.where(degenerate, 0.0, t)

    proj_lat = a_lat + t * (b_lat - a_lat)
    proj_lon = a_lon + t * _wrap_lon(b_lon - a_lon)
    return haversine_km(p_lat, p_lon, proj_lat, proj_lon)


def point_to_segment_km(
    p_lat: float,
    p_lon: float,
    a_lat: Number,
    a_lon: Number,
    b_lat: Number,
    b_lon: Number
) -> Number:
    """
    Approximate distance in km from a point to the segment A-B.

    The point is projected onto the segment with a planar dot product in a
    local equirectangular frame, normalised by the squared geodesic length
    of the segment. This is only accurate for short segments; it is not an
    exact cross-track distance. Segments shorter than MIN_SEGMENT_KM are
    treated as the point A.

    Args:
        p_lat, p_lon: Query point (degrees)
        a_lat, a_lon: Segment start (degrees), scalar or array
        b_lat, b_lon: Segment end (degrees), scalar or array

    Returns:
        Distance in km (array if the segment arguments are arrays)
    """
    a_lat = np.asarray(a_lat, dtype=np.float64)
    a_lon = np.asarray(a_lon, dtype=np.float64)
    b_lat = np.asarray(b_lat, dtype=np.float64)
    b_lon = np.asarray(b_lon, dtype=np.float64)

    seg_len = haversine_km(a_lat, a_lon, b_lat, b_lon)
    lon_scale = np.cos(np.radians((a_lat + b_lat) / 2.0))
    dist = _point_to_segments(p_lat, p_lon, a_lat, a_lon, b_lat, b_lon, seg_len, lon_scale)
    return float(dist) if np.ndim(dist) == 0 else dist


class CoastlineIndex:
    """
    Stride-sampled coastline segments for nearest-coast queries.

    For i in ``range(0, n - 1, stride)`` the segment runs from stream point
    i to stream point ``min(i + stride, n - 1)``. Segment lengths and
    longitude scales are computed once since the stream never changes.
    """

    def __init__(self, coastline: np.ndarray, stride: int = COAST_SAMPLE_STRIDE):
        """
        Args:
            coastline: (n, 2) array of (lon, lat) coastline points
            stride: Sampling stride between segment endpoints
        """
        if stride < 1:
            raise ValueError(f"stride must be positive, got {stride}")
        self.stride = stride

        coastline = np.asarray(coastline, dtype=np.float64).reshape(-1, 2)
        n = len(coastline)
        starts = np.arange(0, max(n - 1, 0), stride)
        ends = np.minimum(starts + stride, n - 1)

        self._a_lon = coastline[starts, 0]
        self._a_lat = coastline[starts, 1]
        self._b_lon = coastline[ends, 0]
        self._b_lat = coastline[ends, 1]
        self._seg_len = haversine_km(self._a_lat, self._a_lon, self._b_lat, self._b_lon)
        self._lon_scale = np.cos(np.radians((self._a_lat + self._b_lat) / 2.0))

    @property
    def segment_count(self) -> int:
        return len(self._a_lat)

    def distances_km(self, lon: float, lat: float) -> np.ndarray:
        """Distance in km from (lon, lat) to every sampled segment."""
        return _point_to_segments(
            lat, lon,
            self._a_lat, self._a_lon, self._b_lat, self._b_lon,
            self._seg_len, self._lon_scale
        )

    def distance_km(self, lon: float, lat: float) -> float:
        """
        Estimated distance in km from (lon, lat) to the nearest coastline.

        Returns:
            Minimum distance over the sampled segments, or inf if there is
            no coastline data
        """
        if self.segment_count == 0:
            return float("inf")
        return float(np.min(self.distances_km(lon, lat)))
