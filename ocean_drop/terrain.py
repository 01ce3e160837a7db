"""
Terrain classification seam between the simulator and the geometry.

The simulator only needs an object with ``classify(lon, lat)`` returning a
TerrainInfo. GeometryTerrain is the real implementation; tests can pass
any object with the same method.
"""

import math
from dataclasses import dataclass
from typing import Optional

from .config import COAST_SAMPLE_STRIDE, ZoneThresholds
from .distance import CoastlineIndex
from .geometry import LandGeometry
from .land import is_land
from .zones import Zone, classify_zone


@dataclass(frozen=True)
class TerrainInfo:
    """Zone of a point and its distance to the coast (None if unknown)."""

    zone: Zone
    distance_km: Optional[float]

    @property
    def is_land(self) -> bool:
        return self.zone is Zone.LAND


class GeometryTerrain:
    """
    Classify points against a LandGeometry.

    Land is checked first; the coastline distance is only estimated for
    ocean points.
    """

    def __init__(
        self,
        geometry: LandGeometry,
        thresholds: ZoneThresholds = ZoneThresholds(),
        stride: int = COAST_SAMPLE_STRIDE
    ):
        self.geometry = geometry
        self.thresholds = thresholds
        self.coastline = CoastlineIndex(geometry.coastline, stride=stride)

    def is_land(self, lon: float, lat: float) -> bool:
        return is_land(lon, lat, self.geometry)

    def distance_to_coast(self, lon: float, lat: float) -> float:
        return self.coastline.distance_km(lon, lat)

    def classify(self, lon: float, lat: float) -> TerrainInfo:
        if self.is_land(lon, lat):
            zone, dist = classify_zone(True, None, self.thresholds)
            return TerrainInfo(zone, dist)

        dist = self.distance_to_coast(lon, lat)
        # No coastline data: the distance is unknown, not a number
        known = dist if math.isfinite(dist) else None
        zone, known = classify_zone(False, known, self.thresholds)
        return TerrainInfo(zone, known)
