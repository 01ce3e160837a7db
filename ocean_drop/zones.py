"""
Ocean proximity zones.
"""

from enum import Enum
from typing import Optional, Tuple

from .config import ZoneThresholds


class Zone(str, Enum):
    """Classification of a sampled point."""

    LAND = "LAND"
    COASTAL = "COASTAL"
    SHELF = "SHELF"
    FAR = "FAR"
    DEEP_OCEAN = "DEEP_OCEAN"

    @property
    def label(self) -> str:
        """Long display label used in drop logs."""
        return _LABELS[self]

    @property
    def short_label(self) -> str:
        return _SHORT_LABELS[self]


# Ocean zones in order of increasing distance from shore
OCEAN_ZONES = (Zone.COASTAL, Zone.SHELF, Zone.FAR, Zone.DEEP_OCEAN)

_LABELS = {
    Zone.LAND: "LAND",
    Zone.COASTAL: "NEAR SHORE",
    Zone.SHELF: "CONT. SHELF",
    Zone.FAR: "FAR OFFSHORE",
    Zone.DEEP_OCEAN: "DEEP OCEAN",
}

_SHORT_LABELS = {
    Zone.LAND: "Land",
    Zone.COASTAL: "Coast",
    Zone.SHELF: "Shelf",
    Zone.FAR: "Far",
    Zone.DEEP_OCEAN: "Deep",
}


def classify_zone(
    is_land: bool,
    distance_km: Optional[float],
    thresholds: ZoneThresholds = ZoneThresholds()
) -> Tuple[Zone, Optional[float]]:
    """
    Bucket a point into a proximity zone.

    Rules are applied in order and each upper bound is inclusive:
    land first (distance forced to 0), then COASTAL, SHELF and FAR by
    distance, and DEEP_OCEAN for anything farther or unknown.

    Args:
        is_land: Whether the point is on land
        distance_km: Distance to the nearest coast in km (None if unknown)
        thresholds: Zone upper bounds

    Returns:
        Tuple of (zone, distance_km)
    """
    if is_land:
        return Zone.LAND, 0.0
    if distance_km is None:
        return Zone.DEEP_OCEAN, None
    if distance_km <= thresholds.coastal_km:
        return Zone.COASTAL, distance_km
    if distance_km <= thresholds.shelf_km:
        return Zone.SHELF, distance_km
    if distance_km <= thresholds.far_km:
        return Zone.FAR, distance_km
    return Zone.DEEP_OCEAN, distance_km
