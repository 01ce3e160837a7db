"""
Drop records and the drop history.

A drop is one recorded ocean sample. Drops are created by the simulator
only, never modified, and discarded together on reset.
"""

import numpy as np
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .zones import Zone


@dataclass(frozen=True)
class Drop:
    """One successful (non-land) sample."""

    day: int                        # 1-based, unique within a run
    lon: float                      # degrees, [-180, 180)
    lat: float                      # degrees, [-90, 90]
    zone: Zone
    distance_km: Optional[float]    # None when no coastline distance is known
    temp: float                     # °C


def format_distance(distance_km: Optional[float]) -> str:
    """Whole metres below 1 km, otherwise km with one decimal."""
    if distance_km is None:
        return ""
    if distance_km < 1:
        return f"{round(distance_km * 1000)}m"
    return f"{distance_km:.1f}km"


def describe(drop: Drop) -> str:
    """One-line log entry for a drop."""
    return (
        f"Day {drop.day}: {drop.zone.label} [{format_distance(drop.distance_km)}] "
        f"({drop.lat:.1f}, {drop.lon:.1f}) {drop.temp:.1f}°C"
    )


def map_url(drop: Drop, zoom: int = 8) -> str:
    """Satellite map link with a marker at the drop location."""
    return (
        f"https://www.google.com/maps/place/{drop.lat},{drop.lon}"
        f"/@{drop.lat},{drop.lon},{zoom}z/data=!3m1!1e3"
    )


class DropHistory:
    """Append-only, day-ordered collection of drops."""

    SORT_KEYS = ("day", "distance", "temp")

    def __init__(self):
        self._drops: List[Drop] = []

    def append(self, drop: Drop):
        """Add the drop for the next day."""
        expected = len(self._drops) + 1
        if drop.day != expected:
            raise ValueError(f"Expected drop for day {expected}, got day {drop.day}")
        self._drops.append(drop)

    def clear(self):
        self._drops = []

    def __len__(self) -> int:
        return len(self._drops)

    def __iter__(self) -> Iterator[Drop]:
        return iter(self._drops)

    def __getitem__(self, index):
        return self._drops[index]

    def as_tuple(self) -> Tuple[Drop, ...]:
        """Immutable snapshot of the history."""
        return tuple(self._drops)

    def temperatures(self) -> np.ndarray:
        return np.array([d.temp for d in self._drops], dtype=np.float64)

    def distances(self) -> np.ndarray:
        """Distances in km, NaN where unknown."""
        return np.array(
            [np.nan if d.distance_km is None else d.distance_km for d in self._drops],
            dtype=np.float64
        )

    def coordinates(self) -> np.ndarray:
        """
        Drop positions.

        Returns:
            Array of shape (n, 2) with [lon, lat]
        """
        if not self._drops:
            return np.array([]).reshape(0, 2)
        return np.array([[d.lon, d.lat] for d in self._drops])

    def filter_by_zone(self, zone: Zone) -> List[Drop]:
        return [d for d in self._drops if d.zone == zone]

    def filter_by_temperature(self, t_min: float, t_max: float) -> List[Drop]:
        """Drops with t_min <= temp < t_max."""
        return [d for d in self._drops if t_min <= d.temp < t_max]

    def sorted_by(self, key: str = "day") -> List[Drop]:
        """
        Drops in display order.

        Args:
            key: "day" (newest first), "distance" (nearest first, unknown
                distances last) or "temp" (coldest first)
        """
        if key == "day":
            return sorted(self._drops, key=lambda d: d.day, reverse=True)
        if key == "distance":
            return sorted(
                self._drops,
                key=lambda d: float("inf") if d.distance_km is None else d.distance_km
            )
        if key == "temp":
            return sorted(self._drops, key=lambda d: d.temp)
        raise ValueError(f"Unknown sort key {key!r}, expected one of {self.SORT_KEYS}")
