"""
Running counters and summary statistics over the drop history.
"""

from dataclasses import asdict, dataclass
from typing import Dict, Iterable, Optional, Tuple, Union

import numpy as np

from .config import ZONE_COASTAL_KM
from .drop import Drop
from .temperature import is_cold, is_warm
from .zones import OCEAN_ZONES, Zone


@dataclass
class RunningStatistics:
    """
    Counters updated as the simulation advances.

    ``avg_temp`` is maintained with the online mean recurrence
    ``avg += (temp - avg) / n`` and always equals the mean temperature of
    the recorded drops.
    """

    water_count: int = 0
    coastal_count: int = 0
    total_attempts: int = 0
    land_attempts: int = 0
    avg_temp: float = 0.0

    def record_land_attempt(self):
        self.total_attempts += 1
        self.land_attempts += 1

    def record_drop(self, drop: Drop):
        """Count the successful attempt that produced ``drop``."""
        self.total_attempts += 1
        self.water_count += 1
        if drop.zone is Zone.COASTAL:
            self.coastal_count += 1
        self.avg_temp += (drop.temp - self.avg_temp) / drop.day

    @property
    def water_fraction(self) -> Optional[float]:
        """Share of attempts that landed in water, None before any attempt."""
        if self.total_attempts == 0:
            return None
        return (self.total_attempts - self.land_attempts) / self.total_attempts

    def snapshot(self) -> "StatisticsSnapshot":
        return StatisticsSnapshot(
            water_count=self.water_count,
            coastal_count=self.coastal_count,
            total_attempts=self.total_attempts,
            land_attempts=self.land_attempts,
            avg_temp=self.avg_temp,
        )


@dataclass(frozen=True)
class StatisticsSnapshot:
    """Read-only copy of RunningStatistics handed to listeners."""

    water_count: int = 0
    coastal_count: int = 0
    total_attempts: int = 0
    land_attempts: int = 0
    avg_temp: float = 0.0

    @property
    def water_fraction(self) -> Optional[float]:
        if self.total_attempts == 0:
            return None
        return (self.total_attempts - self.land_attempts) / self.total_attempts

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class DropSummary:
    """Aggregate view of a history, as shown in a summary panel."""

    drop_count: int
    water_percent: Optional[float]
    coastal_count: int
    coastal_percent: Optional[float]
    closest_km: Optional[float]
    farthest_km: Optional[float]
    mean_distance_km: Optional[float]
    mean_temp: Optional[float]
    cold_percent: Optional[float]
    warm_percent: Optional[float]


def _percent(part: int, whole: int) -> Optional[float]:
    return 100.0 * part / whole if whole else None


def summarize(
    drops: Iterable[Drop],
    stats: Optional[Union[RunningStatistics, "StatisticsSnapshot"]] = None,
    coastal_km: float = ZONE_COASTAL_KM
) -> DropSummary:
    """
    Summarise a drop history.

    Distance figures only use drops with a known, positive distance.
    Temperature shares use the cold and warm water bands.

    Args:
        drops: Recorded drops
        stats: Running counters, used for the water share of attempts
        coastal_km: Distance counted as a coastal hit

    Returns:
        DropSummary; fields that are undefined for an empty history are None
    """
    drops = list(drops)
    n = len(drops)

    water_percent = None
    if stats is not None and stats.water_fraction is not None:
        water_percent = 100.0 * stats.water_fraction

    coastal = sum(
        1 for d in drops if d.distance_km is not None and d.distance_km <= coastal_km
    )

    dists = np.array(
        [d.distance_km for d in drops if d.distance_km is not None and d.distance_km > 0],
        dtype=np.float64
    )
    temps = np.array([d.temp for d in drops], dtype=np.float64)

    return DropSummary(
        drop_count=n,
        water_percent=water_percent,
        coastal_count=coastal,
        coastal_percent=_percent(coastal, n),
        closest_km=float(dists.min()) if dists.size else None,
        farthest_km=float(dists.max()) if dists.size else None,
        mean_distance_km=float(dists.mean()) if dists.size else None,
        mean_temp=float(temps.mean()) if n else None,
        cold_percent=_percent(int(np.sum(is_cold(temps))), n),
        warm_percent=_percent(int(np.sum(is_warm(temps))), n),
    )


def zone_counts(drops: Iterable[Drop]) -> Dict[Zone, int]:
    """Number of drops per ocean zone, ordered from coast to deep ocean."""
    counts = {zone: 0 for zone in OCEAN_ZONES}
    for d in drops:
        if d.zone in counts:
            counts[d.zone] += 1
    return counts


def temperature_histogram(
    drops: Iterable[Drop],
    lo: float = -5.0,
    hi: float = 35.0,
    width: float = 2.0
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Bin drop temperatures.

    Args:
        drops: Recorded drops
        lo, hi: Histogram range in °C; values outside are ignored
        width: Bin width in °C

    Returns:
        Tuple of (counts, bin edges)
    """
    temps = np.array([d.temp for d in drops], dtype=np.float64)
    edges = np.arange(lo, hi + width / 2, width)
    counts, edges = np.histogram(temps, bins=edges)
    return counts, edges
