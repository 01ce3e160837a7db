"""
Tests for running statistics, summaries and the drop history.
"""

import dataclasses

import numpy as np
import pytest

from ocean_drop.drop import Drop, DropHistory, describe, format_distance, map_url
from ocean_drop.statistics import (
    RunningStatistics,
    summarize,
    temperature_histogram,
    zone_counts,
)
from ocean_drop.zones import Zone


def make_history():
    history = DropHistory()
    for day, (zone, dist, temp) in enumerate([
        (Zone.COASTAL, 0.5, 27.0),
        (Zone.SHELF, 42.0, 12.0),
        (Zone.DEEP_OCEAN, 900.0, 2.0),
        (Zone.FAR, 250.0, 25.0),
        (Zone.DEEP_OCEAN, None, 30.0),
    ], start=1):
        history.append(Drop(day=day, lon=float(day), lat=-float(day),
                            zone=zone, distance_km=dist, temp=temp))
    return history


def test_running_mean_matches_mean():
    """The online mean equals the arithmetic mean."""
    stats = RunningStatistics()
    temps = np.random.default_rng(0).uniform(-2, 30, 500)
    for day, temp in enumerate(temps, start=1):
        stats.record_drop(Drop(day, 0.0, 0.0, Zone.SHELF, 10.0, float(temp)))

    assert abs(stats.avg_temp - temps.mean()) < 1e-9
    assert stats.water_count == 500
    assert stats.total_attempts == 500


def test_counters():
    """Land attempts and coastal drops are counted."""
    stats = RunningStatistics()
    stats.record_land_attempt()
    stats.record_land_attempt()
    stats.record_drop(Drop(1, 0.0, 0.0, Zone.COASTAL, 0.2, 20.0))

    assert stats.total_attempts == 3
    assert stats.land_attempts == 2
    assert stats.coastal_count == 1
    assert stats.water_fraction == pytest.approx(1 / 3)
    assert RunningStatistics().water_fraction is None


def test_snapshot_is_frozen():
    """Snapshots cannot be modified and do not follow later updates."""
    stats = RunningStatistics()
    snap = stats.snapshot()
    stats.record_land_attempt()

    assert snap.total_attempts == 0
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.total_attempts = 5
    assert stats.snapshot().water_fraction == 0.0
    assert stats.snapshot().as_dict()["land_attempts"] == 1
    assert "water_fraction" not in stats.snapshot().as_dict()


def test_summarize():
    """Summary figures over a small history."""
    history = make_history()
    stats = RunningStatistics(water_count=5, total_attempts=20, land_attempts=15)

    summary = summarize(history, stats)

    assert summary.drop_count == 5
    assert summary.water_percent == pytest.approx(25.0)
    assert summary.coastal_count == 1
    assert summary.coastal_percent == pytest.approx(20.0)
    assert summary.closest_km == pytest.approx(0.5)
    assert summary.farthest_km == pytest.approx(900.0)
    assert summary.mean_distance_km == pytest.approx((0.5 + 42 + 900 + 250) / 4)
    assert summary.mean_temp == pytest.approx(19.2)
    assert summary.cold_percent == pytest.approx(20.0)
    assert summary.warm_percent == pytest.approx(60.0)


def test_summarize_band_edges():
    """Exactly 4 °C is not cold and exactly 24 °C is not warm."""
    history = DropHistory()
    for day, temp in enumerate([4.0, 24.0, 3.9, 24.1], start=1):
        history.append(Drop(day, 0.0, 0.0, Zone.SHELF, 10.0, temp))

    summary = summarize(history)
    assert summary.cold_percent == pytest.approx(25.0)
    assert summary.warm_percent == pytest.approx(25.0)


def test_summarize_empty():
    """An empty history has no defined averages."""
    summary = summarize([])

    assert summary.drop_count == 0
    assert summary.water_percent is None
    assert summary.mean_temp is None
    assert summary.closest_km is None
    assert summary.cold_percent is None


def test_zone_counts():
    """Drops are counted per ocean zone in coast-to-deep order."""
    counts = zone_counts(make_history())

    assert list(counts) == [Zone.COASTAL, Zone.SHELF, Zone.FAR, Zone.DEEP_OCEAN]
    assert counts[Zone.DEEP_OCEAN] == 2
    assert sum(counts.values()) == 5


def test_temperature_histogram():
    """Temperatures are binned in 2 °C steps from -5 to 35 °C."""
    history = make_history()
    history.append(Drop(6, 0.0, 0.0, Zone.SHELF, 10.0, 40.0))

    counts, edges = temperature_histogram(history)

    assert len(edges) == 21
    assert edges[0] == -5.0 and edges[-1] == 35.0
    assert counts.sum() == 5
    assert counts[np.searchsorted(edges, 27.0, side="right") - 1] == 1


def test_history_append_order():
    """Days must be appended in sequence."""
    history = DropHistory()
    history.append(Drop(1, 0.0, 0.0, Zone.FAR, 200.0, 10.0))

    with pytest.raises(ValueError):
        history.append(Drop(3, 0.0, 0.0, Zone.FAR, 200.0, 10.0))
    assert len(history) == 1


def test_history_queries():
    """Filtering and sorting follow the drop log conventions."""
    history = make_history()

    assert [d.day for d in history.filter_by_zone(Zone.DEEP_OCEAN)] == [3, 5]
    assert [d.day for d in history.filter_by_temperature(12.0, 27.0)] == [2, 4]
    assert [d.day for d in history.sorted_by("day")] == [5, 4, 3, 2, 1]
    assert [d.day for d in history.sorted_by("distance")] == [1, 2, 4, 3, 5]
    assert [d.day for d in history.sorted_by("temp")] == [3, 2, 4, 1, 5]
    with pytest.raises(ValueError):
        history.sorted_by("zone")


def test_history_arrays():
    """Column views of the history."""
    history = make_history()

    assert history.temperatures().shape == (5,)
    assert np.isnan(history.distances()[4])
    assert history.coordinates().shape == (5, 2)
    assert DropHistory().coordinates().shape == (0, 2)
    assert history.as_tuple()[0].day == 1


def test_formatting():
    """Distances and log lines are formatted for display."""
    drop = Drop(3, -45.27, 12.34, Zone.COASTAL, 0.5, 27.26)

    assert format_distance(0.5) == "500m"
    assert format_distance(12.34) == "12.3km"
    assert format_distance(None) == ""
    assert describe(drop) == "Day 3: NEAR SHORE [500m] (12.3, -45.3) 27.3°C"
    assert map_url(drop) == (
        "https://www.google.com/maps/place/12.34,-45.27/@12.34,-45.27,8z/data=!3m1!1e3"
    )


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
