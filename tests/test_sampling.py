"""
Tests for uniform spherical sampling.
"""

import numpy as np
import pytest

from ocean_drop.sampling import point_from_uniform, sample_point, sample_points


def test_point_from_uniform():
    """The inverse-CDF mapping hits the expected corners."""
    assert point_from_uniform(0.5, 0.5) == pytest.approx((0.0, 0.0))
    assert point_from_uniform(0.0, 0.0) == pytest.approx((-180.0, -90.0))
    assert point_from_uniform(0.75, 0.25) == pytest.approx((-90.0, 30.0))


def test_sample_point_ranges():
    """Samples stay inside the lon/lat domain."""
    rng = np.random.default_rng(1)
    for _ in range(1000):
        lon, lat = sample_point(rng)
        assert -180.0 <= lon < 180.0
        assert -90.0 <= lat <= 90.0


def test_sample_point_seeded():
    """The same seed gives the same points."""
    a = [sample_point(np.random.default_rng(5)) for _ in range(3)]
    b = [sample_point(np.random.default_rng(5)) for _ in range(3)]
    assert a == b


def test_area_preserving_distribution():
    """sin(lat) is uniform on [-1, 1] while raw latitude is not."""
    lons, lats = sample_points(200_000, np.random.default_rng(2024))

    counts, _ = np.histogram(np.sin(np.radians(lats)), bins=10, range=(-1, 1))
    assert np.allclose(counts / len(lats), 0.1, atol=0.005)

    # Only 1 - sin(60°) ≈ 13.4% of the sphere lies poleward of ±60°,
    # against a third for latitude drawn uniformly in degrees.
    polar_share = np.mean(np.abs(lats) > 60)
    assert polar_share == pytest.approx(1 - np.sin(np.radians(60)), abs=0.005)

    counts, _ = np.histogram(lons, bins=12, range=(-180, 180))
    assert np.allclose(counts / len(lons), 1 / 12, atol=0.005)


def test_sample_points_shapes():
    """Batch sampling returns paired arrays."""
    lons, lats = sample_points(10)
    assert lons.shape == (10,)
    assert lats.shape == (10,)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
