"""
Tests for zone classification and the temperature model.
"""

import numpy as np
import pytest

from ocean_drop.config import ZoneThresholds
from ocean_drop.errors import ConfigError
from ocean_drop.temperature import is_cold, is_warm, sea_surface_temperature
from ocean_drop.zones import OCEAN_ZONES, Zone, classify_zone


@pytest.mark.parametrize("distance, zone", [
    (0.0, Zone.COASTAL),
    (0.5, Zone.COASTAL),
    (1.0, Zone.COASTAL),
    (1.01, Zone.SHELF),
    (50.0, Zone.SHELF),
    (100.0, Zone.SHELF),
    (200.0, Zone.FAR),
    (300.0, Zone.FAR),
    (300.5, Zone.DEEP_OCEAN),
    (1000.0, Zone.DEEP_OCEAN),
])
def test_zone_by_distance(distance, zone):
    """Each threshold belongs to the closer zone."""
    assert classify_zone(False, distance) == (zone, distance)


def test_land_forces_zero_distance():
    """Land wins over any distance."""
    assert classify_zone(True, 250.0) == (Zone.LAND, 0.0)
    assert classify_zone(True, None) == (Zone.LAND, 0.0)


def test_unknown_distance_is_deep_ocean():
    """Without a distance an ocean point is deep ocean."""
    assert classify_zone(False, None) == (Zone.DEEP_OCEAN, None)


def test_custom_thresholds():
    """Thresholds come from configuration."""
    thresholds = ZoneThresholds(coastal_km=5, shelf_km=50, far_km=500)

    assert classify_zone(False, 4.0, thresholds)[0] is Zone.COASTAL
    assert classify_zone(False, 80.0, thresholds)[0] is Zone.FAR
    assert classify_zone(False, 501.0, thresholds)[0] is Zone.DEEP_OCEAN


def test_invalid_thresholds():
    """Thresholds must be non-negative and ascending."""
    with pytest.raises(ConfigError):
        ZoneThresholds(coastal_km=200, shelf_km=100, far_km=300)
    with pytest.raises(ConfigError):
        ZoneThresholds(coastal_km=-1)


def test_zone_labels():
    """Zones carry display labels."""
    assert Zone.COASTAL.label == "NEAR SHORE"
    assert Zone.DEEP_OCEAN.label == "DEEP OCEAN"
    assert Zone.SHELF.short_label == "Shelf"
    assert Zone.LAND not in OCEAN_ZONES
    assert Zone("FAR") is Zone.FAR


def test_temperature_reference_points():
    """30 °C at the equator, -2 °C at both poles."""
    assert sea_surface_temperature(0) == pytest.approx(30.0)
    assert sea_surface_temperature(90) == pytest.approx(-2.0)
    assert sea_surface_temperature(-90) == pytest.approx(-2.0)
    assert sea_surface_temperature(60) == pytest.approx(14.0)


def test_temperature_symmetric_and_monotonic():
    """Temperature falls steadily from the equator toward either pole."""
    lats = np.linspace(0, 90, 181)
    north = sea_surface_temperature(lats)
    south = sea_surface_temperature(-lats)

    assert np.allclose(north, south)
    assert np.all(np.diff(north) <= 1e-12)
    assert isinstance(sea_surface_temperature(10.0), float)


def test_temperature_bands():
    """Cold and warm bands are exclusive of their thresholds."""
    assert is_cold(3.9)
    assert not is_cold(4.0)
    assert is_warm(24.1)
    assert not is_warm(24.0)

    temps = np.array([3.0, 4.0, 24.0, 25.0])
    assert list(is_cold(temps)) == [True, False, False, False]
    assert list(is_warm(temps)) == [False, False, False, True]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
