"""
Configuration constants and run configuration for the ocean drop simulator.
"""

import json
import logging
from dataclasses import dataclass, field, fields
from typing import Optional

from .errors import ConfigError

# ==================== PHYSICAL CONSTANTS ====================

# Mean Earth radius [km] - spherical Earth, no ellipsoid correction
EARTH_RADIUS_KM = 6371.0

# Latitude [deg] south of which every point counts as land.
# Ring data wraps the antimeridian around Antarctica, which breaks ray casting.
POLAR_CAP_LAT = -80.0

# ==================== ZONE THRESHOLDS ====================
# Upper bound [km] of each ocean proximity zone (inclusive)

ZONE_COASTAL_KM = 1.0    # within 1000 m of the shore
ZONE_SHELF_KM = 100.0    # continental shelf
ZONE_FAR_KM = 300.0      # far offshore; beyond this is deep ocean

# ==================== COASTLINE SAMPLING ====================

# Only every N-th pair of coastline points is tested as a segment.
# ~408k coastline points -> ~41k segment checks per query at N=10
COAST_SAMPLE_STRIDE = 10

# Segments shorter than this [km] are treated as a single point
MIN_SEGMENT_KM = 0.001

# ==================== SIMULATION ====================

DEFAULT_TOTAL_DAYS = 1825     # five years of daily drops
MAX_ATTEMPTS_PER_DAY = 100    # land retries before a day is given up

# Tick delay [ms] mapped linearly from a 1-100 speed control
MIN_DELAY_MS = 1.0
MAX_DELAY_MS = 200.0
DEFAULT_DELAY_MS = 50.0

# ==================== TEMPERATURE BANDS ====================

COLD_WATER_C = 4.0    # drops below this are "cold"
WARM_WATER_C = 24.0   # drops above this are "warm"


@dataclass(frozen=True)
class ZoneThresholds:
    """Upper distance bounds (km) of the COASTAL, SHELF and FAR zones."""

    coastal_km: float = ZONE_COASTAL_KM
    shelf_km: float = ZONE_SHELF_KM
    far_km: float = ZONE_FAR_KM

    def __post_init__(self):
        if min(self.coastal_km, self.shelf_km, self.far_km) < 0:
            raise ConfigError("Zone thresholds must be non-negative")
        if not (self.coastal_km <= self.shelf_km <= self.far_km):
            raise ConfigError(
                f"Zone thresholds must be ascending, got "
                f"{self.coastal_km}, {self.shelf_km}, {self.far_km}"
            )


@dataclass
class SimulationConfig:
    """
    Settings for one simulation run.

    Attributes:
        total_days: Number of successful (ocean) drops to collect
        thresholds: Zone distance thresholds
        stride: Coastline sampling stride for distance estimation
        max_attempts: Land retries allowed per day
        delay_ms: Delay between ticks when run by the built-in host loop
        seed: Optional random seed for reproducible runs
    """

    total_days: int = DEFAULT_TOTAL_DAYS
    thresholds: ZoneThresholds = field(default_factory=ZoneThresholds)
    stride: int = COAST_SAMPLE_STRIDE
    max_attempts: int = MAX_ATTEMPTS_PER_DAY
    delay_ms: float = DEFAULT_DELAY_MS
    seed: Optional[int] = None

    def validate(self) -> "SimulationConfig":
        """Raise ConfigError if any setting is out of range."""
        if self.total_days < 1:
            raise ConfigError(f"total_days must be positive, got {self.total_days}")
        if self.stride < 1:
            raise ConfigError(f"stride must be positive, got {self.stride}")
        if self.max_attempts < 1:
            raise ConfigError(f"max_attempts must be positive, got {self.max_attempts}")
        if not (MIN_DELAY_MS <= self.delay_ms <= MAX_DELAY_MS):
            raise ConfigError(
                f"delay_ms must be within [{MIN_DELAY_MS}, {MAX_DELAY_MS}], got {self.delay_ms}"
            )
        return self


def speed_to_delay_ms(speed: float) -> float:
    """
    Map a 1-100 speed control to a tick delay.

    1 is the slowest setting (200 ms), 100 the fastest (1 ms).
    Values outside the range are clamped.
    """
    speed = min(max(float(speed), 1.0), 100.0)
    return MAX_DELAY_MS - (speed / 100.0) * (MAX_DELAY_MS - MIN_DELAY_MS)


def config_from_dict(data: dict) -> SimulationConfig:
    """
    Build a validated SimulationConfig from a plain dictionary.

    Raises:
        ConfigError: If a value has the wrong type or is out of range
    """
    known = {f.name for f in fields(SimulationConfig)}
    threshold_keys = {"coastal_km", "shelf_km", "far_km"}

    kwargs = {}
    threshold_kwargs = {}
    try:
        for key, value in data.items():
            if key in threshold_keys:
                threshold_kwargs[key] = float(value)
            elif key == "thresholds":
                if not isinstance(value, dict):
                    raise ConfigError(f"thresholds must be an object, got {value!r}")
                threshold_kwargs.update(
                    {k: float(v) for k, v in value.items() if k in threshold_keys}
                )
            elif key == "speed":
                kwargs["delay_ms"] = speed_to_delay_ms(value)
            elif key in known:
                kwargs[key] = value
            else:
                logging.warning("Ignoring unknown config key: %s", key)

        config = SimulationConfig(
            thresholds=ZoneThresholds(**threshold_kwargs), **kwargs
        )
        return config.validate()
    except ConfigError:
        raise
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def load_config(config_file: str) -> SimulationConfig:
    """Load configuration from JSON file."""
    with open(config_file, 'r') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Could not parse config file {config_file}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_file} must contain a JSON object")
    logging.info("Loaded configuration from %s", config_file)
    return config_from_dict(data)
