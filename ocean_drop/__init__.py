"""
Ocean Drop - a Monte Carlo simulator of random drops on the Earth's surface.

This package samples uniform points on a spherical Earth, rejects land,
classifies ocean points by distance to the coast and tracks temperature
statistics over many simulated days.
"""

__version__ = "0.1.0"
__author__ = "ocean_drop contributors"

from .config import SimulationConfig, ZoneThresholds, load_config
from .drop import Drop, DropHistory
from .geometry import LandGeometry, load_geometry
from .simulator import OceanSimulator, RunMode, SimulationListener
from .statistics import RunningStatistics, summarize
from .terrain import GeometryTerrain, TerrainInfo
from .zones import Zone

__all__ = [
    "OceanSimulator",
    "RunMode",
    "SimulationListener",
    "SimulationConfig",
    "ZoneThresholds",
    "load_config",
    "Drop",
    "DropHistory",
    "LandGeometry",
    "load_geometry",
    "GeometryTerrain",
    "TerrainInfo",
    "RunningStatistics",
    "summarize",
    "Zone",
]
