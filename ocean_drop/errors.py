"""
Exception types raised by the ocean drop simulator.
"""


class OceanDropError(Exception):
    """Base class for simulator errors."""


class ConfigError(OceanDropError, ValueError):
    """Invalid simulation configuration."""


class GeometryError(OceanDropError, ValueError):
    """Land geometry that cannot be used for classification."""
