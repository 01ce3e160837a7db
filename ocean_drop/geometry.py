"""
Land geometry shared by the land classifier and the distance estimator.

A geometry is a set of polygon rings, each an ordered list of (lon, lat)
vertices in degrees and implicitly closed. Rings are loaded once and never
modified, so one instance can back any number of simulators.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np

from .errors import GeometryError


def _as_ring(ring: Sequence[Sequence[float]], index: int) -> np.ndarray:
    arr = np.asarray(ring, dtype=np.float64)
    if arr.size == 0:
        return arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] < 2:
        raise GeometryError(
            f"Ring {index} must be a sequence of (lon, lat) pairs, got shape {arr.shape}"
        )
    # GeoJSON positions may carry an altitude; only lon/lat matter here
    arr = np.array(arr[:, :2], dtype=np.float64)
    if not np.all(np.isfinite(arr)):
        raise GeometryError(f"Ring {index} contains non-finite coordinates")
    return arr


class LandGeometry:
    """
    Immutable set of land polygon rings.

    Besides the rings themselves this keeps two derived views:

    * an edge table (every ring edge, last vertex wrapping to the first)
      used for vectorised ray casting;
    * the coastline point stream, all ring vertices flattened in
      ring-then-vertex order, used for distance sampling. Consecutive
      stream entries may belong to different rings.
    """

    def __init__(self, rings: Iterable[Sequence[Sequence[float]]] = ()):
        parsed = [_as_ring(ring, i) for i, ring in enumerate(rings)]
        self._rings: Tuple[np.ndarray, ...] = tuple(r for r in parsed if len(r) > 0)

        if self._rings:
            starts = np.concatenate(self._rings)
            ends = np.concatenate([np.roll(r, -1, axis=0) for r in self._rings])
            ring_ids = np.concatenate(
                [np.full(len(r), i, dtype=np.intp) for i, r in enumerate(self._rings)]
            )
        else:
            starts = np.empty((0, 2))
            ends = np.empty((0, 2))
            ring_ids = np.empty(0, dtype=np.intp)

        self._edge_start = starts
        self._edge_end = ends
        self._edge_ring = ring_ids
        self._coastline = starts

        for arr in (*self._rings, self._edge_start, self._edge_end, self._edge_ring):
            arr.setflags(write=False)

    @classmethod
    def empty(cls) -> "LandGeometry":
        """Geometry with no land at all (degraded mode)."""
        return cls(())

    @property
    def rings(self) -> Tuple[np.ndarray, ...]:
        """Rings as read-only (n, 2) arrays of (lon, lat)."""
        return self._rings

    @property
    def edges(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Edge table: (start points, end points, ring index of each edge)."""
        return self._edge_start, self._edge_end, self._edge_ring

    @property
    def coastline(self) -> np.ndarray:
        """Flattened coastline point stream, shape (n, 2) of (lon, lat)."""
        return self._coastline

    @property
    def point_count(self) -> int:
        return len(self._coastline)

    def is_empty(self) -> bool:
        return not self._rings

    def __len__(self) -> int:
        return len(self._rings)

    def __repr__(self) -> str:
        return f"LandGeometry(rings={len(self)}, points={self.point_count})"


def load_geometry(path: Union[str, Path]) -> LandGeometry:
    """
    Load pre-extracted land rings from a JSON file.

    The file holds ``{"landPolygons": [[[lon, lat], ...], ...]}``. A missing
    file is not fatal: the simulator then runs without land, which is
    logged as a warning.

    Args:
        path: Path to the ring file

    Returns:
        LandGeometry with the rings from the file
    """
    path = Path(path)
    if not path.exists():
        logging.warning("Land geometry %s not found; running without land polygons", path)
        return LandGeometry.empty()

    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise GeometryError(f"Could not parse land geometry {path}: {e}") from e

    if isinstance(data, dict):
        rings: List = data.get("landPolygons", [])
    elif isinstance(data, list):
        rings = data
    else:
        raise GeometryError(f"Unexpected land geometry structure in {path}")

    geometry = LandGeometry(rings)
    if geometry.is_empty():
        logging.warning("No land polygons found in %s", path)
    else:
        logging.info("Loaded %d coastline points, %d polygons from %s",
                     geometry.point_count, len(geometry), path)
    return geometry
