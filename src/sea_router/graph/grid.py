"""Uniform lat/lon bucketing of graph nodes for proximity queries."""
from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from sea_router.core.types import GraphNode


Cell = Tuple[int, int]
DEFAULT_TARGET_PER_CELL = 20


def grid_resolution(node_count: int, target_per_cell: int = DEFAULT_TARGET_PER_CELL) -> int:
    """Cells per axis so that cells hold ``target_per_cell`` nodes on average."""
    if node_count <= 0:
        return 1
    cells = math.ceil(node_count / max(1, target_per_cell))
    return max(1, math.ceil(math.sqrt(cells)))


@dataclass(frozen=True, slots=True)
class SpatialGrid:
    """Spatial index over a fixed node set.

    Attributes:
        resolution: Number of cells along each axis.
        min_lat: Southern edge of the node bounding box.
        max_lat: Northern edge of the node bounding box.
        min_lon: Western edge of the node bounding box.
        max_lon: Eastern edge of the node bounding box.
        cells: Nodes keyed by ``(lat_index, lon_index)``.

    Indices are ``floor(resolution * (c - min) / (max - min))``, so nodes
    sitting exactly on the max edge fall into index ``resolution``. Query
    coordinates outside the box are not clamped and map to empty cells.
    """

    resolution: int
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float
    cells: Mapping[Cell, Tuple[GraphNode, ...]]

    @classmethod
    def build(cls, nodes: Sequence[GraphNode], target_per_cell: int = DEFAULT_TARGET_PER_CELL) -> "SpatialGrid":
        resolution = grid_resolution(len(nodes), target_per_cell)
        if not nodes:
            return cls(resolution, 0.0, 0.0, 0.0, 0.0, MappingProxyType({}))

        lats = np.fromiter((n.lat for n in nodes), dtype=np.float64, count=len(nodes))
        lons = np.fromiter((n.lon for n in nodes), dtype=np.float64, count=len(nodes))
        min_lat, max_lat = float(lats.min()), float(lats.max())
        min_lon, max_lon = float(lons.min()), float(lons.max())

        rows = _axis_indices(lats, min_lat, max_lat, resolution)
        cols = _axis_indices(lons, min_lon, max_lon, resolution)

        buckets: Dict[Cell, List[GraphNode]] = {}
        for node, row, col in zip(nodes, rows.tolist(), cols.tolist()):
            buckets.setdefault((row, col), []).append(node)
        cells = MappingProxyType({key: tuple(members) for key, members in buckets.items()})
        return cls(resolution, min_lat, max_lat, min_lon, max_lon, cells)

    @property
    def cell_count(self) -> int:
        """Number of non-empty cells."""
        return len(self.cells)

    def cell_of(self, lat: float, lon: float) -> Optional[Cell]:
        """Grid cell for a coordinate, or None for non-finite input."""
        if not (math.isfinite(lat) and math.isfinite(lon)):
            return None
        return (
            _axis_index(lat, self.min_lat, self.max_lat, self.resolution),
            _axis_index(lon, self.min_lon, self.max_lon, self.resolution),
        )

    def nearby(self, lat: float, lon: float, radius: int = 0) -> List[GraphNode]:
        """Nodes in the ``(2*radius+1)`` square block of cells around the coordinate."""
        cell = self.cell_of(lat, lon)
        if cell is None or not self.cells:
            return []
        row, col = cell
        found: List[GraphNode] = []
        for r in range(row - radius, row + radius + 1):
            for c in range(col - radius, col + radius + 1):
                members = self.cells.get((r, c))
                if members:
                    found.extend(members)
        return found


def _axis_index(value: float, lo: float, hi: float, resolution: int) -> int:
    span = hi - lo
    if span == 0:
        return 0
    return int(np.floor(resolution * (value - lo) / span))


def _axis_indices(values: np.ndarray, lo: float, hi: float, resolution: int) -> np.ndarray:
    span = hi - lo
    if span == 0:
        return np.zeros(values.shape, dtype=np.int64)
    return np.floor(resolution * (values - lo) / span).astype(np.int64)
