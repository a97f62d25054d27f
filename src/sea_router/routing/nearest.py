"""Snap arbitrary coordinates to the closest graph node."""
from __future__ import annotations

from typing import Iterable, Optional

from sea_router.core.geodesy import haversine_nm
from sea_router.core.types import GraphNode, Point
from sea_router.graph.graph import Graph


DEFAULT_MAX_SEARCH_RADIUS = 5


def _closest(point: Point, candidates: Iterable[GraphNode]) -> Optional[GraphNode]:
    best: Optional[GraphNode] = None
    best_dist = float("inf")
    for node in candidates:
        dist = haversine_nm(point, node)
        if best is None or dist < best_dist:
            best = node
            best_dist = dist
    return best


def find_nearest_node(
    graph: Graph,
    point: Point,
    max_search_radius: int = DEFAULT_MAX_SEARCH_RADIUS,
) -> Optional[GraphNode]:
    """Return the graph node closest to ``point``, or None if the graph is empty.

    Grid cells around the point are searched with a radius growing from 0 up
    to ``max_search_radius``; the first non-empty ring of candidates is
    compared by haversine distance (first seen wins ties). Points whose
    neighbourhood holds no node, such as those far outside the graph extent,
    fall back to an exact scan over every node.
    """
    if len(graph) == 0:
        return None

    for radius in range(max_search_radius + 1):
        candidates = graph.nodes_nearby(point.lat, point.lon, radius)
        if candidates:
            return _closest(point, candidates)

    return _closest(point, graph.nodes)
