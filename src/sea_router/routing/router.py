"""Route orchestration: snap endpoints, search, and assemble the result."""
from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional

from sea_router.core.config import RouterConfig, get_config
from sea_router.core.errors import EmptyGraphError, GraphDataError, NoPathFoundError
from sea_router.core.types import GraphNode, Point, RouteResult
from sea_router.graph.graph import Graph
from sea_router.graph.loader import load_graph
from sea_router.routing.astar import astar_search
from sea_router.routing.nearest import DEFAULT_MAX_SEARCH_RADIUS, find_nearest_node

logger = logging.getLogger(__name__)


def find_route(
    graph: Graph,
    origin: Point,
    destination: Point,
    max_search_radius: int = DEFAULT_MAX_SEARCH_RADIUS,
) -> RouteResult:
    """Find the shortest route between two points.

    Raises:
        EmptyGraphError: no node to snap origin or destination to.
        NoPathFoundError: the snapped nodes are not connected.
        GraphIntegrityError: the path references a node missing from the graph.
    """
    t0 = time.perf_counter()
    start = find_nearest_node(graph, origin, max_search_radius)
    end = find_nearest_node(graph, destination, max_search_radius)
    if start is None or end is None:
        raise EmptyGraphError()
    logger.debug(f"[ROUTE] Snapped origin to node {start.id}, destination to node {end.id}")

    if start.id == end.id:
        return RouteResult(coordinates=(start.lonlat,), distance=0.0, waypoints=1)

    result = astar_search(graph, start.id, end.id)
    if not result.success:
        raise NoPathFoundError(start.id, end.id)

    coordinates = tuple(graph.node(node_id).lonlat for node_id in result.path)
    logger.debug(
        f"[ROUTE] {len(coordinates)} waypoints, {result.distance:.2f} nm "
        f"in {(time.perf_counter() - t0) * 1000:.1f}ms"
    )
    return RouteResult(coordinates=coordinates, distance=result.distance, waypoints=len(coordinates))


def find_distance(
    graph: Graph,
    origin: Point,
    destination: Point,
    max_search_radius: int = DEFAULT_MAX_SEARCH_RADIUS,
) -> float:
    """Distance in nautical miles of the route ``find_route`` would return."""
    return find_route(graph, origin, destination, max_search_radius).distance


class SeaRouter:
    """A loaded graph plus routing settings, built once and shared read-only."""

    def __init__(self, graph: Graph, config: Optional[RouterConfig] = None):
        self.graph = graph
        self.config = config or RouterConfig()

    @classmethod
    def from_path(cls, path: str | Path, config: Optional[RouterConfig] = None) -> "SeaRouter":
        config = config or get_config()
        graph = load_graph(path, target_per_cell=config.grid.target_nodes_per_cell)
        return cls(graph, config)

    @classmethod
    def from_config(cls, config: Optional[RouterConfig] = None) -> "SeaRouter":
        """Load the graph named by the configuration (or ``SEA_ROUTER_GRAPH``)."""
        config = config or get_config()
        path = config.graph_path()
        if path is None:
            raise GraphDataError("No graph data configured; set SEA_ROUTER_GRAPH or graph.path")
        return cls.from_path(path, config)

    @property
    def max_search_radius(self) -> int:
        return self.config.nearest.max_search_radius

    def nearest_node(self, point: Point) -> Optional[GraphNode]:
        return find_nearest_node(self.graph, point, self.max_search_radius)

    def find_route(self, origin: Point, destination: Point) -> RouteResult:
        return find_route(self.graph, origin, destination, self.max_search_radius)

    def find_distance(self, origin: Point, destination: Point) -> float:
        return self.find_route(origin, destination).distance
