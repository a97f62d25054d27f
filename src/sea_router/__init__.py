"""Maritime shortest-path routing over a static navigation graph."""

from sea_router.core.errors import (
    EmptyGraphError,
    GraphDataError,
    GraphIntegrityError,
    InvalidGoalError,
    NoPathFoundError,
    RoutingError,
)
from sea_router.core.types import Point, RouteResult
from sea_router.graph.graph import Graph
from sea_router.graph.loader import load_graph
from sea_router.routing.router import SeaRouter, find_distance, find_route

__all__ = [
    "EmptyGraphError",
    "Graph",
    "GraphDataError",
    "GraphIntegrityError",
    "InvalidGoalError",
    "NoPathFoundError",
    "Point",
    "RouteResult",
    "RoutingError",
    "SeaRouter",
    "find_distance",
    "find_route",
    "load_graph",
]
