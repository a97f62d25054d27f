"""
Routing errors.

Domain exceptions raised by graph construction, search and routing.
They are independent of the transport layer (HTTP, CLI).
"""
from __future__ import annotations


class RoutingError(Exception):
    """Base exception for routing operations."""


class EmptyGraphError(RoutingError):
    """Raised when the graph has no node to snap a coordinate to."""

    def __init__(self, message: str = "Could not find nearest nodes for origin or destination: graph is empty"):
        super().__init__(message)


class NoPathFoundError(RoutingError):
    """Raised when start and goal exist but are not connected."""

    def __init__(self, start_id: int, goal_id: int):
        self.start_id = start_id
        self.goal_id = goal_id
        super().__init__(f"No route found between node {start_id} and node {goal_id}")


class GraphIntegrityError(RoutingError):
    """Raised when a path or edge references a node or edge missing from the graph."""

    def __init__(self, node_id: int, detail: str | None = None):
        self.node_id = node_id
        self.detail = detail
        msg = f"Node {node_id} not found in graph"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class InvalidGoalError(RoutingError, ValueError):
    """Raised when a search is started towards a goal id the graph does not contain."""

    def __init__(self, goal_id: int):
        self.goal_id = goal_id
        super().__init__(f"Goal node {goal_id} not found")


class GraphDataError(RoutingError):
    """Raised when a graph data file cannot be read."""
