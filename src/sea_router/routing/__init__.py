"""Nearest-node snapping, A* search and route assembly."""

from sea_router.routing.astar import AStarResult, astar_search
from sea_router.routing.nearest import find_nearest_node
from sea_router.routing.priority_queue import IndexedPriorityQueue, QueueEntry
from sea_router.routing.router import SeaRouter, find_distance, find_route

__all__ = [
    "AStarResult",
    "IndexedPriorityQueue",
    "QueueEntry",
    "SeaRouter",
    "astar_search",
    "find_distance",
    "find_nearest_node",
    "find_route",
]
