"""A* search over the navigation graph with a haversine heuristic."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Set

from sea_router.core.errors import InvalidGoalError
from sea_router.core.geodesy import haversine_nm
from sea_router.graph.graph import Graph
from sea_router.routing.priority_queue import IndexedPriorityQueue, QueueEntry
from sea_router.routing.reconstruct import path_distance, reconstruct_path

logger = logging.getLogger(__name__)


@dataclass
class AStarResult:
    path: List[int] = field(default_factory=list)
    distance: float = 0.0
    explored: int = 0
    success: bool = False


def astar_search(graph: Graph, start_id: int, goal_id: int) -> AStarResult:
    """Shortest path from ``start_id`` to ``goal_id``.

    The great-circle distance to the goal never exceeds the remaining sailing
    distance, so the first time the goal is popped its path is optimal.
    An unreachable goal yields an empty, unsuccessful result; an unknown goal
    id raises ``InvalidGoalError`` before any search work.
    """
    goal = graph.get_node(goal_id)
    if goal is None:
        raise InvalidGoalError(goal_id)

    open_set = IndexedPriorityQueue()
    open_set.push(QueueEntry(start_id, 0.0, 0.0))
    closed: Set[int] = set()
    g_score: Dict[int, float] = {start_id: 0.0}
    came_from: Dict[int, int] = {}
    explored = 0

    while not open_set.is_empty():
        current = open_set.pop()
        explored += 1

        if current.node_id == goal_id:
            path = reconstruct_path(came_from, goal_id)
            distance = path_distance(graph, path)
            logger.debug(f"[ASTAR] {start_id} -> {goal_id}: {len(path)} nodes, {distance:.2f} nm, explored {explored}")
            return AStarResult(path=path, distance=distance, explored=explored, success=True)

        closed.add(current.node_id)

        for edge in graph.neighbors(current.node_id):
            neighbor_id = edge.node_id
            if neighbor_id in closed:
                continue
            tentative_g = current.g_cost + edge.distance
            if tentative_g >= g_score.get(neighbor_id, float("inf")):
                continue
            neighbor = graph.get_node(neighbor_id)
            if neighbor is None:
                # Dangling edge: no coordinates to estimate from
                continue
            came_from[neighbor_id] = current.node_id
            g_score[neighbor_id] = tentative_g
            open_set.push(QueueEntry(neighbor_id, tentative_g + haversine_nm(neighbor, goal), tentative_g))

    logger.debug(f"[ASTAR] {start_id} -> {goal_id}: no path, explored {explored}")
    return AStarResult(path=[], distance=0.0, explored=explored, success=False)
