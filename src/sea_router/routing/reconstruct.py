"""Utilities to reconstruct paths from predecessor maps."""
from __future__ import annotations

from typing import Dict, List, Sequence

from sea_router.core.errors import GraphIntegrityError
from sea_router.graph.graph import Graph


def reconstruct_path(came_from: Dict[int, int], current: int) -> List[int]:
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


def path_distance(graph: Graph, path: Sequence[int]) -> float:
    """Sum the weights of the edges actually traversed by ``path``."""
    total = 0.0
    for a, b in zip(path, path[1:]):
        weight = graph.edge_weight(a, b)
        if weight is None:
            raise GraphIntegrityError(b, f"no edge from node {a}")
        total += weight
    return total
