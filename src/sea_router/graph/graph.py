"""Static navigation graph: nodes, bidirectional adjacency and spatial grid."""
from __future__ import annotations

import logging
import math
import operator
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Optional, Tuple

from sea_router.core.errors import GraphIntegrityError
from sea_router.core.types import AdjacencyEntry, GraphNode
from sea_router.graph.grid import DEFAULT_TARGET_PER_CELL, SpatialGrid

logger = logging.getLogger(__name__)


def parse_node_id(value: Any) -> int:
    """Integral node id from an int, an integral float or a numeric string.

    Raises ValueError for fractional or non-finite values instead of truncating.
    """
    try:
        return operator.index(value)
    except TypeError:
        pass
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"node id must be integral, got {value!r}")
    return int(number)


def _parse_node(record: Any) -> Optional[GraphNode]:
    """``(id, lon, lat)`` -> GraphNode, None when the record is malformed."""
    if isinstance(record, (str, bytes)) or not hasattr(record, "__len__") or len(record) < 3:
        return None
    try:
        node_id = parse_node_id(record[0])
        lon = float(record[1])
        lat = float(record[2])
    except (TypeError, ValueError, KeyError, IndexError):
        return None
    if not (math.isfinite(lon) and math.isfinite(lat)):
        return None
    return GraphNode(id=node_id, lat=lat, lon=lon)


def _parse_edge(record: Any) -> Optional[Tuple[int, int, float]]:
    """``(from, to, distance_nm)`` -> tuple, None when the record is malformed."""
    if isinstance(record, (str, bytes)) or not hasattr(record, "__len__") or len(record) < 3:
        return None
    try:
        from_id = parse_node_id(record[0])
        to_id = parse_node_id(record[1])
        distance = float(record[2])
    except (TypeError, ValueError, KeyError, IndexError):
        return None
    if not math.isfinite(distance) or distance < 0:
        return None
    return from_id, to_id, distance


class Graph:
    """Read-only maritime graph.

    Every source edge is stored in both directions with the same weight, so
    adjacency is symmetric regardless of how the edge list is directed.
    Nothing is mutable after construction; one instance can be shared by
    concurrent searches.
    """

    def __init__(
        self,
        nodes: Iterable[GraphNode],
        adjacency: Dict[int, List[AdjacencyEntry]],
        target_per_cell: int = DEFAULT_TARGET_PER_CELL,
        edge_count: int = 0,
        dangling_edges: int = 0,
    ):
        table: Dict[int, GraphNode] = {}
        for node in nodes:
            table[node.id] = node
        self._nodes = MappingProxyType(table)
        self._nodes_list: Tuple[GraphNode, ...] = tuple(table.values())
        self._adjacency = MappingProxyType({nid: tuple(entries) for nid, entries in adjacency.items()})
        self._edge_count = edge_count
        self._dangling_edges = dangling_edges
        self._grid = SpatialGrid.build(self._nodes_list, target_per_cell)

    @classmethod
    def from_records(
        cls,
        nodes: Iterable[Any],
        edges: Iterable[Any],
        target_per_cell: int = DEFAULT_TARGET_PER_CELL,
    ) -> "Graph":
        """Build a graph from ``(id, lon, lat)`` node and ``(from, to, nm)`` edge records.

        Malformed records are skipped rather than rejected.
        """
        parsed_nodes: List[GraphNode] = []
        skipped_nodes = 0
        for record in nodes if nodes is not None else ():
            node = _parse_node(record)
            if node is None:
                skipped_nodes += 1
                continue
            parsed_nodes.append(node)
        known = {node.id for node in parsed_nodes}

        adjacency: Dict[int, List[AdjacencyEntry]] = {}
        edge_count = 0
        skipped_edges = 0
        dangling = 0
        for record in edges if edges is not None else ():
            edge = _parse_edge(record)
            if edge is None:
                skipped_edges += 1
                continue
            from_id, to_id, distance = edge
            adjacency.setdefault(from_id, []).append(AdjacencyEntry(to_id, distance))
            adjacency.setdefault(to_id, []).append(AdjacencyEntry(from_id, distance))
            edge_count += 1
            if from_id not in known or to_id not in known:
                dangling += 1

        if skipped_nodes or skipped_edges:
            logger.debug(f"[GRAPH] Skipped {skipped_nodes} malformed node and {skipped_edges} malformed edge records")
        if dangling:
            logger.warning(f"[GRAPH] {dangling} edges reference node ids missing from the node table")

        graph = cls(parsed_nodes, adjacency, target_per_cell, edge_count=edge_count, dangling_edges=dangling)
        logger.info(
            f"[GRAPH] Loaded {graph.node_count} nodes, {edge_count} edges, "
            f"grid {graph.grid.resolution}x{graph.grid.resolution}"
        )
        return graph

    def __len__(self) -> int:
        return len(self._nodes_list)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    @property
    def node_count(self) -> int:
        return len(self._nodes_list)

    @property
    def edge_count(self) -> int:
        """Number of accepted source edges (each stored in both directions)."""
        return self._edge_count

    @property
    def dangling_edges(self) -> int:
        """Accepted edges with at least one endpoint missing from the node table."""
        return self._dangling_edges

    @property
    def nodes(self) -> Tuple[GraphNode, ...]:
        return self._nodes_list

    @property
    def grid(self) -> SpatialGrid:
        return self._grid

    @property
    def bounds(self) -> Optional[Tuple[float, float, float, float]]:
        """``(min_lon, min_lat, max_lon, max_lat)`` or None for an empty graph."""
        if not self._nodes_list:
            return None
        g = self._grid
        return (g.min_lon, g.min_lat, g.max_lon, g.max_lat)

    def get_node(self, node_id: int) -> Optional[GraphNode]:
        return self._nodes.get(node_id)

    def node(self, node_id: int) -> GraphNode:
        """Like ``get_node`` but a missing id is an integrity error."""
        node = self._nodes.get(node_id)
        if node is None:
            raise GraphIntegrityError(node_id)
        return node

    def neighbors(self, node_id: int) -> Tuple[AdjacencyEntry, ...]:
        return self._adjacency.get(node_id, ())

    def edge_weight(self, from_id: int, to_id: int) -> Optional[float]:
        """Smallest weight among edges ``from_id -> to_id``, None if there is none."""
        weights = [entry.distance for entry in self.neighbors(from_id) if entry.node_id == to_id]
        return min(weights) if weights else None

    def nodes_nearby(self, lat: float, lon: float, radius: int = 0) -> List[GraphNode]:
        return self._grid.nearby(lat, lon, radius)
