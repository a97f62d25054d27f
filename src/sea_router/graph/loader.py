"""Graph data loading from JSON or numpy archives."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple

import numpy as np

from sea_router.core.errors import GraphDataError
from sea_router.graph.graph import Graph, parse_node_id
from sea_router.graph.grid import DEFAULT_TARGET_PER_CELL

logger = logging.getLogger(__name__)


def _with_exact_ids(table: np.ndarray, ids: Optional[np.ndarray], id_columns: int) -> List[List[Any]]:
    """Rows of ``table`` with the leading id columns replaced by the int64 ``ids``."""
    rows = np.atleast_2d(table).tolist()
    if ids is None:
        return rows
    id_rows = ids.reshape(len(rows), id_columns).tolist()
    return [id_row + row[id_columns:] for id_row, row in zip(id_rows, rows)]


def load_records(path: str | Path) -> Tuple[Iterable[Any], Iterable[Any]]:
    """Read raw ``(nodes, edges)`` record collections from a data file.

    ``.json`` files hold ``{"nodes": [[id, lon, lat], ...], "edges": [[from, to, nm], ...]}``;
    ``.npz`` archives hold ``nodes`` (N x 3) and ``edges`` (M x 3) arrays, plus
    optional int64 ``node_ids`` (N) and ``edge_ids`` (M x 2) that take precedence
    over the float id columns.
    """
    path = Path(path)
    if not path.exists():
        raise GraphDataError(f"Graph data file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        try:
            with path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, json.JSONDecodeError) as e:
            raise GraphDataError(f"Cannot read graph data {path}: {e}") from e
        if not isinstance(data, dict) or "nodes" not in data or "edges" not in data:
            raise GraphDataError(f"{path} must be an object with 'nodes' and 'edges' arrays")
        nodes, edges = data["nodes"], data["edges"]
        if not isinstance(nodes, list) or not isinstance(edges, list):
            raise GraphDataError(f"{path}: 'nodes' and 'edges' must be arrays")
        return nodes, edges

    if suffix == ".npz":
        try:
            with np.load(path, allow_pickle=False) as archive:
                if "nodes" not in archive.files or "edges" not in archive.files:
                    raise GraphDataError(f"{path} must contain 'nodes' and 'edges' arrays")
                node_ids = np.asarray(archive["node_ids"], dtype=np.int64) if "node_ids" in archive.files else None
                edge_ids = np.asarray(archive["edge_ids"], dtype=np.int64) if "edge_ids" in archive.files else None
                nodes = _with_exact_ids(np.asarray(archive["nodes"], dtype=np.float64), node_ids, 1)
                edges = _with_exact_ids(np.asarray(archive["edges"], dtype=np.float64), edge_ids, 2)
        except (OSError, ValueError) as e:
            raise GraphDataError(f"Cannot read graph data {path}: {e}") from e
        return nodes, edges

    raise GraphDataError(f"Unsupported graph data format '{path.suffix}' (expected .json or .npz)")


def load_graph(path: str | Path, target_per_cell: int = DEFAULT_TARGET_PER_CELL) -> Graph:
    """Load a graph data file and build the Graph."""
    logger.info(f"[GRAPH] Loading graph data from {path}")
    nodes, edges = load_records(path)
    return Graph.from_records(nodes, edges, target_per_cell=target_per_cell)


def save_graph_npz(path: str | Path, nodes: Iterable[Any], edges: Iterable[Any]) -> None:
    """Write ``(id, lon, lat)`` nodes and ``(from, to, nm)`` edges as a compressed archive.

    Ids are stored separately as int64 so ids above 2**53 survive the round trip.
    Raises ValueError for a record with a fractional id.
    """
    nodes = list(nodes)
    edges = list(edges)
    node_ids = np.asarray([parse_node_id(n[0]) for n in nodes], dtype=np.int64)
    edge_ids = np.asarray([[parse_node_id(e[0]), parse_node_id(e[1])] for e in edges], dtype=np.int64).reshape(-1, 2)
    node_arr = np.asarray(nodes, dtype=np.float64).reshape(-1, 3)
    edge_arr = np.asarray(edges, dtype=np.float64).reshape(-1, 3)
    np.savez_compressed(
        Path(path), nodes=node_arr, edges=edge_arr, node_ids=node_ids, edge_ids=edge_ids
    )
