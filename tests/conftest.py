from __future__ import annotations

import json
from pathlib import Path

import pytest

from sea_router.core import config as config_module
from sea_router.graph.graph import Graph


# A(0,0) - B(0,1) - C(0,2), no A-C edge. Records are (id, lon, lat).
LINE_NODES = [(1, 0.0, 0.0), (2, 1.0, 0.0), (3, 2.0, 0.0)]
LINE_EDGES = [(1, 2, 1.0), (2, 3, 1.0)]


@pytest.fixture
def line_graph() -> Graph:
    return Graph.from_records(LINE_NODES, LINE_EDGES)


@pytest.fixture
def empty_graph() -> Graph:
    return Graph.from_records([], [])


@pytest.fixture
def write_graph_json(tmp_path: Path):
    def _write(nodes, edges, name: str = "graph.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps({"nodes": [list(n) for n in nodes], "edges": [list(e) for e in edges]}))
        return path

    return _write


@pytest.fixture(autouse=True)
def _reset_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config_module, "_config", None)
    monkeypatch.delenv(config_module.GRAPH_ENV_VAR, raising=False)
    monkeypatch.delenv(config_module.CONFIG_ENV_VAR, raising=False)


def build_lattice(rows: int = 6, cols: int = 6, seed: int = 3):
    """Nodes on a 0.1 degree lattice off Brittany, edges to right/down/diagonal
    neighbours weighted at 1.0-1.5x their great-circle length."""
    import random

    from sea_router.core.geodesy import haversine_lonlat_nm

    rng = random.Random(seed)
    nodes = []
    coords = {}
    for i in range(rows):
        for j in range(cols):
            node_id = i * cols + j
            lon, lat = -5.0 + 0.1 * j, 48.0 + 0.1 * i
            nodes.append((node_id, lon, lat))
            coords[node_id] = (lon, lat)
    edges = []
    for i in range(rows):
        for j in range(cols):
            a = i * cols + j
            for di, dj in ((0, 1), (1, 0), (1, 1)):
                ni, nj = i + di, j + dj
                if ni >= rows or nj >= cols:
                    continue
                b = ni * cols + nj
                base = haversine_lonlat_nm(*coords[a], *coords[b])
                edges.append((a, b, base * (1.0 + 0.5 * rng.random())))
    return nodes, edges


@pytest.fixture
def lattice_graph() -> Graph:
    nodes, edges = build_lattice()
    return Graph.from_records(nodes, edges)
