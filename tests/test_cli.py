from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from sea_router.cli.main import app

from conftest import LINE_EDGES, LINE_NODES

runner = CliRunner()


def test_route_prints_geojson(write_graph_json) -> None:
    graph = write_graph_json(LINE_NODES, LINE_EDGES)
    result = runner.invoke(app, ["route", "0.01,-0.01", "0,2.01", "--graph", str(graph)])
    assert result.exit_code == 0, result.output
    collection = json.loads(result.stdout)
    feature = collection["features"][0]
    assert feature["geometry"]["coordinates"] == [[0.0, 0.0], [1.0, 0.0], [2.0, 0.0]]
    assert feature["properties"] == {"distance_nm": 2.0, "waypoints": 3}


def test_route_writes_output_file(write_graph_json, tmp_path: Path) -> None:
    graph = write_graph_json(LINE_NODES, LINE_EDGES)
    out = tmp_path / "route.geojson"
    result = runner.invoke(app, ["route", "0,0", "0,2", "-g", str(graph), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert "Saved route" in result.stdout
    assert json.loads(out.read_text())["type"] == "FeatureCollection"


def test_distance(write_graph_json) -> None:
    graph = write_graph_json(LINE_NODES, LINE_EDGES)
    result = runner.invoke(app, ["distance", "0,0", "0,2", "--graph", str(graph)])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "2.000"


def test_invalid_point_is_usage_error(write_graph_json) -> None:
    graph = write_graph_json(LINE_NODES, LINE_EDGES)
    result = runner.invoke(app, ["distance", "north", "0,2", "--graph", str(graph)])
    assert result.exit_code == 2


def test_no_path_exits_with_error(write_graph_json) -> None:
    graph = write_graph_json([(1, 0.0, 0.0), (2, 10.0, 10.0)], [])
    result = runner.invoke(app, ["route", "0,0", "10,10", "--graph", str(graph)])
    assert result.exit_code == 1
    assert "No route found" in result.output


def test_missing_graph_exits_with_error(tmp_path: Path) -> None:
    result = runner.invoke(app, ["info", "--graph", str(tmp_path / "missing.json")])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_info(write_graph_json) -> None:
    graph = write_graph_json(LINE_NODES, LINE_EDGES + [(3, 99, 4.0)])
    result = runner.invoke(app, ["info", "--graph", str(graph)])
    assert result.exit_code == 0, result.output
    assert "Nodes: 3" in result.stdout
    assert "Edges: 3" in result.stdout
    assert "Dangling edges: 1" in result.stdout
    assert "Grid: 1x1" in result.stdout


SOUTH_NODES = [(1, 0.0, -1.0), (2, 1.0, -1.0), (3, 2.0, -1.0)]


def test_distance_with_southern_latitudes(write_graph_json) -> None:
    graph = write_graph_json(SOUTH_NODES, LINE_EDGES)
    result = runner.invoke(app, ["distance", "-1.01,-0.01", "-1,2", "--graph", str(graph)])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "2.000"


def test_route_with_southern_latitudes(write_graph_json, tmp_path: Path) -> None:
    graph = write_graph_json(SOUTH_NODES, LINE_EDGES)
    out = tmp_path / "route.geojson"
    result = runner.invoke(app, ["route", "-g", str(graph), "-1,0", "-1,2", "-o", str(out)])
    assert result.exit_code == 0, result.output
    feature = json.loads(out.read_text())["features"][0]
    assert feature["geometry"]["coordinates"] == [[0.0, -1.0], [1.0, -1.0], [2.0, -1.0]]


def test_unknown_option_is_still_rejected(write_graph_json) -> None:
    graph = write_graph_json(SOUTH_NODES, LINE_EDGES)
    result = runner.invoke(app, ["distance", "-1,0", "-1,2", "--graph", str(graph), "--fast"])
    assert result.exit_code == 2
