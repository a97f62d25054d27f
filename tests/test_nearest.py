from __future__ import annotations

import random

from sea_router.core.geodesy import haversine_nm
from sea_router.core.types import Point
from sea_router.graph.graph import Graph
from sea_router.routing.nearest import find_nearest_node


def _brute_force(graph: Graph, point: Point):
    return min(graph.nodes, key=lambda n: haversine_nm(point, n))


def test_empty_graph_has_no_nearest_node(empty_graph: Graph) -> None:
    assert find_nearest_node(empty_graph, Point(0.0, 0.0)) is None


def test_exact_node_coordinate_resolves_to_that_node(lattice_graph: Graph) -> None:
    for node in lattice_graph.nodes:
        assert find_nearest_node(lattice_graph, Point(node.lat, node.lon)).id == node.id


def test_points_near_line_ends(line_graph: Graph) -> None:
    assert find_nearest_node(line_graph, Point(0.01, -0.01)).id == 1
    assert find_nearest_node(line_graph, Point(-0.02, 2.01)).id == 3
    assert find_nearest_node(line_graph, Point(0.3, 1.2)).id == 2


def test_degenerate_latitude_falls_back_to_linear_scan() -> None:
    nodes = [(i, float(lon), 10.0) for i, lon in enumerate(range(50))]
    graph = Graph.from_records(nodes, [])
    point = Point(10.0, -170.0)
    # no grid cell within the search radius holds a node
    assert graph.nodes_nearby(point.lat, point.lon, 5) == []
    assert find_nearest_node(graph, point) == _brute_force(graph, point)


def test_degenerate_latitude_queries_are_globally_nearest() -> None:
    nodes = [(i, float(lon), 10.0) for i, lon in enumerate(range(50))]
    graph = Graph.from_records(nodes, [])
    rng = random.Random(5)
    for _ in range(50):
        point = Point(rng.uniform(-80, 80), rng.uniform(-10, 48))
        assert find_nearest_node(graph, point) == _brute_force(graph, point)


def test_far_away_point_still_resolves(lattice_graph: Graph) -> None:
    point = Point(-60.0, 120.0)
    assert find_nearest_node(lattice_graph, point) == _brute_force(lattice_graph, point)


def test_zero_search_radius_uses_fallback(line_graph: Graph) -> None:
    # exact cell of the point is empty, so only the linear scan can answer
    assert find_nearest_node(line_graph, Point(0.0, -3.0), max_search_radius=0).id == 1
