"""Static navigation graph and its spatial index."""

from sea_router.graph.graph import Graph
from sea_router.graph.grid import SpatialGrid
from sea_router.graph.loader import load_graph, save_graph_npz

__all__ = ["Graph", "SpatialGrid", "load_graph", "save_graph_npz"]
