"""Typer CLI for maritime routing."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from sea_router.cli import route_cmd

app = typer.Typer(help="Shortest maritime routes over a navigation graph")
# "lat,lon" arguments south of the equator start with "-"
_POINT_ARGS = {"ignore_unknown_options": True}
app.command("route", context_settings=_POINT_ARGS)(route_cmd.route)
app.command("distance", context_settings=_POINT_ARGS)(route_cmd.distance)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log graph loading and search details"),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def info(
    graph: Optional[Path] = typer.Option(None, "--graph", "-g", help="Graph data file (.json or .npz)"),
) -> None:
    """Show information about the loaded graph and configuration."""
    sea_router = route_cmd.load_router(graph)
    g = sea_router.graph

    typer.echo("=== Sea Router Graph ===")
    typer.echo(f"Nodes: {g.node_count}")
    typer.echo(f"Edges: {g.edge_count}")
    if g.dangling_edges:
        typer.echo(f"Dangling edges: {g.dangling_edges}")
    bounds = g.bounds
    if bounds is not None:
        min_lon, min_lat, max_lon, max_lat = bounds
        typer.echo(f"Bounds: lon {min_lon:.4f}..{max_lon:.4f}, lat {min_lat:.4f}..{max_lat:.4f}")
    typer.echo(f"Grid: {g.grid.resolution}x{g.grid.resolution} cells ({g.grid.cell_count} occupied)")
    typer.echo(f"Nearest-node search radius: {sea_router.max_search_radius} cells")


if __name__ == "__main__":
    app()
