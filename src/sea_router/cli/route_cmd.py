"""Route and distance commands backed by the graph A* router."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from sea_router.core.config import get_config
from sea_router.core.errors import RoutingError
from sea_router.core.types import Point
from sea_router.routing.router import SeaRouter


def parse_point(value: str) -> Point:
    """Parse ``"lat,lon"`` into a validated Point."""
    try:
        lat, lon = (float(part) for part in value.split(","))
        return Point(lat=lat, lon=lon).validate()
    except ValueError as e:
        raise typer.BadParameter(f"expected 'lat,lon', got '{value}'") from e


def load_router(graph: Optional[Path]) -> SeaRouter:
    try:
        if graph is not None:
            return SeaRouter.from_path(graph, get_config())
        return SeaRouter.from_config()
    except RoutingError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def route(
    origin: str = typer.Argument(..., help="origin lat,lon"),
    destination: str = typer.Argument(..., help="destination lat,lon"),
    graph: Optional[Path] = typer.Option(None, "--graph", "-g", help="Graph data file (.json or .npz)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Path to save GeoJSON"),
) -> None:
    """Compute the shortest route and print it as GeoJSON."""
    start = parse_point(origin)
    end = parse_point(destination)
    sea_router = load_router(graph)
    try:
        result = sea_router.find_route(start, end)
    except RoutingError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    collection = {"type": "FeatureCollection", "features": [result.to_feature()]}
    if output:
        output.write_text(json.dumps(collection, indent=2))
        typer.echo(f"Saved route to {output} ({result.distance:.2f} nm, {result.waypoints} waypoints)")
    else:
        typer.echo(json.dumps(collection, indent=2))


def distance(
    origin: str = typer.Argument(..., help="origin lat,lon"),
    destination: str = typer.Argument(..., help="destination lat,lon"),
    graph: Optional[Path] = typer.Option(None, "--graph", "-g", help="Graph data file (.json or .npz)"),
) -> None:
    """Print the shortest route distance in nautical miles."""
    start = parse_point(origin)
    end = parse_point(destination)
    sea_router = load_router(graph)
    try:
        nm = sea_router.find_distance(start, end)
    except RoutingError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    typer.echo(f"{nm:.3f}")
