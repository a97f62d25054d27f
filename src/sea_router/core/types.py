"""Value types shared by the graph, search and router layers."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Tuple


LonLat = Tuple[float, float]


@dataclass(frozen=True, slots=True)
class Point:
    """Geodetic input coordinate in degrees."""

    lat: float
    lon: float

    def validate(self) -> "Point":
        """Raise ``ValueError`` unless lat/lon are finite and within range."""
        if not (math.isfinite(self.lat) and math.isfinite(self.lon)):
            raise ValueError(f"Coordinates must be finite numbers, got lat={self.lat}, lon={self.lon}")
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"Latitude {self.lat} outside [-90, 90]")
        if not -180.0 <= self.lon <= 180.0:
            raise ValueError(f"Longitude {self.lon} outside [-180, 180]")
        return self


@dataclass(frozen=True, slots=True)
class GraphNode:
    id: int
    lat: float
    lon: float

    @property
    def lonlat(self) -> LonLat:
        return (self.lon, self.lat)


@dataclass(frozen=True, slots=True)
class AdjacencyEntry:
    """One directed edge record: target node and its distance in NM."""

    node_id: int
    distance: float


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Route between two points.

    Attributes:
        coordinates: Ordered ``(lon, lat)`` pairs from origin node to destination node.
        distance: Total distance in nautical miles.
        waypoints: Number of graph nodes in the route, endpoints included.
    """

    coordinates: Tuple[LonLat, ...]
    distance: float
    waypoints: int

    def to_geojson(self) -> Dict[str, Any]:
        """Return the route as a GeoJSON LineString geometry."""
        return {
            "type": "LineString",
            "coordinates": [[lon, lat] for lon, lat in self.coordinates],
        }

    def to_feature(self) -> Dict[str, Any]:
        return {
            "type": "Feature",
            "properties": {"distance_nm": self.distance, "waypoints": self.waypoints},
            "geometry": self.to_geojson(),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "route": self.to_geojson(),
            "distance": self.distance,
            "waypoints": self.waypoints,
        }
