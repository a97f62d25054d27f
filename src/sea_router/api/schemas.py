"""API request and response models."""
from __future__ import annotations

from typing import List, Literal, Tuple
from pydantic import BaseModel, Field

from sea_router.core.types import Point, RouteResult


class PointModel(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0, description="Latitude in degrees")
    lon: float = Field(..., ge=-180.0, le=180.0, description="Longitude in degrees")

    def to_point(self) -> Point:
        return Point(lat=self.lat, lon=self.lon)


class RouteRequest(BaseModel):
    origin: PointModel
    destination: PointModel


class LineStringModel(BaseModel):
    type: Literal["LineString"] = "LineString"
    coordinates: List[Tuple[float, float]] = Field(..., description="[lon, lat] pairs")


class RouteResponse(BaseModel):
    route: LineStringModel
    distance_nm: float
    waypoints: int

    @classmethod
    def from_result(cls, result: RouteResult) -> "RouteResponse":
        return cls(
            route=LineStringModel(coordinates=list(result.coordinates)),
            distance_nm=result.distance,
            waypoints=result.waypoints,
        )


class DistanceResponse(BaseModel):
    distance_nm: float
