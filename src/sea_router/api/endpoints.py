"""API routers."""
from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from sea_router.api.dependencies import get_router
from sea_router.api.schemas import DistanceResponse, RouteRequest, RouteResponse
from sea_router.core.errors import (
    EmptyGraphError,
    GraphDataError,
    GraphIntegrityError,
    NoPathFoundError,
    RoutingError,
)
from sea_router.core.types import Point, RouteResult
from sea_router.routing.router import SeaRouter

logger = logging.getLogger(__name__)

router = APIRouter()


def _status_for(error: RoutingError) -> int:
    if isinstance(error, NoPathFoundError):
        return 404
    if isinstance(error, (EmptyGraphError, GraphDataError)):
        return 503
    if isinstance(error, GraphIntegrityError):
        return 500
    return 400


def _compute(sea_router: SeaRouter, origin: Point, destination: Point) -> RouteResult:
    t0 = time.perf_counter()
    try:
        result = sea_router.find_route(origin, destination)
    except RoutingError as e:
        logger.warning(f"[ROUTE] Route calculation error: {e}")
        raise HTTPException(status_code=_status_for(e), detail=str(e)) from e
    logger.info(
        f"[ROUTE] Route calculated: {result.distance:.2f} nm, {result.waypoints} waypoints "
        f"in {(time.perf_counter() - t0) * 1000:.1f}ms"
    )
    return result


def _parse_point(lat: Optional[str], lon: Optional[str]) -> Point:
    try:
        return Point(lat=float(lat), lon=float(lon)).validate()
    except (TypeError, ValueError) as e:
        raise HTTPException(status_code=400, detail="Invalid coordinates") from e


@router.get("/api/route")
def route_query(
    origin_lat: Optional[str] = Query(None, alias="originLat"),
    origin_lon: Optional[str] = Query(None, alias="originLon"),
    dest_lat: Optional[str] = Query(None, alias="destLat"),
    dest_lon: Optional[str] = Query(None, alias="destLon"),
    sea_router: SeaRouter = Depends(get_router),
) -> Dict[str, Any]:
    """Route between two points given as query parameters.

    Returns ``{route: GeoJSON LineString, distance, waypoints}``.
    """
    origin = _parse_point(origin_lat, origin_lon)
    destination = _parse_point(dest_lat, dest_lon)
    return _compute(sea_router, origin, destination).to_dict()


@router.post("/route", response_model=RouteResponse)
def route(req: RouteRequest, sea_router: SeaRouter = Depends(get_router)) -> RouteResponse:
    result = _compute(sea_router, req.origin.to_point(), req.destination.to_point())
    return RouteResponse.from_result(result)


@router.post("/distance", response_model=DistanceResponse)
def distance(req: RouteRequest, sea_router: SeaRouter = Depends(get_router)) -> DistanceResponse:
    result = _compute(sea_router, req.origin.to_point(), req.destination.to_point())
    return DistanceResponse(distance_nm=result.distance)
