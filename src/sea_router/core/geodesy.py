"""Great-circle distance helpers in nautical miles."""
from __future__ import annotations

import math
from typing import Protocol


# Mean Earth radius (6371 km) expressed in nautical miles.
EARTH_RADIUS_NM = 3440.065


class HasLatLon(Protocol):
    lat: float
    lon: float


def haversine_lonlat_nm(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    """Return the haversine great-circle distance in nautical miles."""
    lat1_r = math.radians(lat1)
    lat2_r = math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlon / 2) ** 2
    # Rounding can push a marginally outside [0, 1] for antipodal points
    a = min(max(a, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_NM * c


def haversine_nm(p1: HasLatLon, p2: HasLatLon) -> float:
    """Distance between two objects exposing ``lat``/``lon`` (Point, GraphNode)."""
    return haversine_lonlat_nm(p1.lon, p1.lat, p2.lon, p2.lat)
