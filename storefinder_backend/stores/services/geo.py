# stores/services/geo.py

"""
GEO HELPERS

Coordinates follow the GeoJSON convention used by Store.location:
[longitude, latitude], both in degrees. Distances are in metres.
"""

from __future__ import annotations

import math
from typing import NamedTuple

from stores.services.exceptions import InvalidCoordinatesError

EARTH_RADIUS_METERS = 6_371_000.0
METERS_PER_DEGREE_LAT = 111_320.0


class BoundingBox(NamedTuple):
    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float


def parse_coordinates(lng, lat) -> tuple[float, float]:
    try:
        lng_f = float(lng)
        lat_f = float(lat)
    except (TypeError, ValueError) as exc:
        raise InvalidCoordinatesError("lng and lat must be numbers") from exc

    if math.isnan(lng_f) or math.isnan(lat_f):
        raise InvalidCoordinatesError("lng and lat must be numbers")
    if not -180.0 <= lng_f <= 180.0:
        raise InvalidCoordinatesError("lng must be between -180 and 180")
    if not -90.0 <= lat_f <= 90.0:
        raise InvalidCoordinatesError("lat must be between -90 and 90")

    return lng_f, lat_f


def haversine_meters(lng1: float, lat1: float, lng2: float, lat2: float) -> float:
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    return 2 * EARTH_RADIUS_METERS * math.asin(min(1.0, math.sqrt(a)))


def bounding_box(lng: float, lat: float, radius_meters: float) -> BoundingBox:
    """Degree box that fully contains the circle; callers still filter by exact distance."""
    d_lat = radius_meters / METERS_PER_DEGREE_LAT

    cos_lat = math.cos(math.radians(lat))
    if cos_lat < 1e-6:
        d_lng = 180.0
    else:
        d_lng = min(180.0, d_lat / cos_lat)

    return BoundingBox(
        min_lat=max(-90.0, lat - d_lat),
        max_lat=min(90.0, lat + d_lat),
        min_lng=lng - d_lng,
        max_lng=lng + d_lng,
    )
