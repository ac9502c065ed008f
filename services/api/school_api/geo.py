"""
Distance calculations and proximity ranking.

Haversine formula for great-circle distance between two lat/lng points, and a
helper that orders school rows by their distance from a reference point.
"""

import math
from typing import Any, Iterable, Mapping

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Calculate great-circle distance between two points in kilometers.
    Inputs are in degrees.
    """
    lat1_r = math.radians(lat1)
    lat2_r = math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)

    a = (math.sin(dlat / 2) ** 2 +
         math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def rank_by_distance(
    rows: Iterable[Mapping[str, Any]],
    lat: float,
    lng: float,
) -> list[dict]:
    """
    Return copies of `rows` with a `distance` key (km), nearest first.

    Each row must have 'latitude' and 'longitude'. The input is not modified.
    `sorted` is stable, so rows at equal distance keep their input order.
    """
    decorated = []
    for row in rows:
        item = dict(row)
        item["distance"] = haversine_km(lat, lng, float(item["latitude"]), float(item["longitude"]))
        decorated.append(item)

    return sorted(decorated, key=lambda item: item["distance"])
