# ABOUTME: Great-circle distance helpers for branch proximity queries.
# ABOUTME: Haversine formula on a spherical Earth of radius 6371 km.

import math

from pocketlibrary.catalog.types import Coordinate

EARTH_RADIUS_KM = 6371.0


def haversine_km(origin: Coordinate, destination: Coordinate) -> float:
    """Distance in kilometers between two coordinates along the Earth's surface."""
    lat1 = math.radians(origin.latitude)
    lat2 = math.radians(destination.latitude)
    d_lat = lat2 - lat1
    d_lon = math.radians(destination.longitude - origin.longitude)

    a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    # min() guards against a tiny float overshoot past 1.0 for antipodal points
    return EARTH_RADIUS_KM * 2 * math.asin(math.sqrt(min(1.0, a)))
