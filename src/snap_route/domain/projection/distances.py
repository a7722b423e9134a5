import math

from snap_route.domain.entities.geography import LatLng

EARTH_RADIUS_M = 6_378_137.0  # WGS84 equatorial, as used by web map hosts


def haversine_m(a: LatLng, b: LatLng, radius_m: float = EARTH_RADIUS_M) -> float:
    lat1, lng1, lat2, lng2 = map(math.radians, (a.lat, a.lng, b.lat, b.lng))
    dlat = lat2 - lat1
    dlng = lng2 - lng1
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2) ** 2
    return 2 * radius_m * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def euclidean(a: LatLng, b: LatLng) -> float:
    """Straight-line distance in coordinate units; only meaningful for planar data."""
    return math.hypot(b.lat - a.lat, b.lng - a.lng)
