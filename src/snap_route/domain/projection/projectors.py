import math
from collections.abc import Sequence

import numpy as np

from snap_route.app.protocols import Projector
from snap_route.domain.entities.geography import LatLng, Point
from snap_route.domain.errors import ProjectionError

METERS_PER_DEGREE_LAT = 111_319.49  # at the equator
FEET_PER_METER = 3.28083989501312
MAX_SIN_LAT = 0.9999  # keeps Mercator y finite near the poles


def _check_latlng(lat, lng) -> None:
    lat, lng = np.asarray(lat, dtype=float), np.asarray(lng, dtype=float)
    if not (np.all(np.isfinite(lat)) and np.all(np.isfinite(lng))):
        raise ProjectionError("non-finite coordinate")
    if np.any(np.abs(lat) > 90.0):
        raise ProjectionError(f"latitude outside [-90, 90]: {lat.tolist()}")


def _check_point(p: Point) -> None:
    if not (math.isfinite(p.x) and math.isfinite(p.y)):
        raise ProjectionError(f"non-finite point {p}")


def _unpack(points: Sequence[LatLng]) -> tuple[np.ndarray, np.ndarray]:
    lat = np.fromiter((p.lat for p in points), dtype=float, count=len(points))
    lng = np.fromiter((p.lng for p in points), dtype=float, count=len(points))
    return lat, lng


def _pack(xs: np.ndarray, ys: np.ndarray) -> list[Point]:
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


class WebMercatorProjector(Projector):
    """
    Spherical Mercator pixel space used by slippy-map hosts.
    `scale` is the zoom level: the world is tile_size * 2**zoom pixels wide,
    origin at the top-left (lng -180, lat ~85), y growing southwards.
    """

    def __init__(self, tile_size: int = 256):
        self.tile_size = tile_size

    def world_size(self, scale: float) -> float:
        return self.tile_size * 2.0**scale

    def project(self, p: LatLng, scale: float) -> Point:
        _check_latlng(p.lat, p.lng)
        size = self.world_size(scale)
        siny = min(max(math.sin(math.radians(p.lat)), -MAX_SIN_LAT), MAX_SIN_LAT)
        x = (p.lng + 180.0) / 360.0 * size
        y = (0.5 - math.log((1 + siny) / (1 - siny)) / (4 * math.pi)) * size
        return Point(x, y)

    def unproject(self, p: Point, scale: float) -> LatLng:
        _check_point(p)
        size = self.world_size(scale)
        lng = p.x / size * 360.0 - 180.0
        n = math.pi * (1 - 2 * p.y / size)
        return LatLng(math.degrees(math.atan(math.sinh(n))), lng)

    def project_many(self, points: Sequence[LatLng], scale: float) -> list[Point]:
        lat, lng = _unpack(points)
        _check_latlng(lat, lng)
        size = self.world_size(scale)
        siny = np.clip(np.sin(np.radians(lat)), -MAX_SIN_LAT, MAX_SIN_LAT)
        xs = (lng + 180.0) / 360.0 * size
        ys = (0.5 - np.log((1 + siny) / (1 - siny)) / (4 * np.pi)) * size
        return _pack(xs, ys)


class EquirectangularProjector(Projector):
    """Local planar frame around an origin. X = east, Y = north, scaled by 2**scale."""

    def __init__(self, origin_lat: float, origin_lng: float, units: str = "meters"):
        _check_latlng(origin_lat, origin_lng)
        self.origin_lat, self.origin_lng = origin_lat, origin_lng
        self.cos_lat = math.cos(math.radians(origin_lat))
        self.unit = FEET_PER_METER if units == "feet" else 1.0

    def _k(self, scale: float) -> float:
        return METERS_PER_DEGREE_LAT * self.unit * 2.0**scale

    def project(self, p: LatLng, scale: float) -> Point:
        _check_latlng(p.lat, p.lng)
        k = self._k(scale)
        return Point(
            (p.lng - self.origin_lng) * k * self.cos_lat,
            (p.lat - self.origin_lat) * k,
        )

    def unproject(self, p: Point, scale: float) -> LatLng:
        _check_point(p)
        k = self._k(scale)
        return LatLng(p.y / k + self.origin_lat, p.x / (k * self.cos_lat) + self.origin_lng)

    def project_many(self, points: Sequence[LatLng], scale: float) -> list[Point]:
        lat, lng = _unpack(points)
        _check_latlng(lat, lng)
        k = self._k(scale)
        return _pack((lng - self.origin_lng) * k * self.cos_lat, (lat - self.origin_lat) * k)


class IdentityProjector(Projector):
    """x = lng, y = lat; scale ignored. For data that is already planar."""

    def project(self, p: LatLng, scale: float) -> Point:
        if not (math.isfinite(p.lat) and math.isfinite(p.lng)):
            raise ProjectionError(f"non-finite coordinate {p}")
        return Point(p.lng, p.lat)

    def unproject(self, p: Point, scale: float) -> LatLng:
        _check_point(p)
        return LatLng(p.y, p.x)

    def project_many(self, points: Sequence[LatLng], scale: float) -> list[Point]:
        return [self.project(p, scale) for p in points]
