from collections.abc import Sequence

from snap_route.app.hooks import NoopHooks, SnapHooks
from snap_route.app.protocols import DistanceFn, Marker, Projector
from snap_route.app.route_cache import ProjectedRouteCache
from snap_route.domain.entities.geography import LatLng, NearestPointResult
from snap_route.domain.geometry.nearest import find_nearest
from snap_route.domain.geometry.route_distance import distance_along_route


class SnapController:
    """
    Snaps a marker to the closest point of a route as a query point moves.

    The host drives it through explicit commands: on_query_point_changed() for
    pointer moves and on_scale_changed() after a zoom. Nothing is recomputed
    implicitly; the projected route only changes on set_route / update_targets /
    on_scale_changed.
    """

    def __init__(
        self,
        *,
        projector: Projector,
        distance: DistanceFn,
        marker: Marker,
        route: Sequence[LatLng] = (),
        scale: float = 0.0,
        hooks: SnapHooks | None = None,
        active: bool = True,
    ):
        self.marker = marker
        self.cache = ProjectedRouteCache(projector, distance)
        self.hooks = hooks or NoopHooks()
        self.active = active
        self.set_route(route, scale=scale)

    @property
    def projector(self) -> Projector:
        return self.cache.projector

    @property
    def scale(self) -> float:
        return self.cache.scale

    # ---------------- Targets ----------------------------

    def set_route(self, route: Sequence[LatLng], *, scale: float | None = None) -> None:
        try:
            self.cache.set_route(route, scale)
        except Exception as exc:
            self.hooks.error(op="set_route", exc=exc)
            raise
        self.hooks.route_loaded(vertices=len(self.cache.route), scale=self.cache.scale)

    def update_targets(
        self, marker: Marker | None = None, route: Sequence[LatLng] | None = None
    ) -> None:
        """Swap the marker and/or route; None keeps the current one. Always reloads the route."""
        self.marker = marker or self.marker
        self.set_route(self.cache.route if route is None else route)

    def start(self) -> None:
        self.active = True

    def stop(self) -> None:
        self.active = False

    # ---------------- Host commands -----------------------

    def on_query_point_changed(self, latlng: LatLng) -> LatLng | None:
        """Move the marker to the route point closest to `latlng`. Returns it (None if not moved)."""
        if not self.active:
            return None
        r = self._nearest(latlng, op="on_query_point_changed")
        snapped = self._to_latlng(r, op="on_query_point_changed")
        if snapped is not None:
            self.marker.set_position(snapped)
        self.hooks.snapped(latlng, r, snapped=snapped)
        return snapped

    def on_scale_changed(self, new_scale: float) -> None:
        old = self.cache.scale
        try:
            self.cache.rescale(new_scale)
        except Exception as exc:
            self.hooks.error(op="on_scale_changed", exc=exc, scale=new_scale)
            raise
        self.hooks.scale_changed(old=old, new=new_scale, vertices=len(self.cache.pixels))

    # ---------------- Queries -----------------------------

    def closest_latlng(self, latlng: LatLng) -> LatLng | None:
        return self._to_latlng(self._nearest(latlng, op="closest_latlng"), op="closest_latlng")

    def distance_along_route_at(self, latlng: LatLng) -> float:
        """Physical distance from the route start to the route point closest to `latlng`."""
        r = self._nearest(latlng, op="distance_along_route_at")
        if not r.found:
            return 0.0
        return distance_along_route(
            self.cache.route, self.cache.segment_lengths, r.segment_index, r.fraction_from_start
        )

    def distance_along_route_for_current_marker(self) -> float:
        pos = self.marker.get_position()
        if pos is None:
            return 0.0
        return self.distance_along_route_at(pos)

    # ---------------- Helpers -----------------------------

    def _nearest(self, latlng: LatLng, *, op: str) -> NearestPointResult:
        try:
            q = self.projector.project(latlng, self.cache.scale)
            return find_nearest(q, self.cache.pixels)
        except Exception as exc:
            self.hooks.error(op=op, exc=exc, lat=latlng.lat, lng=latlng.lng)
            raise

    def _to_latlng(self, r: NearestPointResult, *, op: str) -> LatLng | None:
        if not r.found:
            return None
        try:
            return self.projector.unproject(r.point, self.cache.scale)
        except Exception as exc:
            self.hooks.error(op=op, exc=exc)
            raise
