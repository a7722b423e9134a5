from collections.abc import Sequence

from snap_route.app.protocols import DistanceFn, Projector
from snap_route.domain.entities.geography import LatLng, Point
from snap_route.domain.geometry.route_distance import segment_distances


class ProjectedRouteCache:
    """
    Owns (route, scale) -> projected vertices, plus the physical segment lengths.

    Rebuilt wholesale by set_route() and rescale(); read-only in between, so a
    query never triggers a projection of the route.
    """

    def __init__(self, projector: Projector, distance: DistanceFn):
        self.projector, self.distance = projector, distance
        self._route: tuple[LatLng, ...] = ()
        self._scale = 0.0
        self._pixels: tuple[Point, ...] = ()
        self._lengths: tuple[float, ...] = ()

    @property
    def route(self) -> tuple[LatLng, ...]:
        return self._route

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def pixels(self) -> tuple[Point, ...]:
        return self._pixels

    @property
    def segment_lengths(self) -> tuple[float, ...]:
        return self._lengths

    def set_route(self, route: Sequence[LatLng], scale: float | None = None) -> None:
        route = tuple(route)
        scale = self._scale if scale is None else scale
        # state is swapped only after projection succeeds
        pixels = tuple(self.projector.project_many(route, scale)) if route else ()
        lengths = tuple(segment_distances(route, self.distance))
        self._route, self._scale, self._pixels, self._lengths = route, scale, pixels, lengths

    def rescale(self, scale: float) -> None:
        pixels = tuple(self.projector.project_many(self._route, scale)) if self._route else ()
        self._scale, self._pixels = scale, pixels
