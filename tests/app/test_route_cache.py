import pytest

from snap_route.app.route_cache import ProjectedRouteCache
from snap_route.domain.entities.geography import LatLng, Point
from snap_route.domain.projection.distances import euclidean
from snap_route.domain.projection.projectors import IdentityProjector, WebMercatorProjector


class CountingProjector(IdentityProjector):
    def __init__(self):
        self.calls = 0

    def project_many(self, points, scale):
        self.calls += 1
        return super().project_many(points, scale)


def test_set_route_projects_once_and_measures_segments():
    proj = CountingProjector()
    cache = ProjectedRouteCache(proj, euclidean)
    cache.set_route([LatLng(0.0, 0.0), LatLng(0.0, 3.0), LatLng(4.0, 3.0)], scale=2)
    assert proj.calls == 1
    assert cache.scale == 2
    assert cache.pixels == (Point(0.0, 0.0), Point(3.0, 0.0), Point(3.0, 4.0))
    assert cache.segment_lengths == pytest.approx((3.0, 4.0))

    # reading never reprojects
    _ = cache.pixels, cache.route, cache.segment_lengths
    assert proj.calls == 1


def test_set_route_keeps_scale_when_not_given():
    cache = ProjectedRouteCache(WebMercatorProjector(), euclidean)
    cache.set_route([LatLng(1.0, 1.0), LatLng(2.0, 2.0)], scale=9)
    cache.set_route([LatLng(3.0, 3.0), LatLng(4.0, 4.0)])
    assert cache.scale == 9
    one = WebMercatorProjector().project(LatLng(3.0, 3.0), 9)
    assert cache.pixels[0].x == pytest.approx(one.x) and cache.pixels[0].y == pytest.approx(one.y)


def test_rescale_rebuilds_pixels_only():
    cache = ProjectedRouteCache(WebMercatorProjector(), euclidean)
    route = [LatLng(10.0, 10.0), LatLng(11.0, 12.0)]
    cache.set_route(route, scale=3)
    lengths = cache.segment_lengths
    cache.rescale(4)
    assert cache.scale == 4
    assert cache.route == tuple(route)
    assert cache.segment_lengths is lengths
    assert cache.pixels[1].y == pytest.approx(2 * WebMercatorProjector().project(route[1], 3).y)


def test_empty_route_skips_projection():
    proj = CountingProjector()
    cache = ProjectedRouteCache(proj, euclidean)
    cache.set_route([])
    cache.rescale(5)
    assert proj.calls == 0
    assert cache.pixels == () and cache.segment_lengths == ()
