import pytest

from snap_route.domain.entities.geography import LatLng, Point
from snap_route.domain.geometry.nearest import find_nearest
from snap_route.domain.geometry.route_distance import distance_along_route, segment_distances
from snap_route.domain.projection.distances import euclidean


def test_sums_full_segments_then_partial():
    route = [Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 0)]
    assert distance_along_route(route, [100.0, 200.0, 50.0], 3, 0.5) == pytest.approx(325.0)
    assert distance_along_route(route, [100.0, 200.0, 50.0], 1, 0.0) == 0.0
    assert distance_along_route(route, [100.0, 200.0, 50.0], 1, 1.0) == pytest.approx(100.0)


def test_no_segment_gives_zero():
    assert distance_along_route([], [], None, 0.0) == 0.0
    assert distance_along_route([Point(0, 0)], [], 1, 0.5) == 0.0
    assert distance_along_route([Point(0, 0), Point(1, 0)], [7.0], None, 0.5) == 0.0


def test_rejects_mismatched_distances_and_bad_index():
    route = [Point(0, 0), Point(1, 0), Point(2, 0)]
    with pytest.raises(ValueError):
        distance_along_route(route, [1.0], 1, 0.5)
    with pytest.raises(ValueError):
        distance_along_route(route, [1.0, 1.0], 3, 0.5)
    with pytest.raises(ValueError):
        distance_along_route(route, [1.0, 1.0], 0, 0.5)


def test_monotone_along_straight_route():
    route = [Point(0.0, 0.0), Point(10.0, 0.0), Point(20.0, 0.0)]
    physical = [10.0, 10.0]
    got = []
    for x in (0.0, 5.0, 15.0, 20.0):
        r = find_nearest(Point(x, 0.0), route)
        got.append(distance_along_route(route, physical, r.segment_index, r.fraction_from_start))
    assert got == pytest.approx([0.0, 5.0, 15.0, 20.0])
    assert all(got[i] <= got[i + 1] for i in range(len(got) - 1))


def test_physical_distances_are_independent_of_planar_lengths():
    # planar route is 10 px per segment, but segments are 1 km and 3 km long
    route = [Point(0.0, 0.0), Point(10.0, 0.0), Point(20.0, 0.0)]
    r = find_nearest(Point(12.5, 3.0), route)
    d = distance_along_route(route, [1000.0, 3000.0], r.segment_index, r.fraction_from_start)
    assert d == pytest.approx(1000.0 + 0.25 * 3000.0)


def test_segment_distances_uses_given_function():
    route = [LatLng(0.0, 0.0), LatLng(3.0, 4.0), LatLng(3.0, 10.0)]
    assert segment_distances(route, euclidean) == pytest.approx([5.0, 6.0])
    assert segment_distances(route[:1], euclidean) == []
    assert segment_distances([], euclidean) == []
