import math
from collections.abc import Sequence

from snap_route.domain.entities.geography import NO_RESULT, NearestPointResult, Point
from snap_route.domain.errors import DegenerateSegmentError


def line_distance(p: Point, a: Point, b: Point) -> float:
    """Perpendicular distance from p to the infinite line through a and b."""
    if b.x != a.x:
        slope = (b.y - a.y) / (b.x - a.x)
        icpt = b.y - slope * b.x
        return abs(slope * p.x + icpt - p.y) / math.sqrt(slope * slope + 1)
    return abs(p.x - b.x)  # vertical


def _sq(dx: float, dy: float) -> float:
    return dx * dx + dy * dy


def find_nearest(query: Point, route: Sequence[Point]) -> NearestPointResult:
    """
    Closest point to `query` lying on any segment of `route`.

    Segments are scanned in order and a later segment only wins when strictly
    closer, so ties resolve to the lower segment index. Routes with fewer than
    two vertices give NO_RESULT.
    Raises DegenerateSegmentError on duplicate consecutive vertices.
    """
    if len(route) < 2:
        return NO_RESULT

    min_dist: float | None = None
    to = frm = 0.0
    best = 0
    for n in range(1, len(route)):
        a, b = route[n - 1], route[n]
        rl2 = _sq(b.x - a.x, b.y - a.y)  # segment length^2
        if rl2 == 0:
            raise DegenerateSegmentError(n)

        dist = line_distance(query, a, b)
        ln2 = _sq(b.x - query.x, b.y - query.y)  # to end vertex
        lnm12 = _sq(a.x - query.x, a.y - query.y)  # to start vertex
        dist2 = dist * dist

        # foot outside the segment: nearest is the closer endpoint
        if (ln2 - dist2) + (lnm12 - dist2) > rl2:
            dist = math.sqrt(min(ln2, lnm12))

        if min_dist is None or dist < min_dist:
            rl = math.sqrt(rl2)
            to = math.sqrt(max(lnm12 - dist2, 0.0)) / rl
            frm = math.sqrt(max(ln2 - dist2, 0.0)) / rl
            min_dist = dist
            best = n

    # NB: the second rule overrides the first
    if to > 1:
        to = 1.0
    if frm > 1:
        to = 0.0
        frm = 1.0

    a, b = route[best - 1], route[best]
    p = Point(a.x - (a.x - b.x) * to, a.y - (a.y - b.y) * to)
    # measured to p, not min_dist: the from > 1 override can move p back to the segment start
    return NearestPointResult(
        point=p,
        segment_index=best,
        fraction_from_start=to,
        fraction_from_end=frm,
        distance=math.hypot(query.x - p.x, query.y - p.y),
    )
