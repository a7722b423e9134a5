from dataclasses import dataclass


# Core geometry types used by the snapping engine
@dataclass(frozen=True)
class Point:
    x: float  # pixels (or any planar unit) at the current scale
    y: float


@dataclass(frozen=True)
class LatLng:
    lat: float  # degrees
    lng: float


@dataclass(frozen=True)
class NearestPointResult:
    """
    Closest point on a planar route to a query point.

    segment_index names the segment by its ending vertex (route[i-1] -> route[i]).
    fraction_from_start / fraction_from_end are the position of the foot within
    that segment, measured from route[i-1] and route[i] respectively.
    Every field is None when the route has fewer than two vertices.
    """

    point: Point | None = None
    segment_index: int | None = None
    fraction_from_start: float | None = None
    fraction_from_end: float | None = None
    distance: float | None = None  # planar distance query -> point

    @property
    def found(self) -> bool:
        return self.segment_index is not None


NO_RESULT = NearestPointResult()
