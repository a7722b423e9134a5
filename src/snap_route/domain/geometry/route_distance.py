from collections.abc import Callable, Sequence

from snap_route.domain.entities.geography import LatLng


def segment_distances(
    route: Sequence[LatLng], distance: Callable[[LatLng, LatLng], float]
) -> list[float]:
    """Physical length of each segment, in route order (len(route) - 1 entries)."""
    return [distance(a, b) for a, b in zip(route[:-1], route[1:])]


def distance_along_route(
    route: Sequence,
    physical_distances: Sequence[float],
    segment_index: int | None,
    fraction: float,
) -> float:
    """
    Arc length from route[0] to the point `fraction` of the way along segment
    `segment_index` (route[i-1] -> route[i]).

    Distances come from `physical_distances`, not from planar coordinates, so
    the result does not depend on the projection scale.
    """
    if len(route) < 2 or segment_index is None:
        return 0.0
    if len(physical_distances) != len(route) - 1:
        raise ValueError(
            f"expected {len(route) - 1} segment distances, got {len(physical_distances)}"
        )
    if not 1 <= segment_index < len(route):
        raise ValueError(f"segment_index {segment_index} outside [1, {len(route) - 1}]")

    d = 0.0
    for n in range(1, segment_index):
        d += physical_distances[n - 1]
    d += physical_distances[segment_index - 1] * fraction
    return d
