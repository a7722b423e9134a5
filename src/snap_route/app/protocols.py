from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from snap_route.domain.entities.geography import LatLng, Point


# ------------- Collaborators --------------------
@runtime_checkable
class Projector(Protocol):
    """
    Responsibilities:
      • Map geographic coordinates to a planar (pixel) frame at a given scale, and back.
      • Raise on coordinates it cannot handle; callers do not recover.
    Scale is host-defined (zoom level for the shipped projectors).
    """

    def project(self, p: LatLng, scale: float) -> Point: ...
    def unproject(self, p: Point, scale: float) -> LatLng: ...
    def project_many(self, points: Sequence[LatLng], scale: float) -> list[Point]:
        """Project a whole route at once; same result as calling project per point."""


@runtime_checkable
class DistanceFn(Protocol):
    """Physical distance between two geographic points (meters for haversine)."""

    def __call__(self, a: LatLng, b: LatLng) -> float: ...


@runtime_checkable
class Marker(Protocol):
    def get_position(self) -> LatLng | None: ...
    def set_position(self, p: LatLng) -> None: ...
