from dataclasses import dataclass

from snap_route.domain.entities.geography import LatLng


@dataclass
class SimpleMarker:
    """In-memory marker; hosts with a real map widget supply their own."""

    position: LatLng | None = None

    def get_position(self) -> LatLng | None:
        return self.position

    def set_position(self, p: LatLng) -> None:
        self.position = p
