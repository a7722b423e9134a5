from typing import Protocol

from snap_route.domain.entities.geography import LatLng, NearestPointResult


class SnapHooks(Protocol):
    def route_loaded(self, *, vertices: int, scale: float): ...
    def scale_changed(self, *, old: float, new: float, vertices: int): ...
    def snapped(self, query: LatLng, result: NearestPointResult, *, snapped: LatLng | None): ...
    def error(self, *, op: str, exc: BaseException, **kw): ...


class NoopHooks:
    def route_loaded(self, **_):
        pass

    def scale_changed(self, **_):
        pass

    def snapped(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass
