# runtime/registries.py
from collections.abc import Callable
from functools import partial
from typing import Any

from snap_route.app.protocols import DistanceFn, Projector
from snap_route.config.models import (
    DistanceEuclideanModel,
    DistanceHaversineModel,
    DistanceUnion,
    ProjectorEquirectangularModel,
    ProjectorIdentityModel,
    ProjectorUnion,
    ProjectorWebMercatorModel,
)
from snap_route.domain.projection.distances import euclidean, haversine_m
from snap_route.domain.projection.projectors import (
    EquirectangularProjector,
    IdentityProjector,
    WebMercatorProjector,
)

ProjectorFactory = Callable[[ProjectorUnion, dict], Projector]
DistanceFactory = Callable[[DistanceUnion, dict], DistanceFn]

_projector_registry: dict[str, ProjectorFactory] = {}
_distance_registry: dict[str, DistanceFactory] = {}


# ------------------- Projectors ---------------------------


def register_projector(kind: str):
    def deco(fn: ProjectorFactory):
        _projector_registry[kind] = fn
        return fn

    return deco


def make_projector(cfg: ProjectorUnion, *, deps: dict[str, Any] | None = None) -> Projector:
    try:
        factory = _projector_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown projector kind {cfg.kind!r}") from None
    return factory(cfg, deps or {})


@register_projector("web_mercator")
def _make_web_mercator(cfg: ProjectorWebMercatorModel, deps):
    return WebMercatorProjector(tile_size=cfg.tile_size)


@register_projector("equirectangular")
def _make_equirectangular(cfg: ProjectorEquirectangularModel, deps):
    return EquirectangularProjector(cfg.origin_lat, cfg.origin_lng, units=cfg.units)


@register_projector("identity")
def _make_identity(cfg: ProjectorIdentityModel, deps):
    return IdentityProjector()


# ------------------- Distances ---------------------------


def register_distance(kind: str):
    def deco(fn: DistanceFactory):
        _distance_registry[kind] = fn
        return fn

    return deco


def make_distance(cfg: DistanceUnion, *, deps: dict[str, Any] | None = None) -> DistanceFn:
    try:
        factory = _distance_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown distance kind {cfg.kind!r}") from None
    return factory(cfg, deps or {})


@register_distance("haversine")
def _make_haversine(cfg: DistanceHaversineModel, deps):
    return partial(haversine_m, radius_m=cfg.radius_m)


@register_distance("euclidean")
def _make_euclidean(cfg: DistanceEuclideanModel, deps):
    return euclidean
