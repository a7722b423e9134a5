from math import isfinite
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = 1

    @field_validator("sample_every")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("sample_every must be >= 1")
        return v


# ----------------- PROJECTORS ---------------------


class ProjectorWebMercatorModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["web_mercator"] = "web_mercator"
    tile_size: int = 256

    @field_validator("tile_size")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("tile_size must be > 0")
        return v


class ProjectorEquirectangularModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["equirectangular"] = "equirectangular"
    origin_lat: float
    origin_lng: float
    units: Literal["meters", "feet"] = "meters"

    @field_validator("origin_lat")
    @classmethod
    def _lat_in_range(cls, v: float) -> float:
        # cos(lat) is the x scale factor, so the poles are excluded
        if not isfinite(v) or not -90.0 < v < 90.0:
            raise ValueError("origin_lat must be inside (-90, 90)")
        return v

    @field_validator("origin_lng")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not isfinite(v):
            raise ValueError("origin_lng must be finite")
        return v


class ProjectorIdentityModel(BaseModel):
    """Test stub: planar data stored as (lat=y, lng=x)."""

    model_config = ConfigDict(extra="forbid")
    kind: Literal["identity"] = "identity"


ProjectorUnion = Annotated[
    ProjectorWebMercatorModel | ProjectorEquirectangularModel | ProjectorIdentityModel,
    Field(discriminator="kind"),
]

# ----------------- DISTANCES ---------------------


class DistanceHaversineModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["haversine"] = "haversine"
    radius_m: float = 6_378_137.0

    @field_validator("radius_m")
    def _positive(cls, v: float, info: ValidationInfo) -> float:
        if not isfinite(v) or v <= 0:
            raise ValueError(f"{info.field_name} must be a positive finite number")
        return v


class DistanceEuclideanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["euclidean"] = "euclidean"


DistanceUnion = Annotated[
    DistanceHaversineModel | DistanceEuclideanModel, Field(discriminator="kind")
]


# ------------------------------------------------------------------


class SnapModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "snap"
    run_id: str = "local"
    scale: float = 0.0  # zoom level for web_mercator
    start_active: bool = True
    projector: ProjectorUnion = Field(default_factory=ProjectorWebMercatorModel)
    distance: DistanceUnion = Field(default_factory=DistanceHaversineModel)
    log: LogModel = LogModel()

    @field_validator("scale")
    @classmethod
    def _finite_scale(cls, v: float) -> float:
        if not isfinite(v):
            raise ValueError("scale must be finite")
        return v
