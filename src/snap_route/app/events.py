from dataclasses import dataclass


# Business events handed to the Recorder. Flat fields so sinks can json.dumps(asdict(ev)).
@dataclass
class RouteLoaded:
    run_id: str
    vertices: int
    scale: float


@dataclass
class ScaleChanged:
    run_id: str
    old_scale: float
    new_scale: float


@dataclass
class MarkerSnapped:
    run_id: str
    lat: float
    lng: float
    segment_index: int
    fraction: float
    offset_px: float  # planar distance from the query to the snapped point
