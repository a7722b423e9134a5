# snap_route/app/build.py
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from snap_route.app.controllers.snap import SnapController
from snap_route.app.hooks import NoopHooks, SnapHooks
from snap_route.app.protocols import DistanceFn, Marker, Projector
from snap_route.config.models import SnapModel
from snap_route.domain.entities.geography import LatLng
from snap_route.domain.entities.marker import SimpleMarker
from snap_route.io.recorder import JsonlSink, Recorder, Sink
from snap_route.io.snap_logging import SnapLogging
from snap_route.runtime.registries import make_distance, make_projector


@dataclass
class App:
    controller: SnapController
    projector: Projector
    distance: DistanceFn
    hooks: SnapHooks
    recorder: Recorder | None


def build(
    cfg: SnapModel | Mapping,
    *,
    route: Sequence[LatLng] = (),
    marker: Marker | None = None,
    sinks: Sequence[Sink] | None = None,
    use_logging: bool = True,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, SnapModel) else SnapModel.model_validate(cfg)

    # 1) Collaborators
    projector = make_projector(model.projector)
    distance = make_distance(model.distance)

    # 2) Hooks; recorder only exists when logging is on
    recorder = None
    if use_logging:
        recorder = Recorder(*(sinks if sinks is not None else [JsonlSink()]))
        hooks = SnapLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
            recorder=recorder,
        )
    else:
        hooks = NoopHooks()

    # 3) Controller (projects the route at the configured scale)
    controller = SnapController(
        projector=projector,
        distance=distance,
        marker=marker or SimpleMarker(),
        route=route,
        scale=model.scale,
        hooks=hooks,
        active=model.start_active,
    )
    return App(controller, projector, distance, hooks, recorder)
