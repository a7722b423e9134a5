# io/snap_logging.py
import json
import logging
import sys

from snap_route.app.events import MarkerSnapped, RouteLoaded, ScaleChanged
from snap_route.app.hooks import NoopHooks
from snap_route.domain.entities.geography import LatLng, NearestPointResult
from snap_route.io.recorder import Recorder


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload)


def _default_json_logger(name="snap_route", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class SnapLogging(NoopHooks):
    """
    Structured logs for route/scale changes and snaps, plus business events to a Recorder.
    Snaps fire on every pointer move, so they are only logged in debug mode and sampled.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.recorder = recorder
        if logger is None:
            logger = _default_json_logger()
            logger.setLevel("DEBUG" if debug else level)
        self.log = logger
        self._snaps = 0

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _biz(self, ev):
        if self.recorder:
            self.recorder.emit(ev)

    # --------------------------------------------------------

    def route_loaded(self, *, vertices: int, scale: float):
        self._emit("INFO", "route_loaded", vertices=vertices, scale=scale)
        self._biz(RouteLoaded(self.run_id, vertices, scale))

    def scale_changed(self, *, old: float, new: float, vertices: int):
        self._emit("INFO", "scale_changed", old=old, new=new, vertices=vertices)
        self._biz(ScaleChanged(self.run_id, old, new))

    def snapped(self, query: LatLng, result: NearestPointResult, *, snapped: LatLng | None):
        self._snaps += 1
        if self.debug and (self._snaps % self.sample_every) == 0:
            self._emit(
                "DEBUG",
                "snapped" if snapped else "no_route",
                query=[query.lat, query.lng],
                snapped=[snapped.lat, snapped.lng] if snapped else None,
                segment=result.segment_index,
                to=result.fraction_from_start,
                offset_px=result.distance,
            )
        if snapped is not None:
            self._biz(
                MarkerSnapped(
                    self.run_id,
                    snapped.lat,
                    snapped.lng,
                    result.segment_index,
                    result.fraction_from_start,
                    result.distance,
                )
            )

    def error(self, *, op: str, exc: BaseException, **extra):
        self._emit("ERROR", "snap_error", op=op, error=str(exc), error_type=type(exc).__name__, **extra)
