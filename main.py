# main.py
import sys

from snap_route.app.build import build
from snap_route.domain.entities.geography import LatLng
from snap_route.io.config import load_config
from snap_route.io.recorder import MemorySink


def run(config_path: str | None = None):
    cfg = load_config(config_path) if config_path else {"scale": 15, "log": {"debug": True}}

    # A short walk along the Amsterdam canals
    route = [
        LatLng(52.3731, 4.8922),
        LatLng(52.3745, 4.8897),
        LatLng(52.3760, 4.8870),
        LatLng(52.3772, 4.8853),
    ]
    # business events stay in memory so stdout only carries the log lines and the report
    events = MemorySink()
    app = build(cfg, route=route, sinks=[events])
    ctl = app.controller

    # Replay a pointer trail, then zoom in and replay once more
    trail = [LatLng(52.3735, 4.8905), LatLng(52.3752, 4.8891), LatLng(52.3770, 4.8840)]
    for scale in (ctl.scale, ctl.scale + 2):
        ctl.on_scale_changed(scale)
        for q in trail:
            ctl.on_query_point_changed(q)
            print(f"z={scale:g} {q} -> {ctl.distance_along_route_for_current_marker():.1f} m")
    print(f"{len(events.events)} business events recorded")


if __name__ == "__main__":
    run(sys.argv[1] if len(sys.argv) > 1 else None)
