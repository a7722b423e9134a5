class SnapRouteError(Exception):
    """Base class for snap_route errors."""


class DegenerateSegmentError(SnapRouteError, ZeroDivisionError):
    """A route segment has zero length (duplicate consecutive vertices)."""

    def __init__(self, segment_index: int):
        super().__init__(f"segment {segment_index} has zero length")
        self.segment_index = segment_index


class ProjectionError(SnapRouteError, ValueError):
    """A coordinate cannot be projected (or unprojected)."""
