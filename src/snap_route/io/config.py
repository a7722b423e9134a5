# src/snap_route/io/config.py
from pathlib import Path

from snap_route.config.models import SnapModel


def load_config(path: str | Path) -> SnapModel:
    """Read and validate a JSON snap config. Raises pydantic.ValidationError on bad input."""
    return SnapModel.model_validate_json(Path(path).expanduser().read_text(encoding="utf-8"))
