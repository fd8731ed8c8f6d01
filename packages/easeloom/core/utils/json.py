"""JSON helpers for config files and CLI output."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import numpy as np


def _to_builtin(obj: Any) -> Any:
    """Convert numpy values and paths that ``json`` cannot encode."""
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, np.generic):
        return obj.item()
    if isinstance(obj, Path):
        return obj.as_posix()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dumps_json(obj: Any) -> str:
    """Serialize sampled curve data (numpy arrays and scalars included)."""
    return json.dumps(obj, indent=2, default=_to_builtin)


def read_json(path: str | Path) -> dict[str, Any]:
    """Parse a JSON document whose top level must be an object.

    Raises:
        ValueError: On malformed JSON or a non-object document.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object, got {type(data).__name__}")
    return data
