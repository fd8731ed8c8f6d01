"""Shared utilities for easeloom."""

from easeloom.core.utils.logging import configure_logging, get_logger
from easeloom.core.utils.math import clamp, lerp, wrap_angle

__all__ = [
    "clamp",
    "configure_logging",
    "get_logger",
    "lerp",
    "wrap_angle",
]
