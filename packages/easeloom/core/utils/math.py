"""Math utilities for common operations."""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, min_val: Number = 0.0, max_val: Number = 1.0) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value (default 0.0)
        max_val: Maximum allowed value (default 1.0)

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def lerp(a: Number, b: Number, t: float) -> float:
    """Linear interpolation between a and b.

    Args:
        a: Start value
        b: End value
        t: Interpolation factor, usually an eased progress value

    Returns:
        Interpolated value
    """
    return float(a) + (float(b) - float(a)) * t


def wrap_angle(angle: float) -> float:
    """Wrap an angle in radians into [0, 2*pi)."""
    two_pi = 2 * math.pi
    return ((angle % two_pi) + two_pi) % two_pi
