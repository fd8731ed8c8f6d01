"""Value interpolation driven by curves.

The animation driver computes progress; these helpers turn eased progress
into concrete values between a start and an end.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict

from easeloom.core.curves.protocols import Curve
from easeloom.core.utils.math import lerp, wrap_angle


class Vector2(BaseModel):
    """2D vector."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class Vector3(BaseModel):
    """3D vector."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float


class RGBColor(BaseModel):
    """RGB color with 0-255 channels."""

    model_config = ConfigDict(frozen=True)

    r: int
    g: int
    b: int


def interpolate_number(start: float, end: float, curve: Curve, t: float) -> float:
    """Ease between two numbers."""
    return lerp(start, end, curve(t))


def interpolate_vector2(start: Vector2, end: Vector2, curve: Curve, t: float) -> Vector2:
    """Ease between two 2D vectors (both axes share the eased progress)."""
    eased = curve(t)
    return Vector2(x=lerp(start.x, end.x, eased), y=lerp(start.y, end.y, eased))


def interpolate_vector3(start: Vector3, end: Vector3, curve: Curve, t: float) -> Vector3:
    """Ease between two 3D vectors."""
    eased = curve(t)
    return Vector3(
        x=lerp(start.x, end.x, eased),
        y=lerp(start.y, end.y, eased),
        z=lerp(start.z, end.z, eased),
    )


def interpolate_rgb(start: RGBColor, end: RGBColor, curve: Curve, t: float) -> RGBColor:
    """Ease between two colors, rounding each channel.

    Channels are not clamped: overshooting curves can leave 0-255.
    """
    eased = curve(t)
    return RGBColor(
        r=round(lerp(start.r, end.r, eased)),
        g=round(lerp(start.g, end.g, eased)),
        b=round(lerp(start.b, end.b, eased)),
    )


def interpolate_angle(start: float, end: float, curve: Curve, t: float) -> float:
    """Ease between two angles (radians) along the shortest arc.

    Both angles are wrapped into [0, 2*pi) first; the result is not wrapped.

    Example:
        >>> from easeloom.core.curves.functions import linear
        >>> round(interpolate_angle(0.1, 2 * math.pi - 0.1, linear, 0.5), 6)
        0.0
    """
    a = wrap_angle(start)
    b = wrap_angle(end)

    delta = b - a
    if abs(delta) > math.pi:
        delta = delta - 2 * math.pi if delta > 0 else delta + 2 * math.pi

    return a + delta * curve(t)
