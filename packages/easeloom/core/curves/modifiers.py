from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from easeloom.core.curves.protocols import Curve


class CurveModifier(str, Enum):
    """Curve transformation modifiers.

    Applied to base curves to create variations without defining new curve types.
    Can be combined for complex effects.
    """

    REVERSE = "reverse"  # Mirror horizontally (reverse time)
    FLIP = "flip"  # Mirror vertically (flip values)
    INVERT = "invert"  # Both: turns an ease-in into the matching ease-out


def reverse_curve(curve: Curve) -> Curve:
    """Play the curve backwards in time: f(1 - t)."""
    return lambda t: curve(1.0 - t)


def flip_curve(curve: Curve) -> Curve:
    """Flip curve values vertically: 1 - f(t)."""
    return lambda t: 1.0 - curve(t)


def invert_curve(curve: Curve) -> Curve:
    """Point-reflect the curve about (0.5, 0.5): 1 - f(1 - t)."""
    return lambda t: 1.0 - curve(1.0 - t)


_MODIFIERS = {
    CurveModifier.REVERSE: reverse_curve,
    CurveModifier.FLIP: flip_curve,
    CurveModifier.INVERT: invert_curve,
}


def apply_modifiers(curve: Curve, modifiers: Iterable[CurveModifier]) -> Curve:
    """Apply modifier transformations to a curve, in order."""
    result = curve
    for modifier in modifiers:
        result = _MODIFIERS[modifier](result)
    return result
