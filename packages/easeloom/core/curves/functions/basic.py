"""Basic curve builders."""

from __future__ import annotations

from easeloom.core.curves.protocols import Curve
from easeloom.core.utils.math import clamp


def linear(t: float) -> float:
    """Identity curve, clamped to [0, 1]."""
    return clamp(t)


def make_ease_in(power: float) -> Curve:
    """Build a power ease-in curve: t^power.

    Args:
        power: Exponent (1 = linear, higher = slower start).

    Returns:
        Curve clamping t to [0, 1].

    Example:
        >>> make_ease_in(2)(0.5)
        0.25
    """

    def ease_in(t: float) -> float:
        return clamp(t) ** power

    return ease_in


def make_ease_out(power: float) -> Curve:
    """Build a power ease-out curve: 1 - (1 - t)^power."""

    def ease_out(t: float) -> float:
        return 1 - (1 - clamp(t)) ** power

    return ease_out


def make_ease_in_out(power: float) -> Curve:
    """Build a power ease-in-out curve, symmetric about (0.5, 0.5).

    Example:
        >>> make_ease_in_out(3)(0.5)
        0.5
    """

    def ease_in_out(t: float) -> float:
        c = clamp(t)
        if c < 0.5:
            return (2 * c) ** power / 2
        return 1 - (2 - 2 * c) ** power / 2

    return ease_in_out
