"""Sampling curves onto a uniform grid, and back.

Previews, exports and the CLI work on sampled points; ``points_to_curve``
turns such a sample back into a callable curve.
"""

from __future__ import annotations

import numpy as np

from easeloom.core.curves.models import CurvePoint
from easeloom.core.curves.protocols import Curve


def sample_uniform_grid(n: int) -> list[float]:
    """Generate N evenly-spaced samples covering [0, 1] inclusive.

    Args:
        n: Number of samples to generate. Must be >= 2.

    Returns:
        List of N floats from 0.0 to 1.0.

    Raises:
        ValueError: If n < 2.

    Example:
        >>> sample_uniform_grid(5)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    return [float(t) for t in np.linspace(0.0, 1.0, n)]


def sample_curve(curve: Curve, n_samples: int) -> list[CurvePoint]:
    """Evaluate a curve on a uniform grid.

    Args:
        curve: Curve to sample.
        n_samples: Number of samples (must be >= 2), endpoints included.

    Returns:
        List of CurvePoints.

    Raises:
        ValueError: If n_samples < 2.
    """
    if n_samples < 2:
        raise ValueError("n_samples must be >= 2")
    return [CurvePoint(t=t, v=float(curve(t))) for t in sample_uniform_grid(n_samples)]


def interpolate_linear(points: list[CurvePoint], t: float) -> float:
    """Linearly interpolate value at time t.

    Given a list of curve points with non-decreasing t values, find the value
    at the specified time. Times before the first point or after the last
    point take the boundary value.

    Raises:
        ValueError: If points is empty.

    Example:
        >>> points = [CurvePoint(t=0.0, v=0.0), CurvePoint(t=1.0, v=1.0)]
        >>> interpolate_linear(points, 0.5)
        0.5
    """
    if not points:
        raise ValueError("points cannot be empty")

    times = np.fromiter((p.t for p in points), dtype=float, count=len(points))
    values = np.fromiter((p.v for p in points), dtype=float, count=len(points))
    return float(np.interp(t, times, values))


def points_to_curve(points: list[CurvePoint]) -> Curve:
    """Turn sampled points back into a curve by linear interpolation.

    Raises:
        ValueError: If points is empty.
    """
    if not points:
        raise ValueError("points cannot be empty")

    times = np.fromiter((p.t for p in points), dtype=float, count=len(points))
    values = np.fromiter((p.v for p in points), dtype=float, count=len(points))

    def curve(t: float) -> float:
        return float(np.interp(t, times, values))

    return curve
