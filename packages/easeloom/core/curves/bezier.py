"""Cubic Bezier easing curves (CSS transition-timing-function style).

The curve runs from (0, 0) to (1, 1) with two free control points. Because a
Bezier is parameterized by s rather than by x, evaluating it at progress t
needs an inverse lookup x -> s. The curve is sampled once into a fixed-size
table at construction and each evaluation interpolates that table.
"""

from __future__ import annotations

import logging

import bezier
import numpy as np

from easeloom.core.utils.math import clamp

logger = logging.getLogger(__name__)

DEFAULT_TABLE_SIZE = 1000


class CubicBezierCurve:
    """Easing curve defined by two cubic Bezier control points.

    x1 and x2 are clamped to [0, 1] so that x(s) is monotonic and the lookup
    is a function. y1 and y2 may leave [0, 1] to produce anticipation or
    overshoot.

    The lookup tables are read-only after construction, so instances are safe
    to share between animations and threads.

    Example:
        >>> ease = CubicBezierCurve(0.25, 0.1, 0.25, 1.0)
        >>> ease(0.0), ease(1.0)
        (0.0, 1.0)
    """

    def __init__(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        table_size: int = DEFAULT_TABLE_SIZE,
    ) -> None:
        """Build the curve and its lookup table.

        Args:
            x1: X of the first control point, clamped to [0, 1].
            y1: Y of the first control point.
            x2: X of the second control point, clamped to [0, 1].
            y2: Y of the second control point.
            table_size: Number of table intervals (table has table_size + 1 entries).

        Raises:
            ValueError: If table_size < 1.
        """
        if table_size < 1:
            raise ValueError("table_size must be >= 1")

        self.x1 = clamp(float(x1))
        self.y1 = float(y1)
        self.x2 = clamp(float(x2))
        self.y2 = float(y2)
        self.table_size = table_size

        nodes = np.asfortranarray(
            [
                [0.0, self.x1, self.x2, 1.0],
                [0.0, self.y1, self.y2, 1.0],
            ]
        )
        curve = bezier.Curve(nodes, degree=3)

        s_grid = np.linspace(0.0, 1.0, table_size + 1)
        evaluated = curve.evaluate_multi(s_grid)

        self._xs = np.ascontiguousarray(evaluated[0, :])
        self._ys = np.ascontiguousarray(evaluated[1, :])
        self._xs.setflags(write=False)
        self._ys.setflags(write=False)

        logger.debug(
            "Built cubic Bezier (%s, %s, %s, %s) with %d table entries",
            self.x1,
            self.y1,
            self.x2,
            self.y2,
            table_size + 1,
        )

    def __call__(self, t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        return float(np.interp(t, self._xs, self._ys))

    def __repr__(self) -> str:
        return f"CubicBezierCurve({self.x1}, {self.y1}, {self.x2}, {self.y2})"


def cubic_bezier(
    x1: float, y1: float, x2: float, y2: float, table_size: int = DEFAULT_TABLE_SIZE
) -> CubicBezierCurve:
    """Convenience constructor mirroring CSS ``cubic-bezier()``."""
    return CubicBezierCurve(x1, y1, x2, y2, table_size=table_size)


# CSS named timing functions
EASE = CubicBezierCurve(0.25, 0.1, 0.25, 1.0)
EASE_IN = CubicBezierCurve(0.42, 0.0, 1.0, 1.0)
EASE_OUT = CubicBezierCurve(0.0, 0.0, 0.58, 1.0)
EASE_IN_OUT = CubicBezierCurve(0.42, 0.0, 0.58, 1.0)
