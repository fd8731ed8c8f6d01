"""Protocol definitions for curve callables.

A curve is any callable mapping normalized progress to a shaping value.
Contextual curves additionally read an AnimationContext supplied by the
animation driver.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from easeloom.core.curves.models import AnimationContext


@runtime_checkable
class Curve(Protocol):
    """Pure function of progress.

    Curves hold no mutable state and may be shared between unrelated
    animations and threads.

    Example:
        >>> def ease_in_quad(t: float) -> float:
        ...     return t * t
        >>> isinstance(ease_in_quad, Curve)
        True
    """

    def __call__(self, t: float) -> float:
        """Evaluate the curve.

        Args:
            t: Progress, nominally in [0, 1]

        Returns:
            Shaped value (may leave [0, 1] for overshooting curves)
        """
        ...


@runtime_checkable
class ContextualCurve(Protocol):
    """Curve that also reads the running animation's context.

    Implementations must not mutate the context.
    """

    def __call__(self, t: float, context: AnimationContext) -> float:
        """Evaluate the curve.

        Args:
            t: Progress, nominally in [0, 1]
            context: Current animation state

        Returns:
            Shaped value
        """
        ...


Predicate = Callable[[float], bool]
