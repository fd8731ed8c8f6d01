"""Contextual curves.

Curves that read the running animation's state (direction, iteration,
velocity, energy, environment) in addition to progress. They never write to
the context: evolving velocity, previous value, iteration or energy between
samples is the animation driver's job.
"""

from __future__ import annotations

import logging
import math

from easeloom.core.curves.library import ease_out_quad
from easeloom.core.curves.models import AnimationContext, AnimationDirection, AnimationPhase
from easeloom.core.curves.protocols import ContextualCurve, Curve
from easeloom.core.utils.math import clamp

logger = logging.getLogger(__name__)

# Share of the carried-over velocity added to the base value
_INERTIA_GAIN = 0.16

DEFAULT_GRAVITY = 9.8
DEFAULT_BOUNCE = 0.3
DEFAULT_FRICTION = 0.2


def as_contextual(curve: Curve) -> ContextualCurve:
    """Lift a plain curve to the contextual signature, ignoring the context."""

    def contextual(t: float, context: AnimationContext) -> float:
        return curve(t)

    return contextual


def with_fixed_context(curve: ContextualCurve, context: AnimationContext) -> Curve:
    """Bind a contextual curve to one context, producing a plain curve."""
    return lambda t: curve(t, context)


def directional(forward: Curve, backward: Curve) -> ContextualCurve:
    """Choose a curve by animation direction.

    Alternating animations use ``forward`` on even iterations and
    ``backward`` on odd ones. Only the chosen curve is evaluated.
    """

    def curve(t: float, context: AnimationContext) -> float:
        if context.direction == AnimationDirection.FORWARD:
            return forward(t)
        if context.direction == AnimationDirection.BACKWARD:
            return backward(t)
        iteration = context.iteration if math.isfinite(context.iteration) else 0
        if math.floor(iteration) % 2 == 0:
            return forward(t)
        return backward(t)

    return curve


def inertial(mass: float = 1.0, friction: float = 0.3) -> ContextualCurve:
    """Ease-out curve that carries over the driver-reported velocity.

    On the first sample (no ``previous_value`` or ``velocity`` in the
    context) the plain ease-out value is returned. Afterwards
    ``velocity * max(0, 1 - resistance/mass) * 0.16`` is added, where
    resistance is ``context.resistance`` if set, else ``friction``. The
    result is clamped to [0, 1].

    Args:
        mass: Heavier objects keep more of their velocity. Non-positive
            mass carries no inertia.
        friction: Resistance used when the context provides none.
    """

    def curve(t: float, context: AnimationContext) -> float:
        base = ease_out_quad(t)

        if context.previous_value is None or context.velocity is None:
            return base

        resistance = context.resistance if context.resistance is not None else friction
        inertia_factor = max(0.0, 1.0 - resistance / mass) if mass > 0 else 0.0

        return clamp(base + context.velocity * inertia_factor * _INERTIA_GAIN)

    return curve


class EnergyAdaptiveCurve:
    """Ease-out curve slowed down by low energy.

    Progress is scaled by ``0.5 + 0.5 * energy_level`` before easing, so an
    exhausted animation (energy 0) only covers the first half of its
    progress. ``energy_level`` defaults to 1.0 (full speed).

    Depletion and recovery feed ``next_energy_level``, which the driver
    calls between steps to evolve the context; evaluating the curve itself
    never changes anything.
    """

    def __init__(self, depletion: float = 0.1, recovery: float = 0.05) -> None:
        self.depletion = depletion
        self.recovery = recovery

    def __call__(self, t: float, context: AnimationContext) -> float:
        energy = self._energy(context)
        return ease_out_quad(t * (0.5 + 0.5 * energy))

    def next_energy_level(self, context: AnimationContext) -> float:
        """Energy level the driver should store for the next step.

        Resting animations recover ``recovery``; any other phase drains
        ``depletion``. The result stays in [0, 1].
        """
        energy = self._energy(context)
        if context.phase == AnimationPhase.RESTING:
            return clamp(energy + self.recovery)
        return clamp(energy - self.depletion)

    @staticmethod
    def _energy(context: AnimationContext) -> float:
        return 1.0 if context.energy_level is None else context.energy_level


def energy_adaptive(depletion: float = 0.1, recovery: float = 0.05) -> EnergyAdaptiveCurve:
    """Build an energy-adaptive contextual curve."""
    return EnergyAdaptiveCurve(depletion=depletion, recovery=recovery)


class PhysicalCurve:
    """Fall-and-rebound curve.

    The first half is a quadratic fall ``2t^2``. The second half rebounds:
    ``1 - sin(pi * phase) * bounce^iteration * (1 - friction)`` where phase
    runs 0 -> 1 over the second half, so each later iteration bounces lower.
    Iterations below or at 0 count as 1, and bounce is clamped to [0, 1].

    Context ``resistance`` overrides ``friction``. Gravity is resolved per
    context by ``effective_gravity`` but does not change the shape.
    """

    def __init__(
        self,
        gravity: float | None = None,
        bounce: float | None = None,
        friction: float | None = None,
    ) -> None:
        self.gravity = DEFAULT_GRAVITY if gravity is None else gravity
        self.bounce = DEFAULT_BOUNCE if bounce is None else clamp(bounce)
        self.friction = DEFAULT_FRICTION if friction is None else friction

    def __call__(self, t: float, context: AnimationContext) -> float:
        t = clamp(t)
        if t < 0.5:
            return 2 * t * t

        friction = context.resistance if context.resistance is not None else self.friction
        bounce_phase = (t - 0.5) * 2
        iteration = context.iteration if context.iteration > 0 else 1
        damping_factor = self.bounce**iteration
        height = math.sin(bounce_phase * math.pi) * damping_factor

        return 1 - height * (1 - friction)

    def effective_gravity(self, context: AnimationContext) -> float:
        """Gravity in effect for this context."""
        return self.gravity if context.gravity is None else context.gravity


def physical(
    gravity: float | None = None,
    bounce: float | None = None,
    friction: float | None = None,
) -> PhysicalCurve:
    """Build a fall-and-rebound contextual curve.

    Args:
        gravity: Default 9.8.
        bounce: Rebound ratio per iteration, default 0.3.
        friction: Energy lost on impact, default 0.2.
    """
    curve = PhysicalCurve(gravity=gravity, bounce=bounce, friction=friction)
    logger.debug(
        "Physical curve: gravity=%s bounce=%s friction=%s",
        curve.gravity,
        curve.bounce,
        curve.friction,
    )
    return curve
