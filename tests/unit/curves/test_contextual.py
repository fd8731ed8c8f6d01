"""Tests for contextual curves."""

from __future__ import annotations

import math

import pytest

from easeloom.core.curves.contextual import (
    DEFAULT_GRAVITY,
    EnergyAdaptiveCurve,
    PhysicalCurve,
    as_contextual,
    directional,
    energy_adaptive,
    inertial,
    physical,
    with_fixed_context,
)
from easeloom.core.curves.functions.basic import make_ease_in
from easeloom.core.curves.library import ease_out_quad
from easeloom.core.curves.models import AnimationContext, AnimationDirection, AnimationPhase


class Recorder:
    """Curve that remembers every progress value it was called with."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.calls: list[float] = []

    def __call__(self, t: float) -> float:
        self.calls.append(t)
        return self.value


class TestAdapters:
    """Tests for as_contextual and with_fixed_context."""

    def test_as_contextual_ignores_context(self, forward_context: AnimationContext) -> None:
        """Lifted curves evaluate the plain curve."""
        curve = as_contextual(make_ease_in(2))
        assert curve(0.5, forward_context) == pytest.approx(0.25)

    def test_with_fixed_context(self) -> None:
        """Binding a context yields a plain curve."""
        ctx = AnimationContext(direction=AnimationDirection.BACKWARD)
        curve = with_fixed_context(directional(lambda t: 0.0, lambda t: 1.0), ctx)
        assert curve(0.3) == 1.0


class TestDirectional:
    """Tests for directional."""

    def test_backward_only_calls_backward(self) -> None:
        """Backward animations never evaluate the forward curve."""
        forward, backward = Recorder(0.1), Recorder(0.9)
        curve = directional(forward, backward)
        ctx = AnimationContext(direction=AnimationDirection.BACKWARD)

        for i in range(11):
            assert curve(i / 10, ctx) == 0.9

        assert forward.calls == []
        assert len(backward.calls) == 11

    def test_forward(self, forward_context: AnimationContext) -> None:
        """Forward animations use the forward curve."""
        assert directional(Recorder(0.1), Recorder(0.9))(0.5, forward_context) == 0.1

    @pytest.mark.parametrize(
        ("iteration", "expected"),
        [(0, 0.1), (1, 0.9), (2, 0.1), (3.5, 0.9), (2.7, 0.1)],
    )
    def test_alternating_by_iteration(self, iteration: float, expected: float) -> None:
        """Alternating animations switch curves on odd iterations."""
        curve = directional(Recorder(0.1), Recorder(0.9))
        ctx = AnimationContext(direction=AnimationDirection.ALTERNATING, iteration=iteration)
        assert curve(0.5, ctx) == expected


class TestInertial:
    """Tests for inertial."""

    def test_first_sample_is_base(self, forward_context: AnimationContext) -> None:
        """Without velocity history the plain ease-out is returned."""
        curve = inertial()
        assert curve(0.5, forward_context) == pytest.approx(ease_out_quad(0.5))

    def test_missing_previous_value_is_base(self) -> None:
        """Velocity alone is not enough to apply inertia."""
        ctx = AnimationContext(velocity=0.5)
        assert inertial()(0.5, ctx) == pytest.approx(0.75)

    def test_carries_velocity(self) -> None:
        """Velocity adds velocity * (1 - friction/mass) * 0.16."""
        ctx = AnimationContext(previous_value=0.2, velocity=0.5)
        assert inertial(mass=1.0, friction=0.3)(0.5, ctx) == pytest.approx(0.75 + 0.5 * 0.7 * 0.16)

    def test_context_resistance_overrides_friction(self) -> None:
        """Context resistance replaces the default friction."""
        ctx = AnimationContext(previous_value=0.2, velocity=0.5, resistance=1.0)
        assert inertial(mass=1.0, friction=0.0)(0.5, ctx) == pytest.approx(0.75)

    def test_non_positive_mass(self) -> None:
        """Mass <= 0 carries no inertia."""
        ctx = AnimationContext(previous_value=0.2, velocity=0.5)
        assert inertial(mass=0.0)(0.5, ctx) == pytest.approx(0.75)

    def test_clamped(self) -> None:
        """Large velocities are clamped to 1."""
        ctx = AnimationContext(previous_value=0.2, velocity=50.0)
        assert inertial()(0.5, ctx) == 1.0

    def test_context_not_mutated(self) -> None:
        """Evaluation never writes to the context."""
        ctx = AnimationContext(previous_value=0.2, velocity=0.5)
        before = ctx.model_dump()
        inertial()(0.5, ctx)
        assert ctx.model_dump() == before


class TestEnergyAdaptive:
    """Tests for energy_adaptive."""

    def test_full_energy_by_default(self, forward_context: AnimationContext) -> None:
        """Missing energy counts as full energy."""
        curve = energy_adaptive()
        assert curve(0.5, forward_context) == pytest.approx(ease_out_quad(0.5))

    def test_exhausted_covers_half(self) -> None:
        """Energy 0 scales progress by one half."""
        curve = energy_adaptive()
        ctx = AnimationContext(energy_level=0.0)
        assert curve(1.0, ctx) == pytest.approx(ease_out_quad(0.5))

    def test_returns_energy_curve(self) -> None:
        """Parameters are kept on the curve object."""
        curve = energy_adaptive(depletion=0.2, recovery=0.1)
        assert isinstance(curve, EnergyAdaptiveCurve)
        assert curve.depletion == 0.2
        assert curve.recovery == 0.1

    def test_next_energy_drains(self) -> None:
        """Active phases lose depletion per step."""
        curve = energy_adaptive(depletion=0.1)
        ctx = AnimationContext(energy_level=0.5, phase=AnimationPhase.CRUISING)
        assert curve.next_energy_level(ctx) == pytest.approx(0.4)

    def test_next_energy_recovers_while_resting(self) -> None:
        """Resting recovers energy."""
        curve = energy_adaptive(recovery=0.05)
        ctx = AnimationContext(energy_level=0.5, phase=AnimationPhase.RESTING)
        assert curve.next_energy_level(ctx) == pytest.approx(0.55)

    def test_next_energy_clamped(self) -> None:
        """Energy stays in [0, 1]."""
        curve = energy_adaptive(depletion=0.5, recovery=0.5)
        assert curve.next_energy_level(AnimationContext(energy_level=0.2)) == 0.0
        resting = AnimationContext(energy_level=0.9, phase=AnimationPhase.RESTING)
        assert curve.next_energy_level(resting) == 1.0

    def test_next_energy_from_default(self) -> None:
        """Missing energy starts from full."""
        curve = energy_adaptive(depletion=0.1)
        assert curve.next_energy_level(AnimationContext()) == pytest.approx(0.9)


class TestPhysical:
    """Tests for physical."""

    def test_defaults(self) -> None:
        """Default gravity, bounce and friction."""
        curve = physical()
        assert isinstance(curve, PhysicalCurve)
        assert curve.gravity == DEFAULT_GRAVITY
        assert curve.bounce == 0.3
        assert curve.friction == 0.2

    def test_fall_is_quadratic(self, forward_context: AnimationContext) -> None:
        """The first half is 2t^2."""
        assert physical()(0.25, forward_context) == pytest.approx(0.125)

    def test_lands_at_one(self, forward_context: AnimationContext) -> None:
        """The rebound ends back at 1."""
        assert physical()(1.0, forward_context) == pytest.approx(1.0)

    def test_rebound_height(self, forward_context: AnimationContext) -> None:
        """Peak rebound is bounce * (1 - friction); iteration 0 counts as 1."""
        assert physical()(0.75, forward_context) == pytest.approx(1 - 0.3 * 0.8)

    def test_later_iterations_bounce_lower(self) -> None:
        """Bounce decays geometrically with iteration."""
        ctx = AnimationContext(iteration=2)
        assert physical()(0.75, ctx) == pytest.approx(1 - 0.09 * 0.8)

    def test_resistance_overrides_friction(self) -> None:
        """Context resistance replaces friction."""
        ctx = AnimationContext(resistance=0.5)
        assert physical()(0.75, ctx) == pytest.approx(1 - 0.3 * 0.5)

    def test_negative_bounce_clamped(self) -> None:
        """Negative bounce is treated as no bounce."""
        assert physical(bounce=-1.0).bounce == 0.0

    def test_effective_gravity(self) -> None:
        """Context gravity overrides the configured gravity."""
        curve = physical(gravity=4.0)
        assert curve.effective_gravity(AnimationContext()) == 4.0
        assert curve.effective_gravity(AnimationContext(gravity=1.6)) == 1.6

    def test_zero_bounce_before_first_iteration(self) -> None:
        """Zero bounce with a negative iteration lands flat instead of raising."""
        assert physical(bounce=0.0)(0.75, AnimationContext(iteration=-1)) == 1.0

    def test_non_positive_iteration_counts_as_first(self) -> None:
        """Negative iterations rebound like iteration 1."""
        first = physical()(0.75, AnimationContext(iteration=1))
        assert physical()(0.75, AnimationContext(iteration=-3)) == pytest.approx(first)

    def test_bounce_capped_at_one(self) -> None:
        """Bounce ratios above 1 are capped."""
        assert physical(bounce=4.0).bounce == 1.0


def _extreme_contexts() -> list[AnimationContext]:
    return [
        AnimationContext(iteration=-5),
        AnimationContext(iteration=-0.5),
        AnimationContext(iteration=0.25),
        AnimationContext(iteration=1e6),
        AnimationContext(iteration=-1e6),
        AnimationContext(direction=AnimationDirection.ALTERNATING, iteration=float("inf")),
        AnimationContext(previous_value=0.0, velocity=1e300, resistance=0.0),
        AnimationContext(previous_value=0.0, velocity=-1e300, resistance=1e300),
        AnimationContext(energy_level=-10.0),
        AnimationContext(energy_level=25.0),
        AnimationContext(resistance=-3.0, gravity=-1e9),
    ]


class TestExtremeContexts:
    """Contextual curves return finite values for any context."""

    @pytest.mark.parametrize(
        "curve",
        [
            physical(),
            physical(bounce=0.0),
            physical(bounce=-2.0, friction=5.0),
            inertial(mass=1e-12),
            inertial(mass=-1.0),
            inertial(mass=1e12, friction=0.0),
            energy_adaptive(),
            energy_adaptive(depletion=5.0, recovery=-5.0),
            directional(ease_out_quad, make_ease_in(3)),
        ],
        ids=[
            "physical",
            "physical-zero-bounce",
            "physical-negative-bounce",
            "inertial-tiny-mass",
            "inertial-negative-mass",
            "inertial-huge-mass",
            "energy",
            "energy-extreme-rates",
            "directional",
        ],
    )
    @pytest.mark.parametrize("t", [-1.0, 0.0, 0.3, 0.5, 0.75, 1.0, 2.0])
    def test_finite(self, curve, t: float) -> None:
        """Evaluation never raises and never leaves the finite floats."""
        for ctx in _extreme_contexts():
            value = curve(t, ctx)
            assert isinstance(value, float)
            assert math.isfinite(value)

    def test_next_energy_level_from_out_of_range_energy(self) -> None:
        """Out-of-range stored energy is pulled back into [0, 1]."""
        curve = energy_adaptive()
        assert curve.next_energy_level(AnimationContext(energy_level=-10.0)) == 0.0
        assert curve.next_energy_level(AnimationContext(energy_level=25.0)) == 1.0
