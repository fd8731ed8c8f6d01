"""Semantic curve synthesis.

Turns a designer-facing MovementProfile into a concrete curve: six base
curves are scored against the profile's characteristics, the three best are
kept and blended with renormalized weights.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from easeloom.core.curves.composition import CurveCombinator, WeightedCurve, normalize_weights
from easeloom.core.curves.contextual import inertial, physical
from easeloom.core.curves.library import CurveLibrary, build_default_registry
from easeloom.core.curves.models import (
    AnimationContext,
    AnimationDirection,
    MovementCharacteristics,
    MovementProfile,
)
from easeloom.core.curves.protocols import ContextualCurve, Curve
from easeloom.core.curves.registry import CurveRegistry

logger = logging.getLogger(__name__)

TOP_CANDIDATES = 3


@dataclass(frozen=True)
class SemanticCandidate:
    """A base curve and the characteristic-derived score that weights it."""

    role: str
    curve_id: CurveLibrary
    score: Callable[[MovementCharacteristics], float]


# Order matters: ties keep this order.
SEMANTIC_CANDIDATES: tuple[SemanticCandidate, ...] = (
    SemanticCandidate("fluid", CurveLibrary.EASE_IN_OUT_SINE, lambda c: c.fluidity),
    SemanticCandidate("heavy", CurveLibrary.EASE_IN_OUT_BACK, lambda c: c.weight),
    SemanticCandidate("elastic", CurveLibrary.ELASTIC_OUT, lambda c: c.elasticity),
    SemanticCandidate("simple", CurveLibrary.EASE_IN_OUT_QUAD, lambda c: 1 - c.complexity),
    SemanticCandidate("playful", CurveLibrary.BOUNCE_OUT, lambda c: c.playfulness),
    SemanticCandidate("mechanical", CurveLibrary.LINEAR, lambda c: 1 - c.organicity),
)


class SemanticSynthesizer:
    """Maps movement profiles to curves.

    Args:
        combinator: Combinator used for blending (default: a new one).
        registry: Source of the base curves (default: the built-in catalog).
    """

    def __init__(
        self,
        combinator: CurveCombinator | None = None,
        registry: CurveRegistry | None = None,
    ) -> None:
        self._combinator = combinator or CurveCombinator()
        self._registry = registry or build_default_registry()

    def _rank(
        self, characteristics: MovementCharacteristics
    ) -> list[tuple[SemanticCandidate, float]]:
        scored = [(c, c.score(characteristics)) for c in SEMANTIC_CANDIDATES]
        # Stable sort: ties keep SEMANTIC_CANDIDATES order
        return sorted(scored, key=lambda pair: pair[1], reverse=True)

    def rank_candidates(self, characteristics: MovementCharacteristics) -> list[WeightedCurve]:
        """Score every candidate and sort by descending weight.

        Equal weights keep candidate-table order.
        """
        return [
            WeightedCurve(curve=self._registry.get(candidate.curve_id.value), weight=weight)
            for candidate, weight in self._rank(characteristics)
        ]

    def select(self, characteristics: MovementCharacteristics) -> list[tuple[str, float]]:
        """Return (curve_id, normalized weight) for the curves a profile blends."""
        top = self._rank(characteristics)[:TOP_CANDIDATES]
        weights = normalize_weights(len(top), [weight for _, weight in top])
        return [
            (candidate.curve_id.value, weight)
            for (candidate, _), weight in zip(top, weights, strict=True)
        ]

    def synthesize(self, profile: MovementProfile) -> Curve:
        """Build the blended curve for a profile.

        Deterministic: the same profile always yields pointwise-identical
        curves. Every candidate maps 0 -> 0 and 1 -> 1, so the blend returns
        exactly 0.0 and 1.0 at the ends despite rounding in the weighted sum.
        """
        selection = self.select(profile.characteristics)
        logger.debug("Synthesized '%s' from %s", profile.name, selection)

        blended = self._combinator.blend(
            [self._registry.get(curve_id) for curve_id, _ in selection],
            [weight for _, weight in selection],
        )

        def curve(t: float) -> float:
            if t <= 0.0:
                return 0.0
            if t >= 1.0:
                return 1.0
            return blended(t)

        return curve

    def synthesize_contextual(self, profile: MovementProfile) -> ContextualCurve:
        """Build a context-aware variant of the profile's curve.

        Heavy profiles (weight > 0.6) get inertia when the animation
        alternates; organic, weighted profiles (organicity > 0.7 and
        weight > 0.4) fall and rebound physically. Everything else uses the
        plain semantic curve.
        """
        c = profile.characteristics
        base = self.synthesize(profile)
        inertia = inertial(mass=c.weight * 2, friction=(1 - c.fluidity) * 0.5)
        rebound = physical(
            gravity=c.weight * 15,
            bounce=c.elasticity * 0.7,
            friction=(1 - c.fluidity) * 0.5,
        )
        organic = c.organicity > 0.7 and c.weight > 0.4

        def curve(t: float, context: AnimationContext) -> float:
            if context.direction == AnimationDirection.ALTERNATING and c.weight > 0.6:
                return inertia(t, context)
            if organic:
                return rebound(t, context)
            return base(t)

        return curve


def semantic_easing(profile: MovementProfile) -> Curve:
    """Synthesize a profile's curve with a default synthesizer."""
    return SemanticSynthesizer().synthesize(profile)


def contextual_semantic_easing(profile: MovementProfile) -> ContextualCurve:
    """Synthesize a profile's contextual curve with a default synthesizer."""
    return SemanticSynthesizer().synthesize_contextual(profile)
