"""Curve composition operations.

This module provides the structural combinators that build one curve out of
several: sequencing (each curve owns a slice of the progress domain),
blending (weighted sum of all curves) and conditional dispatch.
"""

from __future__ import annotations

import bisect
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from easeloom.core.curves.protocols import Curve, Predicate
from easeloom.core.utils.math import clamp

logger = logging.getLogger(__name__)

CurveBranch = tuple[Predicate, Curve]


@dataclass(frozen=True)
class WeightedCurve:
    """A curve paired with its (unnormalized) weight."""

    curve: Curve
    weight: float


@dataclass(frozen=True)
class SequenceSegment:
    """Slice [offset, offset + weight) of the progress domain owned by a curve."""

    curve: Curve
    offset: float
    weight: float

    def local_progress(self, t: float) -> float:
        """Remap global progress into this segment's [0, 1]."""
        if self.weight <= 0.0:
            return 0.0
        return clamp((t - self.offset) / self.weight)


def normalize_weights(count: int, weights: Sequence[float] | None = None) -> list[float]:
    """Normalize a weight list so it has ``count`` entries summing to 1.

    Missing or empty weights yield equal weights. A list of the wrong length
    is truncated or zero-padded first. A zero total (all zeros, or positive
    and negative weights cancelling out) falls back to equal weights.

    Args:
        count: Number of curves the weights apply to.
        weights: Optional raw weights.

    Returns:
        List of ``count`` weights (empty when count <= 0).

    Example:
        >>> normalize_weights(3, [2, 2])
        [0.5, 0.5, 0.0]
    """
    if count <= 0:
        return []

    equal = [1.0 / count] * count
    if not weights:
        return equal

    padded = [float(w) for w in weights[:count]]
    padded.extend([0.0] * (count - len(padded)))

    total = sum(padded)
    if total == 0.0:
        logger.debug("Weights %s sum to zero; using equal weights", list(weights))
        return equal

    return [w / total for w in padded]


class CurveCombinator:
    """Builds composite curves from existing ones.

    Stateless; construct one wherever composition is needed.

    Example:
        >>> combinator = CurveCombinator()
        >>> ramp = combinator.sequence([linear, linear])
        >>> ramp(0.25)
        0.5
    """

    def sequence(self, curves: Sequence[Curve], weights: Sequence[float] | None = None) -> Curve:
        """Play curves one after another.

        Each curve owns a contiguous slice of [0, 1] proportional to its
        weight and sees its own local progress in [0, 1]. Only the curve
        owning ``t`` is evaluated. The last slice includes t = 1.

        Args:
            curves: Curves to chain, in order.
            weights: Relative durations (default: equal).

        Returns:
            Composite curve. Progress outside every slice (t < 0, or no
            curves at all) evaluates to 0.0.
        """
        segments = build_segments(curves, weights)
        offsets = [segment.offset for segment in segments]

        logger.debug("Built sequence of %d segments at offsets %s", len(segments), offsets)

        def sequenced(t: float) -> float:
            index = bisect.bisect_right(offsets, t) - 1
            if index < 0:
                return 0.0
            segment = segments[index]
            return segment.curve(segment.local_progress(t))

        return sequenced

    def blend(self, curves: Sequence[Curve], weights: Sequence[float] | None = None) -> Curve:
        """Weighted sum of curves evaluated at the same progress.

        Args:
            curves: Curves to mix.
            weights: Mixing weights (default: equal), normalized to sum to 1.

        Returns:
            Composite curve; a constant 0.0 when no curves are given.
        """
        pairs = list(zip(curves, normalize_weights(len(curves), weights), strict=True))

        logger.debug("Built blend of %d curves with weights %s", len(pairs), [w for _, w in pairs])

        def blended(t: float) -> float:
            return sum((weight * curve(t) for curve, weight in pairs), 0.0)

        return blended

    def conditional(self, branches: Sequence[CurveBranch]) -> Curve:
        """Dispatch to the first branch whose predicate accepts ``t``.

        Args:
            branches: Ordered (predicate, curve) pairs.

        Returns:
            Composite curve; falls back to identity when nothing matches.
        """
        branch_list = list(branches)

        def dispatched(t: float) -> float:
            for predicate, curve in branch_list:
                if predicate(t):
                    return curve(t)
            return t

        return dispatched

    def blend_weighted(self, weighted: Sequence[WeightedCurve]) -> Curve:
        """Blend a list of WeightedCurve pairs."""
        return self.blend([w.curve for w in weighted], [w.weight for w in weighted])


def build_segments(
    curves: Sequence[Curve], weights: Sequence[float] | None = None
) -> list[SequenceSegment]:
    """Lay curves out as contiguous segments over [0, 1]."""
    normalized = normalize_weights(len(curves), weights)

    segments: list[SequenceSegment] = []
    offset = 0.0
    for curve, weight in zip(curves, normalized, strict=True):
        segments.append(SequenceSegment(curve=curve, offset=offset, weight=weight))
        offset += weight
    return segments
