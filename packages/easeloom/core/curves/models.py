"""Curve schema models.

This module defines the plain-data records that flow through the curve core:
- CurvePoint: A single sampled point (t, v), t in [0,1], v unconstrained
- EasingFamilyParameters: Flat parameter record for parametric families
- MovementCharacteristics: Nine-dimensional semantic description of motion
- MovementProfile: Named, immutable movement characteristics
- AnimationContext: Mutable, driver-owned state read by contextual curves

Field names match the serialized records produced by other runtimes; camelCase
aliases are accepted wherever the wire name differs from the Python name.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CurvePoint(BaseModel):
    """A single sampled point on a curve.

    Time is normalized to [0, 1]. Values are not range-checked because
    overshooting curves (back, elastic, spring) legitimately leave [0, 1].

    Example:
        >>> point = CurvePoint(t=0.5, v=1.1)
        >>> point.v
        1.1
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    t: float = Field(..., ge=0.0, le=1.0, description="Normalized time [0,1]")
    v: float = Field(..., description="Curve value")


class EasingFamilyParameters(BaseModel):
    """Parameters for synthesizing a curve from a parametric family.

    Every field is optional. ``None`` means "use the family default", since
    defaults differ between families (e.g. elastic clamps oscillation to >= 1
    while spring allows 0). Not every family reads every field.

    Attributes:
        intensity: Overall strength of the effect [0, 1].
        overshoot: How far the curve exceeds its target (>= 0).
        oscillation: Number of oscillation cycles (>= 0).
        damping: Exponential decay of oscillation amplitude [0, 1].
        symmetry: 0 = ease-in dominant, 0.5 = linear, 1 = ease-out/in-out.
        smoothness: Reserved transition-sharpness modifier [0, 1].
        anticipation: Negative dip near t=0 [0, 1].
        follow_through: Overshoot bump near t=1 [0, 1].
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    intensity: float | None = None
    overshoot: float | None = None
    oscillation: float | None = None
    damping: float | None = None
    symmetry: float | None = None
    smoothness: float | None = None
    anticipation: float | None = None
    follow_through: float | None = Field(default=None, alias="followThrough")


class MovementCharacteristics(BaseModel):
    """Semantic description of motion quality.

    Each field is conventionally in [0, 1] (0.5 = neutral) but the range is
    not enforced; out-of-range values simply weight candidates more or less.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    fluidity: float = 0.5  # 0: abrupt, 1: smooth
    weight: float = 0.5  # 0: weightless, 1: heavy
    elasticity: float = 0.5  # 0: rigid, 1: springy
    predictability: float = 0.5  # 0: chaotic, 1: predictable
    complexity: float = 0.5  # 0: simple, 1: intricate
    energy: float = 0.5  # 0: sluggish, 1: energetic
    organicity: float = 0.5  # 0: mechanical, 1: organic
    playfulness: float = 0.5  # 0: serious, 1: playful
    aggression: float = 0.5  # 0: gentle, 1: aggressive


class MovementProfile(BaseModel):
    """Named movement characteristics.

    Immutable once constructed. Name and description are presentation
    metadata only; synthesis reads ``characteristics`` exclusively.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1)
    description: str = ""
    characteristics: MovementCharacteristics = Field(default_factory=MovementCharacteristics)


class AnimationDirection(str, Enum):
    """Direction of the running animation."""

    FORWARD = "forward"
    BACKWARD = "backward"
    ALTERNATING = "alternating"


class AnimationPhase(str, Enum):
    """Phase of a cyclic animation."""

    ACCELERATING = "accelerating"
    CRUISING = "cruising"
    DECELERATING = "decelerating"
    RESTING = "resting"


class AnimationContext(BaseModel):
    """State of a running animation, passed alongside progress.

    Created and updated by the animation driver once per step. Contextual
    curves only read it.

    Example:
        >>> ctx = AnimationContext(direction="alternating", iteration=3)
        >>> ctx.direction
        <AnimationDirection.ALTERNATING: 'alternating'>
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, validate_assignment=True)

    direction: AnimationDirection = AnimationDirection.FORWARD
    iteration: float = 0

    # Kinematics
    previous_value: float | None = Field(default=None, alias="previousValue")
    velocity: float | None = None
    acceleration: float | None = None

    # Environment
    gravity: float | None = None
    resistance: float | None = None

    # State
    phase: AnimationPhase | None = None
    energy_level: float | None = Field(default=None, alias="energyLevel")

    # Timing
    elapsed_time_ms: float | None = Field(default=None, alias="elapsedTimeMs")
    delta_time_ms: float | None = Field(default=None, alias="deltaTimeMs")

    # Spatial
    distance: float | None = None
    distance_remaining: float | None = Field(default=None, alias="distanceRemaining")
