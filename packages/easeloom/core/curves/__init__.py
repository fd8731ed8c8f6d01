"""Easing curves, combinators and curve synthesis."""

from easeloom.core.curves.bezier import CubicBezierCurve, cubic_bezier
from easeloom.core.curves.composition import CurveCombinator, WeightedCurve, normalize_weights
from easeloom.core.curves.contextual import (
    as_contextual,
    directional,
    energy_adaptive,
    inertial,
    physical,
    with_fixed_context,
)
from easeloom.core.curves.functions import (
    elastic_family,
    generate_family,
    linear,
    polynomial_family,
    spring_family,
)
from easeloom.core.curves.library import CurveLibrary, build_default_registry
from easeloom.core.curves.models import (
    AnimationContext,
    AnimationDirection,
    AnimationPhase,
    CurvePoint,
    EasingFamilyParameters,
    MovementCharacteristics,
    MovementProfile,
)
from easeloom.core.curves.profiles import (
    MOVEMENT_PROFILES,
    MovementStyle,
    create_movement_profile,
    get_movement_profile,
)
from easeloom.core.curves.protocols import ContextualCurve, Curve
from easeloom.core.curves.semantics import (
    SemanticSynthesizer,
    contextual_semantic_easing,
    semantic_easing,
)

__all__ = [
    "MOVEMENT_PROFILES",
    "AnimationContext",
    "AnimationDirection",
    "AnimationPhase",
    "ContextualCurve",
    "CubicBezierCurve",
    "Curve",
    "CurveCombinator",
    "CurveLibrary",
    "CurvePoint",
    "EasingFamilyParameters",
    "MovementCharacteristics",
    "MovementProfile",
    "MovementStyle",
    "SemanticSynthesizer",
    "WeightedCurve",
    "as_contextual",
    "build_default_registry",
    "contextual_semantic_easing",
    "create_movement_profile",
    "cubic_bezier",
    "directional",
    "elastic_family",
    "energy_adaptive",
    "generate_family",
    "get_movement_profile",
    "inertial",
    "linear",
    "normalize_weights",
    "physical",
    "polynomial_family",
    "semantic_easing",
    "spring_family",
    "with_fixed_context",
]
