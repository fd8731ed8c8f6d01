"""Base curve catalog backed by easing-functions.

Exposes each classical easing as a module-level curve (``ease_in_sine``,
``elastic_out``, ...) and builds a ``CurveRegistry`` containing all of them
plus the CSS cubic-Bezier presets.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from easing_functions import (
    BackEaseIn,
    BackEaseInOut,
    BackEaseOut,
    BounceEaseIn,
    BounceEaseInOut,
    BounceEaseOut,
    CircularEaseIn,
    CircularEaseInOut,
    CircularEaseOut,
    CubicEaseIn,
    CubicEaseInOut,
    CubicEaseOut,
    ElasticEaseIn,
    ElasticEaseInOut,
    ElasticEaseOut,
    ExponentialEaseIn,
    ExponentialEaseInOut,
    ExponentialEaseOut,
    QuadEaseIn,
    QuadEaseInOut,
    QuadEaseOut,
    QuarticEaseIn,
    QuarticEaseInOut,
    QuarticEaseOut,
    QuinticEaseIn,
    QuinticEaseInOut,
    QuinticEaseOut,
    SineEaseIn,
    SineEaseInOut,
    SineEaseOut,
)

from easeloom.core.curves import bezier
from easeloom.core.curves.functions.basic import linear
from easeloom.core.curves.protocols import Curve
from easeloom.core.curves.registry import (
    CurveCategory,
    CurveDefinition,
    CurveFamily,
    CurveRegistry,
)
from easeloom.core.utils.math import clamp

logger = logging.getLogger(__name__)

_EASING_DEFAULTS: dict[str, float] = {
    "start": 0.0,
    "end": 1.0,
    "duration": 1.0,
}


def _evaluate_easing(easing: Any, t: float) -> float:
    if hasattr(easing, "ease"):
        return easing.ease(t)
    return easing(t)


def _make_easing(easing_cls: type[Any]) -> Curve:
    """Wrap an easing-functions class as a clamped curve with exact endpoints."""
    easing = easing_cls(**_EASING_DEFAULTS)

    def curve(t: float) -> float:
        t = clamp(t)
        # easing-functions leaves rounding noise at 0 and 1
        if t == 0.0:
            return 0.0
        if t == 1.0:
            return 1.0
        return float(_evaluate_easing(easing, t))

    curve.__name__ = easing_cls.__name__
    curve.__qualname__ = easing_cls.__name__
    return curve


ease_in_sine = _make_easing(SineEaseIn)
ease_out_sine = _make_easing(SineEaseOut)
ease_in_out_sine = _make_easing(SineEaseInOut)

ease_in_quad = _make_easing(QuadEaseIn)
ease_out_quad = _make_easing(QuadEaseOut)
ease_in_out_quad = _make_easing(QuadEaseInOut)

ease_in_cubic = _make_easing(CubicEaseIn)
ease_out_cubic = _make_easing(CubicEaseOut)
ease_in_out_cubic = _make_easing(CubicEaseInOut)

ease_in_quart = _make_easing(QuarticEaseIn)
ease_out_quart = _make_easing(QuarticEaseOut)
ease_in_out_quart = _make_easing(QuarticEaseInOut)

ease_in_quint = _make_easing(QuinticEaseIn)
ease_out_quint = _make_easing(QuinticEaseOut)
ease_in_out_quint = _make_easing(QuinticEaseInOut)

ease_in_expo = _make_easing(ExponentialEaseIn)
ease_out_expo = _make_easing(ExponentialEaseOut)
ease_in_out_expo = _make_easing(ExponentialEaseInOut)

ease_in_circ = _make_easing(CircularEaseIn)
ease_out_circ = _make_easing(CircularEaseOut)
ease_in_out_circ = _make_easing(CircularEaseInOut)

ease_in_back = _make_easing(BackEaseIn)
ease_out_back = _make_easing(BackEaseOut)
ease_in_out_back = _make_easing(BackEaseInOut)

elastic_in = _make_easing(ElasticEaseIn)
elastic_out = _make_easing(ElasticEaseOut)
elastic_in_out = _make_easing(ElasticEaseInOut)

bounce_in = _make_easing(BounceEaseIn)
bounce_out = _make_easing(BounceEaseOut)
bounce_in_out = _make_easing(BounceEaseInOut)


class CurveLibrary(str, Enum):
    """Identifiers for built-in curves."""

    LINEAR = "linear"

    # Sine
    EASE_IN_SINE = "ease_in_sine"
    EASE_OUT_SINE = "ease_out_sine"
    EASE_IN_OUT_SINE = "ease_in_out_sine"

    # Polynomial
    EASE_IN_QUAD = "ease_in_quad"
    EASE_OUT_QUAD = "ease_out_quad"
    EASE_IN_OUT_QUAD = "ease_in_out_quad"
    EASE_IN_CUBIC = "ease_in_cubic"
    EASE_OUT_CUBIC = "ease_out_cubic"
    EASE_IN_OUT_CUBIC = "ease_in_out_cubic"
    EASE_IN_QUART = "ease_in_quart"
    EASE_OUT_QUART = "ease_out_quart"
    EASE_IN_OUT_QUART = "ease_in_out_quart"
    EASE_IN_QUINT = "ease_in_quint"
    EASE_OUT_QUINT = "ease_out_quint"
    EASE_IN_OUT_QUINT = "ease_in_out_quint"

    # Exponential / circular
    EASE_IN_EXPO = "ease_in_expo"
    EASE_OUT_EXPO = "ease_out_expo"
    EASE_IN_OUT_EXPO = "ease_in_out_expo"
    EASE_IN_CIRC = "ease_in_circ"
    EASE_OUT_CIRC = "ease_out_circ"
    EASE_IN_OUT_CIRC = "ease_in_out_circ"

    # Back - anticipation/overshoot
    EASE_IN_BACK = "ease_in_back"
    EASE_OUT_BACK = "ease_out_back"
    EASE_IN_OUT_BACK = "ease_in_out_back"

    # Dynamic effects
    ELASTIC_IN = "elastic_in"
    ELASTIC_OUT = "elastic_out"
    ELASTIC_IN_OUT = "elastic_in_out"
    BOUNCE_IN = "bounce_in"
    BOUNCE_OUT = "bounce_out"
    BOUNCE_IN_OUT = "bounce_in_out"

    # CSS cubic-bezier presets
    CSS_EASE = "css_ease"
    CSS_EASE_IN = "css_ease_in"
    CSS_EASE_OUT = "css_ease_out"
    CSS_EASE_IN_OUT = "css_ease_in_out"


_IN, _OUT, _IN_OUT = CurveCategory.IN, CurveCategory.OUT, CurveCategory.IN_OUT

_CATALOG: list[tuple[CurveLibrary, Curve, CurveFamily, CurveCategory]] = [
    (CurveLibrary.LINEAR, linear, CurveFamily.LINEAR, CurveCategory.CUSTOM),
    (CurveLibrary.EASE_IN_SINE, ease_in_sine, CurveFamily.SINE, _IN),
    (CurveLibrary.EASE_OUT_SINE, ease_out_sine, CurveFamily.SINE, _OUT),
    (CurveLibrary.EASE_IN_OUT_SINE, ease_in_out_sine, CurveFamily.SINE, _IN_OUT),
    (CurveLibrary.EASE_IN_QUAD, ease_in_quad, CurveFamily.QUAD, _IN),
    (CurveLibrary.EASE_OUT_QUAD, ease_out_quad, CurveFamily.QUAD, _OUT),
    (CurveLibrary.EASE_IN_OUT_QUAD, ease_in_out_quad, CurveFamily.QUAD, _IN_OUT),
    (CurveLibrary.EASE_IN_CUBIC, ease_in_cubic, CurveFamily.CUBIC, _IN),
    (CurveLibrary.EASE_OUT_CUBIC, ease_out_cubic, CurveFamily.CUBIC, _OUT),
    (CurveLibrary.EASE_IN_OUT_CUBIC, ease_in_out_cubic, CurveFamily.CUBIC, _IN_OUT),
    (CurveLibrary.EASE_IN_QUART, ease_in_quart, CurveFamily.QUART, _IN),
    (CurveLibrary.EASE_OUT_QUART, ease_out_quart, CurveFamily.QUART, _OUT),
    (CurveLibrary.EASE_IN_OUT_QUART, ease_in_out_quart, CurveFamily.QUART, _IN_OUT),
    (CurveLibrary.EASE_IN_QUINT, ease_in_quint, CurveFamily.QUINT, _IN),
    (CurveLibrary.EASE_OUT_QUINT, ease_out_quint, CurveFamily.QUINT, _OUT),
    (CurveLibrary.EASE_IN_OUT_QUINT, ease_in_out_quint, CurveFamily.QUINT, _IN_OUT),
    (CurveLibrary.EASE_IN_EXPO, ease_in_expo, CurveFamily.EXPO, _IN),
    (CurveLibrary.EASE_OUT_EXPO, ease_out_expo, CurveFamily.EXPO, _OUT),
    (CurveLibrary.EASE_IN_OUT_EXPO, ease_in_out_expo, CurveFamily.EXPO, _IN_OUT),
    (CurveLibrary.EASE_IN_CIRC, ease_in_circ, CurveFamily.CIRC, _IN),
    (CurveLibrary.EASE_OUT_CIRC, ease_out_circ, CurveFamily.CIRC, _OUT),
    (CurveLibrary.EASE_IN_OUT_CIRC, ease_in_out_circ, CurveFamily.CIRC, _IN_OUT),
    (CurveLibrary.EASE_IN_BACK, ease_in_back, CurveFamily.BACK, _IN),
    (CurveLibrary.EASE_OUT_BACK, ease_out_back, CurveFamily.BACK, _OUT),
    (CurveLibrary.EASE_IN_OUT_BACK, ease_in_out_back, CurveFamily.BACK, _IN_OUT),
    (CurveLibrary.ELASTIC_IN, elastic_in, CurveFamily.ELASTIC, _IN),
    (CurveLibrary.ELASTIC_OUT, elastic_out, CurveFamily.ELASTIC, _OUT),
    (CurveLibrary.ELASTIC_IN_OUT, elastic_in_out, CurveFamily.ELASTIC, _IN_OUT),
    (CurveLibrary.BOUNCE_IN, bounce_in, CurveFamily.BOUNCE, _IN),
    (CurveLibrary.BOUNCE_OUT, bounce_out, CurveFamily.BOUNCE, _OUT),
    (CurveLibrary.BOUNCE_IN_OUT, bounce_in_out, CurveFamily.BOUNCE, _IN_OUT),
    (CurveLibrary.CSS_EASE, bezier.EASE, CurveFamily.BEZIER, CurveCategory.CUSTOM),
    (CurveLibrary.CSS_EASE_IN, bezier.EASE_IN, CurveFamily.BEZIER, _IN),
    (CurveLibrary.CSS_EASE_OUT, bezier.EASE_OUT, CurveFamily.BEZIER, _OUT),
    (CurveLibrary.CSS_EASE_IN_OUT, bezier.EASE_IN_OUT, CurveFamily.BEZIER, _IN_OUT),
]


def build_default_registry() -> CurveRegistry:
    """Construct a registry containing all built-in curves."""
    registry = CurveRegistry()

    for curve_id, curve, family, category in _CATALOG:
        registry.register(
            CurveDefinition(
                curve_id=curve_id.value,
                curve=curve,
                family=family,
                category=category,
            )
        )

    logger.debug("Built default curve registry with %d curves", len(registry))
    return registry
