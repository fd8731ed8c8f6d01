"""Parametric curve families.

Each family synthesizes a curve directly from continuous parameters
(oscillation, damping, symmetry, ...) instead of picking a fixed preset.
Parameters come as an ``EasingFamilyParameters`` record, a plain mapping
(JSON/YAML friendly, camelCase accepted), keyword overrides, or any mix.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping
from typing import Any

from easeloom.core.curves.functions.basic import make_ease_in, make_ease_in_out, make_ease_out
from easeloom.core.curves.models import EasingFamilyParameters
from easeloom.core.curves.protocols import Curve
from easeloom.core.utils.math import clamp

logger = logging.getLogger(__name__)

FamilyParams = EasingFamilyParameters | Mapping[str, Any] | None

DEFAULT_SPRING_PARAMS = {
    "oscillation": 3.0,
    "damping": 0.5,
    "intensity": 0.5,
    "overshoot": 1.70158,
}

DEFAULT_POLYNOMIAL_PARAMS = {
    "intensity": 0.5,
    "symmetry": 0.5,
    "smoothness": 0.5,
}

DEFAULT_ELASTIC_PARAMS = {
    "oscillation": 3.0,
    "overshoot": 1.5,
    "damping": 0.5,
    "symmetry": 0.0,
}

# Anticipation dip spans [0, 0.3); follow-through bump spans (0.8, 1]
_ANTICIPATION_END = 0.3
_ANTICIPATION_SCALE = 0.1
_FOLLOW_THROUGH_START = 0.8
_FOLLOW_THROUGH_SCALE = 0.05


def resolve_params(params: FamilyParams = None, **overrides: Any) -> EasingFamilyParameters:
    """Merge a parameter record and keyword overrides into one model.

    Args:
        params: Model, mapping (snake_case or camelCase keys) or None.
        **overrides: Individual fields; win over ``params``.

    Returns:
        Validated EasingFamilyParameters.

    Raises:
        pydantic.ValidationError: On unknown fields or non-numeric values.
    """
    if params is None:
        merged: dict[str, Any] = {}
    elif isinstance(params, EasingFamilyParameters):
        merged = params.model_dump(exclude_none=True)
    else:
        merged = EasingFamilyParameters.model_validate(params).model_dump(exclude_none=True)

    merged.update({k: v for k, v in overrides.items() if v is not None})
    return EasingFamilyParameters.model_validate(merged)


def _value(params: EasingFamilyParameters, name: str, defaults: Mapping[str, float]) -> float:
    value = getattr(params, name)
    return defaults[name] if value is None else float(value)


def _blend_with_linear(shaped: float, t: float, weight: float) -> float:
    return shaped * weight + t * (1.0 - weight)


def _damped_oscillation(omega: float, decay: float, t: float) -> float:
    # sin(omega*t)/omega tends to t as omega -> 0
    sin_term = math.sin(omega * t) / omega if omega != 0.0 else t
    return 1.0 - math.exp(-decay * t) * (math.cos(omega * t) + decay * sin_term)


def spring_family(params: FamilyParams = None, **overrides: Any) -> Curve:
    """Damped-spring curve.

    Models ``1 - e^(-decay*t) * (cos(wt) + decay*sin(wt)/w)`` with
    ``w = 2*pi*oscillation`` and ``decay = 5*damping``, pulled toward 1 by
    ``intensity``. Optional anticipation adds a small dip before t=0.3 and
    follow-through a small bump after t=0.8. Output is clamped to [0, 1], so
    ``overshoot`` is accepted but has no visible effect.

    Args:
        params: Family parameters (oscillation=3, damping=0.5, intensity=0.5).
        **overrides: Individual parameter overrides.

    Returns:
        Curve with f(0) == 0 and f(1) == 1 exactly.

    Example:
        >>> spring = spring_family({"oscillation": 2, "damping": 0.8})
        >>> spring(0.0), spring(1.0)
        (0.0, 1.0)
    """
    p = resolve_params(params, **overrides)
    oscillation = max(0.0, _value(p, "oscillation", DEFAULT_SPRING_PARAMS))
    damping = clamp(_value(p, "damping", DEFAULT_SPRING_PARAMS))
    intensity = clamp(_value(p, "intensity", DEFAULT_SPRING_PARAMS))
    anticipation = p.anticipation or 0.0
    follow_through = p.follow_through or 0.0

    omega = oscillation * math.pi * 2
    decay = damping * 5

    logger.debug(
        "Spring family: oscillation=%s damping=%s intensity=%s", oscillation, damping, intensity
    )

    def spring(t: float) -> float:
        c = clamp(t)
        if c == 0.0:
            return 0.0
        if c == 1.0:
            return 1.0

        value = _damped_oscillation(omega, decay, c)
        value = 1.0 - (1.0 - value) * intensity

        if anticipation and c < _ANTICIPATION_END:
            value -= (
                anticipation * math.sin(math.pi * c / _ANTICIPATION_END) * _ANTICIPATION_SCALE
            )

        if follow_through and c > _FOLLOW_THROUGH_START:
            phase = (c - _FOLLOW_THROUGH_START) / (1.0 - _FOLLOW_THROUGH_START)
            value += follow_through * math.sin(math.pi * phase) * _FOLLOW_THROUGH_SCALE

        return clamp(value)

    return spring


def polynomial_family(params: FamilyParams = None, **overrides: Any) -> Curve:
    """Power curve with adjustable exponent and symmetry.

    The exponent is ``1 + 4*intensity`` (1 = linear, 5 = quintic).

    - ``symmetry > 0.5``: power ease-in-out blended with linear by
      ``(symmetry - 0.5) * 2``.
    - ``symmetry < 0.5``: power ease-in blended with linear by
      ``1 - 2*symmetry``.
    - ``symmetry == 0.5``: linear (both branches meet here).

    ``smoothness`` is accepted and reserved.

    Example:
        >>> polynomial_family(intensity=1, symmetry=1)(0.5)
        0.5
    """
    p = resolve_params(params, **overrides)
    intensity = clamp(_value(p, "intensity", DEFAULT_POLYNOMIAL_PARAMS))
    symmetry = clamp(_value(p, "symmetry", DEFAULT_POLYNOMIAL_PARAMS))

    exponent = 1.0 + 4.0 * intensity

    logger.debug("Polynomial family: exponent=%s symmetry=%s", exponent, symmetry)

    if symmetry > 0.5:
        shaped, weight = make_ease_in_out(exponent), (symmetry - 0.5) * 2
    elif symmetry < 0.5:
        shaped, weight = make_ease_in(exponent), 1.0 - symmetry * 2
    else:
        shaped, weight = make_ease_out(exponent), 0.0

    def polynomial(t: float) -> float:
        c = clamp(t)
        return _blend_with_linear(shaped(c), c, weight)

    return polynomial


def elastic_family(params: FamilyParams = None, **overrides: Any) -> Curve:
    """Damped elastic curve with adjustable period, envelope and amplitude.

    ``oscillation`` sets the number of cycles (period = 1/oscillation, at
    least 1 cycle), ``damping`` scales the exponential envelope and
    ``overshoot`` multiplies the oscillation amplitude. ``symmetry < 0.5``
    selects the ease-in shape blended with linear by ``1 - 2*symmetry``;
    otherwise the ease-out shape blended by ``(symmetry - 0.5) * 2``.

    ``overshoot`` scales only the oscillation term, not the settled value,
    so presets that multiplied the whole ``1 + ...`` ease-out need retuning.

    Returns:
        Curve with exact 0 and 1 at the endpoints.
    """
    p = resolve_params(params, **overrides)
    oscillation = max(1.0, _value(p, "oscillation", DEFAULT_ELASTIC_PARAMS))
    overshoot = max(0.0, _value(p, "overshoot", DEFAULT_ELASTIC_PARAMS))
    damping = clamp(_value(p, "damping", DEFAULT_ELASTIC_PARAMS))
    symmetry = clamp(_value(p, "symmetry", DEFAULT_ELASTIC_PARAMS))

    period = 1.0 / oscillation
    shift = period / 4
    angular = 2 * math.pi / period

    logger.debug(
        "Elastic family: oscillation=%s overshoot=%s damping=%s symmetry=%s",
        oscillation,
        overshoot,
        damping,
        symmetry,
    )

    def ease_in_elastic(c: float) -> float:
        if c == 0.0:
            return 0.0
        if c == 1.0:
            return 1.0
        envelope = math.pow(2, 10 * (c - 1)) * damping
        return -(envelope * math.sin((c - 1 - shift) * angular)) * overshoot

    def ease_out_elastic(c: float) -> float:
        if c == 0.0:
            return 0.0
        if c == 1.0:
            return 1.0
        envelope = math.pow(2, -10 * c) * damping
        return 1.0 + envelope * math.sin((c - shift) * angular) * overshoot

    if symmetry < 0.5:
        weight = 1.0 - symmetry * 2
        shaped = ease_in_elastic
    else:
        weight = (symmetry - 0.5) * 2
        shaped = ease_out_elastic

    def elastic(t: float) -> float:
        c = clamp(t)
        return _blend_with_linear(shaped(c), c, weight)

    return elastic


FAMILY_GENERATORS: dict[str, Callable[..., Curve]] = {
    "spring": spring_family,
    "polynomial": polynomial_family,
    "elastic": elastic_family,
}


def generate_family(name: str, params: FamilyParams = None, **overrides: Any) -> Curve:
    """Build a curve from a family name.

    Raises:
        ValueError: If the family name is unknown.
    """
    try:
        generator = FAMILY_GENERATORS[name.lower()]
    except KeyError as exc:
        raise ValueError(
            f"Unknown curve family '{name}'. Must be one of: {', '.join(FAMILY_GENERATORS)}"
        ) from exc
    return generator(params, **overrides)
