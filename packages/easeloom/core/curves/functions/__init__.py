"""Curve builders and parametric families."""

from easeloom.core.curves.functions.basic import (
    linear,
    make_ease_in,
    make_ease_in_out,
    make_ease_out,
)
from easeloom.core.curves.functions.parametric import (
    FAMILY_GENERATORS,
    elastic_family,
    generate_family,
    polynomial_family,
    resolve_params,
    spring_family,
)

__all__ = [
    "FAMILY_GENERATORS",
    "elastic_family",
    "generate_family",
    "linear",
    "make_ease_in",
    "make_ease_in_out",
    "make_ease_out",
    "polynomial_family",
    "resolve_params",
    "spring_family",
]
