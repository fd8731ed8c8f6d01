"""Shared pytest fixtures for curve tests."""

from __future__ import annotations

import pytest

from easeloom.core.curves.models import (
    AnimationContext,
    CurvePoint,
    MovementCharacteristics,
    MovementProfile,
)


@pytest.fixture
def dense_grid() -> list[float]:
    """201 evenly spaced progress values covering [0, 1]."""
    n = 201
    return [i / (n - 1) for i in range(n)]


@pytest.fixture
def simple_linear_points() -> list[CurvePoint]:
    """Create simple linear curve points from 0 to 1."""
    return [
        CurvePoint(t=0.0, v=0.0),
        CurvePoint(t=0.5, v=0.5),
        CurvePoint(t=1.0, v=1.0),
    ]


@pytest.fixture
def ramp_down_points() -> list[CurvePoint]:
    """Create descending ramp points."""
    return [
        CurvePoint(t=0.0, v=1.0),
        CurvePoint(t=1.0, v=0.0),
    ]


@pytest.fixture
def forward_context() -> AnimationContext:
    """Fresh context for a forward-running animation."""
    return AnimationContext()


@pytest.fixture
def neutral_profile() -> MovementProfile:
    """Profile with every characteristic at 0.5."""
    return MovementProfile(name="Neutral", characteristics=MovementCharacteristics())
