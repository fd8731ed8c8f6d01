"""Curve registry for named base curves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from easeloom.core.curves.modifiers import CurveModifier, apply_modifiers
from easeloom.core.curves.protocols import Curve


class CurveFamily(str, Enum):
    """Mathematical basis of a catalog curve."""

    LINEAR = "linear"
    SINE = "sine"
    QUAD = "quad"
    CUBIC = "cubic"
    QUART = "quart"
    QUINT = "quint"
    EXPO = "expo"
    CIRC = "circ"
    BACK = "back"
    ELASTIC = "elastic"
    BOUNCE = "bounce"
    BEZIER = "bezier"


class CurveCategory(str, Enum):
    """Where a curve concentrates its change."""

    IN = "in"  # accelerate from rest
    OUT = "out"  # decelerate to rest
    IN_OUT = "in_out"  # accelerate then decelerate
    CUSTOM = "custom"


@dataclass(frozen=True)
class CurveDefinition:
    """Registry entry for a named curve."""

    curve_id: str
    curve: Curve
    family: CurveFamily
    category: CurveCategory = CurveCategory.CUSTOM
    description: str | None = None


class CurveRegistry:
    """Registry of named curves.

    Instances are built explicitly (see ``build_default_registry``) and
    passed to whatever needs them; there is no process-wide registry.
    """

    def __init__(self) -> None:
        self._registry: dict[str, CurveDefinition] = {}

    def register(self, definition: CurveDefinition) -> None:
        if definition.curve_id in self._registry:
            raise ValueError(f"Curve '{definition.curve_id}' already registered")
        self._registry[definition.curve_id] = definition

    def get_definition(self, curve_id: str) -> CurveDefinition:
        try:
            return self._registry[curve_id]
        except KeyError as exc:
            raise ValueError(f"Curve '{curve_id}' is not registered") from exc

    def get(self, curve_id: str) -> Curve:
        """Return the curve callable registered under curve_id."""
        return self.get_definition(curve_id).curve

    def resolve(self, curve_id: str, modifiers: list[str] | None = None) -> Curve:
        """Resolve a curve id, applying modifiers in order.

        Args:
            curve_id: Registered curve id.
            modifiers: Optional modifier names (e.g. ["reverse", "flip"]).

        Raises:
            ValueError: If the curve or a modifier is unknown.
        """
        curve = self.get(curve_id)
        if not modifiers:
            return curve

        try:
            parsed = [CurveModifier(m) for m in modifiers]
        except ValueError as exc:
            raise ValueError(f"Unknown curve modifier in {modifiers}") from exc

        return apply_modifiers(curve, parsed)

    def list_ids(self) -> list[str]:
        return list(self._registry)

    def definitions(self) -> list[CurveDefinition]:
        return list(self._registry.values())

    def __contains__(self, curve_id: object) -> bool:
        return curve_id in self._registry

    def __len__(self) -> int:
        return len(self._registry)
