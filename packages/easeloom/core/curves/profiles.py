"""Movement profile catalog.

Predefined profiles describing common motion styles, plus a constructor for
custom profiles that overlays partial characteristics on neutral defaults.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from easeloom.core.curves.models import MovementCharacteristics, MovementProfile


class MovementStyle(str, Enum):
    """Identifiers for built-in movement profiles."""

    NATURAL = "natural"
    MECHANICAL = "mechanical"
    PLAYFUL = "playful"
    LIQUID = "liquid"
    AGGRESSIVE = "aggressive"
    ROBOTIC = "robotic"
    ETHEREAL = "ethereal"


MOVEMENT_PROFILES: dict[MovementStyle, MovementProfile] = {
    MovementStyle.NATURAL: MovementProfile(
        name="Natural",
        description="Organic motion with small nuances and variation, as found in nature",
        characteristics=MovementCharacteristics(
            fluidity=0.8,
            weight=0.6,
            elasticity=0.4,
            predictability=0.7,
            complexity=0.5,
            energy=0.6,
            organicity=0.9,
            playfulness=0.3,
            aggression=0.2,
        ),
    ),
    MovementStyle.MECHANICAL: MovementProfile(
        name="Mechanical",
        description="Precise, predictable motion with a steady rhythm",
        characteristics=MovementCharacteristics(
            fluidity=0.3,
            weight=0.7,
            elasticity=0.2,
            predictability=0.9,
            complexity=0.3,
            energy=0.5,
            organicity=0.1,
            playfulness=0.1,
            aggression=0.3,
        ),
    ),
    MovementStyle.PLAYFUL: MovementProfile(
        name="Playful",
        description="Bouncy, energetic and unpredictable motion",
        characteristics=MovementCharacteristics(
            fluidity=0.7,
            weight=0.3,
            elasticity=0.8,
            predictability=0.3,
            complexity=0.7,
            energy=0.9,
            organicity=0.7,
            playfulness=0.95,
            aggression=0.4,
        ),
    ),
    MovementStyle.LIQUID: MovementProfile(
        name="Liquid",
        description="Smooth, flowing motion with little resistance",
        characteristics=MovementCharacteristics(
            fluidity=0.95,
            weight=0.4,
            elasticity=0.5,
            predictability=0.6,
            complexity=0.4,
            energy=0.4,
            organicity=0.8,
            playfulness=0.3,
            aggression=0.1,
        ),
    ),
    MovementStyle.AGGRESSIVE: MovementProfile(
        name="Aggressive",
        description="Sharp, intense motion with high energy",
        characteristics=MovementCharacteristics(
            fluidity=0.3,
            weight=0.7,
            elasticity=0.5,
            predictability=0.2,
            complexity=0.6,
            energy=0.9,
            organicity=0.4,
            playfulness=0.2,
            aggression=0.9,
        ),
    ),
    MovementStyle.ROBOTIC: MovementProfile(
        name="Robotic",
        description="Segmented motion with distinct pauses and transitions",
        characteristics=MovementCharacteristics(
            fluidity=0.1,
            weight=0.6,
            elasticity=0.1,
            predictability=0.8,
            complexity=0.5,
            energy=0.6,
            organicity=0.0,
            playfulness=0.1,
            aggression=0.3,
        ),
    ),
    MovementStyle.ETHEREAL: MovementProfile(
        name="Ethereal",
        description="Light, airy motion with minimal weight and maximal smoothness",
        characteristics=MovementCharacteristics(
            fluidity=0.9,
            weight=0.1,
            elasticity=0.7,
            predictability=0.5,
            complexity=0.6,
            energy=0.4,
            organicity=0.7,
            playfulness=0.5,
            aggression=0.0,
        ),
    ),
}


def get_movement_profile(
    key: str | MovementStyle,
    custom: Mapping[str, MovementProfile] | None = None,
) -> MovementProfile:
    """Look up a profile by key (case-insensitive).

    Args:
        key: Built-in style (e.g. "natural") or a key of ``custom``.
        custom: Additional profiles; these shadow built-ins with the same key.

    Raises:
        ValueError: If no profile matches.
    """
    normalized = key.value if isinstance(key, MovementStyle) else key.lower()

    if custom:
        for custom_key, profile in custom.items():
            if custom_key.lower() == normalized:
                return profile

    try:
        return MOVEMENT_PROFILES[MovementStyle(normalized)]
    except ValueError as exc:
        available = [s.value for s in MovementStyle] + list(custom or {})
        raise ValueError(
            f"Unknown movement profile '{key}'. Must be one of: {', '.join(available)}"
        ) from exc


def create_movement_profile(
    name: str,
    description: str = "",
    characteristics: MovementCharacteristics | Mapping[str, Any] | None = None,
    **fields: float,
) -> MovementProfile:
    """Build a custom profile; unspecified characteristics default to 0.5.

    Example:
        >>> underwater = create_movement_profile("Underwater", fluidity=0.9, weight=0.8)
        >>> underwater.characteristics.energy
        0.5
    """
    if isinstance(characteristics, MovementCharacteristics):
        merged = characteristics.model_dump()
    else:
        merged = dict(characteristics or {})
    merged.update(fields)

    return MovementProfile(
        name=name,
        description=description,
        characteristics=MovementCharacteristics.model_validate(merged),
    )
