"""Configuration models for easeloom."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from easeloom.core.curves.functions.parametric import FAMILY_GENERATORS, generate_family
from easeloom.core.curves.models import EasingFamilyParameters, MovementProfile
from easeloom.core.curves.protocols import Curve


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    structured: bool = Field(default=False, description="Emit one JSON object per record")
    filename: str | None = Field(default=None, description="Log file (stdout when unset)")


class FamilyPreset(BaseModel):
    """A named parametric curve: family plus its parameters."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    family: str
    params: EasingFamilyParameters = EasingFamilyParameters()

    @field_validator("family")
    @classmethod
    def _known_family(cls, value: str) -> str:
        normalized = value.lower()
        if normalized not in FAMILY_GENERATORS:
            raise ValueError(
                f"Unknown curve family '{value}'. Must be one of: {', '.join(FAMILY_GENERATORS)}"
            )
        return normalized

    def build(self) -> Curve:
        """Construct the preset's curve."""
        return generate_family(self.family, self.params)


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    bezier_table_size: int = Field(
        default=1000, gt=0, description="Sample count for cubic-Bezier lookup tables"
    )
    default_samples: int = Field(default=21, ge=2, description="Sample count for previews")
    logging: LoggingConfig = LoggingConfig()
    profiles: dict[str, MovementProfile] = Field(
        default_factory=dict, description="User-defined movement profiles"
    )
    families: dict[str, FamilyPreset] = Field(
        default_factory=dict, description="Named parametric curve presets"
    )

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("easeloom.yaml")
