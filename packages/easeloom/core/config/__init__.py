"""Configuration management for easeloom."""

from easeloom.core.config.loader import detect_format, load_app_config, load_config
from easeloom.core.config.models import AppConfig, FamilyPreset, LoggingConfig

__all__ = [
    "AppConfig",
    "FamilyPreset",
    "LoggingConfig",
    "detect_format",
    "load_app_config",
    "load_config",
]
