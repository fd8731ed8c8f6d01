"""Read easeloom configuration from YAML or JSON files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from easeloom.core.config.models import AppConfig
from easeloom.core.utils.json import read_json

logger = logging.getLogger(__name__)

_FORMATS = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def detect_format(file_path: Path | str) -> str:
    """Map a config file extension to "json" or "yaml".

    Raises:
        ValueError: For any other extension.

    Example:
        >>> detect_format("easeloom.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()
    try:
        return _FORMATS[suffix]
    except KeyError as exc:
        raise ValueError(f"Unsupported config format: {suffix}") from exc


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        content = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    # Empty documents load as None
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Expected a mapping in {path}, got {type(content).__name__}")
    return content


def load_config(path: str | Path) -> dict[str, Any]:
    """Read a config file into a plain dictionary, without validation.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: On an unsupported extension or malformed content.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    if detect_format(path) == "yaml":
        return _read_yaml(path)

    try:
        return read_json(path)
    except ValueError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate the application config.

    With no path, ``AppConfig.default_path()`` is read when it exists and
    built-in defaults are used otherwise. An explicit path must exist.

    Raises:
        FileNotFoundError: If an explicit path does not exist.
        pydantic.ValidationError: If values are invalid.
    """
    if path is None:
        path = AppConfig.default_path()
        if not path.exists():
            logger.debug("No %s found, using default configuration", path)
            return AppConfig()

    config = AppConfig.model_validate(load_config(path))
    logger.debug(
        "Loaded %s: %d custom profiles, %d family presets",
        path,
        len(config.profiles),
        len(config.families),
    )
    return config
