"""
Settings loader — reads devsetup.yml into the Settings model.

The file is optional.  Resolution order:

    1. explicit path (``--config``) — must exist
    2. ``~/.config/devsetup/devsetup.yml`` — used when present
    3. built-in defaults
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from devsetup.core.context import settings_path
from devsetup.core.models.settings import Settings
from devsetup.core.services.tool_install.domain.errors import ConfigError

logger = logging.getLogger(__name__)


def find_settings_file(explicit: Path | None = None) -> Path | None:
    """Return the settings file to load, or None for defaults.

    Raises:
        ConfigError: If an explicit path was given but does not exist.
    """
    if explicit is not None:
        if not explicit.is_file():
            raise ConfigError(f"Config file not found: {explicit}")
        return explicit

    default = settings_path()
    return default if default.is_file() else None


def load_settings(path: Path | None = None) -> Settings:
    """Load and validate settings.

    Args:
        path: Explicit settings file.  If None, the default location
            is tried and defaults are used when it is absent.

    Raises:
        ConfigError: If the file is unreadable or invalid.
    """
    path = find_settings_file(path)
    if path is None:
        logger.debug("No settings file, using defaults")
        return Settings()

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {path}: {e}") from e

    logger.info(
        "Loaded settings from %s (weather: %s/%s)",
        path, settings.weather.city, settings.weather.unit,
    )
    return settings
