"""
Settings loader — reads sitebundle.yml into a BuildSettings model.

Reads YAML, validates against the Pydantic schema, and resolves the
relative paths it contains against the settings file's directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from sitebundle.core.models.settings import BuildSettings

logger = logging.getLogger(__name__)

SETTINGS_FILE = "sitebundle.yml"

# Keys that mark a settings file describing a single site at top level.
# "mode" is not one of them: at top level it is the build mode.
_SITE_KEYS = ("name", "packages")


class ConfigError(Exception):
    """Raised when the settings file is invalid or missing."""


def find_settings_file(start_dir: Path | None = None) -> Path | None:
    """Search for sitebundle.yml starting from ``start_dir``, walking up.

    Returns:
        Path to the settings file, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):
        candidate = current / SETTINGS_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_settings(path: Path | None = None) -> BuildSettings:
    """Load and validate build settings.

    Args:
        path: Explicit settings path. If None, searches upward from cwd.

    Returns:
        Validated BuildSettings with ``out_dir`` and ``package_root``
        made absolute.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        path = find_settings_file()

    if path is None:
        raise ConfigError(f"No {SETTINGS_FILE} found. Specify one with --config.")

    if not path.is_file():
        raise ConfigError(f"Settings file not found: {path}")

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # A single site may sit at top level instead of under "sites"
    if "sites" not in data and any(key in data for key in _SITE_KEYS):
        site = {key: data.pop(key) for key in _SITE_KEYS if key in data}
        data["sites"] = [site]

    if "sites" in data and data["sites"] is None:
        data["sites"] = []
    elif isinstance(data.get("sites"), dict):
        data["sites"] = [data["sites"]]

    try:
        settings = BuildSettings.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid settings: {e}") from e

    base = path.parent.resolve()
    settings = settings.model_copy(
        update={
            "out_dir": str(base / settings.out_dir),
            "package_root": str(base / settings.package_root),
        }
    )

    logger.info("Loaded %d site(s) from %s", len(settings.sites), path)
    return settings
