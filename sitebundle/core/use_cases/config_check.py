"""
Config check use case — validate sitebundle.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from sitebundle.core.config.loader import ConfigError, find_settings_file, load_settings
from sitebundle.core.models.settings import BuildSettings
from sitebundle.core.services.site_names import site_name_problems


@dataclass
class ConfigCheckResult:
    """Result of settings validation."""

    valid: bool = False
    settings: BuildSettings | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "site_count": len(self.settings.sites) if self.settings else 0,
            "mode": self.settings.mode if self.settings else None,
        }


def check_settings(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate build settings and report issues.

    Args:
        config_path: Optional explicit path to sitebundle.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_settings_file()
    if config_path is None:
        result.errors.append("No sitebundle.yml found.")
        return result
    result.config_path = config_path

    try:
        settings = load_settings(config_path)
        result.settings = settings
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    if not settings.sites:
        result.warnings.append("No sites defined. Only an empty server bundle would be built.")

    result.errors.extend(site_name_problems(settings.sites))

    for site in settings.sites:
        if not site.packages:
            result.warnings.append(f"Site '{site.name}' has no packages.")

    if not Path(settings.package_root).is_dir():
        result.warnings.append(f"Package root does not exist: {settings.package_root}")

    result.valid = len(result.errors) == 0
    return result
