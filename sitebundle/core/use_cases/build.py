"""
Build use case — settings in, entry-point files on disk.

Ties together settings loading, output directory preparation and
entry-point generation for the CLI.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from sitebundle.adapters.node_modules import NodeModulesProbe
from sitebundle.core.config.loader import ConfigError, find_settings_file, load_settings
from sitebundle.core.models.settings import BuildSettings
from sitebundle.core.models.site import Bundle
from sitebundle.core.services.build_dirs import UnsafeOutDirError, prepare_build_dirs
from sitebundle.core.services.entry_points import generate_entry_points
from sitebundle.core.services.install_check import EntryPointError
from sitebundle.core.services.site_names import validate_site_names

logger = logging.getLogger(__name__)


def _protected_paths(
    settings_path: Path | None, settings: BuildSettings | None = None
) -> list[Path]:
    """Directories a clean must never delete: the settings dir and package root."""
    paths = [settings_path.parent] if settings_path is not None else []
    if settings is not None:
        paths.append(Path(settings.package_root))
    return paths


@dataclass
class BuildResult:
    """Result of the build use case."""

    settings: BuildSettings | None = None
    bundles: list[Bundle] = field(default_factory=list)
    cleaned: bool = False
    error: str | None = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}

        assert self.settings is not None
        return {
            "out_dir": self.settings.out_dir,
            "mode": self.settings.mode,
            "cleaned": self.cleaned,
            "bundles": [b.model_dump() for b in self.bundles],
        }


def run_build(
    config_path: Path | None = None,
    out_dir: Path | None = None,
    mode: str | None = None,
    clean: bool = True,
) -> BuildResult:
    """Generate all entry points described by the settings file.

    Args:
        config_path: Optional explicit path to sitebundle.yml.
        out_dir: Override for the settings' ``out_dir``.
        mode: Override for the settings' build mode.
        clean: Empty the output directory first.

    Returns:
        BuildResult with the produced bundles, or an error message.
    """
    result = BuildResult()
    config_path = config_path or find_settings_file()

    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        result.error = str(e)
        return result

    overrides: dict = {}
    if out_dir is not None:
        overrides["out_dir"] = str(out_dir.resolve())
    if mode is not None:
        overrides["mode"] = mode
    if overrides:
        settings = settings.model_copy(update=overrides)
    result.settings = settings

    target = Path(settings.out_dir)
    probe = NodeModulesProbe(Path(settings.package_root))

    try:
        validate_site_names(settings.sites)
        if clean:
            prepare_build_dirs(target, _protected_paths(config_path, settings))
            result.cleaned = True
        result.bundles = generate_entry_points(
            settings.sites,
            target,
            settings.mode,
            probe,
            runtime=settings.runtime,
        )
    except (EntryPointError, UnsafeOutDirError, OSError) as e:
        logger.debug("Entry-point generation failed", exc_info=True)
        result.error = str(e)
        return result

    return result


def run_clean(
    config_path: Path | None = None,
    out_dir: Path | None = None,
) -> BuildResult:
    """Reset the output directory without generating anything."""
    result = BuildResult()
    config_path = config_path or find_settings_file()
    protected = _protected_paths(config_path)

    if out_dir is None:
        try:
            settings = load_settings(config_path)
        except ConfigError as e:
            result.error = str(e)
            return result
        protected = _protected_paths(config_path, settings)
    else:
        settings = BuildSettings(out_dir=str(out_dir.resolve()))
    result.settings = settings

    try:
        prepare_build_dirs(Path(settings.out_dir), protected)
    except (UnsafeOutDirError, OSError) as e:
        result.error = str(e)
        return result

    result.cleaned = True
    return result
