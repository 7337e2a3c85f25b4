"""
Resolve use case — show where a single package's entry point lives.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from sitebundle.adapters.node_modules import NodeModulesProbe
from sitebundle.core.config.loader import ConfigError, load_settings
from sitebundle.core.services.resolver import candidate_paths, resolve_entry_point


@dataclass
class ResolveResult:
    """Result of resolving one package."""

    name: str = ""
    mode: str = ""
    type: str = ""
    path: str | None = None
    candidates: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def found(self) -> bool:
        return self.path is not None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        return {
            "name": self.name,
            "mode": self.mode,
            "type": self.type,
            "path": self.path,
            "candidates": self.candidates,
        }


def run_resolve(
    name: str,
    mode: str,
    type_: str,
    config_path: Path | None = None,
    package_root: Path | None = None,
) -> ResolveResult:
    """Resolve one package against the configured package root.

    Args:
        name: Package name.
        mode: Site mode.
        type_: Bundle type.
        config_path: Settings file used to find the package root.
        package_root: Explicit package root; skips settings loading.
    """
    result = ResolveResult(name=name, mode=mode, type=type_)
    result.candidates = list(candidate_paths(name, mode, type_))

    if package_root is None:
        try:
            package_root = Path(load_settings(config_path).package_root)
        except ConfigError as e:
            result.error = str(e)
            return result

    probe = NodeModulesProbe(package_root)
    if not probe.is_installed(name):
        result.error = f'Package "{name}" is not installed in {package_root}'
        return result

    try:
        result.path = resolve_entry_point(name, mode, type_, probe)
    except OSError as e:
        result.error = str(e)

    return result
