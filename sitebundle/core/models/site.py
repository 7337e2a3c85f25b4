"""
Site models — what gets bundled and what comes out.

A Site is loaded from settings and never mutated during a run.
PackageRef, ResolvedPackage and Bundle are transient values built
and discarded within one generation pass.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_MODE = "default"


class Site(BaseModel):
    """One deployable front-end configuration.

    Attributes:
        name:     Site identifier, also the client bundle directory name.
        mode:     Mode selecting mode-specific package overrides.
        packages: Ordered package names.
    """

    model_config = ConfigDict(frozen=True)

    name: str = "default"
    mode: str = DEFAULT_MODE
    packages: tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("packages", mode="before")
    @classmethod
    def _normalize_packages(cls, value: Any) -> Any:
        # Entries may be "pkg" or {"name": "pkg", "state": {...}}
        if not isinstance(value, (list, tuple)):
            return value
        names = []
        for entry in value:
            if isinstance(entry, dict):
                if "name" not in entry:
                    raise ValueError(f"Package entry without a name: {entry!r}")
                names.append(entry["name"])
            else:
                names.append(entry)
        return tuple(names)


class PackageRef(BaseModel):
    """Deduplication key for one package under one mode."""

    model_config = ConfigDict(frozen=True)

    name: str
    mode: str = DEFAULT_MODE


class ResolvedPackage(BaseModel):
    """A package with the module reference of its entry point.

    ``path`` is a module reference relative to the package root,
    e.g. ``@org/theme/src/client/index``. Packages without an entry
    point never become a ResolvedPackage.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    mode: str
    path: str


class Bundle(BaseModel):
    """A generated entry-point file handed to the bundler."""

    name: str
    path: str
