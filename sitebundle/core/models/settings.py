"""
Build settings model — loaded from sitebundle.yml.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from sitebundle.core.models.site import Site

DEFAULT_RUNTIME = "@frontity/core"


class BuildSettings(BaseModel):
    """Everything one build needs besides the filesystem itself.

    Relative ``out_dir`` and ``package_root`` values are resolved
    against the directory holding the settings file by the loader.
    """

    out_dir: str = "build"
    mode: str = "production"
    package_root: str = "node_modules"
    runtime: str = DEFAULT_RUNTIME
    sites: list[Site] = Field(default_factory=list)
