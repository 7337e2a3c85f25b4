"""
Domain models — Pydantic types for sitebundle.

All models are re-exported here for convenient access:

    from sitebundle.core.models import Site, ResolvedPackage, Bundle
"""

from sitebundle.core.models.settings import DEFAULT_RUNTIME, BuildSettings
from sitebundle.core.models.site import (
    DEFAULT_MODE,
    Bundle,
    PackageRef,
    ResolvedPackage,
    Site,
)
from sitebundle.core.models.template import GeneratedFile

__all__ = [
    "DEFAULT_MODE",
    "DEFAULT_RUNTIME",
    # settings.py
    "BuildSettings",
    # site.py
    "Bundle",
    # template.py
    "GeneratedFile",
    "PackageRef",
    "ResolvedPackage",
    "Site",
]
