"""Adapters — probes over the installed package tree.

Public re-exports for convenient access.
"""

from sitebundle.adapters.base import ModuleProbe
from sitebundle.adapters.mock import MockProbe
from sitebundle.adapters.node_modules import NodeModulesProbe

__all__ = [
    "MockProbe",
    "ModuleProbe",
    "NodeModulesProbe",
]
