"""
Probe base — the contract between the resolver and the filesystem.

The core services never touch the package tree directly. They ask a
ModuleProbe two questions: does a loadable source file exist for this
module reference, and is this package installed at all.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ModuleProbe(ABC):
    """Abstract base class for package-tree probes.

    Unlike tool adapters, probes DO raise: a missing file is ``False``,
    but any other I/O failure (permission denied, broken mount) is an
    ``OSError`` that must reach the caller unchanged.

    To create a new probe:
        1. Subclass ModuleProbe
        2. Implement name, entry_exists, is_installed
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The probe identifier (e.g., 'node_modules', 'mock')."""

    @abstractmethod
    def entry_exists(self, reference: str) -> bool:
        """Check whether ``reference`` points at a loadable source file.

        ``reference`` is an extensionless module path such as
        ``my-theme/src/client/index``.

        Raises:
            OSError: For any failure other than "not found".
        """

    @abstractmethod
    def is_installed(self, package: str) -> bool:
        """Check whether ``package`` is installed under the package root."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
