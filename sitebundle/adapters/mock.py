"""
Mock probe — in-memory test double for the package tree.

Used in tests to describe a package layout without touching disk and
to assert exactly which references were probed, and in what order.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from sitebundle.adapters.base import ModuleProbe


class MockProbe(ModuleProbe):
    """Universal mock probe for testing.

    By default nothing exists. Entries and installed packages are
    declared up front; individual references can be set to fail.
    """

    def __init__(
        self,
        entries: Iterable[str] = (),
        installed: Iterable[str] | None = None,
        probe_name: str = "mock",
    ):
        self._name = probe_name
        self._entries: set[str] = set(entries)
        # Default: every package that owns an entry is installed
        if installed is None:
            installed = {_package_of(ref) for ref in self._entries}
        self._installed: set[str] = set(installed)
        self._failures: dict[str, OSError] = {}
        self._call_log: list[str] = []
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[str]:
        """All references entry_exists() has been asked about."""
        return self._call_log

    @property
    def call_count(self) -> int:
        """Number of times entry_exists has been called."""
        return len(self._call_log)

    def add_entry(self, reference: str) -> None:
        """Declare that ``reference`` exists."""
        self._entries.add(reference)

    def set_installed(self, *packages: str) -> None:
        """Mark packages as installed."""
        self._installed.update(packages)

    def set_failure(self, reference: str, error: OSError | None = None) -> None:
        """Configure a specific reference to raise when probed."""
        self._failures[reference] = error or PermissionError(
            13, "Permission denied", reference
        )

    def entry_exists(self, reference: str) -> bool:
        with self._lock:
            self._call_log.append(reference)
        if reference in self._failures:
            raise self._failures[reference]
        return reference in self._entries

    def is_installed(self, package: str) -> bool:
        return package in self._installed


def _package_of(reference: str) -> str:
    """``@scope/pkg/src/x`` → ``@scope/pkg``; ``pkg/src/x`` → ``pkg``."""
    parts = reference.split("/")
    if parts[0].startswith("@") and len(parts) > 1:
        return "/".join(parts[:2])
    return parts[0]
