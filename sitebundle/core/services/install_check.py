"""
Installation checker — fail fast on packages that are not installed.

Installation is a filesystem fact independent of modes, so every
package name is checked once, no matter how many sites reference it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sitebundle.adapters.base import ModuleProbe
from sitebundle.core.models.site import Site

logger = logging.getLogger(__name__)


class EntryPointError(Exception):
    """Base class for entry-point generation failures."""


class MissingPackageError(EntryPointError):
    """Raised when a package referenced by a site is not installed."""

    def __init__(self, package: str):
        self.package = package
        super().__init__(
            f'The package "{package}" doesn\'t seem to be installed. '
            f'Make sure you did "npm install {package}"'
        )


def unique_package_names(sites: Sequence[Site]) -> list[str]:
    """All package names across ``sites``, deduplicated, in first-seen order."""
    return list(dict.fromkeys(name for site in sites for name in site.packages))


def check_installed(sites: Sequence[Site], probe: ModuleProbe) -> None:
    """Verify every referenced package is installed.

    Raises:
        MissingPackageError: For the first missing package.
    """
    names = unique_package_names(sites)
    for name in names:
        if not probe.is_installed(name):
            raise MissingPackageError(name)
    logger.debug("All %d package(s) installed", len(names))
