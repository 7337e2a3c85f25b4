"""
Site name rules — every site name becomes one directory under entry-points/.

Shared by the build path, which refuses to write anything for a bad
site list, and by ``config check``, which reports the same problems.
"""

from __future__ import annotations

from collections.abc import Sequence

from sitebundle.core.models.site import Site
from sitebundle.core.services.install_check import EntryPointError


class InvalidSiteNameError(EntryPointError):
    """Raised when site names are duplicated or unusable as directories."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("; ".join(problems))


def is_usable_site_name(name: str) -> bool:
    """A name usable as a single path component."""
    return name not in ("", ".", "..") and "/" not in name and "\\" not in name


def site_name_problems(sites: Sequence[Site]) -> list[str]:
    """Describe every duplicate or unusable site name, in a stable order."""
    problems: list[str] = []

    names = [s.name for s in sites]
    dupes = sorted({n for n in names if names.count(n) > 1})
    if dupes:
        problems.append(f"Duplicate site names: {', '.join(dupes)}")

    for name in names:
        if not is_usable_site_name(name):
            problems.append(f"Site name cannot be used as a directory: {name!r}")

    return problems


def validate_site_names(sites: Sequence[Site]) -> None:
    """Refuse a site list whose names would collide or escape entry-points/.

    Raises:
        InvalidSiteNameError: If any site name is duplicated or unusable.
    """
    problems = site_name_problems(sites)
    if problems:
        raise InvalidSiteNameError(problems)
