"""
Package set builder — sites in, resolved packages out.

Flattens the sites' package lists into (mode, name) pairs, resolves
each distinct pair once and drops packages without an entry point.
The output order is the first-seen order of the pairs, which becomes
the import order of the generated file.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from sitebundle.adapters.base import ModuleProbe
from sitebundle.core.models.site import PackageRef, ResolvedPackage, Site
from sitebundle.core.services.resolver import resolve_entry_point

logger = logging.getLogger(__name__)

MAX_PROBE_WORKERS = 16


def collect_refs(sites: Sequence[Site]) -> list[PackageRef]:
    """Distinct (mode, name) pairs across ``sites``, in first-seen order."""
    refs = dict.fromkeys(
        PackageRef(name=name, mode=site.mode)
        for site in sites
        for name in site.packages
    )
    return list(refs)


def build_package_set(
    sites: Sequence[Site],
    type_: str,
    probe: ModuleProbe,
    *,
    max_workers: int | None = None,
) -> list[ResolvedPackage]:
    """Resolve every distinct package of ``sites`` for one bundle type.

    Resolutions run concurrently; ``Executor.map`` hands results back
    in submission order so the output stays deterministic.

    Args:
        sites: All sites for the server bundle, one site for a client bundle.
        type_: Bundle type passed to the resolver.
        probe: Filesystem probe.
        max_workers: Thread pool size (default: one per distinct package,
            capped at MAX_PROBE_WORKERS).

    Returns:
        Resolved packages, without the ones lacking an entry point.
    """
    refs = collect_refs(sites)
    if not refs:
        return []

    def _resolve(ref: PackageRef) -> str | None:
        return resolve_entry_point(ref.name, ref.mode, type_, probe)

    workers = max_workers or min(len(refs), MAX_PROBE_WORKERS)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        paths = list(pool.map(_resolve, refs))

    packages = [
        ResolvedPackage(name=ref.name, mode=ref.mode, path=path)
        for ref, path in zip(refs, paths)
        if path is not None
    ]
    logger.info(
        "Resolved %d/%d %s package(s)", len(packages), len(refs), type_
    )
    return packages
