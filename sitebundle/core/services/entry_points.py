"""
Entry-point orchestration — sites in, entry-point files and bundles out.

Flow:
    check installed → server package set → server.ts
                    → per-site client package set → <site>/client.ts

Site name validation and the installation check gate everything else. Server and client
files live at disjoint paths and are regenerated from scratch on
every run; a failure part-way leaves already written siblings alone.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from sitebundle.adapters.base import ModuleProbe
from sitebundle.core.models.settings import DEFAULT_RUNTIME
from sitebundle.core.models.site import Bundle, Site
from sitebundle.core.models.template import GeneratedFile
from sitebundle.core.services.build_dirs import entry_points_dir
from sitebundle.core.services.generators.entry_point import (
    generate_hot_reload,
    generate_imports,
)
from sitebundle.core.services.install_check import check_installed
from sitebundle.core.services.package_set import MAX_PROBE_WORKERS, build_package_set
from sitebundle.core.services.site_names import validate_site_names

logger = logging.getLogger(__name__)

SERVER_BUNDLE = "server"
DEVELOPMENT_MODE = "development"


def server_entry_path(out_dir: Path) -> Path:
    return entry_points_dir(out_dir) / "server.ts"


def client_entry_path(out_dir: Path, site_name: str) -> Path:
    return entry_points_dir(out_dir) / site_name / "client.ts"


def generate_server_entry_point(
    sites: Sequence[Site],
    out_dir: Path,
    probe: ModuleProbe,
    *,
    runtime: str = DEFAULT_RUNTIME,
    max_workers: int | None = None,
) -> Bundle:
    """Write the single server entry point covering all sites.

    The server bundle never carries a hot-reload block.
    """
    packages = build_package_set(sites, "server", probe, max_workers=max_workers)
    if not packages:
        logger.warning("Server bundle has no packages with a server entry point")

    path = server_entry_path(out_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    GeneratedFile(
        path=str(path),
        content=generate_imports(packages, "server", runtime=runtime),
        reason=f"Server entry point for {len(sites)} site(s)",
    ).write()

    logger.info("Wrote server entry point (%d packages) → %s", len(packages), path)
    return Bundle(name=SERVER_BUNDLE, path=str(path))


def generate_client_entry_point(
    site: Site,
    out_dir: Path,
    mode: str,
    probe: ModuleProbe,
    *,
    runtime: str = DEFAULT_RUNTIME,
    max_workers: int | None = None,
) -> Bundle | None:
    """Write the client entry point for one site.

    Returns:
        The bundle, or None when no package of the site has a client
        entry point (no file is written in that case).
    """
    packages = build_package_set([site], "client", probe, max_workers=max_workers)
    if not packages:
        logger.info("Site '%s' has no client packages, skipping bundle", site.name)
        return None

    content = generate_imports(packages, "client", runtime=runtime)
    if mode == DEVELOPMENT_MODE:
        content = generate_hot_reload(content, packages, runtime=runtime)

    path = client_entry_path(out_dir, site.name)
    path.parent.mkdir(parents=True, exist_ok=True)
    GeneratedFile(
        path=str(path),
        content=content,
        reason=f"Client entry point for site '{site.name}'",
    ).write()

    logger.info(
        "Wrote client entry point for '%s' (%d packages) → %s",
        site.name,
        len(packages),
        path,
    )
    return Bundle(name=site.name, path=str(path))


def generate_client_entry_points(
    sites: Sequence[Site],
    out_dir: Path,
    mode: str,
    probe: ModuleProbe,
    *,
    runtime: str = DEFAULT_RUNTIME,
    max_workers: int | None = None,
) -> list[Bundle]:
    """Write one client entry point per site that has client packages.

    Sites are generated concurrently; bundles come back in site order.
    """
    if not sites:
        return []

    def _generate(site: Site) -> Bundle | None:
        return generate_client_entry_point(
            site, out_dir, mode, probe, runtime=runtime, max_workers=max_workers
        )

    workers = max_workers or min(len(sites), MAX_PROBE_WORKERS)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        bundles = list(pool.map(_generate, sites))

    return [b for b in bundles if b is not None]


def generate_entry_points(
    sites: Sequence[Site],
    out_dir: Path,
    mode: str,
    probe: ModuleProbe,
    *,
    runtime: str = DEFAULT_RUNTIME,
    max_workers: int | None = None,
) -> list[Bundle]:
    """Check packages, then write server and client entry points.

    Args:
        sites: All configured sites.
        out_dir: Build output root.
        mode: Build mode; ``development`` adds hot-reload blocks to clients.
        probe: Package tree probe.
        runtime: Module prefix of the rendering runtime.
        max_workers: Thread pool size for resolution and site fan-out.

    Returns:
        Client bundles in site order, followed by the server bundle.

    Raises:
        InvalidSiteNameError: Site names collide or are not a single
            directory component.
        MissingPackageError: A referenced package is not installed.
        OSError: Probe or write failure.
    """
    validate_site_names(sites)
    check_installed(sites, probe)

    out_dir = Path(out_dir)
    server = generate_server_entry_point(
        sites, out_dir, probe, runtime=runtime, max_workers=max_workers
    )
    clients = generate_client_entry_points(
        sites, out_dir, mode, probe, runtime=runtime, max_workers=max_workers
    )
    return [*clients, server]
