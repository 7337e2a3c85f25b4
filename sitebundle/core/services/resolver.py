"""
Entry-point resolver — find the source file a package exposes.

Packages declare nothing; the resolver follows a layout convention,
most specific location first:

    <name>/src/<mode>/<type>          per-mode, per-type file
    <name>/src/<mode>/<type>/index    ... or folder
    <name>/src/<mode>                 per-mode file (client/server only)
    <name>/src/<mode>/index           ... or folder
    <name>/src/<type>                 per-type file
    <name>/src/<type>/index           ... or folder
    <name>/src/index                  shared entry (client/server only)

The mode tiers are skipped for the ``default`` mode. The first
candidate that exists wins and nothing after it is probed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from sitebundle.adapters.base import ModuleProbe
from sitebundle.core.models.site import DEFAULT_MODE

logger = logging.getLogger(__name__)

# Types whose bundles may fall back to a shared, type-less entry.
INDEX_FALLBACK_TYPES = frozenset({"client", "server"})


def candidate_paths(name: str, mode: str, type_: str) -> Iterator[str]:
    """Yield module references for ``(name, mode, type_)`` in priority order."""
    base = f"{name}/src"
    with_index = type_ in INDEX_FALLBACK_TYPES

    if mode != DEFAULT_MODE:
        yield f"{base}/{mode}/{type_}"
        yield f"{base}/{mode}/{type_}/index"
        if with_index:
            yield f"{base}/{mode}"
            yield f"{base}/{mode}/index"

    yield f"{base}/{type_}"
    yield f"{base}/{type_}/index"
    if with_index:
        yield f"{base}/index"


def resolve_entry_point(
    name: str,
    mode: str,
    type_: str,
    probe: ModuleProbe,
) -> str | None:
    """Resolve the entry point of a package for a mode and bundle type.

    Args:
        name: Package name, e.g. ``@frontity/mars-theme``.
        mode: Site mode; ``default`` skips the mode-specific tiers.
        type_: Bundle type (``client``, ``server`` or an extension type).
        probe: Filesystem probe answering existence questions.

    Returns:
        The first existing module reference, or None when the package
        has no entry point for this type.

    Raises:
        OSError: Propagated from the probe on failures other than not-found.
    """
    for candidate in candidate_paths(name, mode, type_):
        if probe.entry_exists(candidate):
            logger.debug("Resolved %s [%s/%s] → %s", name, mode, type_, candidate)
            return candidate

    logger.debug("No %s entry point for %s [%s]", type_, name, mode)
    return None
