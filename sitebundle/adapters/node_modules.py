"""
node_modules probe — answers probe questions from an installed package tree.

A module reference ``pkg/src/client`` exists when one of
``pkg/src/client.js``, ``.jsx``, ``.ts`` or ``.tsx`` is a regular file
under the package root. A directory named ``client`` does not count;
folder entries are addressed explicitly as ``pkg/src/client/index``.
"""

from __future__ import annotations

import errno
import logging
import os
import stat
from pathlib import Path

from sitebundle.adapters.base import ModuleProbe

logger = logging.getLogger(__name__)

# Order matters only for logging; any hit counts.
SOURCE_EXTENSIONS: tuple[str, ...] = (".js", ".jsx", ".ts", ".tsx")

# stat() failures that simply mean "there is nothing here"
_NOT_FOUND_ERRNOS = frozenset({errno.ENOENT, errno.ENOTDIR})


def _stat_or_none(path: Path) -> os.stat_result | None:
    """stat() a path, mapping not-found to None and re-raising anything else."""
    try:
        return os.stat(path)
    except OSError as e:
        if e.errno in _NOT_FOUND_ERRNOS:
            return None
        raise


class NodeModulesProbe(ModuleProbe):
    """Probe backed by a real ``node_modules`` directory.

    Args:
        root: The package root (usually ``<project>/node_modules``).
        extensions: Source file extensions tried for each reference.
    """

    def __init__(
        self,
        root: Path,
        extensions: tuple[str, ...] = SOURCE_EXTENSIONS,
    ):
        self._root = Path(root)
        self._extensions = extensions

    @property
    def name(self) -> str:
        return "node_modules"

    @property
    def root(self) -> Path:
        return self._root

    def entry_exists(self, reference: str) -> bool:
        for ext in self._extensions:
            st = _stat_or_none(self._root / f"{reference}{ext}")
            if st is not None and stat.S_ISREG(st.st_mode):
                logger.debug("Entry found: %s%s", reference, ext)
                return True
        return False

    def is_installed(self, package: str) -> bool:
        st = _stat_or_none(self._root / package)
        return st is not None and stat.S_ISDIR(st.st_mode)
