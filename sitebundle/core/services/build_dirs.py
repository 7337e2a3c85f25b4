"""
Build directory preparation — reset the output tree before a build.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

ENTRY_POINTS_SUBDIR = Path("bundling") / "entry-points"


class UnsafeOutDirError(Exception):
    """Raised when emptying out_dir would delete a protected directory."""

    def __init__(self, out_dir: Path, protected: Path):
        self.out_dir = out_dir
        self.protected = protected
        super().__init__(
            f"Refusing to empty {out_dir}: it is or contains {protected}. "
            "Point out_dir at a dedicated build directory."
        )


def entry_points_dir(out_dir: Path) -> Path:
    """Directory holding the generated entry-point files."""
    return Path(out_dir) / ENTRY_POINTS_SUBDIR


def check_out_dir(out_dir: Path, protected: Iterable[Path]) -> None:
    """Refuse an ``out_dir`` that is, or is an ancestor of, a protected path.

    Raises:
        UnsafeOutDirError: For the first protected path inside ``out_dir``.
    """
    out_dir = Path(out_dir).resolve()
    for path in protected:
        path = Path(path).resolve()
        if path == out_dir or out_dir in path.parents:
            raise UnsafeOutDirError(out_dir, path)


def prepare_build_dirs(out_dir: Path, protected: Iterable[Path] = ()) -> Path:
    """Ensure ``out_dir`` exists, empty it and recreate the entry-points dir.

    Runs once per full build. The directory itself is kept; only its
    contents are removed, so watchers holding it stay valid.

    Args:
        out_dir: Build output root.
        protected: Paths that must survive, typically the settings
            directory and the package root.

    Returns:
        The entry-points directory.

    Raises:
        UnsafeOutDirError: ``out_dir`` is or contains a protected path.
    """
    out_dir = Path(out_dir)
    check_out_dir(out_dir, protected)
    out_dir.mkdir(parents=True, exist_ok=True)

    removed = 0
    for child in sorted(out_dir.iterdir()):
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child)
        else:
            child.unlink()
        removed += 1

    target = entry_points_dir(out_dir)
    target.mkdir(parents=True, exist_ok=True)
    logger.info("Prepared %s (removed %d stale entries)", out_dir, removed)
    return target
