"""
Shared test fixtures and configuration.
"""

import json
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def package_root(tmp_path: Path) -> Path:
    """Return an empty node_modules directory."""
    root = tmp_path / "node_modules"
    root.mkdir()
    return root


@pytest.fixture
def make_package(package_root: Path) -> Callable[..., Path]:
    """Return a factory that installs a fake package with source files.

    Usage::

        make_package("my-theme", "src/client/index.js", "src/server.ts")
    """

    def _make(name: str, *files: str) -> Path:
        pkg = package_root / name
        pkg.mkdir(parents=True, exist_ok=True)
        (pkg / "package.json").write_text(json.dumps({"name": name}))
        for rel in files:
            target = pkg / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text("export default {};\n")
        return pkg

    return _make


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    """Return a not-yet-created build output directory."""
    return tmp_path / "build"
