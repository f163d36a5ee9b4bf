"""Shared fixtures for the script app generator test suite.

Provides:
- an isolated HOME so no test touches ``~/.dx-script-app``
- an isolated working directory (``isolated_project``)
- a per-test ``Logger`` writing to a temporary log file
- ``make_tree``: a factory that writes a template tree from a mapping
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator, Mapping
from pathlib import Path

import pytest

from scriptapp_generator.helpers.helpers_logging import Logger

# Relative path -> text or raw bytes
TreeSpec = Mapping[str, "str | bytes"]
MakeTree = Callable[[Path, TreeSpec], Path]

_ENV_VARS = (
    "DX_SCRIPTAPP_CONFIG",
    "DX_SCRIPTAPP_LOG_FILE",
    "DX_SCRIPTAPP_TEMPLATES_DIR",
)


@pytest.fixture(autouse=True)
def isolated_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point HOME at a temporary directory and clear generator env vars."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture()
def isolated_project(tmp_path: Path) -> Iterator[Path]:
    """Create an empty working directory and cd into it.

    The original working directory is restored afterwards.
    """
    workdir = tmp_path / "work"
    workdir.mkdir()
    original_cwd = Path.cwd()
    os.chdir(workdir)
    try:
        yield workdir
    finally:
        os.chdir(original_cwd)


@pytest.fixture()
def log_file(tmp_path: Path) -> Path:
    """Log file used by the ``logger`` fixture."""
    return tmp_path / "logs" / "scriptapp.log"


@pytest.fixture()
def logger(log_file: Path) -> Iterator[Logger]:
    """Diagnostics sink writing to a temporary log file."""
    sink = Logger(log_file)
    try:
        yield sink
    finally:
        sink.close()


def write_tree(root: Path, files: TreeSpec) -> Path:
    """Write *files* under *root*, creating directories as needed."""
    root.mkdir(parents=True, exist_ok=True)
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
    return root


@pytest.fixture()
def make_tree() -> MakeTree:
    """Return the ``write_tree`` helper as a fixture."""
    return write_tree


def snapshot_tree(root: Path) -> dict[str, bytes | None]:
    """Map every relative path under *root* to its bytes (None for dirs)."""
    return {
        path.relative_to(root).as_posix(): (None if path.is_dir() else path.read_bytes())
        for path in sorted(root.rglob("*"))
    }
