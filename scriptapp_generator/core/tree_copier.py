"""Recursive template tree copy."""

from __future__ import annotations

import shutil
from pathlib import Path


def copy_recursive(source: Path, destination: Path) -> None:
    """Copy *source* to *destination*, descending into directories.

    Directories are created one level at a time, so the parent of
    *destination* must already exist. Files are copied byte for byte and
    overwrite whatever is at the target path. Nothing is ever deleted, and
    filesystem errors propagate unchanged (no rollback of a partial copy).

    Args:
        source: Existing file or directory to copy.
        destination: Target path mirroring *source*.
    """
    if source.is_dir():
        if not destination.exists():
            destination.mkdir()
        for entry in sorted(source.iterdir()):
            copy_recursive(entry, destination / entry.name)
    else:
        shutil.copyfile(source, destination)
