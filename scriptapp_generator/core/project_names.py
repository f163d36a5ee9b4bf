"""Project name and destination path helpers."""

from __future__ import annotations

import os
import re
from pathlib import Path

_WHITESPACE_RE = re.compile(r"\s+")


def format_project_name(name: str) -> str:
    """Turn a human-entered name into a directory name.

    Trims, lowercases and collapses every whitespace run into a single
    hyphen. Nothing else is altered, so an all-whitespace name yields ``""``.

    Examples::

        format_project_name("  My Script  App ") -> "my-script-app"
        format_project_name("Hello_World!") -> "hello_world!"
    """
    return _WHITESPACE_RE.sub("-", name.strip().lower())


def resolve_path(relative_path: str | Path) -> Path:
    """Resolve *relative_path* against the current working directory.

    Symlinks are left as they are; only ``.`` and ``..`` are normalised.
    """
    return Path(os.path.abspath(relative_path))
