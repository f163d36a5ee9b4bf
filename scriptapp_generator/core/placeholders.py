"""Placeholder substitution over a freshly copied project tree.

Walks the destination tree and replaces literal ``__TOKEN__`` markers with
project values. Files are picked by extension only; ``package.json`` gets
field-aware treatment, every other eligible file is rewritten as plain
text. A file without any token is never rewritten, so a second pass with
the same mapping changes nothing.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from scriptapp_generator.core.manifest import (
    MANIFEST_FILENAME,
    ManifestNode,
    dump_manifest,
    load_manifest,
    map_strings,
    rewrite_deploy_script,
)
from scriptapp_generator.helpers.helpers_logging import Logger

SCRIPT_APP_NAME_TOKEN = "__SCRIPT_APP_NAME__"
CONTENT_ROOT_TOKEN = "__CONTENT_ROOT__"
WCM_CONTENT_NAME_TOKEN = "__WCM_CONTENT_NAME__"
ROOT_IDENTIFIER_TOKEN = "__ROOT_IDENTIFIER__"

CONTENT_ROOT = "./dist"

# Matched against Path.suffix, so a bare ".env" dotfile has no extension.
TEXT_EXTENSIONS = frozenset({
    ".js",
    ".ts",
    ".jsx",
    ".tsx",
    ".json",
    ".html",
    ".css",
    ".md",
    ".txt",
    ".env",
    ".local",
})

SKIP_DIRECTORY = "node_modules"


@dataclass(frozen=True)
class PlaceholderMapping:
    """A literal token and the value that replaces it."""

    placeholder: str
    value: str


class FilePolicy(Enum):
    """How a file found during the walk is treated."""

    SKIP = "skip"
    TEXT = "text"
    MANIFEST = "manifest"


def build_placeholders(
    script_app_name: str,
    extra: Sequence[PlaceholderMapping] = (),
) -> tuple[PlaceholderMapping, ...]:
    """Return the built-in mappings followed by *extra*."""
    return (
        PlaceholderMapping(SCRIPT_APP_NAME_TOKEN, script_app_name),
        PlaceholderMapping(CONTENT_ROOT_TOKEN, CONTENT_ROOT),
        PlaceholderMapping(WCM_CONTENT_NAME_TOKEN, script_app_name),
        *extra,
    )


def replace_tokens(text: str, placeholders: Sequence[PlaceholderMapping]) -> str:
    """Replace every occurrence of every token, in mapping order."""
    for mapping in placeholders:
        if mapping.placeholder in text:
            text = text.replace(mapping.placeholder, mapping.value)
    return text


def classify_file(path: Path) -> FilePolicy:
    """Pick the rewrite policy for *path* from its name alone."""
    if path.suffix not in TEXT_EXTENSIONS:
        return FilePolicy.SKIP
    if path.name == MANIFEST_FILENAME:
        return FilePolicy.MANIFEST
    return FilePolicy.TEXT


def iter_files(root_dir: Path) -> Iterator[Path]:
    """Yield every file under *root_dir*, depth first, skipping node_modules."""
    for entry in sorted(root_dir.iterdir()):
        if entry.is_dir():
            if entry.name == SKIP_DIRECTORY:
                continue
            yield from iter_files(entry)
        elif entry.is_file():
            yield entry


def _update_manifest(path: Path, placeholders: Sequence[PlaceholderMapping]) -> bool:
    document = load_manifest(path)
    changed = False

    def _rewrite(value: str) -> str:
        nonlocal changed
        new_value = replace_tokens(value, placeholders)
        if new_value != value:
            changed = True
        return new_value

    updated: ManifestNode = map_strings(rewrite_deploy_script(document, _rewrite), _rewrite)
    if changed:
        path.write_bytes(dump_manifest(updated).encode("utf-8"))
    return changed


def _update_text_file(path: Path, placeholders: Sequence[PlaceholderMapping]) -> bool:
    # Raw bytes keep CRLF line endings intact.
    content = path.read_bytes().decode("utf-8")
    updated = replace_tokens(content, placeholders)
    if updated == content:
        return False
    path.write_bytes(updated.encode("utf-8"))
    return True


def update_file(path: Path, placeholders: Sequence[PlaceholderMapping]) -> bool:
    """Apply the file's policy and report whether it was rewritten.

    Raises:
        OSError: If the file cannot be read or written.
        UnicodeDecodeError: If an eligible file is not UTF-8.
        json.JSONDecodeError: If the manifest is malformed.
    """
    policy = classify_file(path)
    if policy is FilePolicy.MANIFEST:
        return _update_manifest(path, placeholders)
    if policy is FilePolicy.TEXT:
        return _update_text_file(path, placeholders)
    return False


def update_placeholders(
    root_dir: Path,
    script_app_name: str,
    logger: Logger,
    extra_placeholders: Sequence[PlaceholderMapping] = (),
) -> list[Path]:
    """Rewrite placeholders in every eligible file under *root_dir*.

    Args:
        root_dir: Project tree to rewrite in place.
        script_app_name: Value for the project-name and content-name tokens.
        logger: Diagnostics sink; one info line per rewritten file.
        extra_placeholders: Additional mappings applied after the built-ins.

    Returns:
        The files that were rewritten, in walk order.
    """
    placeholders = build_placeholders(script_app_name, extra_placeholders)
    updated_files: list[Path] = []
    for path in iter_files(root_dir):
        if update_file(path, placeholders):
            logger.info(f"Updated placeholders in: {path}")
            updated_files.append(path)
    return updated_files
