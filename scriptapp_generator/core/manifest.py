"""Package manifest (``package.json``) document handling.

A parsed manifest is a tree of JSON values. Only string leaves are ever
rewritten: objects are descended into, while arrays, numbers, booleans and
null are left exactly as parsed.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Union, cast

# Recursive type for parsed manifest documents
ManifestNode = Union[str, int, float, bool, None, 'ManifestObject', list['ManifestNode']]
ManifestObject = dict[str, ManifestNode]

MANIFEST_FILENAME = "package.json"
DEPLOY_SCRIPT_KEY = "dx-deploy"


def map_strings(node: ManifestNode, rewrite: Callable[[str], str]) -> ManifestNode:
    """Return a copy of *node* with *rewrite* applied to every string leaf.

    Key order of objects is preserved. Arrays are returned untouched.
    """
    if isinstance(node, str):
        return rewrite(node)
    if isinstance(node, dict):
        return {key: map_strings(value, rewrite) for key, value in node.items()}
    return node


def rewrite_deploy_script(
    document: ManifestNode,
    rewrite: Callable[[str], str],
) -> ManifestNode:
    """Return *document* with ``scripts.dx-deploy`` rewritten.

    Only a non-empty string script is touched; any other shape comes back
    unchanged.
    """
    if not isinstance(document, dict):
        return document
    scripts = document.get("scripts")
    if not isinstance(scripts, dict):
        return document
    script = scripts.get(DEPLOY_SCRIPT_KEY)
    if not isinstance(script, str) or not script:
        return document
    updated_scripts = {**scripts, DEPLOY_SCRIPT_KEY: map_strings(script, rewrite)}
    return {**document, "scripts": updated_scripts}


def load_manifest(path: Path) -> ManifestNode:
    """Parse a manifest file.

    Raises:
        json.JSONDecodeError: If the file is not valid JSON.
    """
    return cast(ManifestNode, json.loads(path.read_bytes().decode("utf-8")))


def dump_manifest(document: ManifestNode) -> str:
    """Serialise a manifest with 2-space indentation and no trailing newline."""
    return json.dumps(document, indent=2, ensure_ascii=False)
