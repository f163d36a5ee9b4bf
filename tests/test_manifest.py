"""Tests for manifest document handling."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from scriptapp_generator.core.manifest import (
    dump_manifest,
    load_manifest,
    map_strings,
    rewrite_deploy_script,
)

pytestmark = pytest.mark.unit


def _upper(value: str) -> str:
    return value.upper()


class TestMapStrings:
    """map_strings rewrites string leaves reachable through objects."""

    def test_rewrites_nested_object_strings(self) -> None:
        document = {"a": "x", "b": {"c": "y", "d": {"e": "z"}}}

        assert map_strings(document, _upper) == {"a": "X", "b": {"c": "Y", "d": {"e": "Z"}}}

    def test_leaves_non_string_scalars_alone(self) -> None:
        document = {"n": 1, "f": 1.5, "t": True, "z": None}

        assert map_strings(document, _upper) == document

    def test_arrays_are_returned_untouched(self) -> None:
        document = {"files": ["dist", "src"], "nested": {"list": [{"k": "v"}]}}

        result = map_strings(document, _upper)

        assert result == {"files": ["dist", "src"], "nested": {"list": [{"k": "v"}]}}

    def test_preserves_key_order(self) -> None:
        document = {"z": "1", "a": "2", "m": "3"}

        result = map_strings(document, _upper)

        assert isinstance(result, dict)
        assert list(result) == ["z", "a", "m"]

    def test_top_level_string(self) -> None:
        assert map_strings("abc", _upper) == "ABC"

    def test_does_not_mutate_input(self) -> None:
        document = {"a": "x", "b": {"c": "y"}}

        map_strings(document, _upper)

        assert document == {"a": "x", "b": {"c": "y"}}


class TestRewriteDeployScript:
    """Only a non-empty string ``scripts.dx-deploy`` is rewritten."""

    def test_rewrites_deploy_script_only(self) -> None:
        document = {"name": "n", "scripts": {"dev": "vite", "dx-deploy": "deploy"}}

        result = rewrite_deploy_script(document, _upper)

        assert result == {"name": "n", "scripts": {"dev": "vite", "dx-deploy": "DEPLOY"}}
        assert document["scripts"]["dx-deploy"] == "deploy"

    @pytest.mark.parametrize(
        "document",
        [
            {"name": "n"},
            {"scripts": "not-an-object"},
            {"scripts": {"dev": "vite"}},
            {"scripts": {"dx-deploy": ""}},
            {"scripts": {"dx-deploy": ["a", "b"]}},
            ["not", "an", "object"],
        ],
    )
    def test_other_shapes_come_back_unchanged(self, document: object) -> None:
        assert rewrite_deploy_script(document, _upper) == document  # type: ignore[arg-type]


class TestLoadAndDump:
    """Manifests are parsed as UTF-8 JSON and written with 2-space indent."""

    def test_dump_uses_two_space_indent_without_trailing_newline(self) -> None:
        text = dump_manifest({"name": "my-app", "scripts": {"dev": "vite"}})

        assert text == '{\n  "name": "my-app",\n  "scripts": {\n    "dev": "vite"\n  }\n}'

    def test_dump_keeps_non_ascii_characters(self) -> None:
        assert dump_manifest({"name": "café"}) == '{\n  "name": "café"\n}'

    def test_load_round_trips_dump(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_bytes(dump_manifest({"b": [1, 2], "a": None}).encode("utf-8"))

        assert load_manifest(path) == {"b": [1, 2], "a": None}

    def test_load_rejects_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError):
            load_manifest(path)
