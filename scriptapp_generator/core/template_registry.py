"""Lookup of the template trees shipped with the generator."""

from __future__ import annotations

from pathlib import Path

_DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


class TemplateRegistry:
    """Resolves template names to directories under a templates root.

    Every immediate subdirectory of the root is a template; its directory
    name is the template name.
    """

    def __init__(self, templates_dir: Path | None = None) -> None:
        self._templates_dir = templates_dir or _DEFAULT_TEMPLATES_DIR

    def get_templates_dir(self) -> Path:
        """Return the templates root."""
        return self._templates_dir

    def get_available_templates(self) -> list[str]:
        """Return the sorted names of all template directories.

        Plain files under the root are ignored.
        """
        return sorted(
            entry.name
            for entry in self._templates_dir.iterdir()
            if entry.is_dir()
        )

    def get_template_path(self, template: str) -> Path:
        """Join *template* onto the templates root without validating it."""
        return self._templates_dir / template
