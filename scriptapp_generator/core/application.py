"""Script app creation workflow.

Sequences one scaffolding run: resolve the name and template (prompting
for whatever is missing), compute the destination, refuse to touch an
existing path, copy the template and rewrite its placeholders. Failures
come back as a ``ScaffoldResult``; nothing in here exits the process.
"""

from __future__ import annotations

import re
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

from scriptapp_generator.core.placeholders import (
    ROOT_IDENTIFIER_TOKEN,
    PlaceholderMapping,
    update_placeholders,
)
from scriptapp_generator.core.project_names import format_project_name, resolve_path
from scriptapp_generator.core.template_registry import TemplateRegistry
from scriptapp_generator.core.tree_copier import copy_recursive
from scriptapp_generator.helpers.helpers_logging import Logger

_WHITESPACE_RE = re.compile(r"\s+")


class FailureReason(Enum):
    """Why a scaffolding run stopped."""

    INVALID_NAME = "invalid-name"
    TEMPLATE_NOT_FOUND = "template-not-found"
    DESTINATION_EXISTS = "destination-exists"
    IO_FAULT = "io-fault"


@dataclass
class ScaffoldResult:
    """Outcome of ``ScriptAppCreator.create_script_app``."""

    destination: Path | None = None
    template: str | None = None
    reason: FailureReason | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.reason is None


class Prompter(Protocol):
    """What the workflow needs from the interactive prompt layer."""

    def ask_for_script_app_name(self) -> str: ...

    def ask_for_template(self, available_templates: list[str]) -> str | None: ...


def root_identifier(script_app_name: str, timestamp_ms: int) -> str:
    """Unique id for the app root element, e.g. ``my-app-1718000000000``.

    The name is lowercased and whitespace runs become hyphens; it is not
    trimmed.
    """
    return f"{_WHITESPACE_RE.sub('-', script_app_name.lower())}-{timestamp_ms}"


def next_steps_message(destination: Path) -> str:
    """Human-readable instructions printed after a successful run."""
    return f"""Done. Now run:

    cd {destination}
    npm install
    npm run dev

    # To deploy the script app, check the environment (.env files) and
    # update the credentials accordingly, then run:
    npm install
    npm run build
    npm run dx-deploy
"""


class ScriptAppCreator:
    """Creates a new script app project from a template.

    Args:
        logger: Diagnostics sink for this run.
        prompts: Source of the name/template when they are not supplied.
        registry: Template lookup.
        clock: Returns the current time in seconds; used for the root id.
    """

    def __init__(
        self,
        logger: Logger,
        prompts: Prompter,
        registry: TemplateRegistry,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.logger = logger
        self.prompts = prompts
        self.registry = registry
        self.clock = clock

    def _fail(
        self,
        reason: FailureReason,
        message: str,
        destination: Path | None = None,
        template: str | None = None,
    ) -> ScaffoldResult:
        self.logger.error(message)
        return ScaffoldResult(
            destination=destination,
            template=template,
            reason=reason,
            message=message,
        )

    def _resolve_template(self, template: str | None) -> str | None:
        available = self.registry.get_available_templates()
        if template and template in available:
            return template
        if not available:
            return None
        if template:
            self.logger.debug(f"Unknown template '{template}', prompting instead")
        selected = self.prompts.ask_for_template(available)
        return selected if selected in available else None

    def create_script_app(
        self,
        script_app_name: str | None = None,
        template: str | None = None,
        base_path: str | Path = ".",
    ) -> ScaffoldResult:
        """Run the whole scaffolding sequence.

        Args:
            script_app_name: Project name; prompted for when missing.
            template: Template name; prompted for when missing or unknown.
            base_path: Directory in which the project folder is created.

        Returns:
            A ``ScaffoldResult``; ``ok`` is False when the run was refused or
            failed part way (a partially written tree is left in place).
        """
        app_name = script_app_name or self.prompts.ask_for_script_app_name()
        if not isinstance(app_name, str) or not app_name.strip():
            return self._fail(FailureReason.INVALID_NAME, "Project name is required.")

        try:
            selected_template = self._resolve_template(template)
        except OSError as exc:
            return self._fail(FailureReason.IO_FAULT, f"Could not list templates: {exc}")
        if selected_template is None:
            return self._fail(
                FailureReason.TEMPLATE_NOT_FOUND,
                f"No template available in {self.registry.get_templates_dir()}",
            )

        destination = resolve_path(Path(base_path) / format_project_name(app_name))
        if destination.exists():
            return self._fail(
                FailureReason.DESTINATION_EXISTS,
                f"Directory already exists: {destination}",
                destination=destination,
                template=selected_template,
            )

        try:
            destination.mkdir(parents=True)
            self.logger.info(f"Created directory: {destination}")

            copy_recursive(self.registry.get_template_path(selected_template), destination)
            self.logger.info(f"Scaffolding project in {destination}")

            timestamp_ms = int(self.clock() * 1000)
            update_placeholders(
                destination,
                app_name,
                self.logger,
                [PlaceholderMapping(ROOT_IDENTIFIER_TOKEN, root_identifier(app_name, timestamp_ms))],
            )
        except (OSError, ValueError) as exc:
            # ValueError covers malformed package.json and non UTF-8 text files.
            return self._fail(
                FailureReason.IO_FAULT,
                f"Failed to scaffold {destination}: {exc}",
                destination=destination,
                template=selected_template,
            )

        self.logger.success(f"Created script app '{app_name}' from template '{selected_template}'")
        self.logger.info(next_steps_message(destination))
        return ScaffoldResult(destination=destination, template=selected_template)
