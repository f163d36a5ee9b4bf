"""Interactive prompts for missing command-line inputs."""

from __future__ import annotations

import re

import click

from scriptapp_generator.helpers.helpers_logging import Logger

_SCRIPT_APP_NAME_RE = re.compile(r"^[a-zA-Z0-9_-]+$")

NAME_REQUIRED_MESSAGE = "Script App name is required"
INVALID_NAME_MESSAGE = (
    "Name must only contain letters, numbers, underscores, or hyphens "
    "(no spaces or special characters)."
)


def validate_script_app_name(name: str) -> str:
    """Return *name* if it is usable, else raise ``click.BadParameter``.

    Only ASCII letters, digits, underscores and hyphens are accepted.
    click re-prompts when this raises.
    """
    if not name:
        raise click.BadParameter(NAME_REQUIRED_MESSAGE)
    if not _SCRIPT_APP_NAME_RE.match(name):
        raise click.BadParameter(INVALID_NAME_MESSAGE)
    return name


class PromptService:
    """Asks the user for the script app name and template."""

    def __init__(self, logger: Logger) -> None:
        self.logger = logger

    def ask_for_script_app_name(self) -> str:
        """Prompt until a valid name is entered.

        Raises:
            click.Abort: If the user cancels (Ctrl-C / end of input).
        """
        name: str = click.prompt(
            "Enter the script app name",
            value_proc=validate_script_app_name,
        )
        self.logger.debug(f"Script app name entered: {name}")
        return name

    def ask_for_template(self, available_templates: list[str]) -> str | None:
        """Show a numbered menu of templates and return the chosen one.

        Returns:
            The selected template name, or None when there is nothing to
            choose from.
        """
        if not available_templates:
            return None

        click.echo("\nSelect a framework template:")
        for i, option in enumerate(available_templates, 1):
            click.echo(f"  {i}. {option}")

        choice: int = click.prompt(
            f"\nSelect (1-{len(available_templates)})",
            type=click.IntRange(1, len(available_templates)),
        )
        selected = available_templates[choice - 1]
        self.logger.debug(f"Template selected: {selected}")
        return selected
