#!/usr/bin/env python3
"""DX Script App CLI - Main Entry Point.

Usage:
    create-dx-scriptapp [SCRIPT_APP_NAME] [options]

Options:
    -t, --template <template>   Template to use (prompted for when missing)
    -p, --path <path>           Directory in which the project is created
    --version                   Show the version and exit
    --help                      Show this help message

Examples:
    create-dx-scriptapp my-app --template react-ts
    create-dx-scriptapp                           # prompts for everything
"""

from __future__ import annotations

import sys

import click

from scriptapp_generator import __version__
from scriptapp_generator.cli.prompts import PromptService
from scriptapp_generator.core.application import ScriptAppCreator
from scriptapp_generator.core.template_registry import TemplateRegistry
from scriptapp_generator.helpers.config import load_config
from scriptapp_generator.helpers.helpers_logging import Logger, print_error

PROG_NAME = "create-dx-scriptapp"

# Exit status for Ctrl-C style aborts
_EXIT_ABORTED = 130


def run(script_app_name: str | None, template: str | None, base_path: str) -> int:
    """Wire up the services for one run and create the script app.

    Returns:
        Exit code
    """
    config = load_config()
    logger = Logger(config.log_file)
    try:
        creator = ScriptAppCreator(
            logger,
            PromptService(logger),
            TemplateRegistry(config.templates_dir),
        )
        result = creator.create_script_app(script_app_name, template, base_path)
        logger.log_saving_info()
        return 0 if result.ok else 1
    except (click.Abort, click.ClickException):
        raise
    except Exception as exc:
        logger.error(f"An unexpected error occurred: {exc}")
        logger.log_saving_info()
        return 1
    finally:
        logger.close()


@click.command(name=PROG_NAME, help="Create a new DX script app")
@click.argument("script_app_name", required=False, default=None)
@click.option("-t", "--template", default=None, help="Template to use")
@click.option(
    "-p",
    "--path",
    "base_path",
    default=".",
    show_default=True,
    help="Directory in which the project folder is created",
)
@click.version_option(__version__, prog_name=PROG_NAME)
def _click_cli(script_app_name: str | None, template: str | None, base_path: str) -> int:
    return run(script_app_name, template, base_path)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = sys.argv[1:] if argv is None else argv
    try:
        result = _click_cli.main(
            args=args,
            prog_name=PROG_NAME,
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return _EXIT_ABORTED
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except Exception as exc:
        print_error(f"An unexpected error occurred: {exc}")
        return 1

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
