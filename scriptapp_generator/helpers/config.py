"""Runtime configuration for the script app generator.

Settings come from built-in defaults, then an optional YAML file, then
environment variables (highest precedence).

YAML file (all keys optional)::

    log_file: logs/scriptapp.log      # relative to the config file
    templates_dir: /opt/dx/templates
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import cast

import yaml

from scriptapp_generator.helpers.helpers_logging import default_log_file, print_warning

CONFIG_ENV_VAR = "DX_SCRIPTAPP_CONFIG"
LOG_FILE_ENV_VAR = "DX_SCRIPTAPP_LOG_FILE"
TEMPLATES_DIR_ENV_VAR = "DX_SCRIPTAPP_TEMPLATES_DIR"

_PATH_KEYS = ("log_file", "templates_dir")


@dataclass
class ScaffoldConfig:
    """Resolved settings for one run."""

    log_file: Path
    templates_dir: Path | None = None


def default_config_path() -> Path:
    """Return ``~/.dx-script-app/config.yaml``."""
    return Path.home() / ".dx-script-app" / "config.yaml"


def _resolve_config_path(config_path: Path | None) -> Path | None:
    if config_path is not None:
        return config_path
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    candidate = default_config_path()
    return candidate if candidate.exists() else None


def _read_config_file(config_path: Path) -> dict[str, Path]:
    """Read path settings from a YAML file, warning about unusable content."""
    try:
        raw_data: object = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        print_warning(f"Ignoring malformed config file {config_path}: {exc}")
        return {}

    if raw_data is None:
        return {}
    if not isinstance(raw_data, dict):
        print_warning(f"Ignoring config file {config_path}: expected a mapping")
        return {}

    data = cast(dict[str, object], raw_data)
    settings: dict[str, Path] = {}
    for key in _PATH_KEYS:
        value = data.get(key)
        if value is None:
            continue
        if not isinstance(value, str) or not value.strip():
            print_warning(f"Ignoring '{key}' in {config_path}: expected a path string")
            continue
        path = Path(value).expanduser()
        if not path.is_absolute():
            path = config_path.parent / path
        settings[key] = path
    return settings


def load_config(config_path: Path | None = None) -> ScaffoldConfig:
    """Build the run configuration.

    Args:
        config_path: Explicit YAML file. When omitted, ``$DX_SCRIPTAPP_CONFIG``
            or ``~/.dx-script-app/config.yaml`` is used if present.

    Returns:
        The merged ``ScaffoldConfig``.

    Raises:
        FileNotFoundError: If an explicitly named config file does not exist.
    """
    config = ScaffoldConfig(log_file=default_log_file())

    resolved = _resolve_config_path(config_path)
    if resolved is not None:
        settings = _read_config_file(resolved)
        if "log_file" in settings:
            config.log_file = settings["log_file"]
        if "templates_dir" in settings:
            config.templates_dir = settings["templates_dir"]

    env_log_file = os.environ.get(LOG_FILE_ENV_VAR)
    if env_log_file:
        config.log_file = Path(env_log_file).expanduser()
    env_templates_dir = os.environ.get(TEMPLATES_DIR_ENV_VAR)
    if env_templates_dir:
        config.templates_dir = Path(env_templates_dir).expanduser()

    return config
