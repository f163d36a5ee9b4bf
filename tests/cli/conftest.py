"""Shared fixtures for end-to-end CLI tests.

Tests invoke the real command in a subprocess
(``python -m scriptapp_generator``), exactly as the installed
``create-dx-scriptapp`` entry point would run it. This validates the full
chain: argument parsing → prompts → scaffolding → exit status.

**Isolation:** every run gets its own working directory and HOME, so the
log file under ``~/.dx-script-app`` never touches the real home directory.
"""

import os
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Type alias for the callable fixture.
RunScriptApp = Callable[..., subprocess.CompletedProcess[str]]

_REPO_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture()
def run_scriptapp(isolated_project: Path, isolated_home: Path) -> RunScriptApp:
    """Return a helper that runs ``create-dx-scriptapp <args>``.

    Usage in tests::

        def test_create(run_scriptapp: RunScriptApp) -> None:
            result = run_scriptapp("my-app", "--template", "react-ts")
            assert result.returncode == 0

    Keyword ``input`` is fed to the process's stdin for prompt answers.

    Returns:
        A callable ``(*args, input=None) -> CompletedProcess[str]``.
    """
    env = dict(os.environ)
    env["HOME"] = str(isolated_home)
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(_REPO_ROOT), env.get("PYTHONPATH", "")) if p
    )
    env["PYTHONIOENCODING"] = "utf-8"
    for name in ("DX_SCRIPTAPP_CONFIG", "DX_SCRIPTAPP_LOG_FILE", "DX_SCRIPTAPP_TEMPLATES_DIR"):
        env.pop(name, None)

    def _run(*args: str, input: str | None = None) -> subprocess.CompletedProcess[str]:
        return subprocess.run(
            [sys.executable, "-m", "scriptapp_generator", *args],
            cwd=isolated_project,
            env=env,
            input=input,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=False,
            timeout=60,
        )

    return _run
