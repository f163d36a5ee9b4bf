"""Console and log-file diagnostics for the script app generator.

Console output goes through the small ``print_*`` colour helpers.  The
``Logger`` class is the per-run diagnostics sink: it echoes each message to
the console, appends a timestamped, PID/host tagged copy to a log file and
keeps count of the errors reported during the run.
"""

from __future__ import annotations

import logging
import socket
from itertools import count
from pathlib import Path


class Colors:
    """ANSI color codes for terminal output."""
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    RESET = '\033[0m'


def print_info(msg: str) -> None:
    """Print an info message."""
    print(f"{Colors.CYAN}{msg}{Colors.RESET}")


def print_success(msg: str) -> None:
    """Print a success message."""
    print(f"{Colors.GREEN}✓ {msg}{Colors.RESET}")


def print_warning(msg: str) -> None:
    """Print a warning message."""
    print(f"{Colors.YELLOW}⚠️  {msg}{Colors.RESET}")


def print_error(msg: str) -> None:
    """Print an error message."""
    print(f"{Colors.RED}❌ {msg}{Colors.RESET}")


# ============================================================================
# Diagnostics sink
# ============================================================================

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

_FILE_FORMAT = "[%(asctime)s] %(levelname)-7s (PID %(process)d @ {host}) %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_LOGGER_IDS = count(1)


def default_log_file() -> Path:
    """Return ``~/.dx-script-app/logs/logger.log``."""
    return Path.home() / ".dx-script-app" / "logs" / "logger.log"


class Logger:
    """Diagnostics sink shared by every component of one scaffolding run.

    Args:
        log_file: File that receives the full log record. Defaults to
            :func:`default_log_file`. Missing parent directories are created.
    """

    def __init__(self, log_file: Path | str | None = None) -> None:
        self.log_file = (
            Path(log_file).expanduser().resolve()
            if log_file is not None
            else default_log_file()
        )
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        self._error_count = 0

        handler = logging.FileHandler(self.log_file, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter(
                _FILE_FORMAT.format(host=socket.gethostname()),
                datefmt=_DATE_FORMAT,
            )
        )
        # One named logger per sink so handlers never leak between runs.
        self._file_logger = logging.getLogger(
            f"scriptapp_generator.run{next(_LOGGER_IDS)}"
        )
        self._file_logger.setLevel(logging.DEBUG)
        self._file_logger.propagate = False
        self._file_logger.addHandler(handler)
        self._handler = handler

    @property
    def had_errors(self) -> bool:
        """True once at least one error has been reported."""
        return self._error_count > 0

    def info(self, msg: str) -> None:
        self._file_logger.info(msg)
        print_info(msg)

    def success(self, msg: str) -> None:
        self._file_logger.log(SUCCESS, msg)
        print_success(msg)

    def warning(self, msg: str) -> None:
        self._file_logger.warning(msg)
        print_warning(msg)

    def error(self, msg: str) -> None:
        self._error_count += 1
        self._file_logger.error(msg)
        print_error(msg)

    def debug(self, msg: str) -> None:
        """Record a message in the log file only."""
        self._file_logger.debug(msg)

    def log_saving_info(self) -> None:
        """Point the user at the log file if anything went wrong."""
        if self.had_errors:
            self.info(f"Full logs can be found at: {self.log_file}")

    def close(self) -> None:
        """Flush and detach the log-file handler."""
        self._file_logger.removeHandler(self._handler)
        self._handler.close()
