"""
Logging setup for running inside GitHub Actions.

Records are written to stdout. Debug, warning and error records are rendered
as workflow commands so the runner shows them as annotations.
"""

import logging
import sys
from typing import Optional, TextIO


LOG_FORMAT = "%(message)s"

_COMMANDS = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


def escape_command_data(message: str) -> str:
    """Escape a message so it survives as workflow command data."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class WorkflowCommandFormatter(logging.Formatter):
    """Formatter that prefixes non-info records with a ``::level::`` command."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = _COMMANDS.get(record.levelno)
        if command is None:
            return message
        return f"::{command}::{escape_command_data(message)}"


def configure_logging(debug: bool = False, stream: Optional[TextIO] = None) -> None:
    """Configure the root logger for a single action run."""
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(WorkflowCommandFormatter(LOG_FORMAT))

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        handlers=[handler],
        force=True,
    )

    # PyGithub and urllib3 are chatty at debug level
    logging.getLogger("github").setLevel(logging.INFO)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
