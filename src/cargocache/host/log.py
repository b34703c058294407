"""Logging setup for hosted runners and plain terminals."""

from __future__ import annotations

import logging
import sys

from cargocache.constants.config import LOG_FORMAT_GITHUB, PLAIN_LOG_FORMAT

_WORKFLOW_COMMANDS: dict[int, str] = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


def escape_data(message: str) -> str:
    """Escape a message for use as workflow command data."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class WorkflowCommandFormatter(logging.Formatter):
    """Render records as runner workflow commands so they surface as annotations."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = _WORKFLOW_COMMANDS.get(record.levelno)
        if command is None:
            return message
        return f"::{command}::{escape_data(message)}"


def build_handler(log_format: str) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    if log_format == LOG_FORMAT_GITHUB:
        handler.setFormatter(WorkflowCommandFormatter("%(message)s"))
    else:
        handler.setFormatter(logging.Formatter(PLAIN_LOG_FORMAT))
    return handler


def configure_logging(log_format: str, *, verbose: bool = False, force: bool = False) -> None:
    """Configure root logging for ``log_format``; a no-op when already configured unless forced."""
    # The runner hides ::debug:: lines unless step debugging is enabled.
    level = logging.DEBUG if verbose or log_format == LOG_FORMAT_GITHUB else logging.INFO
    logging.basicConfig(level=level, handlers=[build_handler(log_format)], force=force)
