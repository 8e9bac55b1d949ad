"""Logging rendered as GitHub/Forgejo workflow commands.

The runner turns specially formatted stdout lines into annotations:
``::debug::`` lines are only shown with step debugging enabled,
``::warning::`` and ``::error::`` become annotations on the run.
INFO records are printed as plain text.
"""

import logging
import sys
from typing import TextIO

WORKFLOW_COMMANDS = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
}


def _escape(message: str) -> str:
    # Workflow command data must not contain raw newlines
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class WorkflowCommandFormatter(logging.Formatter):
    """Format records as workflow commands."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno >= logging.ERROR:
            command = WORKFLOW_COMMANDS[logging.ERROR]
        elif record.levelno >= logging.WARNING:
            command = WORKFLOW_COMMANDS[logging.WARNING]
        elif record.levelno >= logging.INFO:
            return message
        else:
            command = WORKFLOW_COMMANDS[logging.DEBUG]
        return f"::{command}::{_escape(message)}"


def configure_logging(verbose: bool = True, stream: TextIO | None = None) -> None:
    """Route tfdocs_action logs through the workflow command formatter.

    Args:
        verbose: Emit debug records (the runner hides them unless step
            debugging is on)
        stream: Output stream (default: stdout, where the runner reads
            workflow commands)
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(WorkflowCommandFormatter("%(message)s"))

    package_logger = logging.getLogger("tfdocs_action")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    package_logger.propagate = False


__all__ = ["WorkflowCommandFormatter", "configure_logging"]
