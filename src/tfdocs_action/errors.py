"""Base exception for tfdocs-action.

Every failure that should end the run carries the process exit code the
action must terminate with, so the CLI can propagate it verbatim.
"""


class ActionError(Exception):
    """Base exception for tfdocs-action errors."""

    exit_code = 1

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


__all__ = ["ActionError"]
