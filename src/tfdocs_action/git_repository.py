"""Git integration for tfdocs-action.

Wraps the git CLI for the handful of operations the action needs:
identity setup, staging generated docs, counting changes, committing and
pushing. All commands run in the workspace.

Changes are counted from ``git status --porcelain``: a line counts when a
status letter M or A is followed by a non-word character, which covers
staged and unstaged additions and modifications.
"""

import logging
import os
import re
import subprocess
from pathlib import Path

from tfdocs_action.errors import ActionError

logger = logging.getLogger(__name__)

CHANGE_PATTERN = re.compile(r"[MA]\W.+")
TAGS_REFSPEC = "+refs/tags/*:refs/tags/*"


class GitError(ActionError):
    """Raised when a git command fails; exit_code is git's."""

    pass


class GitRepository:
    """git operations scoped to one workspace.

    Args:
        workspace: Repository working tree
    """

    def __init__(self, workspace: Path):
        self.workspace = workspace

    def _run(self, args: list[str], check: bool = True) -> subprocess.CompletedProcess[str]:
        """Run a git command and return the completed process.

        Raises:
            GitError: If git cannot be executed, or exits non-zero when
                check is True
        """
        cmd = ["git", *args]
        logger.debug(f"Running git command: {' '.join(cmd)}")
        try:
            completed = subprocess.run(
                cmd,
                cwd=self.workspace,
                check=False,
                text=True,
                capture_output=True,
            )
        except OSError as e:
            raise GitError(f"Failed to execute git: {e}") from e

        if check and completed.returncode != 0:
            stderr = completed.stderr.strip()
            raise GitError(
                f"git command failed: {' '.join(cmd)}" + (f"\n{stderr}" if stderr else ""),
                exit_code=completed.returncode,
            )

        return completed

    def setup(self, user_name: str, user_email: str) -> None:
        """Prepare the repository for committing.

        Marks the workspace as a safe directory (the runner mounts it with a
        different owner than the container user), sets the commit identity
        and fetches tags. A failed tag fetch is not fatal.
        """
        self._run(["config", "--global", "--add", "safe.directory", str(self.workspace)])
        self._run(["config", "--global", "user.name", user_name])
        self._run(["config", "--global", "user.email", user_email])

        fetched = self._run(["fetch", "--depth=1", "origin", TAGS_REFSPEC], check=False)
        if fetched.returncode != 0:
            logger.debug(f"Tag fetch failed (ignored): {fetched.stderr.strip()}")

    def status_lines(self) -> list[str]:
        """Lines of ``git status --porcelain``."""
        return self._run(["status", "--porcelain"]).stdout.splitlines()

    def count_changes(self, path: str | None = None) -> int:
        """Count added or modified entries, optionally only those mentioning path."""
        lines = self.status_lines()
        if path is not None:
            lines = [line for line in lines if path in line]
        return sum(1 for line in lines if CHANGE_PATTERN.search(line))

    def add(self, path: str) -> bool:
        """Stage path.

        Returns:
            True if the staged file shows up as an addition or modification
        """
        self._run(["add", path])
        changed = self.count_changes(os.path.normpath(path)) == 1
        if changed:
            logger.debug(f"Added {path} to git staging area")
        else:
            logger.debug(f"No change in {path} detected")
        return changed

    def commit(self, message: str, sign_off: bool = False) -> None:
        """Commit the index with message, adding a Signed-off-by trailer if asked."""
        logger.debug("Following files will be committed")
        for line in self._run(["status", "-s"]).stdout.splitlines():
            logger.debug(line)

        args = ["commit", "-m", message]
        if sign_off:
            args.append("-s")
        self._run(args)

    def push(self) -> None:
        self._run(["push"])


__all__ = ["CHANGE_PATTERN", "GitError", "GitRepository"]
