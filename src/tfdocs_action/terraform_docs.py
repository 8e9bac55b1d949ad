"""terraform-docs subprocess execution.

Runs the terraform-docs binary for a single module directory. Output is
not captured so it appears in the CI log as it is produced.

Philosophy:
- One invocation per directory, no retries
- A non-zero exit is fatal and keeps the binary's exit code
"""

import logging
import shlex
import subprocess
from pathlib import Path

from tfdocs_action.errors import ActionError

logger = logging.getLogger(__name__)

TERRAFORM_DOCS_BINARY = "terraform-docs"
COMMAND_NOT_FOUND_EXIT_CODE = 127


class TerraformDocsError(ActionError):
    """Raised when terraform-docs fails; exit_code is the binary's."""

    pass


class TerraformDocsRunner:
    """Invoke terraform-docs in the workspace.

    Args:
        workspace: Working directory for the subprocess
        binary: Executable name or path (default: terraform-docs on PATH)
    """

    def __init__(self, workspace: Path, binary: str = TERRAFORM_DOCS_BINARY):
        self.workspace = workspace
        self.binary = binary

    def run(self, args: list[str]) -> None:
        """Run terraform-docs with the given arguments.

        Args:
            args: Arguments as produced by TerraformDocsCommand.build()

        Raises:
            TerraformDocsError: If the binary is missing or exits non-zero
        """
        cmd = [self.binary, *args]
        logger.debug(shlex.join(cmd))

        try:
            completed = subprocess.run(cmd, cwd=self.workspace, check=False)
        except FileNotFoundError as e:
            raise TerraformDocsError(
                f"{self.binary} not found on PATH", exit_code=COMMAND_NOT_FOUND_EXIT_CODE
            ) from e
        except OSError as e:
            raise TerraformDocsError(f"Failed to execute {self.binary}: {e}") from e

        if completed.returncode != 0:
            # Killed by signal N shows up as -N; report it the way a shell would
            exit_code = completed.returncode if completed.returncode > 0 else 128 - completed.returncode
            raise TerraformDocsError(
                f"{self.binary} exited with code {completed.returncode} "
                f"for {args[-1] if args else '<no directory>'}",
                exit_code=exit_code,
            )


__all__ = ["TerraformDocsError", "TerraformDocsRunner"]
