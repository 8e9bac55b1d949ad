"""Action orchestration.

Coordinates one run of the action:
1. Configure git in the workspace
2. Resolve the module directories
3. Run terraform-docs for each directory, staging the output file
4. Report num_changed to the runner
5. Commit and push, fail on diff, or leave the changes alone

Directories are processed strictly in order. The first failure (a
terraform-docs or git error) aborts the run; directories after it are
never processed and already staged files stay staged.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from tfdocs_action.command_builder import TerraformDocsCommand
from tfdocs_action.directories import resolve_directories
from tfdocs_action.errors import ActionError
from tfdocs_action.git_repository import GitRepository
from tfdocs_action.host import HostContext
from tfdocs_action.inputs import ActionInputs
from tfdocs_action.terraform_docs import TerraformDocsRunner

logger = logging.getLogger(__name__)

FAIL_ON_DIFF_EXIT_CODE = 1
FAIL_ON_DIFF_MESSAGE = "Uncommitted change(s) has been found!"


class Outcome(Enum):
    """How a run ended."""

    NO_CHANGES = "no_changes"
    PUSHED = "pushed"
    FAILED_ON_DIFF = "failed_on_diff"
    LEFT_UNCOMMITTED = "left_uncommitted"


@dataclass
class DirectoryResult:
    """Result of documenting one module directory."""

    directory: str
    output_file: str | None = None  # None when nothing was written in place
    changed: bool = False


@dataclass
class ActionResult:
    """Result of a complete run."""

    num_changed: int
    outcome: Outcome
    exit_code: int = 0
    directories: list[DirectoryResult] = field(default_factory=list)


class ActionRunner:
    """Run the documentation workflow for one set of inputs.

    Args:
        inputs: Normalized action inputs
        host: Workspace and output file of the runner
        git: Optional git wrapper (for testing)
        terraform_docs: Optional terraform-docs runner (for testing)
    """

    def __init__(
        self,
        inputs: ActionInputs,
        host: HostContext,
        git: GitRepository | None = None,
        terraform_docs: TerraformDocsRunner | None = None,
    ):
        self.inputs = inputs
        self.host = host
        self.git = git or GitRepository(host.workspace)
        self.terraform_docs = terraform_docs or TerraformDocsRunner(host.workspace)
        self.command = TerraformDocsCommand(inputs, host.workspace)

    def update_doc(self, directory: str) -> DirectoryResult:
        """Generate documentation for one directory and stage the output file.

        Raises:
            TerraformDocsError: If terraform-docs fails
            GitError: If staging fails
        """
        logger.debug(f"working_dir={directory}")
        self.terraform_docs.run(self.command.build(directory))

        if not self.inputs.writes_output_file:
            return DirectoryResult(directory=directory)

        output_file = f"{directory}/{self.inputs.output_file}"
        changed = self.git.add(output_file)
        return DirectoryResult(directory=directory, output_file=output_file, changed=changed)

    def run(self) -> ActionResult:
        """Execute the whole workflow.

        Returns:
            ActionResult; exit_code is 1 when fail_on_diff triggered

        Raises:
            ActionError: On any subprocess failure, carrying its exit code
        """
        if not self.host.workspace.is_dir():
            raise ActionError(f"Workspace {self.host.workspace} does not exist")

        self.git.setup(self.inputs.git_push_user_name, self.inputs.git_push_user_email)

        directories = resolve_directories(self.inputs, self.host.workspace)
        logger.debug(f"Documenting {len(directories)} director(ies): {', '.join(directories)}")

        results = []
        for directory in directories:
            results.append(self.update_doc(directory))

        num_changed = self.git.count_changes()
        self.host.set_output("num_changed", num_changed)

        if self.inputs.git_push:
            return self._commit_and_push(num_changed, results)

        if self.inputs.fail_on_diff and num_changed != 0:
            logger.error(FAIL_ON_DIFF_MESSAGE)
            return ActionResult(
                num_changed=num_changed,
                outcome=Outcome.FAILED_ON_DIFF,
                exit_code=FAIL_ON_DIFF_EXIT_CODE,
                directories=results,
            )

        outcome = Outcome.NO_CHANGES if num_changed == 0 else Outcome.LEFT_UNCOMMITTED
        return ActionResult(num_changed=num_changed, outcome=outcome, directories=results)

    def _commit_and_push(self, num_changed: int, results: list[DirectoryResult]) -> ActionResult:
        if num_changed == 0:
            logger.debug("No files changed, skipping commit")
            return ActionResult(num_changed=0, outcome=Outcome.NO_CHANGES, directories=results)

        self.git.commit(self.inputs.git_commit_message, sign_off=self.inputs.git_push_sign_off)
        self.git.push()
        return ActionResult(num_changed=num_changed, outcome=Outcome.PUSHED, directories=results)


__all__ = ["ActionResult", "ActionRunner", "DirectoryResult", "Outcome"]
