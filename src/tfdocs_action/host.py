"""CI host integration (GitHub Actions and Forgejo Actions).

Resolves the repository workspace and the step output file from the
runner's environment and writes step outputs. Forgejo variables take
precedence over their GitHub counterparts when both are set.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from tfdocs_action.inputs import ActionInputs

logger = logging.getLogger(__name__)

WORKSPACE_VARS = ("FORGEJO_WORKSPACE", "GITHUB_WORKSPACE")
OUTPUT_VARS = ("FORGEJO_OUTPUT", "GITHUB_OUTPUT")


def _first_set(env: Mapping[str, str], names: tuple[str, ...]) -> str | None:
    for name in names:
        value = env.get(name)
        if value:
            return value
    return None


@dataclass(frozen=True)
class HostContext:
    """Where the action runs and where it reports outputs."""

    workspace: Path
    output_path: Path | None = None

    @classmethod
    def from_environment(
        cls,
        inputs: ActionInputs,
        env: Mapping[str, str] | None = None,
        workspace: str | None = None,
        output_path: str | None = None,
    ) -> "HostContext":
        """Resolve the host context.

        Args:
            inputs: Normalized action inputs (git_sub_dir is honoured)
            env: Environment mapping (default: os.environ)
            workspace: Explicit workspace, overrides the environment
            output_path: Explicit output file, overrides the environment

        Returns:
            HostContext for this run
        """
        if env is None:
            env = os.environ

        base = workspace or _first_set(env, WORKSPACE_VARS) or os.getcwd()
        resolved = Path(base)
        if inputs.git_sub_dir:
            resolved = resolved / inputs.git_sub_dir
            logger.info(f"Using non-standard workspace of {resolved}")

        output = output_path or _first_set(env, OUTPUT_VARS)
        return cls(workspace=resolved, output_path=Path(output) if output else None)

    def set_output(self, name: str, value: str | int) -> None:
        """Append ``name=value`` to the step output file.

        When the runner did not provide an output file the value is only
        logged.
        """
        if self.output_path is None:
            logger.warning(f"No step output file configured, {name}={value} not recorded")
            return

        with open(self.output_path, "a", encoding="utf-8") as f:
            f.write(f"{name}={value}\n")
        logger.debug(f"Set output {name}={value}")


__all__ = ["HostContext"]
