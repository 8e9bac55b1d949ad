"""Module directory discovery.

Produces the ordered list of Terraform module directories to document.
Exactly one strategy runs, in priority order:

1. Atlantis: every ``projects[].dir`` of an atlantis.yaml in the workspace
2. Find: parent directories of all ``*.tf`` files below find_dir
3. Explicit: the comma separated working_dir input

Directories are returned as strings relative to the workspace, exactly as
they will be passed to terraform-docs.
"""

import fnmatch
import logging
import os
from pathlib import Path

import yaml

from tfdocs_action.errors import ActionError
from tfdocs_action.inputs import ActionInputs

logger = logging.getLogger(__name__)

TERRAFORM_FILE_PATTERN = "*.tf"
LIST_MARKER = "- "


class DirectoryResolutionError(ActionError):
    """Raised when the module directory list cannot be determined."""

    pass


def parse_atlantis_file(path: Path) -> list[str]:
    """Return the project directories listed in an Atlantis config.

    Args:
        path: Path to atlantis.yaml

    Returns:
        Project ``dir`` values in file order

    Raises:
        DirectoryResolutionError: If the file is not valid YAML or
            ``projects`` is not a list
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DirectoryResolutionError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise DirectoryResolutionError(f"Cannot read {path}: {e}") from e

    if not data:
        logger.warning(f"Atlantis file {path} is empty")
        return []
    if not isinstance(data, dict):
        raise DirectoryResolutionError(f"Atlantis file {path} must be a mapping")

    projects = data.get("projects") or []
    if not isinstance(projects, list):
        raise DirectoryResolutionError(f"'projects' in {path} must be a list")

    directories = []
    for index, project in enumerate(projects):
        project_dir = project.get("dir") if isinstance(project, dict) else None
        if project_dir is None:
            logger.warning(f"Skipping Atlantis project #{index} without a dir")
            continue
        project_dir = str(project_dir)
        if project_dir.startswith(LIST_MARKER):
            project_dir = project_dir[len(LIST_MARKER) :]
        directories.append(project_dir)

    return directories


def find_terraform_directories(root: str, base: Path | None = None) -> list[str]:
    """Return every directory below root that holds a ``*.tf`` file.

    The walk is depth-first with sorted entries; each directory appears
    once, in first-seen order. Returned paths keep root as given, so
    ``"."`` yields ``"./modules/vpc"``.

    Args:
        root: Directory to search, relative to base
        base: Directory relative paths are resolved against (default: cwd)
    """
    base = base or Path.cwd()
    search_root = base / root
    if not search_root.is_dir():
        logger.warning(f"find_dir {root} does not exist in {base}")
        return []

    found: dict[str, None] = {}
    for dirpath, dirnames, filenames in os.walk(search_root):
        dirnames.sort()
        if any(fnmatch.fnmatch(name, TERRAFORM_FILE_PATTERN) for name in sorted(filenames)):
            relative = Path(dirpath).relative_to(search_root)
            directory = root if relative == Path(".") else os.path.join(root, relative)
            found.setdefault(directory, None)

    return list(found)


def split_working_dirs(working_dir: str) -> list[str]:
    """Split a comma separated directory list, dropping empty entries.

    Example:
        >>> split_working_dirs("a,b,c")
        ['a', 'b', 'c']
        >>> split_working_dirs(",a,,b,")
        ['a', 'b']
    """
    return [part.strip() for part in working_dir.split(",") if part.strip()]


def resolve_directories(inputs: ActionInputs, workspace: Path) -> list[str]:
    """Pick the discovery strategy and return the directory worklist.

    Args:
        inputs: Normalized action inputs
        workspace: Repository workspace

    Returns:
        Ordered module directories

    Raises:
        DirectoryResolutionError: If the Atlantis file is malformed
    """
    atlantis_path = workspace / inputs.atlantis_file
    if inputs.atlantis_enabled and atlantis_path.is_file():
        logger.debug(f"Reading project directories from {atlantis_path}")
        return parse_atlantis_file(atlantis_path)

    if inputs.find_enabled:
        logger.debug(f"Searching {inputs.find_dir} for Terraform modules")
        return find_terraform_directories(inputs.find_dir, base=workspace)

    return split_working_dirs(inputs.working_dir)


__all__ = [
    "DirectoryResolutionError",
    "find_terraform_directories",
    "parse_atlantis_file",
    "resolve_directories",
    "split_working_dirs",
]
