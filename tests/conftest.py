"""
Shared test fixtures for tfdocs-action tests.

- Environment isolation (no INPUT_* or runner variables leak in)
- Temporary workspaces with Terraform module layouts
"""

import logging
import os
from pathlib import Path

import pytest

RUNNER_VARS = (
    "FORGEJO_WORKSPACE",
    "GITHUB_WORKSPACE",
    "FORGEJO_OUTPUT",
    "GITHUB_OUTPUT",
    "TERRAFORM_DOCS_BIN",
)


@pytest.fixture(autouse=True)
def clean_action_env(monkeypatch):
    """Remove action inputs and runner variables from the environment.

    Tests run inside CI themselves; without this, the runner's own
    GITHUB_* variables would change workspace detection.
    """
    for name in list(os.environ):
        if name.startswith("INPUT_") or name in RUNNER_VARS:
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def workspace(tmp_path) -> Path:
    """Empty workspace directory."""
    path = tmp_path / "workspace"
    path.mkdir()
    return path


@pytest.fixture
def module_tree(workspace) -> Path:
    """Workspace with a root module and two nested modules.

    Layout:
        main.tf
        modules/network/main.tf, variables.tf
        modules/storage/main.tf
        docs/README.md (no Terraform)
    """
    (workspace / "main.tf").write_text('module "network" {}\n')
    network = workspace / "modules" / "network"
    network.mkdir(parents=True)
    (network / "main.tf").write_text('resource "null_resource" "a" {}\n')
    (network / "variables.tf").write_text('variable "name" {}\n')
    storage = workspace / "modules" / "storage"
    storage.mkdir(parents=True)
    (storage / "main.tf").write_text('resource "null_resource" "b" {}\n')
    docs = workspace / "docs"
    docs.mkdir()
    (docs / "README.md").write_text("# docs\n")
    return workspace


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo configure_logging() so caplog keeps working in later tests."""
    package_logger = logging.getLogger("tfdocs_action")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate

    yield

    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
