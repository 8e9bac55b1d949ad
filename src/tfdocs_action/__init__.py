"""tfdocs-action - terraform-docs automation for GitHub and Forgejo Actions

Philosophy:
- Ruthless simplicity
- Brick architecture (self-contained modules)
- Fail fast with the failing tool's exit code

Reads the action inputs from the environment, runs terraform-docs against
every selected Terraform module directory, stages the generated
documentation and optionally commits and pushes it.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
