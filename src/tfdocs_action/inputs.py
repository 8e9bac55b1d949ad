"""Action input normalization.

Turns the INPUT_* environment variables provided by the GitHub/Forgejo
runner into a single immutable ActionInputs instance.

Design Philosophy:
- Sensible defaults: must match the defaults declared in action.yml
- Never fails: malformed or unevaluated inputs fall back to defaults
- Built once at startup, passed down explicitly

Forgejo/act runners sometimes fail to interpolate ``${{ inputs.* }}``
expressions and hand them over as literal strings. Any value still holding
a template marker is treated as if the input was never set.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DISABLED = "disabled"
TEMPLATE_MARKERS = ("${{", "}}")
OUTPUT_METHODS_WITH_FILE = ("inject", "replace")

DEFAULT_TEMPLATE = "<!-- BEGIN_TF_DOCS -->\n{{ .Content }}\n<!-- END_TF_DOCS -->"
DEFAULT_USER_NAME = "actions[bot]"
DEFAULT_USER_EMAIL = "actions[bot]@users.noreply.localhost"
DEFAULT_COMMIT_MESSAGE = "terraform-docs: automated action"

# input name -> default applied when the input is empty or stripped
INPUT_DEFAULTS: dict[str, str] = {
    "output_format": "markdown table",
    "args": "",
    "template": "",
    "indention": "2",
    "output_method": "inject",
    "output_file": "README.md",
    "config_file": DISABLED,
    "recursive": "false",
    "recursive_path": "modules",
    "working_dir": ".",
    "atlantis_file": DISABLED,
    "find_dir": DISABLED,
    "git_push": "false",
    "git_push_user_name": "",
    "git_push_user_email": "",
    "git_commit_message": DEFAULT_COMMIT_MESSAGE,
    "git_push_sign_off": "false",
    "git_sub_dir": "",
    "fail_on_diff": "false",
}


def strip_template_expression(value: str | None) -> str:
    """Return value, or an empty string if it is an unevaluated expression.

    Args:
        value: Raw input value (None when the variable is unset)

    Returns:
        The value unchanged, or "" when it contains ``${{`` or ``}}``

    Example:
        >>> strip_template_expression("${{ inputs.output-file }}")
        ''
        >>> strip_template_expression("README.md")
        'README.md'
    """
    if not value:
        return ""
    if any(marker in value for marker in TEMPLATE_MARKERS):
        return ""
    return value


def env_var_name(input_name: str) -> str:
    """Environment variable the runner uses for an input name."""
    return f"INPUT_{input_name.upper()}"


def _parse_bool(value: str) -> bool:
    return value.strip().lower() == "true"


@dataclass(frozen=True)
class ActionInputs:
    """Normalized action inputs.

    Every field already has its default applied; consumers never need to
    check for empty values except where emptiness is meaningful
    (args, template, git_sub_dir).
    """

    output_format: str = "markdown table"
    args: str = ""
    template: str = DEFAULT_TEMPLATE
    indention: str = "2"
    output_method: str = "inject"
    output_file: str = "README.md"
    config_file: str = DISABLED
    recursive: bool = False
    recursive_path: str = "modules"
    working_dir: str = "."
    atlantis_file: str = DISABLED
    find_dir: str = DISABLED
    git_push: bool = False
    git_push_user_name: str = DEFAULT_USER_NAME
    git_push_user_email: str = DEFAULT_USER_EMAIL
    git_commit_message: str = DEFAULT_COMMIT_MESSAGE
    git_push_sign_off: bool = False
    git_sub_dir: str = ""
    fail_on_diff: bool = False

    @property
    def uses_config_file(self) -> bool:
        """True when a terraform-docs config file is in effect."""
        return bool(self.config_file) and self.config_file != DISABLED

    @property
    def writes_output_file(self) -> bool:
        """True when terraform-docs writes into output_file (inject/replace)."""
        return self.output_method in OUTPUT_METHODS_WITH_FILE

    @property
    def atlantis_enabled(self) -> bool:
        return bool(self.atlantis_file) and self.atlantis_file != DISABLED

    @property
    def find_enabled(self) -> bool:
        return bool(self.find_dir) and self.find_dir != DISABLED

    @classmethod
    def from_mapping(cls, raw: Mapping[str, str | None]) -> "ActionInputs":
        """Build inputs from a mapping of input name to raw value.

        Args:
            raw: Input names (e.g. "output_file") to raw string values.
                Missing names fall back to defaults.

        Returns:
            ActionInputs with sanitization and defaults applied
        """
        values: dict[str, str] = {}
        for name, default in INPUT_DEFAULTS.items():
            value = strip_template_expression(raw.get(name))
            if raw.get(name) and not value:
                logger.debug(f"Ignoring unevaluated expression in input {name}")
            values[name] = value if value.strip() else default

        config_file = values["config_file"]
        template = values["template"]
        if config_file == DISABLED and not template:
            template = DEFAULT_TEMPLATE

        return cls(
            output_format=values["output_format"],
            args=values["args"],
            template=template,
            indention=values["indention"],
            output_method=values["output_method"],
            output_file=values["output_file"],
            config_file=config_file,
            recursive=_parse_bool(values["recursive"]),
            recursive_path=values["recursive_path"],
            working_dir=values["working_dir"],
            atlantis_file=values["atlantis_file"],
            find_dir=values["find_dir"],
            git_push=_parse_bool(values["git_push"]),
            git_push_user_name=values["git_push_user_name"] or DEFAULT_USER_NAME,
            git_push_user_email=values["git_push_user_email"] or DEFAULT_USER_EMAIL,
            git_commit_message=values["git_commit_message"],
            git_push_sign_off=_parse_bool(values["git_push_sign_off"]),
            git_sub_dir=values["git_sub_dir"],
            fail_on_diff=_parse_bool(values["fail_on_diff"]),
        )

    @classmethod
    def from_environment(cls, env: Mapping[str, str] | None = None) -> "ActionInputs":
        """Load inputs from INPUT_* environment variables.

        Args:
            env: Environment mapping (default: os.environ)

        Returns:
            ActionInputs with sanitization and defaults applied
        """
        if env is None:
            env = os.environ
        return cls.from_mapping({name: env.get(env_var_name(name)) for name in INPUT_DEFAULTS})


__all__ = [
    "DEFAULT_COMMIT_MESSAGE",
    "DEFAULT_TEMPLATE",
    "DISABLED",
    "INPUT_DEFAULTS",
    "ActionInputs",
    "env_var_name",
    "strip_template_expression",
]
