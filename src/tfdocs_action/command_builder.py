"""terraform-docs command line assembly.

Builds the argument vector passed to the terraform-docs binary. The base
arguments (formatter and extra args) are computed once; per-directory
flags are appended for each module directory with the directory itself
always last.

Public API:
    OutputFormat: Structured formatter name + variant
    TerraformDocsCommand: Argument builder
"""

import logging
import shlex
from dataclasses import dataclass
from pathlib import Path

from tfdocs_action.inputs import ActionInputs

logger = logging.getLogger(__name__)

# Formatters that accept --indent
INDENTED_FORMATTERS = ("asciidoc", "markdown")
INDENTED_VARIANTS = (None, "table", "document")


def split_extra_args(value: str) -> list[str]:
    """Split the args input shell-style.

    Quotes group words (``--header-from "my header.md"``). Input shlex
    cannot parse, such as an unbalanced quote, is split on whitespace.
    """
    try:
        return shlex.split(value)
    except ValueError:
        logger.warning(f"Could not parse args {value!r}, splitting on whitespace")
        return value.split()


@dataclass(frozen=True)
class OutputFormat:
    """terraform-docs formatter, e.g. ``markdown table``.

    The formatter input is a subcommand path; most formatters take an
    optional variant as a second token.
    """

    name: str
    variant: str | None = None

    @classmethod
    def parse(cls, value: str) -> "OutputFormat":
        """Parse an output-format input.

        Inputs with more than two tokens keep the extra tokens in variant so
        that to_args() reproduces the whitespace split of the input.

        Example:
            >>> OutputFormat.parse("markdown table")
            OutputFormat(name='markdown', variant='table')
        """
        tokens = value.split()
        if not tokens:
            raise ValueError("output format must not be empty")
        variant = " ".join(tokens[1:]) or None
        return cls(name=tokens[0], variant=variant)

    @property
    def supports_indent(self) -> bool:
        return self.name in INDENTED_FORMATTERS and self.variant in INDENTED_VARIANTS

    def to_args(self) -> list[str]:
        args = [self.name]
        if self.variant:
            args.extend(self.variant.split())
        return args

    def __str__(self) -> str:
        return " ".join(self.to_args())


class TerraformDocsCommand:
    """Assemble terraform-docs arguments from action inputs.

    Args:
        inputs: Normalized action inputs
        workspace: Directory the binary runs in; relative config file
            paths are checked against it
    """

    def __init__(self, inputs: ActionInputs, workspace: Path):
        self.inputs = inputs
        self.workspace = workspace
        self.output_format = OutputFormat.parse(inputs.output_format)
        self.base_args = self._build_base_args()

    def _build_base_args(self) -> list[str]:
        args = self.output_format.to_args()
        args.extend(split_extra_args(self.inputs.args))

        # A config file owns indentation
        if not self.inputs.uses_config_file and self.output_format.supports_indent:
            args.extend(["--indent", self.inputs.indention])

        return args

    def resolve_config_file(self, directory: str) -> str:
        """Config file path for a directory.

        An existing file is used as given, anything else is taken to be
        relative to the module directory.
        """
        config_file = self.inputs.config_file
        if (self.workspace / config_file).is_file():
            return config_file
        return f"{directory}/{config_file}"

    def build(self, directory: str) -> list[str]:
        """Full argument list (without the binary) for one directory."""
        args = list(self.base_args)

        if self.inputs.uses_config_file:
            config_file = self.resolve_config_file(directory)
            logger.debug(f"config_file={config_file}")
            args.extend(["--config", config_file])

        if self.inputs.writes_output_file:
            logger.debug(f"output_mode={self.inputs.output_method}")
            logger.debug(f"output_file={self.inputs.output_file}")
            args.extend(["--output-mode", self.inputs.output_method])
            args.extend(["--output-file", self.inputs.output_file])

        if self.inputs.template:
            args.extend(["--output-template", self.inputs.template])

        if self.inputs.recursive and self.inputs.recursive_path:
            args.append("--recursive")
            args.extend(["--recursive-path", self.inputs.recursive_path])

        args.append(directory)
        return args


__all__ = ["OutputFormat", "TerraformDocsCommand", "split_extra_args"]
