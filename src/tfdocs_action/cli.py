"""CLI entry point for tfdocs-action.

Runs inside the action container; all behaviour is driven by the INPUT_*
environment variables set by the runner. The options below only exist to
run the action locally.

Commands:
    tfdocs-action                          # Run with the runner's environment
    tfdocs-action --workspace ./infra      # Run against a local checkout
"""

import logging

import click

from tfdocs_action import __version__
from tfdocs_action.action import ActionRunner
from tfdocs_action.errors import ActionError
from tfdocs_action.host import HostContext
from tfdocs_action.inputs import ActionInputs
from tfdocs_action.logging_utils import configure_logging
from tfdocs_action.reporting import print_summary
from tfdocs_action.terraform_docs import TERRAFORM_DOCS_BINARY, TerraformDocsRunner

logger = logging.getLogger(__name__)

INTERRUPTED_EXIT_CODE = 130


@click.command(
    name="tfdocs-action",
    context_settings={"help_option_names": ["--help", "-h"]},
)
@click.option(
    "--workspace",
    type=click.Path(file_okay=False),
    help="Repository workspace (default: $FORGEJO_WORKSPACE or $GITHUB_WORKSPACE)",
)
@click.option(
    "--output-path",
    type=click.Path(dir_okay=False),
    help="Step output file (default: $FORGEJO_OUTPUT or $GITHUB_OUTPUT)",
)
@click.option(
    "--terraform-docs-bin",
    default=TERRAFORM_DOCS_BINARY,
    show_default=True,
    envvar="TERRAFORM_DOCS_BIN",
    help="terraform-docs executable",
)
@click.option("--quiet", "-q", is_flag=True, help="Do not emit ::debug:: workflow commands")
@click.version_option(version=__version__)
@click.pass_context
def main(
    ctx: click.Context,
    workspace: str | None,
    output_path: str | None,
    terraform_docs_bin: str,
    quiet: bool,
) -> None:
    """Generate terraform-docs documentation and commit it.

    \b
    INPUTS (environment):
        INPUT_OUTPUT_FORMAT     terraform-docs formatter (markdown table)
        INPUT_OUTPUT_METHOD     inject, replace or print (inject)
        INPUT_OUTPUT_FILE       file to write into (README.md)
        INPUT_WORKING_DIR       comma separated module directories (.)
        INPUT_FIND_DIR          search for *.tf below this directory
        INPUT_ATLANTIS_FILE     read directories from an atlantis.yaml
        INPUT_GIT_PUSH          commit and push the changes (false)
        INPUT_FAIL_ON_DIFF      fail when docs are out of date (false)

    See action.yml for the complete list.
    """
    configure_logging(verbose=not quiet)

    inputs = ActionInputs.from_environment()
    host = HostContext.from_environment(inputs, workspace=workspace, output_path=output_path)
    runner = ActionRunner(
        inputs,
        host,
        terraform_docs=TerraformDocsRunner(host.workspace, binary=terraform_docs_bin),
    )

    try:
        result = runner.run()
    except ActionError as e:
        logger.error(str(e))
        ctx.exit(e.exit_code)
    except KeyboardInterrupt:
        ctx.exit(INTERRUPTED_EXIT_CODE)

    print_summary(result)
    ctx.exit(result.exit_code)


if __name__ == "__main__":  # pragma: no cover - manual invocation
    main()
