"""Run summary display."""

from rich.console import Console
from rich.table import Table

from tfdocs_action.action import ActionResult, Outcome

OUTCOME_MESSAGES = {
    Outcome.NO_CHANGES: "[green]No documentation changes[/green]",
    Outcome.PUSHED: "[green]Committed and pushed {num_changed} change(s)[/green]",
    Outcome.FAILED_ON_DIFF: "[red]{num_changed} uncommitted change(s) found[/red]",
    Outcome.LEFT_UNCOMMITTED: "[yellow]{num_changed} change(s) left uncommitted[/yellow]",
}


def build_summary_table(result: ActionResult) -> Table:
    """Table with one row per processed directory."""
    table = Table(title="terraform-docs", show_header=True, header_style="bold")
    table.add_column("Directory", style="cyan")
    table.add_column("Output file")
    table.add_column("Status")

    for entry in result.directories:
        if entry.output_file is None:
            status = "[dim]generated[/dim]"
        elif entry.changed:
            status = "[yellow]updated[/yellow]"
        else:
            status = "[green]up to date[/green]"
        table.add_row(entry.directory, entry.output_file or "-", status)

    return table


def print_summary(result: ActionResult, console: Console | None = None) -> None:
    """Print the summary table and outcome line (stderr by default)."""
    console = console or Console(stderr=True)
    if result.directories:
        console.print(build_summary_table(result))
    else:
        console.print("[dim]No module directories found[/dim]")
    console.print(OUTCOME_MESSAGES[result.outcome].format(num_changed=result.num_changed))


__all__ = ["build_summary_table", "print_summary"]
