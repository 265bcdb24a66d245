"""Recent list command - display persisted recent entries."""

import click
from rich.console import Console
from rich.table import Table

from branch_titlebar.core.context import TitlebarContext
from branch_titlebar.output import user_output


@click.command("list")
@click.pass_obj
def recent_list(ctx: TitlebarContext) -> None:
    """List recent projects, most recent first."""
    entries = ctx.recent_store.load()
    if not entries:
        user_output(f"No recent entries in {ctx.recent_store.path}")
        return

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Project", style="cyan", no_wrap=True)
    table.add_column("Branch", style="green", no_wrap=True)
    table.add_column("Path")

    for index, entry in enumerate(entries, start=1):
        table.add_row(
            str(index),
            entry.display_name,
            entry.branch_label or "-",
            entry.path,
        )

    # Output to stderr for consistency with other user-facing output
    console = Console(stderr=True, force_terminal=False)
    console.print(table)
