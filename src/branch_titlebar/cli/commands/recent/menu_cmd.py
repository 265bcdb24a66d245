"""Recent menu command - preview the recent-items presentation."""

import click

from branch_titlebar.core.context import TitlebarContext
from branch_titlebar.core.recent_entries import build_jump_list
from branch_titlebar.output import machine_output


@click.command("menu")
@click.pass_obj
def recent_menu(ctx: TitlebarContext) -> None:
    """Show the categories published to the recent-items menu."""
    categories = build_jump_list(ctx.recent_store.load(), ctx.config.limits)
    for category in categories:
        machine_output(category.title)
        for item in category.items:
            machine_output(f"  {item.label}\t{item.target}")
