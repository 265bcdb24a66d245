import click

from branch_titlebar.cli.commands.recent.list_cmd import recent_list
from branch_titlebar.cli.commands.recent.menu_cmd import recent_menu


@click.group("recent")
def recent_group() -> None:
    """Inspect the recent-items history."""


recent_group.add_command(recent_list)
recent_group.add_command(recent_menu)
