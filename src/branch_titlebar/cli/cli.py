import logging
from pathlib import Path

import click

from branch_titlebar.cli.commands.branch import branch_cmd
from branch_titlebar.cli.commands.recent.group import recent_group
from branch_titlebar.cli.commands.sync import sync_cmd
from branch_titlebar.cli.commands.watch import watch_cmd
from branch_titlebar.core.config import default_config_path, load_config
from branch_titlebar.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="branch-titlebar")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to use instead of ~/.branch-titlebar/config.toml",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config_path: Path | None) -> None:
    """Show the current git branch in a window title and recent-items menu."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        path = config_path if config_path is not None else default_config_path()
        try:
            config = load_config(path)
        except (OSError, ValueError) as e:
            raise click.ClickException(f"Invalid configuration: {e}") from None
        ctx.obj = create_context(config, dry_run=False)


cli.add_command(branch_cmd)
cli.add_command(sync_cmd)
cli.add_command(watch_cmd)
cli.add_command(recent_group)
