"""Sync command - run a single synchronization cycle."""

from pathlib import Path

import click

from branch_titlebar.cli.options import create_host, project_options
from branch_titlebar.core.context import TitlebarContext
from branch_titlebar.core.title_sync import SyncState
from branch_titlebar.output import user_output


@click.command("sync")
@project_options
@click.pass_obj
def sync_cmd(ctx: TitlebarContext, project: Path, caption: str | None, dry_run: bool) -> None:
    """Update the window title and recent items for PROJECT once.

    PROJECT is a project file (its name becomes the title prefix) or a
    project directory.
    """
    if dry_run:
        ctx = ctx.with_dry_run()

    result = ctx.synchronizer().tick(SyncState(), create_host(project, caption))

    if not result.branch:
        user_output(f"No branch found for {project}")
        raise SystemExit(1)

    user_output(f"Branch: {result.branch}")
    if result.title_updated:
        user_output("Window title updated")
    if result.recents_updated:
        user_output("Recent items updated")
