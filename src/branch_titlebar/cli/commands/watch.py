"""Watch command - keep the title in sync until interrupted."""

import logging
from pathlib import Path

import click

from branch_titlebar.cli.options import create_host, project_options
from branch_titlebar.core.context import TitlebarContext
from branch_titlebar.core.polling import PollingDriver
from branch_titlebar.core.title_sync import SyncState
from branch_titlebar.gateway.dispatch.real import ThreadDispatcher
from branch_titlebar.output import user_output

logger = logging.getLogger(__name__)


@click.command("watch")
@project_options
@click.option(
    "--interval",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds between checks (defaults to poll_interval_seconds from config)",
)
@click.pass_obj
def watch_cmd(
    ctx: TitlebarContext,
    project: Path,
    caption: str | None,
    dry_run: bool,
    interval: float | None,
) -> None:
    """Poll PROJECT's branch and update the title whenever it changes.

    Runs until interrupted with Ctrl-C.
    """
    if dry_run:
        ctx = ctx.with_dry_run()

    interval_seconds = interval if interval is not None else ctx.config.poll_interval_seconds
    synchronizer = ctx.synchronizer()
    host = create_host(project, caption)
    state = SyncState()

    def tick() -> None:
        result = synchronizer.tick(state, host)
        if result.recents_updated:
            user_output(f"Now on {result.branch}")

    driver = PollingDriver(
        tick=tick,
        dispatcher=ThreadDispatcher(),
        interval_seconds=interval_seconds,
    )

    user_output(f"Watching {project} every {interval_seconds:g}s (Ctrl-C to stop)")
    with driver:
        try:
            driver.wait()
        except KeyboardInterrupt:
            logger.debug("Interrupted, stopping")
