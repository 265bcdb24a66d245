"""Branch command - print the branch resolved for a directory."""

import json
from pathlib import Path

import click

from branch_titlebar.core.branch_resolver import resolve_branch
from branch_titlebar.core.context import TitlebarContext
from branch_titlebar.core.refstore import read_ref_state
from branch_titlebar.output import machine_output, user_output


@click.command("branch")
@click.argument(
    "path",
    required=False,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def branch_cmd(ctx: TitlebarContext, path: Path | None, as_json: bool) -> None:
    """Print the branch that would be shown for PATH (default: cwd).

    The branch is read from .git metadata when possible and from
    `git rev-parse --abbrev-ref HEAD` otherwise.
    """
    directory = path if path is not None else ctx.cwd
    ref_state = read_ref_state(directory)
    branch = resolve_branch(ctx.git, directory, timeout_seconds=ctx.config.git_timeout_seconds)

    if not branch:
        source = "none"
    elif ref_state.is_resolved:
        source = "metadata"
    else:
        source = "git"

    if as_json:
        machine_output(
            json.dumps(
                {
                    "branch": branch,
                    "kind": ref_state.kind,
                    "source": source,
                    "error": ref_state.error,
                }
            )
        )
        return

    if not branch:
        user_output(f"No branch found for {directory}")
        raise SystemExit(1)

    machine_output(branch)
