"""Options and helpers shared by the sync and watch commands."""

from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

import click

from branch_titlebar.gateway.host.real import FileProjectHost

F = TypeVar("F", bound=Callable[..., object])


def project_options(fn: F) -> F:
    """Add the PROJECT argument and the --caption/--dry-run options."""
    fn = click.option(
        "--dry-run",
        is_flag=True,
        help="Print what would change without touching the title or recent items",
    )(fn)
    fn = click.option(
        "--caption",
        default=None,
        help="Current window title to match (defaults to the project name)",
    )(fn)
    fn = click.argument(
        "project",
        type=click.Path(exists=True, path_type=Path),
    )(fn)
    return fn


def create_host(project: Path, caption: str | None) -> FileProjectHost:
    return FileProjectHost(project, window_caption=caption)
