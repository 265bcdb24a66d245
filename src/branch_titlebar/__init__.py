"""branch-titlebar entry point.

This package keeps a host window title and a recent-items menu in sync with
the current git branch of the active project. See `branch-titlebar --help`.
"""

from branch_titlebar.cli.cli import cli


def main() -> None:
    """CLI entry point used by the `branch-titlebar` console script."""
    cli()
