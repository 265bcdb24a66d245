"""Output helpers for user-facing and machine-readable text.

user_output() writes to stderr so that stdout stays parseable for commands
that emit JSON or script-friendly values through machine_output().
"""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Print a message meant for a human reader to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", *, nl: bool = True) -> None:
    """Print a message meant for scripts to stdout."""
    click.echo(message, nl=nl)
