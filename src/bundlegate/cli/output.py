"""Output utilities for CLI commands with clear intent.

user_output() is for messages meant for a person (stderr); machine_output()
is for results another program may parse (stdout).
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Write a machine-readable result to stdout."""
    click.echo(message, nl=nl)
