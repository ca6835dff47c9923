"""Output utilities for CLI commands with clear intent.

user_output is for humans (stderr). machine_output is for values that other
tools consume (stdout), such as the published properties.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a diagnostic message for the user to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write a result meant for scripts to stdout."""
    click.echo(message, nl=nl)
