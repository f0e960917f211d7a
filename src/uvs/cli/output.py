"""Output helpers with clear intent.

user_output: diagnostics and prompts for the operator (stderr)
machine_output: results meant to be read or piped (stdout)
"""

import click


def user_output(message: str = "") -> None:
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    click.echo(message)
