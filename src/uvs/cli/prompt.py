"""Interactive choice of a recently used project."""

from pathlib import Path

import click

from uvs.cli.output import user_output
from uvs.core.errors import InvalidSelectionError


def parse_selection(text: str, count: int) -> int:
    """Convert operator input to an index into a list of ``count`` items.

    Raises:
        InvalidSelectionError: If the input is not an integer or is out of range
    """
    try:
        index = int(text.strip())
    except ValueError:
        raise InvalidSelectionError(f"Not a project index: {text!r}") from None
    if index < 0 or index >= count:
        raise InvalidSelectionError(f"The index {index} is out of range (0-{count - 1})")
    return index


def choose_project(recents: list[Path]) -> Path:
    """List ``recents`` as "<index> : <path>" and read the operator's choice."""
    for index, path in enumerate(recents):
        user_output(f"{index} : {path}")
    user_output()

    text = click.prompt(">", prompt_suffix=" ", err=True)
    return recents[parse_selection(text, len(recents))]
