"""Depth-limited search for a named file under a directory tree.

Depth is the number of path separators in the absolute path of a node, not
the distance from the search root. A search rooted deep in the filesystem
therefore has less room below it than one rooted near the top; callers pick
``max_depth`` with that in mind.

The walk is driven by a visitor that answers every node with an explicit
signal (``Continue`` or ``Found``); I/O failures surface as ``Failed``. A
successful match is never modelled as an error.
"""

import logging
import os
import stat
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from uvs.core.errors import ScanTimeoutError, TraversalError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Continue:
    """Keep walking."""


@dataclass(frozen=True)
class Found:
    """Stop walking; the visitor matched ``path``."""

    path: Path


@dataclass(frozen=True)
class Failed:
    """Stop walking; reading the tree failed."""

    error: TraversalError


CONTINUE = Continue()

WalkSignal = Continue | Found | Failed
Visitor = Callable[[Path, bool], Continue | Found]


def path_depth(path: Path) -> int:
    """Count separators in the absolute form of ``path``."""
    return str(path.absolute()).count(os.sep)


def walk_tree(
    root: Path,
    visit: Visitor,
    max_depth: int,
    *,
    deadline: float | None = None,
) -> WalkSignal:
    """Walk ``root`` in pre-order, calling ``visit(path, is_dir)`` for each node.

    Children are visited in ascending name order. Directories deeper than
    ``max_depth`` are pruned without being listed, and files deeper than
    ``max_depth`` are never offered to the visitor. Symbolic links are
    reported as non-directories and never descended into.

    Args:
        root: Directory to start from
        visit: Callback returning ``CONTINUE`` or ``Found(path)``
        max_depth: Maximum separator count of a visited path
        deadline: Optional ``time.monotonic()`` value after which the walk fails

    Returns:
        ``Found`` from the visitor, ``Failed`` on the first I/O error or
        timeout, or ``CONTINUE`` when the whole bounded tree was visited.
    """
    root = root.absolute()
    try:
        is_dir = stat.S_ISDIR(os.stat(root).st_mode)
    except OSError as e:
        return Failed(TraversalError(root, e))
    return _walk(root, is_dir, visit, max_depth, deadline)


def _walk(
    path: Path,
    is_dir: bool,
    visit: Visitor,
    max_depth: int,
    deadline: float | None,
) -> WalkSignal:
    if deadline is not None and time.monotonic() > deadline:
        return Failed(ScanTimeoutError(path))

    if path_depth(path) > max_depth:
        return CONTINUE

    signal = visit(path, is_dir)
    if not isinstance(signal, Continue) or not is_dir:
        return signal

    try:
        with os.scandir(path) as it:
            entries = sorted(it, key=lambda entry: entry.name)
        children = [(Path(entry.path), entry.is_dir(follow_symlinks=False)) for entry in entries]
    except OSError as e:
        return Failed(TraversalError(path, e))

    for child, child_is_dir in children:
        signal = _walk(child, child_is_dir, visit, max_depth, deadline)
        if not isinstance(signal, Continue):
            return signal

    return CONTINUE


def find_file(
    root: Path,
    target_name: str,
    max_depth: int,
    *,
    deadline: float | None = None,
) -> Path | None:
    """Return the first file named exactly ``target_name`` under ``root``.

    Args:
        root: Directory to search
        target_name: Exact file name to match (directories never match)
        max_depth: Maximum separator count of a matched path
        deadline: Optional ``time.monotonic()`` value bounding the search

    Returns:
        Path of the first match in traversal order, or None if there is none
        within the depth bound

    Raises:
        TraversalError: If any directory in the bounded tree cannot be read
        ScanTimeoutError: If ``deadline`` passes before the search finishes
    """

    def match(path: Path, is_dir: bool) -> Continue | Found:
        if not is_dir and path.name == target_name:
            return Found(path)
        return CONTINUE

    signal = walk_tree(root, match, max_depth, deadline=deadline)
    if isinstance(signal, Failed):
        raise signal.error
    if isinstance(signal, Found):
        logger.debug("Found %s at %s", target_name, signal.path)
        return signal.path
    logger.debug("No %s under %s within depth %d", target_name, root, max_depth)
    return None
