"""Tests for recently used project discovery."""

import sys
from pathlib import Path

import pytest

from uvs.core.errors import RecentProjectsUnavailableError
from uvs.core.recent_projects import WindowsRegistryRecentProjects, decode_recent_project_value


def test_decode_strips_trailing_nul() -> None:
    assert decode_recent_project_value(b"C:/Work/Game\x00") == Path("C:/Work/Game")


def test_decode_without_terminator() -> None:
    assert decode_recent_project_value(b"/work/game") == Path("/work/game")


@pytest.mark.skipif(sys.platform == "win32", reason="registry is readable on Windows")
def test_unavailable_outside_windows() -> None:
    with pytest.raises(RecentProjectsUnavailableError, match="only available on Windows"):
        WindowsRegistryRecentProjects().list_recent()
