"""Tests for reading the required editor version from a project."""

from pathlib import Path

import pytest

from tests.test_utils.install_tree import create_project, project_version_text
from uvs.core.errors import (
    EditorVersionMissingError,
    ExtractionError,
    ProjectVersionFileNotFoundError,
    ProjectVersionUnreadableError,
)
from uvs.core.project_version import extract_project_version


def test_extracts_editor_version(tmp_path: Path) -> None:
    project = create_project(tmp_path / "Game", project_version_text("2021.1.0f1"))

    assert extract_project_version(project) == "2021.1.0f1"


def test_first_editor_version_line_wins(tmp_path: Path) -> None:
    project = create_project(
        tmp_path / "Game",
        "m_EditorVersion: 2019.4.1f1\nm_EditorVersion: 2020.1.0f1\n",
    )

    assert extract_project_version(project) == "2019.4.1f1"


def test_value_is_not_trimmed(tmp_path: Path) -> None:
    project = create_project(tmp_path / "Game", "m_EditorVersion: 5.6.7f1  \n")

    assert extract_project_version(project) == "5.6.7f1  "


def test_windows_line_endings_do_not_leak_into_version(tmp_path: Path) -> None:
    project = tmp_path / "Game"
    settings = project / "ProjectSettings"
    settings.mkdir(parents=True)
    (settings / "ProjectVersion.txt").write_bytes(b"m_EditorVersion: 2018.4.2f1\r\n")

    assert extract_project_version(project) == "2018.4.2f1"


def test_missing_version_file(tmp_path: Path) -> None:
    project = create_project(tmp_path / "Game", None)

    with pytest.raises(ProjectVersionFileNotFoundError, match="No ProjectVersion.txt"):
        extract_project_version(project)


@pytest.mark.parametrize(
    "content",
    [
        "",
        "m_EditorVersionWithRevision: 2021.1.0f1 (abc)\n",
        "m_EditorVersion:\n",
        "m_EditorVersion: \n",
    ],
)
def test_missing_editor_version_field(tmp_path: Path, content: str) -> None:
    project = create_project(tmp_path / "Game", content)

    with pytest.raises(EditorVersionMissingError, match="doesn't have m_EditorVersion"):
        extract_project_version(project)


def test_extraction_errors_share_base_class(tmp_path: Path) -> None:
    with pytest.raises(ExtractionError):
        extract_project_version(tmp_path)


def test_undecodable_version_file(tmp_path: Path) -> None:
    project = tmp_path / "Game"
    settings = project / "ProjectSettings"
    settings.mkdir(parents=True)
    (settings / "ProjectVersion.txt").write_bytes(b"m_EditorVersion: 5.6\xff\n")

    with pytest.raises(ProjectVersionUnreadableError, match="Cannot read"):
        extract_project_version(project)
