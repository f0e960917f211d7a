"""Tests for resolving a project to an editor executable."""

from pathlib import Path

import pytest

from tests.test_utils.install_tree import create_project, project_version_text
from uvs.core.configuration import Configuration
from uvs.core.errors import ExtractionError, VersionNotFoundError
from uvs.core.resolver import resolve

CONFIG = Configuration(
    installation_root=Path("/path"),
    directory_pattern=r"^Unity(.+)$",
    versions={"2021.1.0f1": Path("/path/to/App"), "5.6.7f1": Path("/path/to/Old")},
)


def test_resolve_returns_registered_executable(tmp_path: Path) -> None:
    project = create_project(tmp_path / "Game", project_version_text("2021.1.0f1"))

    assert resolve(CONFIG, project) == Path("/path/to/App")


def test_resolve_unknown_version_fails(tmp_path: Path) -> None:
    project = create_project(tmp_path / "Game", "m_EditorVersion: 9.9.9\n")

    with pytest.raises(VersionNotFoundError) as exc_info:
        resolve(CONFIG, project)

    assert exc_info.value.version == "9.9.9"
    assert exc_info.value.known_versions == ["5.6.7f1", "2021.1.0f1"]
    assert "--reload" in str(exc_info.value)


def test_resolve_does_not_match_prefixes(tmp_path: Path) -> None:
    project = create_project(tmp_path / "Game", "m_EditorVersion: 2021.1.0\n")

    with pytest.raises(VersionNotFoundError):
        resolve(CONFIG, project)


def test_resolve_propagates_extraction_failure(tmp_path: Path) -> None:
    with pytest.raises(ExtractionError):
        resolve(CONFIG, tmp_path)
