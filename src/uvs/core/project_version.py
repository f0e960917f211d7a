"""Extraction of the required editor version from project metadata."""

import re
from pathlib import Path

from uvs.core.errors import (
    EditorVersionMissingError,
    ProjectVersionFileNotFoundError,
    ProjectVersionUnreadableError,
)

PROJECT_VERSION_FILE = Path("ProjectSettings") / "ProjectVersion.txt"
EDITOR_VERSION_PATTERN = re.compile(r"m_EditorVersion: (.+)")


def project_version_path(project_path: Path) -> Path:
    return project_path / PROJECT_VERSION_FILE


def extract_project_version(project_path: Path) -> str:
    """Read the editor version a project was last saved with.

    The first ``m_EditorVersion: <value>`` line in
    ``ProjectSettings/ProjectVersion.txt`` wins; the value is returned as
    captured, without trimming.

    Raises:
        ProjectVersionFileNotFoundError: If the metadata file does not exist
        ProjectVersionUnreadableError: If the file cannot be read as UTF-8 text
        EditorVersionMissingError: If the file has no m_EditorVersion line
    """
    path = project_version_path(project_path)
    if not path.is_file():
        raise ProjectVersionFileNotFoundError(path)

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ProjectVersionUnreadableError(path, e) from e

    match = EDITOR_VERSION_PATTERN.search(content)
    if match is None:
        raise EditorVersionMissingError(path)
    return match.group(1)
