"""Recently used project paths as recorded by the editor in the Windows registry."""

import sys
from abc import ABC, abstractmethod
from pathlib import Path

from uvs.core.errors import RecentProjectsUnavailableError

EDITOR_PREFERENCES_KEY = r"Software\Unity Technologies\Unity Editor 5.x"
RECENT_PROJECT_VALUE_PREFIX = "RecentlyUsedProjectPaths"


def decode_recent_project_value(data: bytes) -> Path:
    """Decode a registry value; the editor stores a NUL-terminated UTF-8 string."""
    return Path(data.rstrip(b"\x00").decode("utf-8"))


class RecentProjects(ABC):
    """Abstract source of recently opened projects."""

    @abstractmethod
    def list_recent(self) -> list[Path]:
        """Return recently used project paths in the order the source stores them.

        Raises:
            RecentProjectsUnavailableError: If the source cannot be read
        """
        ...


class WindowsRegistryRecentProjects(RecentProjects):
    """Production implementation reading the editor's preference key."""

    def list_recent(self) -> list[Path]:
        if sys.platform != "win32":
            raise RecentProjectsUnavailableError(
                "Recent projects are only available on Windows; pass a project path instead"
            )

        import winreg

        try:
            with winreg.OpenKey(
                winreg.HKEY_CURRENT_USER, EDITOR_PREFERENCES_KEY, 0, winreg.KEY_QUERY_VALUE
            ) as key:
                _, value_count, _ = winreg.QueryInfoKey(key)
                projects: list[Path] = []
                for index in range(value_count):
                    name, data, _ = winreg.EnumValue(key, index)
                    if not name.startswith(RECENT_PROJECT_VALUE_PREFIX):
                        continue
                    projects.append(decode_recent_project_value(data))
        except OSError as e:
            raise RecentProjectsUnavailableError(
                f"Cannot read HKEY_CURRENT_USER\\{EDITOR_PREFERENCES_KEY}: {e}"
            ) from e

        return projects
