"""Fake implementation of Launcher for testing."""

from pathlib import Path

from uvs.core.launcher import Launcher


class FakeLauncher(Launcher):
    """Records launch requests without starting any process."""

    def __init__(self) -> None:
        self._launches: list[tuple[Path, Path]] = []

    def launch(self, executable: Path, project_path: Path) -> None:
        self._launches.append((executable, project_path))

    @property
    def launches(self) -> list[tuple[Path, Path]]:
        """Get the list of (executable, project_path) launch requests.

        This property is for test assertions only.
        """
        return self._launches.copy()
