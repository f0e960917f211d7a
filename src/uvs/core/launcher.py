"""Starting the editor process for a project."""

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from uvs.core.errors import LaunchError

logger = logging.getLogger(__name__)

PROJECT_PATH_FLAG = "-projectPath"


def build_launch_command(executable: Path, project_path: Path) -> list[str]:
    """Command line that opens ``project_path`` in ``executable``."""
    return [str(executable), PROJECT_PATH_FLAG, str(project_path)]


class Launcher(ABC):
    """Abstract editor launcher for dependency injection."""

    @abstractmethod
    def launch(self, executable: Path, project_path: Path) -> None:
        """Start the editor on a project without waiting for it to exit.

        Raises:
            LaunchError: If the process cannot be started
        """
        ...


class RealLauncher(Launcher):
    """Production implementation using subprocess.Popen()."""

    def launch(self, executable: Path, project_path: Path) -> None:
        cmd = build_launch_command(executable, project_path)
        logger.debug("Starting %s", cmd)
        try:
            subprocess.Popen(cmd)
        except OSError as e:
            raise LaunchError(executable, e) from e
