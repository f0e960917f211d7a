"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from uvs.core.launcher import Launcher, RealLauncher
from uvs.core.recent_projects import RecentProjects, WindowsRegistryRecentProjects
from uvs.core.registry_store import FilesystemRegistryStore, RegistryStore
from uvs.core.scanner import ScanSettings


@dataclass(frozen=True)
class SelectorContext:
    """Immutable context holding all dependencies for a uvs invocation.

    Created at CLI entry point and threaded through the application.
    Tests construct it directly with fakes and pass it as ``obj``.
    """

    store: RegistryStore
    launcher: Launcher
    recent_projects: RecentProjects
    scan_settings: ScanSettings


def create_context(*, registry_path: Path | None = None) -> SelectorContext:
    """Create production context with real implementations.

    Args:
        registry_path: Registry file location; defaults to the per-user
            application directory
    """
    return SelectorContext(
        store=FilesystemRegistryStore(registry_path),
        launcher=RealLauncher(),
        recent_projects=WindowsRegistryRecentProjects(),
        scan_settings=ScanSettings(),
    )
