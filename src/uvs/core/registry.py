"""Version registry lifecycle: load the persisted registry or rebuild it by scanning.

Rebuild is the only write path. A registry is either loaded unchanged or
replaced wholesale; there are no incremental updates.
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum

from uvs.core.configuration import Configuration
from uvs.core.errors import RegistryFormatError
from uvs.core.registry_store import RegistryStore
from uvs.core.scanner import ScanSettings, SkippedDirectory, scan_versions

logger = logging.getLogger(__name__)


class RegistryOrigin(Enum):
    LOADED = "loaded"
    REBUILT = "rebuilt"


@dataclass(frozen=True)
class LoadedRegistry:
    """Registry ready to serve a list or resolve request.

    ``skipped`` is only populated when ``origin`` is REBUILT.
    """

    config: Configuration
    origin: RegistryOrigin
    skipped: list[SkippedDirectory] = field(default_factory=list)


def rebuild(store: RegistryStore, settings: ScanSettings) -> LoadedRegistry:
    """Scan the installation root from ``settings`` and persist the result.

    Args:
        store: Registry storage to overwrite
        settings: Scan defaults (installation root, pattern, executable, depth, timeout)

    Returns:
        LoadedRegistry with origin REBUILT and the directories dropped by the scan

    Raises:
        InvalidPatternError, DiscoveryError, TraversalError: From the scan;
            nothing is persisted in that case
    """
    deadline = None
    if settings.timeout_seconds is not None:
        deadline = time.monotonic() + settings.timeout_seconds

    result = scan_versions(settings, deadline=deadline)
    config = Configuration(
        installation_root=settings.installation_root,
        directory_pattern=settings.directory_pattern,
        versions=result.versions,
    )
    store.save(config)
    logger.debug("Registry rebuilt with %d version(s) at %s", len(config.versions), store.path())
    return LoadedRegistry(config=config, origin=RegistryOrigin.REBUILT, skipped=result.skipped)


def load_or_rebuild(
    store: RegistryStore, settings: ScanSettings, *, reload: bool
) -> LoadedRegistry:
    """Bring the registry into a ready state.

    A forced ``reload`` always rebuilds. Otherwise the persisted registry is
    loaded, and an absent, unreadable or malformed one silently falls back to
    a rebuild.
    """
    if reload:
        logger.debug("Reload requested, rebuilding registry")
        return rebuild(store, settings)

    try:
        config = store.load()
    except (OSError, RegistryFormatError) as e:
        logger.debug("Registry load failed (%s), rebuilding", e)
        return rebuild(store, settings)

    logger.debug("Loaded %d version(s) from %s", len(config.versions), store.path())
    return LoadedRegistry(config=config, origin=RegistryOrigin.LOADED)
