"""Resolution of a project's required editor version to an installed executable."""

import logging
from pathlib import Path

from uvs.core.configuration import Configuration, lookup, ordered_version_keys
from uvs.core.errors import VersionNotFoundError
from uvs.core.project_version import extract_project_version

logger = logging.getLogger(__name__)


def resolve(config: Configuration, project_path: Path) -> Path:
    """Return the executable that must open ``project_path``.

    No fallback is attempted on a miss: the registry is not rebuilt and no
    nearby version is substituted.

    Raises:
        ExtractionError: If the project's version cannot be read
        VersionNotFoundError: If the version is not in the registry
    """
    version = extract_project_version(project_path)
    logger.debug("Project %s requires version %s", project_path, version)

    executable = lookup(config, version)
    if executable is None:
        raise VersionNotFoundError(version, ordered_version_keys(config))
    return executable
