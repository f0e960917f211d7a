"""Discovery of installed editor versions under an installation root."""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

from uvs.core.errors import DiscoveryError, InvalidPatternError
from uvs.core.tree_search import find_file

logger = logging.getLogger(__name__)

DEFAULT_INSTALLATION_ROOT = Path("C:/Program Files")
DEFAULT_DIRECTORY_PATTERN = r"^Unity(.+)$"
DEFAULT_EXECUTABLE_NAME = "Unity.exe"
DEFAULT_DEPTH_CUTOFF = 6


@dataclass(frozen=True)
class ScanSettings:
    """Parameters of a discovery scan.

    ``installation_root`` and ``directory_pattern`` are persisted alongside the
    discovered versions; the rest only shape the scan itself.
    """

    installation_root: Path = DEFAULT_INSTALLATION_ROOT
    directory_pattern: str = DEFAULT_DIRECTORY_PATTERN
    executable_name: str = DEFAULT_EXECUTABLE_NAME
    max_depth: int = DEFAULT_DEPTH_CUTOFF
    timeout_seconds: float | None = None


@dataclass(frozen=True)
class SkippedDirectory:
    """A directory that matched the pattern but holds no executable."""

    name: str
    path: Path


@dataclass(frozen=True)
class ScanResult:
    versions: dict[str, Path]
    skipped: list[SkippedDirectory]


def compile_directory_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a version directory pattern, requiring exactly one capture group.

    Raises:
        InvalidPatternError: If the pattern is not a valid regex or its group
            count is not one
    """
    try:
        regex = re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e
    if regex.groups != 1:
        raise InvalidPatternError(pattern, f"expected 1 capture group, found {regex.groups}")
    return regex


def match_version(regex: re.Pattern[str], name: str) -> str | None:
    """Return the version captured from a directory name, or None if it does not match."""
    match = regex.search(name)
    if match is None:
        return None
    return match.group(1)


def scan_versions(settings: ScanSettings, *, deadline: float | None = None) -> ScanResult:
    """Map every installed version under the installation root to its executable.

    Immediate children of ``settings.installation_root`` are examined in name
    order. Directories whose name matches the pattern are searched for the
    executable; a later directory yielding the same version replaces an
    earlier one.

    Args:
        settings: Installation root, pattern, executable name and depth cutoff
        deadline: Optional ``time.monotonic()`` value bounding the whole scan

    Returns:
        ScanResult with the version mapping and the directories that were
        dropped because no executable was found in them

    Raises:
        InvalidPatternError: If the directory pattern is unusable
        DiscoveryError: If the installation root cannot be listed
        TraversalError: If a version directory cannot be read
    """
    regex = compile_directory_pattern(settings.directory_pattern)
    root = settings.installation_root

    try:
        with os.scandir(root) as it:
            entries = sorted(
                (entry for entry in it if entry.is_dir()),
                key=lambda entry: entry.name,
            )
    except OSError as e:
        raise DiscoveryError(root, e) from e

    versions: dict[str, Path] = {}
    skipped: list[SkippedDirectory] = []
    for entry in entries:
        version = match_version(regex, entry.name)
        if version is None:
            continue

        directory = root / entry.name
        executable = find_file(
            directory, settings.executable_name, settings.max_depth, deadline=deadline
        )
        if executable is None:
            logger.warning("%s has no %s!", entry.name, settings.executable_name)
            skipped.append(SkippedDirectory(name=entry.name, path=directory))
            continue

        if version in versions:
            logger.debug("Version %s: %s replaces %s", version, executable, versions[version])
        versions[version] = executable

    logger.debug("Scan of %s found %d version(s)", root, len(versions))
    return ScanResult(versions=versions, skipped=skipped)
