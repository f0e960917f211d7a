"""Persistence of the version registry as a TOML document.

Example registry file:

    ProgramDir = "C:/Program Files"
    DirPattern = "^Unity(.+)$"

    [Versions]
    "2019.4.28f1" = "C:/Program Files/Unity2019.4.28f1/Editor/Unity.exe"
"""

import tomllib
from abc import ABC, abstractmethod
from pathlib import Path

import click
import tomlkit

from uvs.core.configuration import Configuration, ordered_version_keys
from uvs.core.errors import RegistryFormatError, RegistryWriteError

APP_NAME = "unity-version-selector"
REGISTRY_FILE_NAME = "config.toml"

PROGRAM_DIR_KEY = "ProgramDir"
DIR_PATTERN_KEY = "DirPattern"
VERSIONS_KEY = "Versions"


def default_registry_path() -> Path:
    """Per-user location of the registry file."""
    return Path(click.get_app_dir(APP_NAME)) / REGISTRY_FILE_NAME


class RegistryStore(ABC):
    """Abstract storage for the registry configuration.

    Provides dependency injection for registry persistence, enabling
    in-memory implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def load(self) -> Configuration:
        """Load the persisted registry.

        Raises:
            FileNotFoundError: If nothing has been persisted yet
            RegistryFormatError: If the persisted document is malformed
        """
        ...

    @abstractmethod
    def save(self, config: Configuration) -> None:
        """Persist ``config``, replacing any previous registry.

        Raises:
            RegistryWriteError: If the storage cannot be written
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Location of the registry (for messages and debugging)."""
        ...


class FilesystemRegistryStore(RegistryStore):
    """Production implementation reading and writing a TOML file."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path if path is not None else default_registry_path()

    def load(self) -> Configuration:
        """Parse the registry file.

        Missing ``Versions`` is accepted as an empty mapping; missing or
        non-string ``ProgramDir``/``DirPattern`` is not.
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Registry not found at {self._path}")

        try:
            data = tomllib.loads(self._path.read_text(encoding="utf-8"))
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            raise RegistryFormatError(self._path, str(e)) from e

        program_dir = data.get(PROGRAM_DIR_KEY)
        if not isinstance(program_dir, str) or not program_dir:
            raise RegistryFormatError(self._path, f"missing or invalid '{PROGRAM_DIR_KEY}'")

        dir_pattern = data.get(DIR_PATTERN_KEY)
        if not isinstance(dir_pattern, str) or not dir_pattern:
            raise RegistryFormatError(self._path, f"missing or invalid '{DIR_PATTERN_KEY}'")

        raw_versions = data.get(VERSIONS_KEY, {})
        if not isinstance(raw_versions, dict):
            raise RegistryFormatError(self._path, f"'{VERSIONS_KEY}' must be a table")

        versions: dict[str, Path] = {}
        for version, executable in raw_versions.items():
            if not isinstance(executable, str):
                raise RegistryFormatError(
                    self._path, f"executable for version {version!r} must be a string"
                )
            versions[version] = Path(executable)

        return Configuration(
            installation_root=Path(program_dir),
            directory_pattern=dir_pattern,
            versions=versions,
        )

    def save(self, config: Configuration) -> None:
        """Write the registry, creating its parent directory if needed.

        Raises:
            RegistryWriteError: If the directory or file cannot be written
        """
        doc = tomlkit.document()
        doc[PROGRAM_DIR_KEY] = str(config.installation_root)
        doc[DIR_PATTERN_KEY] = config.directory_pattern

        versions = tomlkit.table()
        for version in ordered_version_keys(config):
            versions[version] = str(config.versions[version])
        doc[VERSIONS_KEY] = versions

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(tomlkit.dumps(doc), encoding="utf-8")
        except OSError as e:
            raise RegistryWriteError(self._path, e) from e

    def path(self) -> Path:
        return self._path
