"""Exception hierarchy for version discovery, registry and resolution failures.

The engine raises these and never terminates the process itself. The CLI
entry point is the single place that turns them into a styled error message
and a non-zero exit status.
"""

from pathlib import Path


class SelectorError(Exception):
    """Base class for all failures surfaced to the operator."""


class RegistryFormatError(SelectorError):
    """Persisted registry exists but cannot be parsed into a Configuration."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Malformed registry at {path}: {reason}")


class RegistryWriteError(SelectorError):
    """Registry could not be written to its storage location."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot write registry to {path}: {cause}")


class InvalidPatternError(SelectorError):
    """Directory pattern does not compile or does not have exactly one capture group."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid directory pattern {pattern!r}: {reason}")


class DiscoveryError(SelectorError):
    """Installation root could not be listed."""

    def __init__(self, root: Path, cause: OSError):
        self.root = root
        self.cause = cause
        super().__init__(f"Cannot list installation root {root}: {cause}")


class TraversalError(SelectorError):
    """I/O failure while walking a version directory."""

    def __init__(self, path: Path, cause: OSError | None, message: str | None = None):
        self.path = path
        self.cause = cause
        super().__init__(message or f"Cannot read directory {path}: {cause}")


class ScanTimeoutError(TraversalError):
    """Scan deadline passed before the traversal finished."""

    def __init__(self, path: Path):
        super().__init__(path, None, f"Scan timed out while searching {path}")


class ExtractionError(SelectorError):
    """Project metadata could not produce a required editor version."""


class ProjectVersionFileNotFoundError(ExtractionError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"No ProjectVersion.txt at {path}")


class ProjectVersionUnreadableError(ExtractionError):
    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read {path}: {cause}")


class EditorVersionMissingError(ExtractionError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"{path.name} doesn't have m_EditorVersion ({path})")


class VersionNotFoundError(SelectorError):
    """Required version is not present in the registry."""

    def __init__(self, version: str, known_versions: list[str]):
        self.version = version
        self.known_versions = known_versions
        super().__init__(
            f"The version {version} not found in the registry. "
            "Run with --reload if it was installed recently."
        )


class RecentProjectsUnavailableError(SelectorError):
    """Recently used project list cannot be read on this platform or machine."""


class InvalidSelectionError(SelectorError):
    """Operator entered a non-numeric or out-of-range project index."""


class LaunchError(SelectorError):
    """Editor process could not be started."""

    def __init__(self, executable: Path, cause: OSError):
        self.executable = executable
        self.cause = cause
        super().__init__(f"Failed to start {executable}: {cause}")
