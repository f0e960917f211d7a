"""Registry configuration value and its deterministic version ordering."""

from dataclasses import dataclass, field
from pathlib import Path

CALENDAR_VERSION_PREFIX = "20"


@dataclass(frozen=True)
class Configuration:
    """Immutable registry state: where versions live and where each executable is.

    Produced by loading the persisted registry or by a rebuild scan, then
    passed explicitly to listing and resolution. Entries in ``versions``
    pointed to existing executables at the time of the last rebuild; nothing
    re-checks them after a load.
    """

    installation_root: Path
    directory_pattern: str
    versions: dict[str, Path] = field(default_factory=dict)


def ordered_version_keys(config: Configuration) -> list[str]:
    """Return version keys with legacy versions first, calendar versions last.

    Keys not starting with "20" come first in ascending lexicographic order,
    followed by keys starting with "20" (e.g. "2021.1"), also ascending.

    Example:
        >>> config = Configuration(Path("/apps"), "^Unity(.+)$", {
        ...     "2021.1": Path("a"), "5.6": Path("b"), "2019.4": Path("c"), "4.7": Path("d"),
        ... })
        >>> ordered_version_keys(config)
        ['4.7', '5.6', '2019.4', '2021.1']
    """
    legacy = sorted(k for k in config.versions if not k.startswith(CALENDAR_VERSION_PREFIX))
    calendar = sorted(k for k in config.versions if k.startswith(CALENDAR_VERSION_PREFIX))
    return legacy + calendar


def lookup(config: Configuration, version: str) -> Path | None:
    """Return the executable registered for ``version``, or None."""
    return config.versions.get(version)
