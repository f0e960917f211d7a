"""Tests for registry ordering and lookup."""

from pathlib import Path

from uvs.core.configuration import Configuration, lookup, ordered_version_keys


def _config(*versions: str) -> Configuration:
    return Configuration(
        installation_root=Path("/apps"),
        directory_pattern=r"^Unity(.+)$",
        versions={v: Path(f"/apps/Unity{v}/Editor/Unity.exe") for v in versions},
    )


def test_legacy_versions_precede_calendar_versions() -> None:
    config = _config("2021.1", "5.6", "2019.4", "4.7")

    assert ordered_version_keys(config) == ["4.7", "5.6", "2019.4", "2021.1"]


def test_ordering_is_lexicographic_within_groups() -> None:
    config = _config("2020.3.10f1", "2020.3.9f1", "5.10", "5.9", "2019.4.1f1")

    assert ordered_version_keys(config) == [
        "5.10",
        "5.9",
        "2019.4.1f1",
        "2020.3.10f1",
        "2020.3.9f1",
    ]


def test_ordering_depends_only_on_key_set() -> None:
    first = _config("2021.1", "5.6", "2019.4")
    second = _config("2019.4", "2021.1", "5.6")

    assert ordered_version_keys(first) == ordered_version_keys(second)


def test_prefix_is_literal_twenty() -> None:
    """Keys like "200" or "21.0" are grouped by the "20" prefix alone."""
    config = _config("21.0", "200", "3.0")

    assert ordered_version_keys(config) == ["21.0", "3.0", "200"]


def test_ordering_of_empty_registry() -> None:
    assert ordered_version_keys(_config()) == []


def test_lookup_hit_and_miss() -> None:
    config = _config("2021.1.0f1")

    assert lookup(config, "2021.1.0f1") == Path("/apps/Unity2021.1.0f1/Editor/Unity.exe")
    assert lookup(config, "2021.1.0") is None
