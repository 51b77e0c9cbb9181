from datetime import date

from sas_signer.versions import (
    ALL,
    KNOWN_VERSIONS,
    LATEST,
    V2015_04_05,
    V2019_12_12,
    V2020_02_10,
    V2020_08_04,
    V2020_10_02,
    ProtocolVersion,
    VersionRegistry,
    parse_version,
)


def test_known_versions_parse_and_match() -> None:
    for version in KNOWN_VERSIONS:
        parsed, matched = parse_version(version.tag)
        assert matched is True
        assert parsed == version
        assert parsed.tag == version.tag


def test_unknown_version_falls_back_to_latest() -> None:
    parsed, matched = parse_version("2099-01-01")
    assert matched is False
    assert parsed == LATEST
    assert LATEST == V2020_10_02


def test_all_sentinel_is_not_a_signed_version() -> None:
    parsed, matched = parse_version("*")
    assert matched is False
    assert parsed == LATEST


def test_versions_order_chronologically() -> None:
    assert ALL < V2015_04_05 < V2019_12_12 < V2020_02_10 < V2020_08_04 < V2020_10_02
    assert tuple(sorted(KNOWN_VERSIONS)) == (V2015_04_05, V2019_12_12, V2020_02_10, V2020_08_04, V2020_10_02)


def test_ordering_ignores_tag_text() -> None:
    future = ProtocolVersion(released=date(2021, 6, 8), tag="0-future")
    assert future > V2020_10_02
    assert future.tag < V2020_10_02.tag


def test_satisfied_by() -> None:
    assert ALL.satisfied_by(V2015_04_05)
    assert V2019_12_12.satisfied_by(V2019_12_12)
    assert V2019_12_12.satisfied_by(V2020_10_02)
    assert not V2020_02_10.satisfied_by(V2019_12_12)


def test_registry_with_custom_default() -> None:
    registry = VersionRegistry(default=V2019_12_12)
    parsed, matched = registry.parse("nope")
    assert matched is False
    assert parsed == V2019_12_12


def test_registry_register_adds_version() -> None:
    registry = VersionRegistry()
    newer = ProtocolVersion.parse_tag("2021-06-08")
    registry.register(newer)
    assert registry.parse("2021-06-08") == (newer, True)
    # the default does not move when a version is registered
    assert registry.default == V2020_10_02
