import pytest

from sas_signer.codecs.permissions import NUM_PERMISSIONS, PERMISSIONS, parse_permissions
from sas_signer.versions import ALL, LATEST, V2015_04_05, V2019_12_12, V2020_02_10


def test_table_is_in_canonical_order() -> None:
    assert NUM_PERMISSIONS == 13
    assert "".join(spec.code for spec in PERMISSIONS) == "racwdxyltmeop"
    assert [spec.position for spec in PERMISSIONS] == list(range(13))


def test_version_gates() -> None:
    gates = {spec.code: spec.min_version for spec in PERMISSIONS}
    assert [c for c, v in gates.items() if v == V2019_12_12] == ["x", "t"]
    assert [c for c, v in gates.items() if v == V2020_02_10] == ["y", "m", "e", "o", "p"]
    assert [c for c, v in gates.items() if v == ALL] == ["r", "a", "c", "w", "d", "l"]


def test_render_is_independent_of_input_order() -> None:
    assert parse_permissions(LATEST, "wrc").render() == "rcw"
    assert parse_permissions(LATEST, "rcw").render() == "rcw"
    assert parse_permissions(LATEST, "poemtlyxdwcar").render() == "racwdxyltmeop"


def test_input_is_lowercased_and_trimmed() -> None:
    assert parse_permissions(LATEST, "  RWL ").render() == "rwl"


def test_unknown_and_duplicate_characters_are_dropped() -> None:
    perms = parse_permissions(LATEST, "rzr!q w")
    assert perms.render() == "rw"
    assert perms.has_values is True


@pytest.mark.parametrize(
    "version,expected",
    [
        (V2015_04_05, "racwdl"),
        (V2019_12_12, "racwdxlt"),
        (V2020_02_10, "racwdxyltmeop"),
        (LATEST, "racwdxyltmeop"),
    ],
)
def test_render_filters_by_version(version, expected) -> None:
    assert parse_permissions(version, "racwdxyltmeop").render() == expected


@pytest.mark.parametrize("spec", PERMISSIONS, ids=lambda s: s.name)
def test_each_permission_is_gated_at_its_minimum_version(spec) -> None:
    at_minimum = V2015_04_05 if spec.min_version == ALL else spec.min_version
    assert parse_permissions(at_minimum, spec.code).render() == spec.code
    if spec.min_version != ALL:
        assert parse_permissions(V2015_04_05, spec.code).render() == ""


def test_empty_input_has_no_values() -> None:
    perms = parse_permissions(LATEST, "")
    assert perms.has_values is False
    assert perms.render() == ""


def test_filtered_out_permissions_still_report_presence() -> None:
    perms = parse_permissions(V2019_12_12, "y")
    assert perms.has_values is True
    assert perms.render() == ""
    assert str(perms) == ""
