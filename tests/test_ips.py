import pytest

from sas_signer.codecs.ips import parse_ip_restriction


@pytest.mark.parametrize(
    "raw,expected",
    [
        # single address
        ("1.1", None),
        ("1.1.1.256", None),
        ("1.1.1.1", "1.1.1.1"),
        # IPv6 is never accepted
        ("2001:0db8:85a3:0000:0000:8a2e:0370:7334", None),
        ("2001:0db8:85a3:0000:0000:8a2e:0370:7334-2001:0db8:85a3:0000:0000:8a2e:0370:7334", None),
        ("::ffff:1.2.3.4", None),
        # malformed range members
        ("1.1-1.1.1.1", None),
        ("1.1.1.256-1.1.1.1", None),
        ("1.1.1.1-1.1", None),
        ("1.1.1.1-1.1.1.256", None),
        # first octet
        ("2.2.2.2-1.2.2.2", None),
        ("1.2.2.2-1.2.2.2", "1.2.2.2-1.2.2.2"),
        ("2.2.2.2-3.2.2.2", "2.2.2.2-3.2.2.2"),
        # second octet
        ("2.2.2.2-2.1.2.2", None),
        ("2.1.2.2-2.1.2.2", "2.1.2.2-2.1.2.2"),
        ("2.2.2.2-2.3.2.2", "2.2.2.2-2.3.2.2"),
        # third octet
        ("2.2.2.2-2.2.1.2", None),
        ("2.2.1.2-2.2.1.2", "2.2.1.2-2.2.1.2"),
        ("2.2.2.2-2.2.3.2", "2.2.2.2-2.2.3.2"),
        # fourth octet
        ("2.2.2.2-2.2.2.1", None),
        ("2.2.2.1-2.2.2.1", "2.2.2.1-2.2.2.1"),
        ("2.2.2.2-2.2.2.3", "2.2.2.2-2.2.2.3"),
        # separators
        ("2.2.2.2--2.2.2.3", None),
        ("2.2.2.2-2.2.2.3-2.2.2.4", None),
        ("", None),
    ],
)
def test_parse_ip_restriction(raw, expected) -> None:
    sip, ok = parse_ip_restriction(raw)
    if expected is None:
        assert ok is False
        assert sip is None
    else:
        assert ok is True
        assert sip is not None
        assert sip.render() == expected


def test_range_compares_numerically_not_lexically() -> None:
    sip, ok = parse_ip_restriction("9.0.0.1-10.0.0.1")
    assert ok is True
    assert sip.end is not None
    assert str(sip) == "9.0.0.1-10.0.0.1"


def test_whitespace_is_trimmed() -> None:
    sip, ok = parse_ip_restriction(" 10.0.0.1 - 10.0.0.9 ")
    assert ok is True
    assert sip.render() == "10.0.0.1-10.0.0.9"

    single, ok = parse_ip_restriction(" 8.8.8.8\n")
    assert ok is True
    assert single.end is None
    assert single.render() == "8.8.8.8"
