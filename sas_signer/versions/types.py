"""Signed storage service version datatypes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True, order=True)
class ProtocolVersion:
    """A signed service version, ordered by release date rather than tag text."""

    released: date
    tag: str = field(compare=False)

    @classmethod
    def parse_tag(cls, tag: str) -> "ProtocolVersion":
        """Build a version from a ``YYYY-MM-DD`` tag.

        Raises ``ValueError`` if the tag is not a calendar date.
        """
        return cls(released=date.fromisoformat(tag), tag=tag)

    def satisfied_by(self, active: "ProtocolVersion") -> bool:
        """Return whether a feature requiring this version is usable at ``active``."""
        return self == ALL or self <= active

    def __str__(self) -> str:
        return self.tag


# Placeholder requirement for features available in every version.
ALL = ProtocolVersion(released=date.min, tag="*")

V2015_04_05 = ProtocolVersion.parse_tag("2015-04-05")
V2019_12_12 = ProtocolVersion.parse_tag("2019-12-12")
V2020_02_10 = ProtocolVersion.parse_tag("2020-02-10")
V2020_08_04 = ProtocolVersion.parse_tag("2020-08-04")
V2020_10_02 = ProtocolVersion.parse_tag("2020-10-02")

LATEST = V2020_10_02
