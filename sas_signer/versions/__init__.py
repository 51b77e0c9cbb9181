"""Signed service versions and version lookup."""

from .registry import DEFAULT_REGISTRY, KNOWN_VERSIONS, VersionRegistry, parse_version
from .types import ALL, LATEST, V2015_04_05, V2019_12_12, V2020_02_10, V2020_08_04, V2020_10_02, ProtocolVersion

__all__ = [
    "ALL",
    "LATEST",
    "V2015_04_05",
    "V2019_12_12",
    "V2020_02_10",
    "V2020_08_04",
    "V2020_10_02",
    "ProtocolVersion",
    "VersionRegistry",
    "DEFAULT_REGISTRY",
    "KNOWN_VERSIONS",
    "parse_version",
]
