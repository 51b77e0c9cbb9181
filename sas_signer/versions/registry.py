"""Registry of signed versions known to the token builder."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

from .types import LATEST, V2015_04_05, V2019_12_12, V2020_02_10, V2020_08_04, V2020_10_02, ProtocolVersion

KNOWN_VERSIONS: Tuple[ProtocolVersion, ...] = (
    V2020_10_02,
    V2020_08_04,
    V2020_02_10,
    V2019_12_12,
    V2015_04_05,
)


class VersionRegistry:
    """In-memory lookup of signed version tags with a fallback default."""

    def __init__(
        self,
        versions: Iterable[ProtocolVersion] = KNOWN_VERSIONS,
        *,
        default: Optional[ProtocolVersion] = None,
    ) -> None:
        self._versions: Dict[str, ProtocolVersion] = {v.tag: v for v in versions}
        self.default = default or max(self._versions.values(), default=LATEST)

    def register(self, version: ProtocolVersion) -> None:
        self._versions[version.tag] = version

    def parse(self, raw: str) -> Tuple[ProtocolVersion, bool]:
        """Resolve ``raw`` to a known version.

        Unknown tags resolve to the default with ``matched`` set to False; the
        caller decides whether that is fatal.
        """
        version = self._versions.get(raw)
        if version is not None:
            return version, True
        return self.default, False


DEFAULT_REGISTRY = VersionRegistry()


def parse_version(raw: str) -> Tuple[ProtocolVersion, bool]:
    """Resolve ``raw`` against :data:`DEFAULT_REGISTRY`."""
    return DEFAULT_REGISTRY.parse(raw)
