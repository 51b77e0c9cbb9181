"""Environment-backed configuration for callers of the token builder."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .versions.registry import KNOWN_VERSIONS, VersionRegistry
from .versions.types import LATEST, ProtocolVersion

ENV_PREFIX = "SAS_SIGNER_"


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "y", "on"):
        return True
    if value in ("0", "false", "no", "n", "off"):
        return False
    return default


@dataclass(frozen=True)
class SasConfig:
    """Defaults used when building tokens outside of library calls."""

    account_name: str = ""
    account_key: str = ""
    default_version: str = LATEST.tag
    strict_version: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "SasConfig":
        return cls(
            account_name=os.getenv(f"{ENV_PREFIX}ACCOUNT_NAME", "").strip(),
            account_key=os.getenv(f"{ENV_PREFIX}ACCOUNT_KEY", "").strip(),
            default_version=(os.getenv(f"{ENV_PREFIX}DEFAULT_VERSION") or LATEST.tag).strip(),
            strict_version=_get_bool(f"{ENV_PREFIX}STRICT_VERSION", True),
            log_level=(os.getenv(f"{ENV_PREFIX}LOG_LEVEL") or "WARNING").strip().upper(),
        )

    def registry(self) -> VersionRegistry:
        """Build a version registry whose fallback is ``default_version``.

        Raises ``ValueError`` if ``default_version`` is not a ``YYYY-MM-DD`` tag.
        """
        registry = VersionRegistry(KNOWN_VERSIONS)
        default, matched = registry.parse(self.default_version)
        if not matched:
            default = ProtocolVersion.parse_tag(self.default_version)
            registry.register(default)
        registry.default = default
        return registry
