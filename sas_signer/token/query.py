"""Query string serialization for signed tokens."""

from __future__ import annotations

from typing import List, Tuple
from urllib.parse import unquote_plus, urlencode


class QueryKeys:
    API_VERSION = "api-version"
    SIGNED_VERSION = "sv"
    SIGNED_SERVICES = "ss"
    SIGNED_RESOURCE_TYPES = "srt"
    SIGNED_PERMISSION = "sp"
    SIGNED_START = "st"
    SIGNED_EXPIRY = "se"
    SIGNED_IP = "sip"
    SIGNED_PROTOCOL = "spr"
    SIGNED_SIGNATURE = "sig"


class QueryFields:
    """Ordered query parameters. Serialization keeps insertion order."""

    def __init__(self) -> None:
        self._pairs: List[Tuple[str, str]] = []

    def add(self, key: str, value: str) -> None:
        self._pairs.append((key, value))

    def add_if(self, present: bool, key: str, value: str) -> None:
        if present:
            self.add(key, value)

    def pairs(self) -> Tuple[Tuple[str, str], ...]:
        return tuple(self._pairs)


def serialize(fields: QueryFields) -> str:
    """Percent-encode every pair and join them with ``&``."""
    return urlencode(fields.pairs())


def decode(query: str) -> str:
    """Return the URL-decoded form of a serialized query string."""
    return unquote_plus(query)
