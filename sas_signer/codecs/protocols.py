"""Signed protocol (``spr``) codec.

Valid restrictions are ``https`` and ``https,http``. HTTP on its own is not a
permitted value and falls back to the default ``https,http``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

HTTPS = "https"
HTTP = "http"

# Wire order is always https first.
_PROTOCOL_SLOTS: Dict[str, int] = {HTTPS: 0, HTTP: 1}


@dataclass(frozen=True)
class ProtocolRestriction:
    slots: Tuple[Optional[str], Optional[str]] = (None, None)
    has_values: bool = False

    def render(self) -> str:
        return ",".join(p for p in self.slots if p)

    def __str__(self) -> str:
        return self.render()


DEFAULT_PROTOCOLS = ProtocolRestriction(slots=(HTTPS, HTTP), has_values=True)
NO_PROTOCOLS = ProtocolRestriction()


def parse_protocols(raw: str) -> ProtocolRestriction:
    """Parse a comma separated protocol list.

    An empty string yields an absent restriction, which is distinct from the
    ``https,http`` default.
    """
    slots: list[Optional[str]] = [None, None]
    has_values = False
    for token in raw.split(","):
        protocol = token.strip().lower()
        index = _PROTOCOL_SLOTS.get(protocol)
        if index is None:
            continue
        slots[index] = protocol
        has_values = True

    if slots[1] == HTTP and slots[0] is None:
        return DEFAULT_PROTOCOLS
    return ProtocolRestriction(slots=(slots[0], slots[1]), has_values=has_values)
