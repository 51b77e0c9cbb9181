"""Signed IP (``sip``) codec.

Accepts a single IPv4 address or an ascending ``start-end`` IPv4 range. IPv6 is
never accepted.
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from typing import Optional, Tuple

IP_RANGE_SEPARATOR = "-"


@dataclass(frozen=True)
class IPRestriction:
    start: ipaddress.IPv4Address
    end: Optional[ipaddress.IPv4Address] = None

    def render(self) -> str:
        if self.end is None:
            return str(self.start)
        return f"{self.start}{IP_RANGE_SEPARATOR}{self.end}"

    def __str__(self) -> str:
        return self.render()


def _parse_ipv4(raw: str) -> Optional[ipaddress.IPv4Address]:
    try:
        return ipaddress.IPv4Address(raw.strip())
    except ValueError:
        return None


def parse_ip_restriction(raw: str) -> Tuple[Optional[IPRestriction], bool]:
    """Parse ``raw`` into an IP restriction.

    Returns ``(None, False)`` for anything other than one IPv4 address or two
    IPv4 addresses joined by a single ``-`` with start not above end.
    """
    parts = raw.strip().split(IP_RANGE_SEPARATOR)

    if len(parts) == 1:
        address = _parse_ipv4(parts[0])
        if address is None:
            return None, False
        return IPRestriction(start=address), True

    if len(parts) == 2:
        start = _parse_ipv4(parts[0])
        end = _parse_ipv4(parts[1])
        if start is None or end is None:
            return None, False
        if int(start) > int(end):
            return None, False
        return IPRestriction(start=start, end=end), True

    return None, False
