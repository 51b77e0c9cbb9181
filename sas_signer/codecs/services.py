"""Signed services (``ss``) codec."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Service(str, Enum):
    """Storage service a token grants access to."""

    BLOB = "b"
    QUEUE = "q"
    TABLE = "t"
    FILE = "f"


_SERVICE_CODES = {s.value: s for s in Service}


@dataclass(frozen=True)
class ServiceSet:
    """Services in the order they were supplied. Duplicates are kept."""

    members: Tuple[Service, ...] = ()

    @property
    def has_values(self) -> bool:
        return bool(self.members)

    def render(self) -> str:
        return "".join(member.value for member in self.members)

    def __str__(self) -> str:
        return self.render()


def parse_services(raw: str) -> ServiceSet:
    """Keep the characters of ``raw`` that name a service."""
    return ServiceSet(members=tuple(_SERVICE_CODES[c] for c in raw if c in _SERVICE_CODES))
