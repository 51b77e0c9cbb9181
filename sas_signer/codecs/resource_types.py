"""Signed resource types (``srt``) codec."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class ResourceType(str, Enum):
    """Level of the storage hierarchy a token grants access to."""

    SERVICE = "s"
    CONTAINER = "c"
    OBJECT = "o"


_RESOURCE_TYPE_CODES = {r.value: r for r in ResourceType}


@dataclass(frozen=True)
class ResourceTypeSet:
    """Resource types in the order they were supplied. Duplicates are kept."""

    members: Tuple[ResourceType, ...] = ()

    @property
    def has_values(self) -> bool:
        return bool(self.members)

    def render(self) -> str:
        return "".join(member.value for member in self.members)

    def __str__(self) -> str:
        return self.render()


def parse_resource_types(raw: str) -> ResourceTypeSet:
    """Keep the characters of ``raw`` that name a resource type."""
    return ResourceTypeSet(members=tuple(_RESOURCE_TYPE_CODES[c] for c in raw if c in _RESOURCE_TYPE_CODES))
