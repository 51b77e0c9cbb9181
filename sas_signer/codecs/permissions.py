"""Signed permissions (``sp``) codec.

Permissions are written in the fixed order ``racwdxyltmeop`` regardless of the
order they were supplied in, and a permission is only emitted when the active
signed version supports it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..versions.types import ALL, V2019_12_12, V2020_02_10, ProtocolVersion


@dataclass(frozen=True)
class PermissionSpec:
    """One entry of the permission table."""

    code: str
    name: str
    description: str
    position: int
    min_version: ProtocolVersion


PERMISSIONS: Tuple[PermissionSpec, ...] = (
    PermissionSpec("r", "Read", "Read the content, properties and metadata of a resource.", 0, ALL),
    PermissionSpec("a", "Add", "Add a block to an append blob or a message to a queue.", 1, ALL),
    PermissionSpec("c", "Create", "Write a new blob, snapshot a blob, or copy a blob to a new blob.", 2, ALL),
    PermissionSpec("w", "Write", "Create or write content, properties, metadata, or block list.", 3, ALL),
    PermissionSpec("d", "Delete", "Delete a resource.", 4, ALL),
    PermissionSpec("x", "Delete version", "Delete a blob version.", 5, V2019_12_12),
    PermissionSpec("y", "Permanent delete", "Permanently delete a blob snapshot or version.", 6, V2020_02_10),
    PermissionSpec("l", "List", "List resources non-recursively.", 7, ALL),
    PermissionSpec("t", "Tags", "Read or write the tags on a blob.", 8, V2019_12_12),
    PermissionSpec("m", "Move", "Move a blob or a directory and its contents to a new location.", 9, V2020_02_10),
    PermissionSpec("e", "Execute", "Get system properties and, with a hierarchical namespace, the POSIX ACL.", 10, V2020_02_10),
    PermissionSpec("o", "Ownership", "Set the owner or owning group with a hierarchical namespace enabled.", 11, V2020_02_10),
    PermissionSpec("p", "Permissions", "Set permissions and POSIX ACLs with a hierarchical namespace enabled.", 12, V2020_02_10),
)

PERMISSIONS_BY_CODE: Dict[str, PermissionSpec] = {spec.code: spec for spec in PERMISSIONS}

NUM_PERMISSIONS = len(PERMISSIONS)


@dataclass(frozen=True)
class PermissionSet:
    """Parsed permissions stored by canonical position.

    ``has_values`` records whether any known permission was supplied. It is
    independent of version filtering, so a set whose every member is too new
    for ``version`` still reports as present and renders as an empty string.
    """

    version: ProtocolVersion
    slots: Tuple[Optional[str], ...] = (None,) * NUM_PERMISSIONS
    has_values: bool = False

    def render(self) -> str:
        out = []
        for code in self.slots:
            if code is None:
                continue
            spec = PERMISSIONS_BY_CODE[code]
            if spec.min_version.satisfied_by(self.version):
                out.append(code)
        return "".join(out)

    def __str__(self) -> str:
        return self.render()


def parse_permissions(version: ProtocolVersion, raw: str) -> PermissionSet:
    """Parse a permission string; unknown characters are dropped."""
    slots: list[Optional[str]] = [None] * NUM_PERMISSIONS
    has_values = False
    for char in raw.strip().lower():
        spec = PERMISSIONS_BY_CODE.get(char)
        if spec is None:
            continue
        slots[spec.position] = spec.code
        has_values = True
    return PermissionSet(version=version, slots=tuple(slots), has_values=has_values)
