"""Codecs for each access-scoping dimension of an account SAS."""

from .ips import IPRestriction, parse_ip_restriction
from .permissions import PERMISSIONS, PERMISSIONS_BY_CODE, PermissionSet, PermissionSpec, parse_permissions
from .protocols import DEFAULT_PROTOCOLS, NO_PROTOCOLS, ProtocolRestriction, parse_protocols
from .resource_types import ResourceType, ResourceTypeSet, parse_resource_types
from .services import Service, ServiceSet, parse_services

__all__ = [
    "IPRestriction",
    "parse_ip_restriction",
    "PERMISSIONS",
    "PERMISSIONS_BY_CODE",
    "PermissionSet",
    "PermissionSpec",
    "parse_permissions",
    "DEFAULT_PROTOCOLS",
    "NO_PROTOCOLS",
    "ProtocolRestriction",
    "parse_protocols",
    "ResourceType",
    "ResourceTypeSet",
    "parse_resource_types",
    "Service",
    "ServiceSet",
    "parse_services",
]
