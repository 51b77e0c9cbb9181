"""Account SAS datatypes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from ..codecs.ips import IPRestriction
from ..codecs.permissions import PermissionSet
from ..codecs.protocols import NO_PROTOCOLS, ProtocolRestriction
from ..codecs.resource_types import ResourceTypeSet
from ..codecs.services import ServiceSet
from ..utils.time import format_timestamp
from ..versions.types import ProtocolVersion
from .query import QueryFields, QueryKeys, decode, serialize


@dataclass
class AccountSasDraft:
    """Mutable parameter set that options write into before signing."""

    account_name: str
    version: ProtocolVersion
    services: ServiceSet
    resource_types: ResourceTypeSet
    permissions: PermissionSet
    expiry: datetime
    start: Optional[datetime] = None
    ip: Optional[IPRestriction] = None
    protocols: ProtocolRestriction = NO_PROTOCOLS
    api_version: str = ""

    def freeze(self) -> "AccountSasRequest":
        return AccountSasRequest(
            account_name=self.account_name,
            version=self.version,
            services=self.services,
            resource_types=self.resource_types,
            permissions=self.permissions,
            expiry=self.expiry,
            start=self.start,
            ip=self.ip,
            protocols=self.protocols,
            api_version=self.api_version,
        )


@dataclass(frozen=True)
class AccountSasRequest:
    """Validated account SAS parameters. Holds no key material."""

    account_name: str
    version: ProtocolVersion
    services: ServiceSet
    resource_types: ResourceTypeSet
    permissions: PermissionSet
    expiry: datetime
    start: Optional[datetime] = None
    ip: Optional[IPRestriction] = None
    protocols: ProtocolRestriction = NO_PROTOCOLS
    api_version: str = ""

    def string_to_sign(self) -> str:
        """Newline-joined signature fields. The order is fixed by the service."""
        fields = (
            self.account_name,
            self.permissions.render(),
            self.services.render(),
            self.resource_types.render(),
            format_timestamp(self.start) if self.start is not None else "",
            format_timestamp(self.expiry),
            self.ip.render() if self.ip is not None else "",
            self.protocols.render(),
            self.version.tag,
        )
        return "\n".join(fields) + "\n"

    def query_fields(self, signature: str) -> QueryFields:
        q = QueryFields()
        q.add_if(bool(self.api_version), QueryKeys.API_VERSION, self.api_version)
        q.add(QueryKeys.SIGNED_VERSION, self.version.tag)
        q.add_if(self.services.has_values, QueryKeys.SIGNED_SERVICES, self.services.render())
        q.add_if(self.resource_types.has_values, QueryKeys.SIGNED_RESOURCE_TYPES, self.resource_types.render())
        q.add_if(self.permissions.has_values, QueryKeys.SIGNED_PERMISSION, self.permissions.render())
        if self.start is not None:
            q.add(QueryKeys.SIGNED_START, format_timestamp(self.start))
        q.add(QueryKeys.SIGNED_EXPIRY, format_timestamp(self.expiry))
        if self.ip is not None:
            q.add(QueryKeys.SIGNED_IP, self.ip.render())
        q.add_if(self.protocols.has_values, QueryKeys.SIGNED_PROTOCOL, self.protocols.render())
        q.add(QueryKeys.SIGNED_SIGNATURE, signature)
        return q


@dataclass(frozen=True)
class SignedAccountSas:
    """A signed account SAS token ready to attach to a storage request."""

    request: AccountSasRequest
    string_to_sign: str
    signature: str
    fields: Tuple[Tuple[str, str], ...]
    query: str

    @classmethod
    def from_request(cls, request: AccountSasRequest, *, string_to_sign: str, signature: str) -> "SignedAccountSas":
        q = request.query_fields(signature)
        return cls(
            request=request,
            string_to_sign=string_to_sign,
            signature=signature,
            fields=q.pairs(),
            query=serialize(q),
        )

    def decoded_query(self) -> str:
        return decode(self.query)

    def to_url(self, resource_url: str) -> str:
        """Append the token to ``resource_url``."""
        if resource_url.endswith(("?", "&")):
            separator = ""
        elif "?" in resource_url:
            separator = "&"
        else:
            separator = "?"
        return f"{resource_url}{separator}{self.query}"

    def __str__(self) -> str:
        return self.query
