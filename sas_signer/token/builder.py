"""Account SAS token assembly and signing."""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Optional

from ..codecs.permissions import parse_permissions
from ..codecs.resource_types import parse_resource_types
from ..codecs.services import parse_services
from ..errors import InvalidDateTimeFormatError, InvalidExpiryFormatError, InvalidVersionError, KeyDecodingError
from ..utils.time import parse_datetime
from ..versions.registry import DEFAULT_REGISTRY, VersionRegistry
from .options import AccountSasOption
from .signer import sign
from .types import AccountSasDraft, SignedAccountSas

logger = logging.getLogger(__name__)


def decode_account_key(account_key: str) -> bytearray:
    """Decode a standard base64 account key into a wipeable buffer."""
    try:
        return bytearray(base64.b64decode(account_key, validate=True))
    except (binascii.Error, ValueError) as exc:
        raise KeyDecodingError() from exc


def wipe(buffer: bytearray) -> None:
    buffer[:] = bytes(len(buffer))


def build_account_sas(
    account_name: str,
    account_key: str,
    version: str,
    services: str,
    resource_types: str,
    permissions: str,
    expiry: str,
    *options: AccountSasOption,
    strict_version: bool = True,
    registry: Optional[VersionRegistry] = None,
) -> SignedAccountSas:
    """Validate the inputs, sign them and return the account SAS token.

    Options are applied in the order given; the first one that raises aborts
    the build. The decoded key is zeroed before this function returns.

    Raises:
        KeyDecodingError: ``account_key`` is not standard base64.
        InvalidVersionError: ``version`` is unknown and ``strict_version`` is set.
        EmptyInputError: ``expiry`` (or a start option) is empty.
        InvalidExpiryFormatError: ``expiry`` matches no accepted format.
        InvalidStartFormatError: a start option matches no accepted format.
        InvalidIPv4FormatError: an IP option is not a valid IPv4 address or range.
    """
    key = decode_account_key(account_key)
    try:
        sv, matched = (registry or DEFAULT_REGISTRY).parse(version)
        if not matched:
            if strict_version:
                raise InvalidVersionError()
            logger.warning("Unknown signed version %r, falling back to %s", version, sv.tag)

        try:
            se = parse_datetime(expiry)
        except InvalidDateTimeFormatError as exc:
            raise InvalidExpiryFormatError() from exc

        draft = AccountSasDraft(
            account_name=account_name,
            version=sv,
            services=parse_services(services),
            resource_types=parse_resource_types(resource_types),
            permissions=parse_permissions(sv, permissions),
            expiry=se,
        )
        for option in options:
            option(draft)

        request = draft.freeze()
        string_to_sign = request.string_to_sign()
        signature = sign(key, string_to_sign)
    finally:
        wipe(key)

    logger.debug(
        "Built account SAS for account=%s version=%s start=%s ip=%s protocols=%s",
        request.account_name,
        request.version.tag,
        request.start is not None,
        request.ip is not None,
        request.protocols.has_values,
    )
    return SignedAccountSas.from_request(request, string_to_sign=string_to_sign, signature=signature)
