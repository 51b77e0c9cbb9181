"""Optional account SAS fields, applied in order after the required ones."""

from __future__ import annotations

from typing import Callable

from ..codecs.ips import parse_ip_restriction
from ..codecs.protocols import parse_protocols
from ..errors import InvalidDateTimeFormatError, InvalidIPv4FormatError, InvalidStartFormatError
from ..utils.time import parse_datetime
from .types import AccountSasDraft

AccountSasOption = Callable[[AccountSasDraft], None]


def with_api_version(api_version: str) -> AccountSasOption:
    """Set the ``api-version`` transport parameter. It is not signed."""

    def apply(draft: AccountSasDraft) -> None:
        draft.api_version = api_version

    return apply


def with_start(start: str) -> AccountSasOption:
    """Set the signed start time. Empty input raises ``EmptyInputError``."""

    def apply(draft: AccountSasDraft) -> None:
        try:
            draft.start = parse_datetime(start)
        except InvalidDateTimeFormatError as exc:
            raise InvalidStartFormatError() from exc

    return apply


def with_ip(ip: str) -> AccountSasOption:
    """Restrict the token to one IPv4 address or an IPv4 range."""

    def apply(draft: AccountSasDraft) -> None:
        restriction, ok = parse_ip_restriction(ip)
        if not ok:
            raise InvalidIPv4FormatError()
        draft.ip = restriction

    return apply


def with_protocols(protocols: str) -> AccountSasOption:
    """Restrict the protocols the token may be used over."""

    def apply(draft: AccountSasDraft) -> None:
        draft.protocols = parse_protocols(protocols)

    return apply
