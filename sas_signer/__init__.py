"""sas-signer package.

Builds and signs account Shared Access Signature (SAS) tokens for cloud object
storage from an account name, a base64 account key and access-scoping
parameters.
"""

from .config import SasConfig
from .errors import (
    EmptyInputError,
    InvalidDateTimeFormatError,
    InvalidExpiryFormatError,
    InvalidIPv4FormatError,
    InvalidStartFormatError,
    InvalidVersionError,
    KeyDecodingError,
    SasError,
)
from .token import (
    AccountSasRequest,
    SignedAccountSas,
    build_account_sas,
    with_api_version,
    with_ip,
    with_protocols,
    with_start,
)
from .versions import ProtocolVersion, VersionRegistry, parse_version

__all__ = [
    "build_account_sas",
    "with_api_version",
    "with_ip",
    "with_protocols",
    "with_start",
    "AccountSasRequest",
    "SignedAccountSas",
    "ProtocolVersion",
    "VersionRegistry",
    "parse_version",
    "SasConfig",
    "SasError",
    "KeyDecodingError",
    "InvalidVersionError",
    "EmptyInputError",
    "InvalidDateTimeFormatError",
    "InvalidExpiryFormatError",
    "InvalidStartFormatError",
    "InvalidIPv4FormatError",
]
