"""Error types raised while building account SAS tokens."""

from __future__ import annotations

from typing import Optional


class SasError(ValueError):
    """Base class for all caller-input failures during token construction."""

    code = "sas_error"
    default_message = "invalid shared access signature input"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class KeyDecodingError(SasError):
    code = "key_decoding"
    default_message = "error decoding storage account key, must be base64 encoded"


class InvalidVersionError(SasError):
    code = "invalid_version"
    default_message = "error parsing signed version"


class EmptyInputError(SasError):
    code = "empty_input"
    default_message = "datetime provided to parse is empty"


class InvalidDateTimeFormatError(SasError):
    code = "invalid_datetime_format"
    default_message = "invalid date format provided, must be ISO 8601 formatted date string"


class InvalidExpiryFormatError(InvalidDateTimeFormatError):
    code = "invalid_expiry_format"
    default_message = "invalid date format provided for signed expiry, must be ISO 8601 formatted date string"


class InvalidStartFormatError(InvalidDateTimeFormatError):
    code = "invalid_start_format"
    default_message = "invalid date format provided for signed start, must be ISO 8601 formatted date string"


class InvalidIPv4FormatError(SasError):
    code = "invalid_ipv4_format"
    default_message = "invalid signed IP provided, must be an IPv4 address or an ascending IPv4 range"
