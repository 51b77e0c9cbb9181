"""HMAC-SHA256 signing of the string-to-sign."""

from __future__ import annotations

import base64
import hmac
from hashlib import sha256
from typing import Union


def sign(key: Union[bytes, bytearray], message: Union[str, bytes]) -> str:
    """Return the standard base64 encoded HMAC-SHA256 of ``message`` under ``key``."""
    if isinstance(message, str):
        message = message.encode("utf-8")
    digest = hmac.new(bytes(key), message, sha256).digest()
    return base64.b64encode(digest).decode("utf-8")
