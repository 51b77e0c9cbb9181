"""Account SAS assembly, signing and serialization."""

from .builder import build_account_sas, decode_account_key
from .options import AccountSasOption, with_api_version, with_ip, with_protocols, with_start
from .query import QueryFields, QueryKeys, serialize
from .signer import sign
from .types import AccountSasDraft, AccountSasRequest, SignedAccountSas

__all__ = [
    "build_account_sas",
    "decode_account_key",
    "AccountSasOption",
    "with_api_version",
    "with_ip",
    "with_protocols",
    "with_start",
    "QueryFields",
    "QueryKeys",
    "serialize",
    "sign",
    "AccountSasDraft",
    "AccountSasRequest",
    "SignedAccountSas",
]
