"""Command line front-end for generating account SAS tokens."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import timedelta
from typing import List, Optional, Sequence

from .config import SasConfig
from .errors import SasError
from .token import AccountSasOption, build_account_sas, with_api_version, with_ip, with_protocols, with_start
from .utils.time import format_timestamp, utc_now

logger = logging.getLogger(__name__)


def build_parser(config: SasConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sas-signer",
        description="Generate a signed account Shared Access Signature (SAS) token.",
    )
    parser.add_argument("--account-name", default=config.account_name, help="Storage account name.")
    parser.add_argument(
        "--account-key",
        default=config.account_key,
        help="Base64 storage account key (defaults to SAS_SIGNER_ACCOUNT_KEY).",
    )
    parser.add_argument("--version", default=config.default_version, help="Signed version, e.g. 2020-10-02.")
    parser.add_argument("--services", required=True, help="Services from b,q,t,f, e.g. 'bq'.")
    parser.add_argument("--resource-types", required=True, help="Resource types from s,c,o, e.g. 'sco'.")
    parser.add_argument("--permissions", required=True, help="Permissions from racwdxyltmeop.")

    expiry = parser.add_mutually_exclusive_group(required=True)
    expiry.add_argument("--expiry", help="Expiry date/time, ISO 8601. Values without an offset are UTC.")
    expiry.add_argument("--expires-in-hours", type=float, help="Expiry relative to now, in hours.")

    parser.add_argument("--start", help="Start date/time, ISO 8601.")
    parser.add_argument("--ip", help="Allowed IPv4 address or range, e.g. 10.0.0.1-10.0.0.9.")
    parser.add_argument("--protocols", help="'https' or 'https,http'.")
    parser.add_argument("--api-version", help="Optional api-version transport parameter.")
    parser.add_argument("--resource-url", help="Print the token appended to this URL.")
    parser.add_argument("--show-string-to-sign", action="store_true", help="Also print the string-to-sign to stderr.")
    parser.add_argument(
        "--lenient-version",
        action="store_true",
        default=not config.strict_version,
        help="Fall back to the default version instead of failing on unknown versions.",
    )
    return parser


def _options(args: argparse.Namespace) -> List[AccountSasOption]:
    options: List[AccountSasOption] = []
    if args.start is not None:
        options.append(with_start(args.start))
    if args.ip is not None:
        options.append(with_ip(args.ip))
    if args.protocols is not None:
        options.append(with_protocols(args.protocols))
    if args.api_version:
        options.append(with_api_version(args.api_version))
    return options


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = SasConfig.from_env()
    logging.basicConfig(level=getattr(logging, config.log_level, logging.WARNING))
    parser = build_parser(config)
    args = parser.parse_args(argv)
    if not args.account_name:
        parser.error("an account name is required (--account-name or SAS_SIGNER_ACCOUNT_NAME)")
    if not args.account_key:
        parser.error("an account key is required (--account-key or SAS_SIGNER_ACCOUNT_KEY)")

    try:
        registry = config.registry()
    except ValueError:
        print(f"error[config]: SAS_SIGNER_DEFAULT_VERSION {config.default_version!r} is not a YYYY-MM-DD tag", file=sys.stderr)
        return 2

    expiry = args.expiry
    if expiry is None:
        expiry = format_timestamp(utc_now() + timedelta(hours=args.expires_in_hours))

    try:
        token = build_account_sas(
            args.account_name,
            args.account_key,
            args.version,
            args.services,
            args.resource_types,
            args.permissions,
            expiry,
            *_options(args),
            strict_version=not args.lenient_version,
            registry=registry,
        )
    except SasError as exc:
        logger.debug("Account SAS build failed", exc_info=True)
        print(f"error[{exc.code}]: {exc}", file=sys.stderr)
        return 2

    if args.show_string_to_sign:
        print(token.string_to_sign, end="", file=sys.stderr)
    print(token.to_url(args.resource_url) if args.resource_url else token.query)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
