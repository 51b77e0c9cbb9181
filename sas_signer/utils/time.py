"""UTC time helpers and the signed start/expiry timestamp format."""

from __future__ import annotations

import re
from datetime import datetime, timezone

from ..errors import EmptyInputError, InvalidDateTimeFormatError

WIRE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Least to most precise. The first format that matches wins.
INPUT_FORMATS = (
    "%Y-%m-%d",
    "%Y-%m-%d%z",
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%dT%H:%M%z",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%dT%H:%M:%S.%f%z",
)

# strptime tolerates unpadded fields, so the layout is checked up front.
_SHAPE_RE = re.compile(
    r"\d{4}-\d{2}-\d{2}(?:T\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?)?(?:Z|[+-]\d{2}:\d{2})?",
    re.ASCII,
)
# %f takes at most six digits.
_LONG_FRACTION_RE = re.compile(r"(\.\d{6})\d+", re.ASCII)

MIN_YEAR = 1000
MAX_YEAR = 9999


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def parse_datetime(raw: str) -> datetime:
    """Parse a user supplied ISO 8601 style date/time into a UTC datetime.

    Values without an offset are taken to be UTC. Fractions of a second
    beyond microseconds are truncated.

    Raises:
        EmptyInputError: ``raw`` is empty.
        InvalidDateTimeFormatError: no accepted format matched, or the instant
            has no four-digit year in UTC.
    """
    if raw == "":
        raise EmptyInputError()
    if not _SHAPE_RE.fullmatch(raw):
        raise InvalidDateTimeFormatError()

    value = _LONG_FRACTION_RE.sub(r"\1", raw)
    for fmt in INPUT_FORMATS:
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        try:
            parsed = parsed.astimezone(timezone.utc)
        except OverflowError as exc:
            raise InvalidDateTimeFormatError() from exc
        if not MIN_YEAR <= parsed.year <= MAX_YEAR:
            raise InvalidDateTimeFormatError()
        return parsed

    raise InvalidDateTimeFormatError()


def format_timestamp(instant: datetime) -> str:
    """Render ``instant`` as ``YYYY-MM-DDThh:mm:ssZ`` in UTC."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc).strftime(WIRE_FORMAT)
