"""Utility helpers for time parsing and formatting."""

from .time import format_timestamp, parse_datetime, utc_now

__all__ = ["format_timestamp", "parse_datetime", "utc_now"]
