"""Parsing of the date and time formats the server sends."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

_SERVER_RE = re.compile(r"(\d{2})/(\d{2})/(\d{4}) (\d{2}):(\d{2}):(\d{2})")

_ISO_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})"
    r"(?:T(\d{2}):(\d{2})(?::(\d{2})(?:[.,](\d+))?)?"
    r"(Z|[+-]\d{2}(?::?\d{2})?)?)?"
)

_ERROR = "Can't parse time from QStringTime"


def parse_server_datetime(text: str) -> datetime:
    """Parse ``MM/DD/YYYY hh:mm:ss`` found anywhere in ``text``."""
    match = _SERVER_RE.search(text)
    if match is None:
        raise ValueError(_ERROR)
    month, day, year, hour, minute, second = (int(part) for part in match.groups())
    try:
        return datetime(year, month, day, hour, minute, second)
    except ValueError as exc:
        raise ValueError(_ERROR) from exc


def _parse_offset(text: str) -> timezone:
    if text == "Z":
        return timezone.utc
    sign = -1 if text[0] == "-" else 1
    digits = text[1:].replace(":", "")
    hours = int(digits[:2])
    minutes = int(digits[2:4]) if len(digits) > 2 else 0
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def parse_iso_datetime(text: str) -> datetime:
    """Parse an ISO 8601 date-time with optional fraction and zone.

    Without a zone designator the result is naive (local time).
    """
    match = _ISO_RE.fullmatch(text.strip())
    if match is None:
        raise ValueError(_ERROR)
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0
    try:
        tzinfo = _parse_offset(zone) if zone else None
        return datetime(
            int(year),
            int(month),
            int(day),
            int(hour or 0),
            int(minute or 0),
            int(second or 0),
            microsecond,
            tzinfo=tzinfo,
        )
    except ValueError as exc:
        raise ValueError(_ERROR) from exc