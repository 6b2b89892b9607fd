"""Fixed-offset timestamp codec for front-matter dates.

Dates are written as RFC 822 with a numeric zone, e.g.
``27 May 12 01:50 -0300``. Timestamps are plain timezone-aware
:class:`~datetime.datetime` values; this module only provides the pure
``encode``/``decode`` pair and its JSON-literal twin.

Round-trip law: ``decode(encode(t)) == t`` with the same ``utcoffset()``
for every timestamp with minute precision whose year falls inside the
two-digit window (1969-2068). Offsets are never normalized to UTC.
"""

from __future__ import annotations

import json
import re
from datetime import UTC, datetime, timedelta, timezone

from rafall.domain.errors import TimestampParseError

LAYOUT = "02 Jan 06 15:04 -0700"

MONTHS: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

# Two-digit years at or above the pivot belong to the 1900s.
_YEAR_PIVOT = 69

ZERO_TIMESTAMP = datetime(1, 1, 1, tzinfo=UTC)

_PATTERN = re.compile(
    r"(?P<day>\d{2}) (?P<month>[A-Z][a-z]{2}) (?P<year>\d{2}) "
    r"(?P<hour>\d{2}):(?P<minute>\d{2}) (?P<sign>[+-])(?P<zh>\d{2})(?P<zm>\d{2})",
    re.ASCII,
)


def _offset(sign: str, hours: int, minutes: int) -> timezone:
    delta = timedelta(hours=hours, minutes=minutes)
    if sign == "-":
        delta = -delta
    if delta == timedelta(0):
        return UTC
    return timezone(delta)


def encode(value: datetime) -> str:
    """Format *value* as ``DD Mon YY HH:MM ±ZZZZ``.

    Naive datetimes are treated as UTC.
    """
    offset = value.utcoffset() or timedelta(0)
    sign = "-" if offset < timedelta(0) else "+"
    total_minutes = abs(int(offset.total_seconds())) // 60
    zh, zm = divmod(total_minutes, 60)
    return (
        f"{value.day:02d} {MONTHS[value.month - 1]} {value.year % 100:02d} "
        f"{value.hour:02d}:{value.minute:02d} {sign}{zh:02d}{zm:02d}"
    )


def decode(text: str) -> datetime:
    """Parse ``DD Mon YY HH:MM ±ZZZZ`` into an aware datetime.

    Raises:
        TimestampParseError: If *text* does not match the layout or names
            an impossible date.
    """
    match = _PATTERN.fullmatch(text)
    if match is None:
        msg = f"cannot parse {text!r} as {LAYOUT!r}"
        raise TimestampParseError(msg)

    month_name = match["month"]
    if month_name not in MONTHS:
        msg = f"cannot parse {text!r}: unknown month {month_name!r}"
        raise TimestampParseError(msg)

    yy = int(match["year"])
    year = 1900 + yy if yy >= _YEAR_PIVOT else 2000 + yy
    zone_minutes = int(match["zm"])
    if zone_minutes >= 60:
        msg = f"cannot parse {text!r}: zone minutes out of range"
        raise TimestampParseError(msg)

    try:
        return datetime(
            year,
            MONTHS.index(month_name) + 1,
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            tzinfo=_offset(match["sign"], int(match["zh"]), zone_minutes),
        )
    except ValueError as exc:
        msg = f"cannot parse {text!r}: {exc}"
        raise TimestampParseError(msg) from exc


def encode_json(value: datetime) -> str:
    """Encode *value* as a JSON string literal, quotes included."""
    return json.dumps(encode(value))


def decode_json(literal: str | bytes) -> datetime:
    """Decode a JSON string literal holding an encoded timestamp."""
    try:
        text = json.loads(literal)
    except ValueError as exc:
        msg = f"timestamp is not a JSON literal: {literal!r}"
        raise TimestampParseError(msg) from exc
    if not isinstance(text, str):
        msg = f"timestamp must be a JSON string, got {type(text).__name__}"
        raise TimestampParseError(msg)
    return decode(text)
