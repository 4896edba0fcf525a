# -*- coding: utf-8 -*-
"""
IETF RFC3339 timestamp validation and parsing.

Example of a valid timestamp: `1985-04-12T23:20:50.52Z`.
"""

import re
from datetime import datetime, timedelta, timezone

from orion.core.errors import OrionError

_RFC3339_RE = re.compile(
    r"(?P<date>\d{4}-\d{2}-\d{2})[Tt]"
    r"(?P<time>\d{2}:\d{2}:\d{2})(?P<frac>\.\d+)?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})",
    re.ASCII,
)


class InvalidTimestampError(OrionError, ValueError):
    """Text is not a valid RFC3339 date-time."""

    def __init__(self, text):
        super().__init__(f"Invalid RFC3339 timestamp: {text!r}")
        self.text = text


def parse_rfc3339(text: str) -> datetime:
    """Parse an RFC3339 timestamp into an aware datetime in UTC.

    Fractional seconds beyond microseconds are truncated. A leap second
    (`:60`) is folded onto the last microsecond of the minute.

    Raises
    ------
    InvalidTimestampError
        If the text does not follow the RFC3339 grammar or names an
        impossible date or time, or one outside the datetime range in UTC.
    """
    match = _RFC3339_RE.fullmatch(text) if isinstance(text, str) else None
    if match is None:
        raise InvalidTimestampError(text)

    year, month, day = (int(x) for x in match["date"].split("-"))
    hour, minute, second = (int(x) for x in match["time"].split(":"))
    micro = int((match["frac"] or ".0")[1:7].ljust(6, "0"))

    leap = second == 60
    if leap:
        second, micro = 59, 999999

    offset = match["offset"]
    try:
        if offset in ("Z", "z"):
            tz = timezone.utc
        else:
            sign = -1 if offset[0] == "-" else 1
            off_h, off_m = int(offset[1:3]), int(offset[4:6])
            if off_h > 23 or off_m > 59:
                raise InvalidTimestampError(text)
            tz = timezone(sign * timedelta(hours=off_h, minutes=off_m))
        date = datetime(year, month, day, hour, minute, second, micro, tzinfo=tz)
        return date.astimezone(timezone.utc)
    except (ValueError, OverflowError) as err:
        raise InvalidTimestampError(text) from err


def is_rfc3339_timestamp(text: str) -> bool:
    try:
        parse_rfc3339(text)
    except InvalidTimestampError:
        return False
    return True


def is_rfc3339_utc_timestamp(text: str) -> bool:
    """True for valid timestamps written with a zero UTC offset."""
    if not is_rfc3339_timestamp(text):
        return False
    offset = _RFC3339_RE.fullmatch(text)["offset"]
    return offset in ("Z", "z", "+00:00", "-00:00")
