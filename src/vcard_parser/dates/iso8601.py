# src/vcard_parser/dates/iso8601.py

from __future__ import annotations

import calendar
import re
from dataclasses import replace
from datetime import timedelta
from typing import Optional, Pattern, Tuple

from vcard_parser.core.exceptions import DateTimeParseError
from vcard_parser.values.types import DateAndOrTime


# ---------------------------------------------------------------------------
# Grammar (RFC 6350, 4.3): ISO 8601 basic format, reduced and truncated forms.
# Parenthesised examples all describe 31 January 1970, 23:59:30.
# ---------------------------------------------------------------------------

DATE_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"^(?P<year>\d{4})(?P<month>\d{2})(?P<day>\d{2})$"),  # (19700131)
    re.compile(r"^(?P<year>\d{4})-(?P<month>\d{2})$"),              # (1970-01)
    re.compile(r"^(?P<year>\d{4})$"),                                # (1970)
    re.compile(r"^--(?P<month>\d{2})(?P<day>\d{2})$"),              # (--0131)
    re.compile(r"^---(?P<day>\d{2})$"),                              # (---31)
)

_ZONE = r"(?P<zone>Z|[+-]\d{2}(?:\d{2})?)?"

TIME_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"^(?P<hour>\d{2})(?P<minute>\d{2})(?P<second>\d{2})" + _ZONE + "$"),  # (235930)
    re.compile(r"^(?P<hour>\d{2})(?P<minute>\d{2})" + _ZONE + "$"),                   # (2359)
    re.compile(r"^(?P<hour>\d{2})" + _ZONE + "$"),                                    # (23)
    re.compile(r"^--(?P<minute>\d{2})(?P<second>\d{2})" + _ZONE + "$"),              # (--5930)
    re.compile(r"^---(?P<second>\d{2})" + _ZONE + "$"),                               # (---30)
)

UTC_OFFSET_RE = re.compile(r"^(?P<sign>[+-])(?P<hours>\d{2}):?(?P<minutes>\d{2})?$")


def _match(patterns: Tuple[Pattern[str], ...], text: str):
    for pattern in patterns:
        md = pattern.match(text)
        if md:
            return md
    return None


def _int(md, name: str) -> Optional[int]:
    raw = md.groupdict().get(name)
    return int(raw) if raw is not None else None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_utc_offset(text: str) -> timedelta:
    """
    Parse a signed UTC offset: "+0200", "-05", "-05:30".

    Raises:
        DateTimeParseError: for anything else.
    """
    md = UTC_OFFSET_RE.match((text or "").strip())
    if not md:
        raise DateTimeParseError(f"failed to parse UTC offset: {text!r}")

    hours = int(md.group("hours"))
    minutes = int(md.group("minutes") or 0)
    if minutes > 59:
        raise DateTimeParseError(f"UTC offset minutes out of range: {text!r}")

    offset = timedelta(hours=hours, minutes=minutes)
    return offset if md.group("sign") == "+" else -offset


def parse_date(text: str) -> DateAndOrTime:
    """
    Parse a date in one of the supported forms.

        '19961022' -> year=1996, month=10, day=22
        '1996-10'  -> year=1996, month=10
        '1996'     -> year=1996
        '--1022'   -> month=10, day=22
        '---22'    -> day=22

    Raises:
        DateTimeParseError: when no form matches or a component is out of range.
    """
    md = _match(DATE_PATTERNS, text)
    if md is None:
        raise DateTimeParseError(f"failed to parse date: {text!r}")

    year, month, day = _int(md, "year"), _int(md, "month"), _int(md, "day")

    if year == 0:
        raise DateTimeParseError(f"year out of range in {text!r}")
    if month is not None and not 1 <= month <= 12:
        raise DateTimeParseError(f"month out of range in {text!r}")
    if day is not None:
        # Without a year, allow Feb 29 (a birthday may fall on a leap day).
        last_day = calendar.monthrange(year or 2000, month or 1)[1] if month else 31
        if not 1 <= day <= last_day:
            raise DateTimeParseError(f"day out of range in {text!r}")

    return DateAndOrTime(year=year, month=month, day=day)


def parse_time(text: str) -> DateAndOrTime:
    """
    Parse a time in one of the supported forms, with an optional zone.

        '140000'      -> hour=14, minute=0, second=0
        '1400'        -> hour=14, minute=0
        '14'          -> hour=14
        '--0000'      -> minute=0, second=0
        '---00'       -> second=0
        '140000Z'     -> ..., utc_offset=0
        '140000-0500' -> ..., utc_offset=-5h

    Raises:
        DateTimeParseError: when no form matches or a component is out of range.
    """
    md = _match(TIME_PATTERNS, text)
    if md is None:
        raise DateTimeParseError(f"failed to parse time: {text!r}")

    hour, minute, second = _int(md, "hour"), _int(md, "minute"), _int(md, "second")

    if hour is not None and hour > 24:
        raise DateTimeParseError(f"hour out of range in {text!r}")
    if minute is not None and minute > 59:
        raise DateTimeParseError(f"minute out of range in {text!r}")
    if second is not None and second > 60:
        raise DateTimeParseError(f"second out of range in {text!r}")

    zone = md.group("zone")
    if zone is None:
        offset = None
    elif zone == "Z":
        offset = timedelta(0)
    else:
        offset = parse_utc_offset(zone)

    return DateAndOrTime(hour=hour, minute=minute, second=second, utc_offset=offset)


def parse_date_and_or_time(text: str) -> DateAndOrTime:
    """
    Parse a DATE-AND-OR-TIME value, splitting on the first 'T'.

        'T102200'          -> time only
        '19961022'         -> date only
        '19961022T140000'  -> date at midnight plus the time of day

    A failure of either half fails the whole value.

    Raises:
        DateTimeParseError
    """
    s = (text or "").strip()
    idx = s.find("T")

    if idx == 0:
        return parse_time(s[1:])
    if idx == -1:
        return parse_date(s)

    date_part = parse_date(s[:idx])
    time_part = parse_time(s[idx + 1:])
    return replace(
        date_part,
        hour=time_part.hour,
        minute=time_part.minute,
        second=time_part.second,
        utc_offset=time_part.utc_offset,
    )
