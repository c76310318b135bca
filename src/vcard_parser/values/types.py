from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional, Tuple


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


# -----------------------------
# Compound values
# -----------------------------

@dataclass(frozen=True)
class TypedValue:
    """
    Compound-with-type value used by TEL, EMAIL, IMPP, LANG, RELATED and ADR.

    type holds the TYPE attribute tokens (lower-cased), pref the PREF rank.
    """
    value: str
    type: Tuple[str, ...] = ()
    pref: Optional[int] = None


@dataclass(frozen=True)
class StructuredName:
    """N property: five ordered slots, each an ordered sequence of text."""
    family: Tuple[str, ...] = ()
    given: Tuple[str, ...] = ()
    additional: Tuple[str, ...] = ()
    honorific_prefix: Tuple[str, ...] = ()
    honorific_suffix: Tuple[str, ...] = ()


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


@dataclass(frozen=True)
class Gender:
    """GENDER property. sex is None when no sex was recorded (N, U, ...)."""
    sex: Optional[Sex] = None
    identity: Optional[str] = None


@dataclass(frozen=True)
class Organization:
    name: str
    unit: Optional[str] = None


@dataclass(frozen=True)
class TimeZone:
    """TZ property: either a free-text name or a UTC offset."""
    name: Optional[str] = None
    utc_offset: Optional[timedelta] = None


# -----------------------------
# Date and/or time
# -----------------------------

@dataclass(frozen=True)
class DateAndOrTime:
    """
    A date-and-or-time value with possibly-missing components.

    Components hold only what the source text carried; everything else is
    None. utc_offset is the timezone designator of the time part (``Z`` is
    a zero offset), or None when no designator was given.
    """
    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    hour: Optional[int] = None
    minute: Optional[int] = None
    second: Optional[int] = None
    utc_offset: Optional[timedelta] = None

    @property
    def has_date(self) -> bool:
        return any(v is not None for v in (self.year, self.month, self.day))

    @property
    def has_time(self) -> bool:
        return any(v is not None for v in (self.hour, self.minute, self.second))

    @property
    def instant(self) -> datetime:
        """
        Resolve to an aware UTC datetime.

        Missing components default to 1970-01-01T00:00:00. Day and time
        components are added as offsets, so "--0229" rolls over to
        1970-03-01 instead of failing. A timezone designator shifts the
        instant by its signed offset (14:00+0200 -> 16:00Z).
        """
        dt = EPOCH.replace(year=self.year or 1970, month=self.month or 1)
        dt += timedelta(
            days=(self.day or 1) - 1,
            hours=self.hour or 0,
            minutes=self.minute or 0,
            seconds=self.second or 0,
        )
        if self.utc_offset:
            dt += self.utc_offset
        return dt

    def isoformat(self) -> str:
        """
        ISO 8601 extended form keeping only the components present
        (jCard, RFC 7095 3.3.2):

            '1996-10-22T14:00:00Z', '--10-22', '---22', 'T10:22', 'T-22:00'
        """
        y, mo, d = self.year, self.month, self.day
        if y is not None and mo is not None and d is not None:
            date = f"{y:04d}-{mo:02d}-{d:02d}"
        elif y is not None and mo is not None:
            date = f"{y:04d}-{mo:02d}"
        elif y is not None:
            date = f"{y:04d}"
        elif mo is not None and d is not None:
            date = f"--{mo:02d}-{d:02d}"
        elif d is not None:
            date = f"---{d:02d}"
        else:
            date = ""

        h, mi, s = self.hour, self.minute, self.second
        if h is not None and mi is not None and s is not None:
            time = f"{h:02d}:{mi:02d}:{s:02d}"
        elif h is not None and mi is not None:
            time = f"{h:02d}:{mi:02d}"
        elif h is not None:
            time = f"{h:02d}"
        elif mi is not None and s is not None:
            time = f"-{mi:02d}:{s:02d}"
        elif s is not None:
            time = f"--{s:02d}"
        else:
            return date

        if self.utc_offset is not None:
            time += format_utc_offset(self.utc_offset, zulu=True)
        return f"{date}T{time}"


def format_utc_offset(offset: timedelta, zulu: bool = False) -> str:
    """timedelta(hours=-5) -> '-05:00'; a zero offset is 'Z' when zulu is set."""
    total = int(offset.total_seconds())
    if total == 0 and zulu:
        return "Z"
    sign = "-" if total < 0 else "+"
    minutes = abs(total) // 60
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"
