# src/vcard_parser/values/interpreters.py

"""
Value interpreters: one pure function per property class.

Dispatch is purely a function of the property's ValueKind (see
vcard_parser.properties). Interpreters never touch the record; they
return the value to store, or raise:

    DateTimeParseError        unparseable date/time or UTC offset
    UnsupportedCalendarError  CALSCALE other than gregorian

Structural separators escaped with a backslash (``\\,`` and ``\\;``)
do not split; the text itself is returned unmodified.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from vcard_parser.core.exceptions import UnsupportedCalendarError
from vcard_parser.dates.iso8601 import parse_date_and_or_time, parse_utc_offset
from vcard_parser.properties import PropertySpec, ValueKind
from vcard_parser.values.types import (
    Gender,
    Organization,
    Sex,
    StructuredName,
    TimeZone,
    TypedValue,
)

Attributes = Mapping[str, Tuple[str, ...]]

_COMMA = re.compile(r"(?<!\\),")
_SEMICOLON = re.compile(r"(?<!\\);")

SEX_CODES: Dict[str, Sex] = {
    "M": Sex.MALE,
    "F": Sex.FEMALE,
    "O": Sex.OTHER,
}

NAME_SLOTS: Tuple[str, ...] = (
    "family",
    "given",
    "additional",
    "honorific_prefix",
    "honorific_suffix",
)

# RFC 6350 value-type tokens that may appear as VALUE=...
VALUE_TYPE_TOKENS = frozenset({"uri", "text"})


def _first(attributes: Attributes, name: str) -> Optional[str]:
    values = attributes.get(name)
    return values[0] if values else None


def _split(pattern: re.Pattern, value: str) -> List[str]:
    return pattern.split(value)


# ---------------------------------------------------------------------------
# simple / csv
# ---------------------------------------------------------------------------

def parse_simple(value: str) -> str:
    return value


def parse_csv(value: str) -> Tuple[str, ...]:
    """'a,b,c' -> ('a', 'b', 'c')"""
    return tuple(_split(_COMMA, value))


# ---------------------------------------------------------------------------
# structured values
# ---------------------------------------------------------------------------

def parse_name(value: str) -> StructuredName:
    """
    N (6.2.2): split on ';' into the five slots, each slot on ','.

        'Public;John;Quinlan,Q.;Mr.;Esq.'
            -> family=('Public',), given=('John',),
               additional=('Quinlan', 'Q.'), honorific_prefix=('Mr.',),
               honorific_suffix=('Esq.',)

    Empty or missing slots stay empty; segments past the fifth are ignored.
    """
    slots: Dict[str, Tuple[str, ...]] = {}
    for slot, part in zip(NAME_SLOTS, _split(_SEMICOLON, value)):
        if part:
            slots[slot] = tuple(_split(_COMMA, part))
    return StructuredName(**slots)


def parse_gender(value: str) -> Gender:
    """
    GENDER (6.2.7), compound representation.

        'M'              -> sex=male
        'M;man'          -> sex=male, identity='man'
        'N;woman'        -> identity='woman'
        'O;potted plant' -> sex=other, identity='potted plant'
    """
    parts = _split(_SEMICOLON, value)
    sex = SEX_CODES.get(parts[0].strip().upper())
    identity = parts[1] if len(parts) > 1 and parts[1] else None
    return Gender(sex=sex, identity=identity)


def parse_org(value: str) -> Organization:
    """ORG (6.6.4): 'ABC, Inc.;North American Division' -> name + unit."""
    parts = _split(_SEMICOLON, value)
    unit = parts[1] if len(parts) > 1 and parts[1] else None
    return Organization(name=parts[0], unit=unit)


def _pref(attributes: Attributes) -> Optional[int]:
    raw = _first(attributes, "PREF")
    if raw is None:
        return None
    raw = raw.strip()
    return int(raw) if raw.isdecimal() else None


def _types(attributes: Attributes) -> Tuple[str, ...]:
    # TYPE="work,voice" arrives as one quoted token; it is still a list.
    tokens = (
        t.strip().lower()
        for raw in attributes.get("TYPE", ())
        for t in raw.split(",")
    )
    return tuple(t for t in tokens if t)


def parse_typed(
    value: str,
    attributes: Attributes,
    default_type: Optional[str] = None,
    with_type: bool = True,
) -> TypedValue:
    """
    Compound-with-type value (TEL, EMAIL, LANG, ADR; IMPP without type).

        TEL;TYPE=cell;PREF=1:+1-555-0100
            -> TypedValue(value='+1-555-0100', type=('cell',), pref=1)
        TEL:+1-555-0100
            -> TypedValue(value='+1-555-0100', type=('voice',))
    """
    if not with_type:
        return TypedValue(value=value, pref=_pref(attributes))

    types = _types(attributes)
    if not types and default_type:
        types = (default_type,)
    return TypedValue(value=value, type=types, pref=_pref(attributes))


def parse_related(value: str, attributes: Attributes) -> TypedValue:
    """
    RELATED (6.6.6): the value comes from the VALUE attribute. When VALUE is
    absent or only names the value type (uri/text) the raw text is used.
    """
    related = _first(attributes, "VALUE")
    if not related or related.lower() in VALUE_TYPE_TOKENS:
        related = value
    return TypedValue(value=related, type=_types(attributes), pref=_pref(attributes))


def parse_timezone(value: str, attributes: Attributes) -> TimeZone:
    """TZ (6.5.1): VALUE=utc-offset -> utc_offset, otherwise a free-text name."""
    value_type = (_first(attributes, "VALUE") or "").lower()
    if value_type == "utc-offset":
        return TimeZone(utc_offset=parse_utc_offset(value))
    return TimeZone(name=value)


def parse_date_value(value: str, attributes: Attributes) -> Any:
    """
    BDAY / ANNIVERSARY / REV.

    VALUE=text keeps the raw text ("circa 1800"). A CALSCALE other than
    gregorian is unsupported.
    """
    if (_first(attributes, "VALUE") or "").lower() == "text":
        return value

    calscale = _first(attributes, "CALSCALE")
    if calscale and calscale.lower() != "gregorian":
        raise UnsupportedCalendarError(f"unsupported CALSCALE {calscale!r}")

    return parse_date_and_or_time(value)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

Interpreter = Callable[[PropertySpec, str, Attributes], Any]


def _compound(spec: PropertySpec, value: str, attributes: Attributes) -> TypedValue:
    if spec.key == "related":
        return parse_related(value, attributes)
    return parse_typed(value, attributes, default_type=spec.default_type, with_type=spec.with_type)


INTERPRETERS: Dict[ValueKind, Interpreter] = {
    ValueKind.SIMPLE: lambda spec, value, attrs: parse_simple(value),
    ValueKind.CSV: lambda spec, value, attrs: parse_csv(value),
    ValueKind.DATE_AND_OR_TIME: lambda spec, value, attrs: parse_date_value(value, attrs),
    ValueKind.NAME: lambda spec, value, attrs: parse_name(value),
    ValueKind.GENDER: lambda spec, value, attrs: parse_gender(value),
    ValueKind.ORG: lambda spec, value, attrs: parse_org(value),
    ValueKind.COMPOUND: _compound,
    ValueKind.TIMEZONE: lambda spec, value, attrs: parse_timezone(value, attrs),
}


def interpret(spec: PropertySpec, value: str, attributes: Optional[Attributes] = None) -> Any:
    """Parse `value` according to the property's kind."""
    return INTERPRETERS[spec.kind](spec, value, attributes or {})
