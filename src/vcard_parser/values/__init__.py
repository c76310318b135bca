"""
Value types stored on VCard records.

The interpreters that produce them live in ``vcard_parser.values.interpreters``.
"""

from .types import (
    DateAndOrTime,
    Gender,
    Organization,
    Sex,
    StructuredName,
    TimeZone,
    TypedValue,
)

__all__ = [
    "DateAndOrTime",
    "Gender",
    "Organization",
    "Sex",
    "StructuredName",
    "TimeZone",
    "TypedValue",
]
