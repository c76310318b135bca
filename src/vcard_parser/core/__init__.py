from .context import Diagnostic, ParseContext
from .exceptions import (
    DateTimeParseError,
    MergeConflictError,
    UnknownPropertyError,
    UnsupportedCalendarError,
    ValidationError,
    VCardError,
    VCardSyntaxError,
)

__all__ = [
    "Diagnostic",
    "ParseContext",
    "DateTimeParseError",
    "MergeConflictError",
    "UnknownPropertyError",
    "UnsupportedCalendarError",
    "ValidationError",
    "VCardError",
    "VCardSyntaxError",
]
