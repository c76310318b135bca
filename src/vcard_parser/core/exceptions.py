from __future__ import annotations

from typing import Any, Optional, Sequence


class VCardError(Exception):
    """Base exception for vcard_parser failures."""


class VCardSyntaxError(VCardError, ValueError):
    """Raised when a logical line cannot be lexed into key/attributes/value."""


class DateTimeParseError(VCardError, ValueError):
    """Raised when a date, time or UTC offset is outside the supported grammar."""


class UnsupportedCalendarError(VCardError):
    """Raised for CALSCALE values other than gregorian."""


class UnknownPropertyError(VCardError, KeyError):
    """Raised when a record key is not one of the permitted property keys."""


class ValidationError(VCardError):
    """Raised when validation fails and the caller asked for an exception."""

    def __init__(self, issues: Sequence[Any]):
        self.issues = list(issues)
        summary = ", ".join(f"{i.locator}:{i.kind}" for i in self.issues)
        super().__init__(f"Invalid vCard ({summary})")


class MergeConflictError(VCardError):
    """Raised when two records with different explicit UIDs are merged."""

    def __init__(self, left_uid: Optional[str], right_uid: Optional[str]):
        self.left_uid = left_uid
        self.right_uid = right_uid
        super().__init__(
            f"Won't merge vCards without matching UIDs: {left_uid!r} != {right_uid!r}"
        )
