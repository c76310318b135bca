"""
Validation for VCard records.

Steps, in order:
    a) FN is required.
    b) Multivalued properties are coerced into list form.
    c) TEL / EMAIL entries must be objects carrying a type and a value.
    d) A missing UID is generated.
    e) A missing REV is generated.

Errors are collected as (locator, kind) pairs; for multivalued entries the
locator is the key plus the entry index ("email-0", "tel-7"). Generating
UID/REV never produces an error.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, List

from vcard_parser.core.exceptions import ValidationError
from vcard_parser.identity.uid_factory import generate_rev, generate_uid
from vcard_parser.logging import get_logger
from vcard_parser.properties import ALL_KEYS, MULTIVALUED_KEYS, TYPED_KEYS
from vcard_parser.values.types import TypedValue

log = get_logger(__name__)

REQUIRED = "required"
NOT_AN_OBJECT = "not-an-object"
MISSING_TYPE = "missing-type"
MISSING_VALUE = "missing-value"


@dataclass(frozen=True)
class ValidationIssue:
    locator: str
    kind: str


@dataclass
class ValidationResult:
    valid: bool
    errors: List[ValidationIssue] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.valid

    def raise_for_errors(self) -> None:
        if not self.valid:
            raise ValidationError(self.errors)


def _check_typed_entries(key: str, entries: List[Any], errors: List[ValidationIssue]) -> None:
    for index, entry in enumerate(entries):
        locator = f"{key}-{index}"

        if isinstance(entry, TypedValue):
            type_, value = entry.type, entry.value
        elif isinstance(entry, Mapping):
            type_, value = entry.get("type"), entry.get("value")
        else:
            errors.append(ValidationIssue(locator, NOT_AN_OBJECT))
            continue

        if not type_:
            errors.append(ValidationIssue(locator, MISSING_TYPE))
        elif not value:
            # empty values are not allowed.
            errors.append(ValidationIssue(locator, MISSING_VALUE))


def validate_card(card) -> ValidationResult:
    """
    Validate `card` in place and return the result.

    The error list is also stored on ``card.errors``.
    """
    errors: List[ValidationIssue] = []

    if not card.get("fn"):
        errors.append(ValidationIssue("fn", REQUIRED))

    for key in ALL_KEYS:
        if key not in MULTIVALUED_KEYS:
            continue
        value = card.get(key)
        if value is not None and not isinstance(value, list):
            card.set_attribute(key, [value])

    for key in TYPED_KEYS:
        entries = card.get(key)
        if entries:
            _check_typed_entries(key, entries, errors)

    if not card.get("uid"):
        card.set_attribute("uid", generate_uid())

    if not card.get("rev"):
        card.set_attribute("rev", generate_rev())

    card.errors = errors

    if errors:
        log.debug("Validation failed for %r: %s", card.get("fn"), errors)

    return ValidationResult(valid=not errors, errors=list(errors))
