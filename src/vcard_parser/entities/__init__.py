from .merge import merge_cards
from .validation import ValidationIssue, ValidationResult, validate_card
from .vcard import VCard

__all__ = [
    "VCard",
    "ValidationIssue",
    "ValidationResult",
    "merge_cards",
    "validate_card",
]
