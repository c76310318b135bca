"""
vcard_parser: vCard 4.0 (RFC 6350) parsing, validation and merging, with
limited support for legacy vCard 2.1 quoted-printable values.

    from vcard_parser import parse_cards

    cards = parse_cards("BEGIN:VCARD\\nFN:John Doe\\nEND:VCARD")
    cards[0]["fn"]  # 'John Doe'
"""

from vcard_parser.core.exceptions import MergeConflictError, ValidationError, VCardError
from vcard_parser.entities import VCard, ValidationIssue, ValidationResult, merge_cards, validate_card
from vcard_parser.exporter import to_jcard, to_json
from vcard_parser.parser_core import VCardParser, parse, parse_cards

__version__ = "0.3.0"

__all__ = [
    "MergeConflictError",
    "ValidationError",
    "VCardError",
    "VCard",
    "ValidationIssue",
    "ValidationResult",
    "merge_cards",
    "validate_card",
    "to_jcard",
    "to_json",
    "VCardParser",
    "parse",
    "parse_cards",
]
