"""
The VCard record.

A VCard is a mapping from the closed set of property keys
(vcard_parser.properties.ALL_KEYS) to values. Multivalued keys hold lists.

Records are mutated through two operations:

    set_attribute(key, value)  overwrite
    add_attribute(key, value)  append for multivalued keys, overwrite otherwise

Both set ``changed`` so callers can tell whether anything was updated.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, Dict, Iterator, List, Mapping, Optional

from vcard_parser.core.exceptions import UnknownPropertyError
from vcard_parser.exporter.jcard import to_jcard, to_json
from vcard_parser.properties import PROPERTIES_BY_KEY, is_multivalued

from .merge import merge_cards
from .validation import ValidationIssue, ValidationResult, validate_card


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (str, list, tuple)) and not value)


class VCard(MutableMapping):
    """
    A contact record.

    Attributes
    ----------
    facts:
        The stored properties, keyed by record key ("fn", "tel", ...).

    changed:
        True once any property has been set (including pre-population).

    errors:
        Issues found by the most recent validate() call.
    """

    def __init__(self, attributes: Optional[Mapping[str, Any]] = None):
        self.facts: Dict[str, Any] = {}
        self.changed = False
        self.errors: List[ValidationIssue] = []
        if attributes:
            for key, value in attributes.items():
                self.set_attribute(key, value)

    # ------------------------------------------------------------------
    # MutableMapping interface delegates to facts
    # ------------------------------------------------------------------
    def __getitem__(self, key: str) -> Any:
        return self.facts[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.set_attribute(key, value)

    def __delitem__(self, key: str) -> None:
        del self.facts[key]
        self.changed = True

    def __iter__(self) -> Iterator[str]:
        return iter(self.facts)

    def __len__(self) -> int:
        return len(self.facts)

    def __repr__(self) -> str:
        return f"<VCard fn={self.facts.get('fn')!r} keys={sorted(self.facts)}>"

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    @staticmethod
    def _check_key(key: str) -> None:
        if key not in PROPERTIES_BY_KEY:
            raise UnknownPropertyError(key)

    def set_attribute(self, key: str, value: Any) -> None:
        """Set `key` to `value`, replacing any current value."""
        self._check_key(key)
        self.facts[key] = value
        self.changed = True

    def add_attribute(self, key: str, value: Any) -> None:
        """
        Set `key` to `value`, or append when the key is multivalued.

        Empty values (None, "", empty sequences) are ignored.
        """
        self._check_key(key)
        if _is_empty(value):
            return

        if not is_multivalued(key):
            self.set_attribute(key, value)
            return

        current = self.facts.get(key)
        if current is None:
            self.set_attribute(key, [value])
        elif isinstance(current, list):
            current.append(value)
            self.changed = True
        else:
            self.set_attribute(key, [current, value])

    # ------------------------------------------------------------------
    # Validation / merge / export
    # ------------------------------------------------------------------
    def validate(self) -> ValidationResult:
        """
        Check validity, generating UID and REV when missing.

        It is recommended to call this even on imported cards, as some
        producers don't generate UIDs.
        """
        return validate_card(self)

    def merge(self, other: "VCard") -> "VCard":
        """Return a new VCard combining this card and `other`."""
        return merge_cards(self, other)

    def to_jcard(self) -> Dict[str, Any]:
        return to_jcard(self)

    def to_json(self, indent: int | None = None) -> str:
        return to_json(self, indent=indent)
