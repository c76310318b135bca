"""
Property table for vCard 4.0 (RFC 6350, section 6).

Every supported property name maps to a PropertySpec that fixes:
    - the record key it is stored under (jCard style, lower case)
    - the ValueKind deciding which interpreter parses it
    - its cardinality (scalar or multivalued)

The tables are built once at import time and exposed read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional, Tuple


class ValueKind(Enum):
    SIMPLE = "simple"
    CSV = "csv"
    DATE_AND_OR_TIME = "date-and-or-time"
    NAME = "name"
    GENDER = "gender"
    ORG = "org"
    COMPOUND = "compound"
    TIMEZONE = "timezone"


@dataclass(frozen=True)
class PropertySpec:
    """
    Attributes:
        name: vCard property name as it appears on the wire ("TEL").
        key: Record key ("tel").
        kind: Value interpreter class.
        multivalued: True if the record stores a list for this key.
        default_type: TYPE used when a compound value carries none.
        with_type: False for compounds that never carry a TYPE (IMPP).
    """
    name: str
    key: str
    kind: ValueKind
    multivalued: bool = False
    default_type: Optional[str] = None
    with_type: bool = True


_SPECS: Tuple[PropertySpec, ...] = (
    PropertySpec("VERSION", "version", ValueKind.SIMPLE),
    PropertySpec("FN", "fn", ValueKind.SIMPLE),                     # 6.2.1
    PropertySpec("N", "n", ValueKind.NAME),                         # 6.2.2
    PropertySpec("NICKNAME", "nickname", ValueKind.CSV),            # 6.2.3
    PropertySpec("PHOTO", "photo", ValueKind.SIMPLE),               # 6.2.4
    PropertySpec("BDAY", "bday", ValueKind.DATE_AND_OR_TIME),       # 6.2.5
    PropertySpec("ANNIVERSARY", "anniversary", ValueKind.DATE_AND_OR_TIME),  # 6.2.6
    PropertySpec("GENDER", "gender", ValueKind.GENDER),             # 6.2.7
    PropertySpec("ADR", "adr", ValueKind.COMPOUND, multivalued=True),  # 6.3.1
    PropertySpec("TEL", "tel", ValueKind.COMPOUND, multivalued=True, default_type="voice"),  # 6.4.1
    PropertySpec("EMAIL", "email", ValueKind.COMPOUND, multivalued=True),  # 6.4.2
    PropertySpec("IMPP", "impp", ValueKind.COMPOUND, multivalued=True, with_type=False),  # 6.4.3
    PropertySpec("LANG", "lang", ValueKind.COMPOUND, multivalued=True),  # 6.4.4
    PropertySpec("TZ", "tz", ValueKind.TIMEZONE),                   # 6.5.1
    PropertySpec("GEO", "geo", ValueKind.SIMPLE, multivalued=True),  # 6.5.2
    PropertySpec("TITLE", "title", ValueKind.SIMPLE, multivalued=True),  # 6.6.1
    PropertySpec("ROLE", "role", ValueKind.SIMPLE, multivalued=True),  # 6.6.2
    PropertySpec("LOGO", "logo", ValueKind.SIMPLE, multivalued=True),  # 6.6.3
    PropertySpec("ORG", "org", ValueKind.ORG, multivalued=True),    # 6.6.4
    PropertySpec("MEMBER", "member", ValueKind.SIMPLE, multivalued=True),  # 6.6.5
    PropertySpec("RELATED", "related", ValueKind.COMPOUND, multivalued=True),  # 6.6.6
    PropertySpec("CATEGORIES", "categories", ValueKind.CSV, multivalued=True),  # 6.7.1
    PropertySpec("NOTE", "note", ValueKind.SIMPLE, multivalued=True),  # 6.7.2
    PropertySpec("PRODID", "prodid", ValueKind.SIMPLE),             # 6.7.3
    PropertySpec("REV", "rev", ValueKind.DATE_AND_OR_TIME),         # 6.7.4
    PropertySpec("SOUND", "sound", ValueKind.SIMPLE),               # 6.7.5
    PropertySpec("UID", "uid", ValueKind.SIMPLE),                   # 6.7.6
)

PROPERTIES: Mapping[str, PropertySpec] = MappingProxyType({s.name: s for s in _SPECS})
PROPERTIES_BY_KEY: Mapping[str, PropertySpec] = MappingProxyType({s.key: s for s in _SPECS})

ALL_KEYS: Tuple[str, ...] = tuple(s.key for s in _SPECS)
MULTIVALUED_KEYS: FrozenSet[str] = frozenset(s.key for s in _SPECS if s.multivalued)

# Compound keys whose entries must carry both a type and a value.
TYPED_KEYS: Tuple[str, ...] = ("tel", "email")

# Record boundaries, handled by the dispatcher rather than an interpreter.
BEGIN = "BEGIN"
END = "END"


# -----------------------------
# Enumerations
# -----------------------------

TEL_TYPES: Tuple[str, ...] = ("text", "voice", "fax", "cell", "video", "pager", "textphone")

RELATED_TYPES: Tuple[str, ...] = (
    "contact", "acquaintance", "friend", "met", "co-worker", "colleague",
    "co-resident", "neighbor", "child", "parent", "sibling", "spouse", "kin",
    "muse", "crush", "date", "sweetheart", "me", "agent", "emergency",
)

# Not defined by RFC 6350, just very common.
EMAIL_TYPES: Tuple[str, ...] = ("work", "home", "internet")

LANG_TYPES: Tuple[str, ...] = ("work", "home")


def lookup(name: str) -> Optional[PropertySpec]:
    """Return the PropertySpec for a vCard property name, or None if unsupported."""
    return PROPERTIES.get((name or "").upper())


def is_multivalued(key: str) -> bool:
    return key in MULTIVALUED_KEYS


__all__ = [
    "ValueKind",
    "PropertySpec",
    "PROPERTIES",
    "PROPERTIES_BY_KEY",
    "ALL_KEYS",
    "MULTIVALUED_KEYS",
    "TYPED_KEYS",
    "BEGIN",
    "END",
    "TEL_TYPES",
    "RELATED_TYPES",
    "EMAIL_TYPES",
    "LANG_TYPES",
    "lookup",
    "is_multivalued",
]
