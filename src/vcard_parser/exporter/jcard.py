"""
jcard.py
jCard-shaped JSON export for VCard records.

This exporter:
- Copies only the permitted property keys (vcard_parser.properties.ALL_KEYS)
- Converts value dataclasses to dictionaries using dashed jCard field names
- Renders dates/times as ISO 8601 extended strings and offsets as +HH:MM
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from datetime import datetime, timedelta
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List

from vcard_parser.logging import get_logger
from vcard_parser.properties import ALL_KEYS
from vcard_parser.values.types import DateAndOrTime, Organization, format_utc_offset

log = get_logger(__name__)

# Python field name -> jCard member name
FIELD_NAMES: Dict[str, str] = {
    "family": "family-name",
    "given": "given-name",
    "additional": "additional-name",
    "honorific_prefix": "honorific-prefix",
    "honorific_suffix": "honorific-suffix",
    "utc_offset": "utc-offset",
}

# Organization uses its own prefix for name/unit.
ORG_FIELD_NAMES: Dict[str, str] = {
    "name": "organization-name",
    "unit": "organization-unit",
}


def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert stored values into JSON-compatible structures.

    Rules:
    - Enums → their value (checked before primitives: Sex is a str enum)
    - Primitives pass through
    - DateAndOrTime → ISO 8601 string, datetime → isoformat()
    - timedelta → '+HH:MM'
    - dataclasses → dict (None / empty members dropped)
    - dict → dict, list / tuple / set → list (recursively)
    """
    if isinstance(obj, Enum):
        return obj.value

    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if isinstance(obj, DateAndOrTime):
        return obj.isoformat()

    if isinstance(obj, datetime):
        return obj.isoformat()

    if isinstance(obj, timedelta):
        return format_utc_offset(obj)

    if is_dataclass(obj):
        names = ORG_FIELD_NAMES if isinstance(obj, Organization) else FIELD_NAMES
        out: Dict[str, Any] = {}
        for f in fields(obj):
            value = getattr(obj, f.name)
            if value is None or value == ():
                continue
            out[names.get(f.name, f.name)] = _to_json_compatible(value)
        return out

    if isinstance(obj, dict):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [_to_json_compatible(v) for v in obj]

    # Last resort
    return str(obj)


def to_jcard(card: Any) -> Dict[str, Any]:
    """
    Copy every permitted, non-empty property of `card` into a plain dict,
    in property-table order.
    """
    jcard: Dict[str, Any] = {}
    for key in ALL_KEYS:
        value = card.get(key)
        if value:
            jcard[key] = _to_json_compatible(value)
    return jcard


def to_json(card: Any, indent: int | None = None) -> str:
    return json.dumps(to_jcard(card), indent=indent, ensure_ascii=False)


def cards_to_json(cards: Iterable[Any], indent: int | None = 2) -> str:
    payload: List[Dict[str, Any]] = [to_jcard(c) for c in cards]
    if indent is None:
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def export_cards_json(cards: Iterable[Any], output_path: str | Path, indent: int | None = 2) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    cards = list(cards)
    log.info("Exporting %d jCard(s) to: %s", len(cards), output_path)

    json_str = cards_to_json(cards, indent=indent)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)

    size_bytes = output_path.stat().st_size
    log.info("JSON export complete. size=%d bytes", size_bytes)
