"""
Merging of two VCard records (RFC 6350, section 7).

merge_cards(left, right) builds a new record:
    - both UIDs present and different -> MergeConflictError (7.1.1)
    - equal on both sides             -> one copy
    - different on both sides         -> left value(s) first, then right
                                         (multivalued: right entries already
                                         present on the left are not repeated)
    - present on one side only        -> copied unchanged

Inputs are never mutated; values are deep-copied. The result is not
validated.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, List

from vcard_parser.core.exceptions import MergeConflictError
from vcard_parser.logging import get_logger
from vcard_parser.properties import is_multivalued

log = get_logger(__name__)


def _as_list(value: Any) -> List[Any]:
    return list(value) if isinstance(value, list) else [value]


def _combine(key: str, left: Any, right: Any) -> Any:
    if not is_multivalued(key):
        return [deepcopy(left), deepcopy(right)]

    # Multivalued: keep left's entries, then right's entries not already there.
    combined = deepcopy(_as_list(left))
    for item in _as_list(right):
        if item not in combined:
            combined.append(deepcopy(item))
    return combined


def merge_cards(left, right):
    """
    Merge two records into a new one of the same class as `left`.

    Raises:
        MergeConflictError: both records carry a UID and they differ.
    """
    left_uid, right_uid = left.get("uid"), right.get("uid")
    if left_uid is not None and right_uid is not None and left_uid != right_uid:
        raise MergeConflictError(left_uid, right_uid)

    # TODO: PID matching for multivalued properties (RFC 6350, 7.3.1).
    result = type(left)()

    keys = list(left.keys()) + [k for k in right.keys() if k not in left]
    for key in keys:
        if key in left and key in right:
            a, b = left[key], right[key]
            merged = deepcopy(a) if a == b else _combine(key, a, b)
        elif key in left:
            merged = deepcopy(left[key])
        else:
            merged = deepcopy(right[key])
        result.set_attribute(key, merged)

    log.debug("Merged %d properties (uid=%r)", len(keys), left_uid or right_uid)
    return result
