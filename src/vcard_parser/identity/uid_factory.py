# src/vcard_parser/identity/uid_factory.py
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Optional

from vcard_parser.config import get_config


REV_FORMAT = "%Y%m%dT%H%M%SZ"


# -----------------------------
# UID (RFC 6350, 6.7.6)
# -----------------------------

def generate_uid(namespace: Optional[str] = None) -> str:
    """
    Random UID in the uuid: URN namespace, as suggested by RFC 6350:

        'uuid:0f5bd5b6-0c1c-4a2e-9d0b-3c0e3f1c9a54'

    The namespace prefix defaults to ``parser.uid_namespace`` from config.
    """
    if namespace is None:
        namespace = get_config().uid_namespace
    return f"{namespace}{uuid.uuid4()}"


# -----------------------------
# REV (RFC 6350, 6.7.4)
# -----------------------------

def generate_rev(now: Optional[datetime] = None) -> str:
    """
    Revision timestamp in compact ISO 8601 basic format (no separators):

        '20121105T173000Z'
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime(REV_FORMAT)


__all__ = [
    "REV_FORMAT",
    "generate_uid",
    "generate_rev",
]
