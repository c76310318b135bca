"""
Quoted-printable decoding for legacy vCard 2.1 values.

The value is turned back into bytes with its CHARSET, run through
``quopri`` (``=XX`` escapes and soft line breaks), and decoded with the same
charset. A CHARSET that is unknown, or that names a non-text codec such as
``base64``, falls back to the configured default.
"""

from __future__ import annotations

import codecs
import quopri

from vcard_parser.logging import get_logger

log = get_logger(__name__)


def _resolve_charset(charset: str | None, fallback: str) -> str:
    for candidate in (charset, fallback):
        if not candidate:
            continue
        try:
            info = codecs.lookup(candidate)
        except LookupError:
            log.debug("Unknown charset %r, trying fallback", candidate)
            continue
        if not getattr(info, "_is_text_encoding", True):
            log.debug("Charset %r is not a text encoding, trying fallback", candidate)
            continue
        return info.name
    return "utf-8"


def decode_quoted_printable(text: str, charset: str | None = None, fallback: str = "utf-8") -> str:
    """
    Decode a quoted-printable string.

        decode_quoted_printable("=4A=C3=B6rg")  -> "Jörg"
        decode_quoted_printable("abc=")         -> "abc"

    Undecodable bytes are replaced rather than raising.
    """
    codec = _resolve_charset(charset, fallback)
    raw = quopri.decodestring((text or "").encode(codec, errors="replace"))
    return raw.decode(codec, errors="replace")
