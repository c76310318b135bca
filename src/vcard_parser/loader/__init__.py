# src/vcard_parser/loader/__init__.py

"""
Public interface for the vCard loader stack.

Intended usage from other parts of the project and tests:

    from vcard_parser.loader import (
        LogicalLine,
        Statement,
        LexState,
        unfold_lines,
        lex_line,
        lex,
        decode_quoted_printable,
    )
"""

from __future__ import annotations

from .lexer import LexState, Statement, lex, lex_line
from .quoted_printable import decode_quoted_printable
from .unfolder import LogicalLine, unfold_lines


__all__ = [
    "LogicalLine",
    "Statement",
    "LexState",
    "unfold_lines",
    "lex_line",
    "lex",
    "decode_quoted_printable",
]
