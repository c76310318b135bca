# src/vcard_parser/loader/unfolder.py

"""
Line Reassembler: rebuilds logical vCard lines from physical lines.

Rules (RFC 6350, 3.2):
    - A physical line starting with a whitespace character (SPACE or TAB)
      continues the previous logical line. Exactly that one whitespace
      character is removed; the rest is appended verbatim ("unfolding").

Legacy vCard 2.1:
    - While the line in progress carries QUOTED-PRINTABLE and ends with '=',
      the '=' is a "soft" line break: it is removed and the next physical
      line is appended directly.

Examples:
    "NOTE:This is a long"
    " er note"
        → "NOTE:This is a longer note"

    "NOTE;ENCODING=QUOTED-PRINTABLE:first=0D=0A="
    "second"
        → "NOTE;ENCODING=QUOTED-PRINTABLE:first=0D=0Asecond"

CRLF and bare LF terminators are both accepted. Lines matching neither
the normal nor the folded grammar are reported and skipped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from vcard_parser.logging import get_logger

log = get_logger(__name__)

QP_MARKER = "QUOTED-PRINTABLE"

Reporter = Callable[[str, str, Optional[int]], object]


@dataclass(frozen=True)
class LogicalLine:
    """
    One unfolded statement line.

    Attributes:
        lineno: 1-based physical line number where the statement starts.
        text: The unfolded line without its terminator.
    """
    lineno: int
    text: str


def _log_report(kind: str, message: str, lineno: Optional[int] = None) -> None:
    log.warning("line %s: %s: %s", lineno, kind, message)


def _is_soft_break(line: str) -> bool:
    return line.endswith("=") and QP_MARKER in line.upper()


def unfold_lines(text: str, report: Optional[Reporter] = None) -> Iterator[LogicalLine]:
    """
    Yield LogicalLine objects for every statement in `text`.

    Physical lines are walked once, so cost is linear in the input size.

    Args:
        text: Raw vCard text (one or more cards).
        report: Optional diagnostic sink called as report(kind, message, lineno).
                Defaults to logging a warning.
    """
    report = report or _log_report

    current: Optional[str] = None
    start = 0

    physical = text.split("\n")
    if physical and physical[-1] == "":
        # Trailing terminator, not an empty line.
        physical.pop()

    for lineno, raw in enumerate(physical, start=1):
        line = raw[:-1] if raw.endswith("\r") else raw

        # Handle optional UTF-8 BOM on the very first line.
        if lineno == 1 and line.startswith("\ufeff"):
            line = line.lstrip("\ufeff")

        if line and not line[0].isspace():
            if current is not None and _is_soft_break(current):
                current = current[:-1] + line
                continue
            if current is not None:
                yield LogicalLine(lineno=start, text=current)
            current, start = line, lineno

        elif len(line) > 1:
            if current is None:
                report("orphan-continuation", f"folded line with nothing to continue: {line!r}", lineno)
                continue
            current += line[1:]

        else:
            report("malformed-line", f"unmatched line: {raw!r}", lineno)

    if current is not None:
        yield LogicalLine(lineno=start, text=current)
