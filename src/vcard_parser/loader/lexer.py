# src/vcard_parser/loader/lexer.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from vcard_parser.config import get_config
from vcard_parser.core.exceptions import VCardSyntaxError
from vcard_parser.logging import get_logger

from .quoted_printable import decode_quoted_printable
from .unfolder import Reporter, unfold_lines

log = get_logger(__name__)

Attributes = Dict[str, Tuple[str, ...]]

QP_ENCODING = "QUOTED-PRINTABLE"


@dataclass(frozen=True)
class Statement:
    """
    A single lexed vCard content line.

    Attributes:
        lineno: 1-based physical line number where the statement starts.
        group: Optional RFC 6350 group prefix ("item1" in "item1.EMAIL").
        key: Upper-cased property name, e.g. "BEGIN", "FN", "TEL".
        attributes: Upper-cased attribute names mapped to their
                    comma-split values, e.g. {"TYPE": ("work", "voice")}.
        value: Everything after the first unquoted ':' (decoded if the line
               was quoted-printable).
        raw: The logical line as handed to the lexer.
    """
    lineno: int
    group: Optional[str]
    key: str
    attributes: Attributes = field(default_factory=dict)
    value: str = ""
    raw: str = ""

    def attr(self, name: str) -> Optional[str]:
        """First value of an attribute, or None."""
        values = self.attributes.get(name.upper())
        return values[0] if values else None


class LexState(Enum):
    KEY = "key"
    ATTR_NAME = "attr-name"
    ATTR_VALUE = "attr-value"
    QUOTED = "quoted"
    VALUE = "value"


class _LineLexer:
    """
    Character-at-a-time scanner for one logical line.

    Transitions:
        KEY        ';' -> ATTR_NAME    ':' -> VALUE
        ATTR_NAME  '=' -> ATTR_VALUE   ';' -> ATTR_NAME   ':' -> VALUE
        ATTR_VALUE '"' -> QUOTED       ';' -> ATTR_NAME   ':' -> VALUE
        QUOTED     '"' -> ATTR_VALUE
    Once VALUE is reached the rest of the line is taken verbatim.
    """

    def __init__(self, line: str, lineno: int):
        self.line = line
        self.lineno = lineno
        self.state = LexState.KEY
        self.token = ""
        self.key: Optional[str] = None
        self.attr_name: Optional[str] = None
        self.parts: List[str] = []
        self.attributes: Attributes = {}

    # ---------- finalizers ----------

    def _add_attr(self, name: str, values: List[str]) -> None:
        name = name.upper()
        self.attributes[name] = self.attributes.get(name, ()) + tuple(values)

    def _finish_key(self) -> None:
        self.key = self.token
        self.token = ""

    def _finish_floating(self) -> None:
        # "Floating" attributes are vCard 2.1 TYPE / PREF / ENCODING values.
        token, self.token = self.token, ""
        if not token:
            return
        upper = token.upper()
        if upper == "PREF":
            self.attributes["PREF"] = ("1",)
        elif upper == QP_ENCODING:
            self.attributes["ENCODING"] = (QP_ENCODING,)
        else:
            self._add_attr("TYPE", [token])

    def _finish_attr(self) -> None:
        self.parts.append(self.token)
        self._add_attr(self.attr_name or "", self.parts)
        self.token = ""
        self.attr_name = None
        self.parts = []

    # ---------- scanner ----------

    def run(self) -> Tuple[str, Attributes, str]:
        for i, c in enumerate(self.line):
            state = self.state

            if state is LexState.QUOTED:
                if c == '"':
                    self.state = LexState.ATTR_VALUE
                else:
                    self.token += c
                continue

            if c == ":":
                if state is LexState.KEY:
                    self._finish_key()
                elif state is LexState.ATTR_NAME:
                    self._finish_floating()
                else:
                    self._finish_attr()
                self.state = LexState.VALUE
                return self.key or "", self.attributes, self.line[i + 1:]

            if c == ";":
                if state is LexState.KEY:
                    self._finish_key()
                elif state is LexState.ATTR_NAME:
                    self._finish_floating()
                else:
                    self._finish_attr()
                self.state = LexState.ATTR_NAME
            elif c == "=" and state is LexState.ATTR_NAME:
                self.attr_name = self.token
                self.token = ""
                self.state = LexState.ATTR_VALUE
            elif c == '"' and state is LexState.ATTR_VALUE:
                self.state = LexState.QUOTED
            elif c == "," and state is LexState.ATTR_VALUE:
                self.parts.append(self.token)
                self.token = ""
            else:
                self.token += c

        if self.state is LexState.QUOTED:
            raise VCardSyntaxError(f"Line {self.lineno}: unterminated quoted attribute value -> {self.line!r}")
        raise VCardSyntaxError(f"Line {self.lineno}: missing ':' value separator -> {self.line!r}")


def _split_group(key: str) -> Tuple[Optional[str], str]:
    if "." in key:
        group, name = key.split(".", 1)
        return group or None, name
    return None, key


def lex_line(line: str, lineno: int = 0, default_charset: Optional[str] = None) -> Statement:
    """
    Split one logical line into a Statement.

        "TEL;TYPE=work,voice;PREF=1:+1-555-0100"
            -> key="TEL", attributes={"TYPE": ("work", "voice"), "PREF": ("1",)},
               value="+1-555-0100"

        "EMAIL;INTERNET;PREF:jane@example.com"   (vCard 2.1 floating attributes)
            -> attributes={"TYPE": ("INTERNET",), "PREF": ("1",)}

    A quoted-printable value is decoded with its CHARSET attribute and the
    ENCODING attribute is dropped.

    Raises:
        VCardSyntaxError: if the line has no key or no ':' separator.
    """
    key, attributes, value = _LineLexer(line, lineno).run()

    group, key = _split_group(key.strip())
    if not key:
        raise VCardSyntaxError(f"Line {lineno}: empty property name -> {line!r}")

    encoding = attributes.get("ENCODING")
    if encoding and encoding[0].upper() == QP_ENCODING:
        charset = attributes.pop("CHARSET", (None,))[0]
        del attributes["ENCODING"]
        fallback = default_charset or get_config().default_charset
        value = decode_quoted_printable(value, charset=charset, fallback=fallback)

    return Statement(
        lineno=lineno,
        group=group,
        key=key.upper(),
        attributes=attributes,
        value=value,
        raw=line,
    )


def lex(text: str, report: Optional[Reporter] = None, default_charset: Optional[str] = None) -> Iterator[Statement]:
    """
    Yield a Statement for every logical line of `text`.

    Lines that cannot be lexed are reported as "malformed-statement" and
    skipped; lexing continues with the next line.
    """
    def _report(kind: str, message: str, lineno: Optional[int] = None) -> None:
        if report is not None:
            report(kind, message, lineno)
        else:
            log.warning("line %s: %s: %s", lineno, kind, message)

    for logical in unfold_lines(text, report=_report):
        try:
            yield lex_line(logical.text, lineno=logical.lineno, default_charset=default_charset)
        except VCardSyntaxError as exc:
            _report("malformed-statement", str(exc), logical.lineno)
