"""
parser_core.py
Property dispatcher: drives BEGIN/END record boundaries and routes each
statement to its value interpreter.

    raw text -> unfold_lines -> lex -> VCardParser -> interpret -> VCard -> callback
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, List, Optional

from vcard_parser.config import get_config
from vcard_parser.core.context import ParseContext
from vcard_parser.core.exceptions import UnsupportedCalendarError
from vcard_parser.entities.vcard import VCard
from vcard_parser.loader.lexer import Statement, lex
from vcard_parser.logging import get_logger
from vcard_parser.properties import BEGIN, END, lookup
from vcard_parser.values.interpreters import interpret

CardCallback = Callable[..., Any]


class DispatchState(Enum):
    IDLE = "idle"          # no record open
    BUILDING = "building"  # record open


class VCardParser:
    """
    High-level parser:
      - unfolds and lexes the input
      - opens a record at BEGIN, closes and emits it at END
      - interprets every other statement into the open record

    Each parse() call owns its own state and ParseContext; a parser
    instance can be reused for any number of inputs.
    """

    def __init__(self, config=None):
        self.cfg = config if config is not None else get_config()
        self.log = get_logger("parser_core")

    # ---------------------------------------------------------
    # Public API
    # ---------------------------------------------------------
    def parse(self, text: str, callback: CardCallback, context: Any = None) -> ParseContext:
        """
        Parse `text`, calling `callback` once per completed card in document
        order. With a bound `context` the call is ``callback(context, card)``,
        otherwise ``callback(card)``.

        Returns the ParseContext holding diagnostics and counters.
        """
        ctx = ParseContext(config=self.cfg, logger=self.log)

        def emit(card: VCard) -> None:
            if context is not None:
                callback(context, card)
            else:
                callback(card)

        state = DispatchState.IDLE
        card: Optional[VCard] = None

        for stmt in lex(text, report=ctx.report, default_charset=self.cfg.default_charset):
            ctx.count("statements")

            if stmt.key == BEGIN:
                if state is DispatchState.BUILDING:
                    ctx.report("nested-begin", "BEGIN before END; discarding unfinished card", stmt.lineno)
                card = VCard()
                state = DispatchState.BUILDING

            elif stmt.key == END:
                if state is DispatchState.BUILDING and card is not None:
                    ctx.count("cards")
                    emit(card)
                card = None
                state = DispatchState.IDLE

            elif state is DispatchState.BUILDING and card is not None:
                self._dispatch(ctx, card, stmt)

            else:
                self.log.debug("Line %d: %s outside of BEGIN/END ignored", stmt.lineno, stmt.key)

        if state is DispatchState.BUILDING:
            ctx.report("unterminated-card", "input ended before END; discarding unfinished card")

        self.log.debug(
            "Parse complete: cards=%d statements=%d diagnostics=%d",
            ctx.stats["cards"],
            ctx.stats["statements"],
            len(ctx.diagnostics),
        )
        return ctx

    def parse_all(self, text: str) -> List[VCard]:
        """Parse `text` and return every completed card."""
        cards: List[VCard] = []
        self.parse(text, cards.append)
        return cards

    # ---------------------------------------------------------
    # Statement routing
    # ---------------------------------------------------------
    def _dispatch(self, ctx: ParseContext, card: VCard, stmt: Statement) -> None:
        spec = lookup(stmt.key)
        if spec is None:
            ctx.report("unknown-property", f"unhandled key {stmt.key!r}", stmt.lineno)
            return

        try:
            value = interpret(spec, stmt.value, stmt.attributes)
        except UnsupportedCalendarError as exc:
            ctx.report("unsupported-calendar", f"{stmt.key}: {exc}", stmt.lineno)
            return
        except ValueError as exc:
            ctx.report("invalid-value", f"{stmt.key}: {exc}", stmt.lineno)
            return

        card.add_attribute(spec.key, value)


# ---------------------------------------------------------
# Module-level convenience
# ---------------------------------------------------------
def parse(text: str, callback: CardCallback, context: Any = None) -> ParseContext:
    return VCardParser().parse(text, callback, context)


def parse_cards(text: str) -> List[VCard]:
    return VCardParser().parse_all(text)
