from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Diagnostic:
    """
    A non-fatal problem found while parsing.

    kind is one of:
        malformed-line, orphan-continuation, malformed-statement,
        unknown-property, invalid-value, unsupported-calendar,
        nested-begin, unterminated-card
    """

    kind: str
    message: str
    lineno: Optional[int] = None

    def __str__(self) -> str:
        where = f"line {self.lineno}: " if self.lineno else ""
        return f"{where}{self.kind}: {self.message}"


@dataclass
class ParseContext:
    """
    Per-invocation parse state.
    Each call to VCardParser.parse() owns one of these; nothing is shared
    between invocations except the read-only property tables.
    """

    config: Any
    logger: Any

    diagnostics: List[Diagnostic] = field(default_factory=list)
    stats: Dict[str, int] = field(
        default_factory=lambda: {"cards": 0, "statements": 0, "skipped": 0}
    )

    def report(self, kind: str, message: str, lineno: Optional[int] = None) -> Diagnostic:
        diag = Diagnostic(kind=kind, message=message, lineno=lineno)
        self.diagnostics.append(diag)
        self.stats["skipped"] += 1
        if self.logger is not None:
            self.logger.warning(str(diag))
        return diag

    def count(self, name: str, amount: int = 1) -> None:
        self.stats[name] = self.stats.get(name, 0) + amount
