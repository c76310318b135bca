
from __future__ import annotations

import time
from pathlib import Path
from typing import List, Tuple

from rich.console import Console

from vcard_parser.core.context import ParseContext
from vcard_parser.entities.vcard import VCard
from vcard_parser.parser_core import VCardParser

console = Console()


def load_cards(path: Path, *, verbose: bool = False) -> Tuple[List[VCard], ParseContext]:
    """
    Read a .vcf file and parse every card in it.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    t0 = time.perf_counter()

    text = path.read_text(encoding="utf-8", errors="replace")
    cards: List[VCard] = []
    ctx = VCardParser().parse(text, cards.append)

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Parsed {len(cards)} card(s) from {path} in {elapsed:.2f}s")
        for diag in ctx.diagnostics:
            console.log(f"[yellow]{diag}[/yellow]")

    return cards, ctx


def write_json(
    payload: str,
    *,
    out: Path | None,
):
    """
    Write JSON to stdout or file.
    """
    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
