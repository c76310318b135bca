from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from vcard_parser.cli.utils import load_cards, write_json
from vcard_parser.core.exceptions import MergeConflictError

console = Console()


def merge_command(
    left: Path = typer.Argument(..., exists=True, readable=True),
    right: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
):
    """
    Merge the first card of LEFT with the first card of RIGHT and print the
    result as jCard JSON.
    """
    left_cards, _ = load_cards(left)
    right_cards, _ = load_cards(right)

    if not left_cards or not right_cards:
        console.print("[red]Both files must contain at least one vCard.[/red]")
        raise typer.Exit(code=1)

    try:
        merged = left_cards[0].merge(right_cards[0])
    except MergeConflictError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)

    write_json(merged.to_json(indent=2 if pretty else None), out=out)
