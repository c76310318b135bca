from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from vcard_parser.cli.utils import load_cards, write_json
from vcard_parser.exporter import cards_to_json

console = Console()


def export_command(
    vcf: Path = typer.Argument(..., exists=True, readable=True),
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
    validate: bool = typer.Option(
        False,
        "--validate",
        help="Validate each card first (generates missing UID/REV)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export the cards of a .vcf file as a JSON list of jCards (stdout by default).
    """
    cards, _ = load_cards(vcf, verbose=verbose)

    if validate:
        for index, card in enumerate(cards):
            result = card.validate()
            if not result.valid and verbose:
                issues = ", ".join(f"{i.locator}:{i.kind}" for i in result.errors)
                console.log(f"[red]card {index} invalid:[/red] {issues}")

    if verbose:
        console.log("Exporting JSON")

    write_json(cards_to_json(cards, indent=2 if pretty else None), out=out)

    if verbose:
        console.log("Export complete")
