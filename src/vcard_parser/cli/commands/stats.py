from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from vcard_parser.cli.utils import load_cards

console = Console()


def stats_command(
    vcf: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics and diagnostics for a .vcf file.
    """
    cards, ctx = load_cards(vcf, verbose=verbose)
    invalid = sum(1 for card in cards if not card.validate().valid)

    table = Table(title="vCard Statistics")
    table.add_column("Item", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Cards", str(len(cards)))
    table.add_row("Statements", str(ctx.stats["statements"]))
    table.add_row("Diagnostics", str(len(ctx.diagnostics)))
    table.add_row("Invalid cards", str(invalid))

    console.print(table)

    if ctx.diagnostics:
        diag_table = Table(title="Diagnostics")
        diag_table.add_column("Line", justify="right")
        diag_table.add_column("Kind", style="yellow", no_wrap=True)
        diag_table.add_column("Message")
        for diag in ctx.diagnostics:
            diag_table.add_row(str(diag.lineno or ""), diag.kind, diag.message)
        console.print(diag_table)
