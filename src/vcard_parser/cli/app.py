
from __future__ import annotations

import typer
from rich.console import Console

from vcard_parser.cli.commands.export import export_command
from vcard_parser.cli.commands.merge import merge_command
from vcard_parser.cli.commands.stats import stats_command

app = typer.Typer(
    name="vcard",
    help="vCard 4.0 parser, validator, merger and jCard exporter",
    add_completion=False,
)

console = Console()

app.command("export")(export_command)
app.command("stats")(stats_command)
app.command("merge")(merge_command)


def main():
    app()


if __name__ == "__main__":
    main()
