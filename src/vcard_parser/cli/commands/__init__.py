"""
CLI command modules for vcard_parser.

Each command module defines a single Typer-compatible command function.
"""

from vcard_parser.cli.commands.export import export_command
from vcard_parser.cli.commands.merge import merge_command
from vcard_parser.cli.commands.stats import stats_command

__all__ = [
    "export_command",
    "merge_command",
    "stats_command",
]
