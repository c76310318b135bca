"""
CLI package for vcard_parser.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from vcard_parser.cli.app import app, main

__all__ = [
    "app",
    "main",
]
