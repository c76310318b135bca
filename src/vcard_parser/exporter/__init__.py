"""
Exporter package.

Re-exports the jCard export entry points.
"""

from __future__ import annotations

from .jcard import cards_to_json, export_cards_json, to_jcard, to_json

__all__ = ["cards_to_json", "export_cards_json", "to_jcard", "to_json"]
