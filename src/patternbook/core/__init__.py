"""Functional core - pure pattern examples with no I/O."""

from .journal import EntryCounter, Journal
from .html import HTMLBuilder, HTMLElement

__all__ = [
    # Single responsibility
    "EntryCounter",
    "Journal",
    # Builder
    "HTMLBuilder",
    "HTMLElement",
]
