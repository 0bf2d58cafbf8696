"""Output formatting for terminal and tables."""

from deckcraft.formatters.text import TextFormatter
from deckcraft.formatters.table import TableFormatter

__all__ = ["TextFormatter", "TableFormatter"]
