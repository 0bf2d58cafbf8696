"""Card and deck text parsing."""

from deckcraft.parser.card_parser import (
    check_delimiter, format_cards, parse_card, parse_cards,
)

__all__ = ["check_delimiter", "format_cards", "parse_card", "parse_cards"]
