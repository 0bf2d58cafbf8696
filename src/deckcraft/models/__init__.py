"""Data models for deckcraft."""

from deckcraft.models.card import (
    ALL_SUITS, BLACK_SUITS, RED_SUITS, STANDARD_RANKS, Card, Color, Rank, Suit,
)
from deckcraft.models.deck import Deck

__all__ = [
    "Card", "Rank", "Suit", "Color", "Deck",
    "ALL_SUITS", "RED_SUITS", "BLACK_SUITS", "STANDARD_RANKS",
]
