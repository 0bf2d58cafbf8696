"""deckcraft: playing cards and decks for building card games.

Quick start::

    from deckcraft import Card, Deck, Rank, Standard52, Suit

    deck = Deck.from_factory(Standard52())
    deck.shuffle()
    card = deck.deal()

    ace_of_spades = Card(Suit.SPADES, Rank.ACE)
"""

from deckcraft.models import (
    ALL_SUITS, BLACK_SUITS, RED_SUITS, STANDARD_RANKS, Card, Color, Deck, Rank, Suit,
)
from deckcraft.errors import DeckcraftError, DeckIndexError, ParseError
from deckcraft.factories import DeckFactory, Pinochle, Shoe, Standard52, Standard54
from deckcraft.ordering import (
    AceLowComparator, BridgeComparator, CardComparator, StandardComparator,
    TrumpComparator,
)

__version__ = "0.1.0"

__all__ = [
    "Card", "Rank", "Suit", "Color", "Deck",
    "ALL_SUITS", "RED_SUITS", "BLACK_SUITS", "STANDARD_RANKS",
    "DeckcraftError", "ParseError", "DeckIndexError",
    "DeckFactory", "Standard52", "Standard54", "Pinochle", "Shoe",
    "CardComparator", "StandardComparator", "AceLowComparator",
    "BridgeComparator", "TrumpComparator",
]
