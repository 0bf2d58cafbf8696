"""Built-in deck factories."""

from typing import List, Optional

from deckcraft import config
from deckcraft.factories.base import DeckFactory
from deckcraft.models.card import ALL_SUITS, Card, Rank, STANDARD_RANKS, Suit


class Standard52(DeckFactory):
    """A standard 52-card deck, grouped by rank: 2♥ 2♦ 2♣ 2♠ 3♥ ... A♠."""

    def generate(self) -> List[Card]:
        return [Card(suit, rank) for rank in STANDARD_RANKS for suit in ALL_SUITS]


class Standard54(DeckFactory):
    """Standard52 followed by two jokers, tagged Hearts and Spades for display."""

    JOKER_TAGS = (Suit.HEARTS, Suit.SPADES)

    def generate(self) -> List[Card]:
        cards = Standard52().generate()
        cards.extend(Card.joker(tag) for tag in self.JOKER_TAGS)
        return cards


class Pinochle(DeckFactory):
    """A 48-card Pinochle deck: Nine through Ace, two copies of each card."""

    RANKS = (Rank.NINE, Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE)

    def generate(self) -> List[Card]:
        return [Card(suit, rank)
                for _ in range(2)
                for suit in ALL_SUITS
                for rank in self.RANKS]


class Shoe(DeckFactory):
    """Several decks from another factory stacked into one shoe."""

    def __init__(self, factory: Optional[DeckFactory] = None, decks: int = config.DEFAULT_SHOE_DECKS):
        if decks < 1:
            raise ValueError(f"A shoe needs at least one deck, got {decks}")
        self.factory = factory or Standard52()
        self.decks = decks

    def generate(self) -> List[Card]:
        cards: List[Card] = []
        for _ in range(self.decks):
            cards.extend(self.factory.generate())
        return cards

    def __repr__(self) -> str:
        return f"Shoe({self.factory!r}, decks={self.decks})"
