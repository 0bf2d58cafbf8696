"""Deck factory interface."""

from abc import ABC, abstractmethod
from typing import List

from deckcraft.models.card import Card


class DeckFactory(ABC):
    """Generates the initial card sequence of a new deck.

    Implement :meth:`generate` to create custom deck compositions. A deck
    keeps no reference to the factory it was built from.

    Example::

        class EuchreDeck(DeckFactory):
            def generate(self):
                ranks = [Rank.NINE, Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE]
                return [Card(suit, rank) for suit in ALL_SUITS for rank in ranks]

        deck = Deck.from_factory(EuchreDeck())
    """

    @abstractmethod
    def generate(self) -> List[Card]:
        """Return all cards of a fresh deck, top card first."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
