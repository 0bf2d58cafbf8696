"""Card comparators: pluggable rank orderings used for sorting decks.

Different card games rank cards differently:
- Poker: Ace high
- Lowball / Razz: Ace low
- Bridge: suits break ties
- Trick-taking games: a trump suit beats everything else

Subclass :class:`CardComparator` and implement :meth:`rank_value` to define
a new ordering. Everything else has a default built on top of it.
"""

from abc import ABC, abstractmethod

from deckcraft.models.card import Card, Rank, STANDARD_RANKS, Suit


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


class CardComparator(ABC):
    """Strategy that maps ranks to integers and derives a card order from them."""

    @abstractmethod
    def rank_value(self, rank: Rank) -> int:
        """Return the value of a rank for comparison purposes."""

    def joker_value(self) -> int:
        """Value of a joker. Defaults to one above the highest rank."""
        return max(self.rank_value(r) for r in STANDARD_RANKS) + 1

    def suit_value(self, suit: Suit) -> int:
        """Value of a suit for tie-breaks. Defaults to 0 (suits are equal)."""
        return 0

    def card_value(self, card: Card) -> int:
        if card.is_joker:
            return self.joker_value()
        return self.rank_value(card.rank)

    def compare(self, a: Card, b: Card) -> int:
        """Three-way comparison: negative, zero or positive.

        Compares by rank value first, then by suit value. Jokers carry no
        suit, so their tag never affects the result.
        """
        by_rank = self.card_value(a) - self.card_value(b)
        if by_rank:
            return _sign(by_rank)
        if a.is_joker or b.is_joker:
            return 0
        return _sign(self.suit_value(a.suit) - self.suit_value(b.suit))

    def is_greater(self, a: Card, b: Card) -> bool:
        return self.compare(a, b) > 0

    def is_less(self, a: Card, b: Card) -> bool:
        return self.compare(a, b) < 0

    def max(self, a: Card, b: Card) -> Card:
        """Return the higher card, or ``a`` if equal."""
        return a if self.compare(a, b) >= 0 else b

    def min(self, a: Card, b: Card) -> Card:
        """Return the lower card, or ``a`` if equal."""
        return a if self.compare(a, b) <= 0 else b

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class StandardComparator(CardComparator):
    """Ace high: Two=2 .. King=13, Ace=14, Joker=15. Suits are equal."""

    def rank_value(self, rank: Rank) -> int:
        return rank.ordinal + 2


class AceLowComparator(CardComparator):
    """Ace low: Ace=1, Two=2 .. King=13, Joker=14."""

    def rank_value(self, rank: Rank) -> int:
        if rank is Rank.ACE:
            return 1
        return rank.ordinal + 2


class BridgeComparator(StandardComparator):
    """Ace high, ties broken by suit: Clubs < Diamonds < Hearts < Spades."""

    SUIT_ORDER = {Suit.CLUBS: 1, Suit.DIAMONDS: 2, Suit.HEARTS: 3, Suit.SPADES: 4}

    def suit_value(self, suit: Suit) -> int:
        return self.SUIT_ORDER[suit]


class TrumpComparator(StandardComparator):
    """Cards of the trump suit beat all other cards; jokers beat trumps.

    Within the same group cards compare by rank only.
    """

    def __init__(self, trump: Suit):
        self.trump = trump

    def _group(self, card: Card) -> int:
        if card.is_joker:
            return 2
        return 1 if card.suit is self.trump else 0

    def compare(self, a: Card, b: Card) -> int:
        by_group = self._group(a) - self._group(b)
        if by_group:
            return _sign(by_group)
        return _sign(self.card_value(a) - self.card_value(b))

    def __repr__(self) -> str:
        return f"TrumpComparator(Suit.{self.trump.name})"
