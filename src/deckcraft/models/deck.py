"""Deck: an ordered, double-ended, mutable sequence of cards."""

import logging
import random
from collections import deque
from functools import cmp_to_key
from typing import Callable, Deque, Iterable, Iterator, List, Optional

from deckcraft import serialization
from deckcraft.errors import DeckIndexError
from deckcraft.factories.base import DeckFactory
from deckcraft.logging_utils import get_logger, preview_cards
from deckcraft.models.card import Card
from deckcraft.ordering.comparators import CardComparator
from deckcraft.shuffling import algorithms
from deckcraft.shuffling.rng import get_rng

logger = get_logger(__name__)


def _suit_tiebreak(card: Card) -> int:
    # Untagged jokers first, then Hearts < Diamonds < Clubs < Spades
    return -1 if card.suit is None else card.suit.ordinal


class Deck:
    """An ordered pile of cards. Index 0 / the front is the top of the deck.

    Duplicates are allowed. The deck holds no locks: guard a deck shared
    between threads with your own lock.
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None):
        self.cards: Deque[Card] = deque()
        if cards is not None:
            self.cards.extend(self._checked(cards))

    @staticmethod
    def _checked(cards: Iterable[Card]) -> List[Card]:
        cards = list(cards)
        for card in cards:
            if not isinstance(card, Card):
                raise TypeError(f"Deck can only hold Card objects, got {card!r}")
        return cards

    # -- construction -----------------------------------------------------

    @classmethod
    def from_factory(cls, factory: DeckFactory) -> "Deck":
        """Build a deck from a factory's freshly generated cards."""
        return cls(factory.generate())

    @classmethod
    def parse(cls, text: str, delimiter: Optional[str] = None) -> "Deck":
        """Parse delimiter-separated short-forms ('A♠ K♠ Q♠'), top card first."""
        return cls(serialization.loads(text, "text", delimiter=delimiter))

    @classmethod
    def from_csv(cls, text: str) -> "Deck":
        return cls(serialization.loads(text, "csv"))

    @classmethod
    def from_json(cls, text: str) -> "Deck":
        return cls(serialization.loads(text, "json"))

    @classmethod
    def from_yaml(cls, text: str) -> "Deck":
        return cls(serialization.loads(text, "yaml"))

    @classmethod
    def from_indices(cls, indices: Iterable[int]) -> "Deck":
        return cls(Card.from_index(i) for i in indices)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Deck":
        return cls(serialization.decode_bytes(data))

    @classmethod
    def loads(cls, text: str, fmt: str, **options) -> "Deck":
        """Parse text in any registered format ('text', 'csv', 'json', 'yaml')."""
        return cls(serialization.loads(text, fmt, **options))

    # -- serialization ----------------------------------------------------

    def to_string(self, delimiter: str = " ") -> str:
        return serialization.dumps(self.cards, "text", delimiter=delimiter)

    def to_csv(self) -> str:
        return serialization.dumps(self.cards, "csv")

    def to_json(self, indent: Optional[int] = None) -> str:
        return serialization.dumps(self.cards, "json", indent=indent)

    def to_yaml(self) -> str:
        return serialization.dumps(self.cards, "yaml")

    def to_indices(self) -> List[int]:
        return [card.to_index() for card in self.cards]

    def to_bytes(self) -> bytes:
        return serialization.encode_bytes(self.cards)

    def dumps(self, fmt: str, **options) -> str:
        return serialization.dumps(self.cards, fmt, **options)

    # -- dealing ----------------------------------------------------------

    def deal(self) -> Optional[Card]:
        """Remove and return the top card, or None if the deck is empty."""
        return self.cards.popleft() if self.cards else None

    def deal_bottom(self) -> Optional[Card]:
        """Remove and return the bottom card, or None if the deck is empty."""
        return self.cards.pop() if self.cards else None

    def deal_n(self, count: int) -> List[Card]:
        """Deal up to ``count`` cards from the top, in the order drawn.

        Asking for more cards than the deck holds returns every remaining
        card instead of failing.
        """
        self._check_count(count)
        return [self.cards.popleft() for _ in range(min(count, len(self.cards)))]

    def deal_n_bottom(self, count: int) -> List[Card]:
        """Deal up to ``count`` cards from the bottom, in the order drawn."""
        self._check_count(count)
        return [self.cards.pop() for _ in range(min(count, len(self.cards)))]

    @staticmethod
    def _check_count(count: int) -> None:
        if count < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {count}")

    # -- adding -----------------------------------------------------------

    def add_card(self, card: Card) -> None:
        """Put a card on top of the deck."""
        self.cards.appendleft(self._checked([card])[0])

    def add_card_bottom(self, card: Card) -> None:
        self.cards.append(self._checked([card])[0])

    def add_cards(self, cards: Iterable[Card]) -> None:
        """Put cards on top, keeping their order: ``cards[0]`` becomes the top card."""
        self.cards.extendleft(reversed(self._checked(cards)))

    def add_cards_bottom(self, cards: Iterable[Card]) -> None:
        self.cards.extend(self._checked(cards))

    # -- inspection -------------------------------------------------------

    def peek(self) -> Optional[Card]:
        return self.cards[0] if self.cards else None

    def peek_bottom(self) -> Optional[Card]:
        return self.cards[-1] if self.cards else None

    def contains(self, card: Card) -> bool:
        return card in self.cards

    def find(self, card: Card) -> Optional[int]:
        """Position of the first matching card from the top, or None."""
        for position, candidate in enumerate(self.cards):
            if candidate == card:
                return position
        return None

    def is_empty(self) -> bool:
        return not self.cards

    def clear(self) -> None:
        self.cards.clear()

    # -- bulk transformation ----------------------------------------------

    def transform(self, func: Callable[[Card], Card]) -> None:
        """Replace every card with ``func(card)``, keeping positions."""
        self.cards = deque(self._checked(func(card) for card in self.cards))

    def retain(self, predicate: Callable[[Card], bool]) -> None:
        """Keep only the cards for which ``predicate`` is true, in order."""
        self.cards = deque(card for card in self.cards if predicate(card))

    def remove(self, card: Card) -> bool:
        """Remove the first matching card. Returns False if none was found."""
        try:
            self.cards.remove(card)
        except ValueError:
            return False
        return True

    # -- shuffling --------------------------------------------------------

    def _permute(self, algorithm, rng: Optional[random.Random], **options) -> None:
        cards = list(self.cards)
        algorithm(cards, rng if rng is not None else get_rng(), **options)
        self.cards = deque(cards)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s -> %s", algorithm.__name__, preview_cards(self.cards))

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """Uniform random shuffle (Fisher-Yates)."""
        self._permute(algorithms.fisher_yates, rng)

    def shuffle_times(self, times: int, rng: Optional[random.Random] = None) -> None:
        for _ in range(times):
            self.shuffle(rng)

    def riffle(self, rng: Optional[random.Random] = None, **options) -> None:
        self._permute(algorithms.riffle, rng, **options)

    def overhand(self, rng: Optional[random.Random] = None, **options) -> None:
        self._permute(algorithms.overhand, rng, **options)

    def cut(self, position: int) -> None:
        """Move the cards from ``position`` onward to the top.

        Raises:
            DeckIndexError: if position is outside 0..len(deck).
        """
        if not 0 <= position <= len(self.cards):
            raise DeckIndexError(position, len(self.cards), allow_end=True)
        if position in (0, len(self.cards)):
            return
        self.cards = deque(algorithms.cut(list(self.cards), position))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("cut at %d -> %s", position, preview_cards(self.cards))

    # -- sorting ----------------------------------------------------------

    def sort_by_comparator(self, comparator: CardComparator) -> None:
        """Stable sort by the comparator's order.

        Cards the comparator ranks equal are ordered by suit (untagged
        joker, Hearts, Diamonds, Clubs, Spades); cards equal on both keys
        keep their relative order.
        """
        def compare(a: Card, b: Card) -> int:
            result = comparator.compare(a, b)
            if result:
                return result
            return _suit_tiebreak(a) - _suit_tiebreak(b)

        self.sort_by(compare)
        logger.debug("sorted with %r", comparator)

    def sort_by(self, compare: Callable[[Card, Card], int]) -> None:
        """Stable sort with a three-way ``compare(a, b)`` function."""
        self.sort_by_key(cmp_to_key(compare))

    def sort_by_key(self, key: Callable[[Card], object]) -> None:
        self.cards = deque(sorted(self.cards, key=key))

    # -- composition ------------------------------------------------------

    def copy(self) -> "Deck":
        return Deck(self.cards)

    def concat(self, other: "Deck") -> "Deck":
        """New deck holding this deck's cards followed by ``other``'s."""
        return Deck(list(self.cards) + list(other.cards))

    def repeat(self, times: int) -> "Deck":
        """New deck holding ``times`` copies of this deck's sequence."""
        if times < 0:
            raise ValueError(f"Cannot repeat a deck a negative number of times: {times}")
        return Deck(list(self.cards) * times)

    def __add__(self, other):
        if isinstance(other, Card):
            result = self.copy()
            result.add_card(other)
            return result
        if isinstance(other, Deck):
            return self.concat(other)
        return NotImplemented

    def __iadd__(self, other):
        if isinstance(other, Card):
            self.add_card(other)
            return self
        if isinstance(other, Deck):
            self.add_cards_bottom(other.cards)
            return self
        return NotImplemented

    def __sub__(self, other):
        if not isinstance(other, (Card, Deck)):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __isub__(self, other):
        if isinstance(other, Card):
            self.remove(other)
            return self
        if isinstance(other, Deck):
            for card in list(other.cards):
                self.remove(card)
            return self
        return NotImplemented

    def __mul__(self, times):
        if isinstance(times, bool) or not isinstance(times, int):
            return NotImplemented
        return self.repeat(times)

    __rmul__ = __mul__

    def __imul__(self, times):
        if isinstance(times, bool) or not isinstance(times, int):
            return NotImplemented
        self.cards = self.repeat(times).cards
        return self

    # -- sequence protocol ------------------------------------------------

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"Deck indices must be integers, got {type(index).__name__}")
        if not 0 <= index < len(self.cards):
            raise DeckIndexError(index, len(self.cards))

    def __getitem__(self, index: int) -> Card:
        self._check_index(index)
        return self.cards[index]

    def __setitem__(self, index: int, card: Card) -> None:
        self._check_index(index)
        self.cards[index] = self._checked([card])[0]

    def __contains__(self, card: object) -> bool:
        return card in self.cards

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return list(self.cards) == list(other.cards)

    __hash__ = None

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self.cards)})"
