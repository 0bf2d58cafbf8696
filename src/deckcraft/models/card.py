"""Card, Rank, Suit and Color models."""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Optional, Tuple

from deckcraft.errors import ParseError


class Color(str, Enum):
    RED = "R"
    BLACK = "B"

    def __str__(self) -> str:
        return self.value


class Suit(str, Enum):
    HEARTS = "h"
    DIAMONDS = "d"
    CLUBS = "c"
    SPADES = "s"

    @classmethod
    def from_symbol(cls, s: str) -> "Suit":
        """Look up a suit by letter, name or glyph ('h', 'Hearts', '♥')."""
        from deckcraft.parser.patterns import SUIT_TOKENS

        key = "".join(s.split()).lower()
        if key in SUIT_TOKENS:
            return SUIT_TOKENS[key]
        raise ParseError(f"Unknown suit: {s}")

    @property
    def symbol(self) -> str:
        return {"h": "♥", "d": "♦", "c": "♣", "s": "♠"}[self.value]

    @property
    def label(self) -> str:
        return self.name.lower()

    @property
    def ordinal(self) -> int:
        return _SUIT_ORDER.index(self)

    @property
    def color(self) -> Color:
        if self in (Suit.HEARTS, Suit.DIAMONDS):
            return Color.RED
        return Color.BLACK

    @property
    def is_red(self) -> bool:
        return self.color is Color.RED

    @property
    def is_black(self) -> bool:
        return self.color is Color.BLACK

    def __str__(self) -> str:
        return self.symbol


class Rank(str, Enum):
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    @classmethod
    def from_char(cls, c: str) -> "Rank":
        """Look up a rank by token ('K', 'king', '10', 'T', 'ten')."""
        from deckcraft.parser.patterns import RANK_TOKENS

        key = "".join(c.split()).lower()
        if key in RANK_TOKENS:
            return RANK_TOKENS[key]
        raise ParseError(f"Unknown rank: {c}")

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.name.lower()

    @property
    def ordinal(self) -> int:
        """Position in STANDARD_RANKS. Identity only; comparators assign values."""
        return _RANK_ORDER.index(self)

    @property
    def is_face(self) -> bool:
        return self in (Rank.JACK, Rank.QUEEN, Rank.KING)

    @property
    def is_ace(self) -> bool:
        return self is Rank.ACE

    def __str__(self) -> str:
        return self.value


_SUIT_ORDER: Tuple[Suit, ...] = (Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES)
_RANK_ORDER: Tuple[Rank, ...] = tuple(Rank)

ALL_SUITS: Tuple[Suit, ...] = _SUIT_ORDER
RED_SUITS: Tuple[Suit, ...] = (Suit.HEARTS, Suit.DIAMONDS)
BLACK_SUITS: Tuple[Suit, ...] = (Suit.CLUBS, Suit.SPADES)
STANDARD_RANKS: Tuple[Rank, ...] = _RANK_ORDER

JOKER_GLYPH = "🃏"

# Integer encoding: 14 slots per suit (13 ranks + tagged joker), then one
# slot for the untagged joker.
_SLOTS_PER_SUIT = len(STANDARD_RANKS) + 1
UNTAGGED_JOKER_INDEX = _SLOTS_PER_SUIT * len(ALL_SUITS)
MAX_CARD_INDEX = UNTAGGED_JOKER_INDEX


@total_ordering
@dataclass(frozen=True, eq=False)
class Card:
    """A single playing card.

    A joker is a card whose ``rank`` is None. Its ``suit`` is an optional
    display tag: it is kept by every serialization format but ignored by
    equality, hashing and ordering, so all jokers are the same card.
    """

    suit: Optional[Suit]
    rank: Optional[Rank]

    def __post_init__(self):
        if self.rank is None:
            if self.suit is not None and not isinstance(self.suit, Suit):
                raise TypeError(f"Joker tag must be a Suit or None, got {self.suit!r}")
            return
        if not isinstance(self.rank, Rank):
            raise TypeError(f"rank must be a Rank, got {self.rank!r}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"suit must be a Suit, got {self.suit!r}")

    @classmethod
    def joker(cls, tag: Optional[Suit] = None) -> "Card":
        return cls(tag, None)

    @classmethod
    def parse(cls, s: str) -> "Card":
        """Parse a card string like 'A♠', 'Ks', 'King of Spades' or 'joker'."""
        from deckcraft.parser.card_parser import parse_card

        return parse_card(s)

    @classmethod
    def from_index(cls, index: int) -> "Card":
        """Decode the integer produced by :meth:`to_index`."""
        if isinstance(index, bool) or not isinstance(index, int):
            raise ParseError(f"Card index must be an int, got {index!r}")
        if index < 0 or index > MAX_CARD_INDEX:
            raise ParseError(f"Card index {index} out of range 0..{MAX_CARD_INDEX}")
        if index == UNTAGGED_JOKER_INDEX:
            return cls.joker()
        suit_index, rank_index = divmod(index, _SLOTS_PER_SUIT)
        suit = ALL_SUITS[suit_index]
        if rank_index == len(STANDARD_RANKS):
            return cls.joker(suit)
        return cls(suit, STANDARD_RANKS[rank_index])

    def to_index(self) -> int:
        if self.is_joker:
            if self.suit is None:
                return UNTAGGED_JOKER_INDEX
            return self.suit.ordinal * _SLOTS_PER_SUIT + len(STANDARD_RANKS)
        return self.suit.ordinal * _SLOTS_PER_SUIT + self.rank.ordinal

    @property
    def is_joker(self) -> bool:
        return self.rank is None

    @property
    def color(self) -> Optional[Color]:
        """Suit color; a joker reports its tag's color, or None when untagged."""
        if self.suit is None:
            return None
        return self.suit.color

    @property
    def is_ace(self) -> bool:
        return self.rank is Rank.ACE

    @property
    def is_face_card(self) -> bool:
        return self.rank is not None and self.rank.is_face

    @property
    def is_value_card(self) -> bool:
        return self.rank is not None and not self.rank.is_face and not self.rank.is_ace

    def is_same_rank(self, other: "Card") -> bool:
        return self.rank == other.rank

    def is_same_suit(self, other: "Card") -> bool:
        return not self.is_joker and not other.is_joker and self.suit == other.suit

    def is_same_color(self, other: "Card") -> bool:
        return self.color is not None and self.color == other.color

    def to_short(self) -> str:
        """Return the short form, e.g. 'A♠', '10♥', '🃏♥'."""
        if self.is_joker:
            return JOKER_GLYPH + (self.suit.symbol if self.suit else "")
        return f"{self.rank.value}{self.suit.symbol}"

    def _identity(self) -> tuple:
        if self.is_joker:
            return (None, None)
        return (self.suit, self.rank)

    def _order_key(self) -> Tuple[int, int]:
        if self.is_joker:
            return (len(STANDARD_RANKS), 0)
        return (self.rank.ordinal, self.suit.ordinal)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._identity() == other._identity()

    def __lt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._order_key() < other._order_key()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __str__(self) -> str:
        return self.to_short()

    def __repr__(self) -> str:
        if self.is_joker:
            tag = f"Suit.{self.suit.name}" if self.suit else "None"
            return f"Card.joker({tag})"
        return f"Card(Suit.{self.suit.name}, Rank.{self.rank.name})"
