"""Token vocabulary and regex patterns for card text.

All keys are lower-case with whitespace removed; the parser folds input the
same way before looking anything up.
"""

import re

from deckcraft.models.card import JOKER_GLYPH, Rank, Suit

RANK_TOKENS = {
    "2": Rank.TWO, "two": Rank.TWO,
    "3": Rank.THREE, "three": Rank.THREE,
    "4": Rank.FOUR, "four": Rank.FOUR,
    "5": Rank.FIVE, "five": Rank.FIVE,
    "6": Rank.SIX, "six": Rank.SIX,
    "7": Rank.SEVEN, "seven": Rank.SEVEN,
    "8": Rank.EIGHT, "eight": Rank.EIGHT,
    "9": Rank.NINE, "nine": Rank.NINE,
    "10": Rank.TEN, "t": Rank.TEN, "ten": Rank.TEN,
    "j": Rank.JACK, "jack": Rank.JACK,
    "q": Rank.QUEEN, "queen": Rank.QUEEN,
    "k": Rank.KING, "king": Rank.KING,
    "a": Rank.ACE, "ace": Rank.ACE,
}

SUIT_TOKENS = {
    "h": Suit.HEARTS, "heart": Suit.HEARTS, "hearts": Suit.HEARTS,
    "♥": Suit.HEARTS, "♡": Suit.HEARTS,
    "d": Suit.DIAMONDS, "diamond": Suit.DIAMONDS, "diamonds": Suit.DIAMONDS,
    "♦": Suit.DIAMONDS, "♢": Suit.DIAMONDS,
    "c": Suit.CLUBS, "club": Suit.CLUBS, "clubs": Suit.CLUBS,
    "♣": Suit.CLUBS, "♧": Suit.CLUBS,
    "s": Suit.SPADES, "spade": Suit.SPADES, "spades": Suit.SPADES,
    "♠": Suit.SPADES, "♤": Suit.SPADES,
}

JOKER_TOKENS = frozenset({"joker", "jokers", "jk", "jkr", JOKER_GLYPH})

# "King of Spades" folds to "kingofspades"
OF_CONNECTOR = "of"

# Every character a card token can contain. A custom deck delimiter may not
# use any of these (compared case-folded).
RESERVED_CHARS = frozenset(
    "".join(RANK_TOKENS) + "".join(SUIT_TOKENS) + "".join(JOKER_TOKENS) + OF_CONNECTOR
)

# Runs of whitespace separate cards in the default deck text form
WHITESPACE = re.compile(r"\s+")
