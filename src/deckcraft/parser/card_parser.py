"""Parser for card short-forms and delimiter-separated deck text."""

from typing import Iterable, List, Optional, Set, Tuple

from deckcraft.errors import ParseError
from deckcraft.logging_utils import get_logger
from deckcraft.models.card import Card, Rank, Suit
from deckcraft.parser import patterns

logger = get_logger(__name__)

_Reading = Tuple[Optional[Suit], Optional[Rank]]


def _fold(text: str) -> str:
    """Drop all whitespace and lower-case."""
    return "".join(text.split()).lower()


def _match_suit(token: str) -> Optional[Suit]:
    if token in patterns.SUIT_TOKENS:
        return patterns.SUIT_TOKENS[token]
    if token.startswith(patterns.OF_CONNECTOR):
        return patterns.SUIT_TOKENS.get(token[len(patterns.OF_CONNECTOR):])
    return None


def _readings(folded: str) -> Set[_Reading]:
    """Every (suit, rank) a folded card token can be split into.

    Jokers read as (tag, None). A whole joker token ('jokers') is never
    split into a shorter token plus a suit tag.
    """
    if folded in patterns.JOKER_TOKENS:
        return {(None, None)}
    found: Set[_Reading] = set()
    for cut in range(1, len(folded) + 1):
        head, tail = folded[:cut], folded[cut:]
        if head in patterns.JOKER_TOKENS:
            if not tail:
                found.add((None, None))
            else:
                tag = _match_suit(tail)
                if tag is not None:
                    found.add((tag, None))
        rank = patterns.RANK_TOKENS.get(head)
        if rank is not None and tail:
            suit = _match_suit(tail)
            if suit is not None:
                found.add((suit, rank))
    return found


def parse_card(text: str) -> Card:
    """Parse a single card.

    Accepts 'K♠', 'King♠', 'KS', 'Kspades', 'KiNgsPaDeS', 'king of spades',
    '10h', 'Th', 'joker', 'JK♥' and similar. Case and whitespace are ignored.

    Raises:
        ParseError: if the text has no reading, or more than one.
    """
    if not isinstance(text, str):
        raise ParseError(f"Card text must be a string, got {type(text).__name__}")
    folded = _fold(text)
    if not folded:
        raise ParseError("Empty card text")

    found = _readings(folded)
    if not found:
        logger.debug("no reading for card text %r", text)
        raise ParseError(f"Cannot parse card: {text!r}")
    if len(found) > 1:
        logger.debug("ambiguous card text %r: %s", text, sorted(map(repr, found)))
        raise ParseError(f"Ambiguous card: {text!r}")

    suit, rank = found.pop()
    return Card(suit, rank)


def check_delimiter(delimiter: str) -> None:
    """Reject delimiters that could be confused with card text.

    A delimiter must be non-empty and must not contain any character that
    appears in a rank, suit or joker token (letters, digits and suit glyphs),
    compared case-insensitively.
    """
    if not isinstance(delimiter, str) or not delimiter:
        raise ParseError("Delimiter must be a non-empty string")
    clashes = sorted({ch for ch in delimiter.lower() if ch in patterns.RESERVED_CHARS})
    if clashes:
        raise ParseError(
            f"Delimiter {delimiter!r} collides with card text characters: {''.join(clashes)}"
        )


def split_fields(text: str, delimiter: Optional[str] = None) -> List[str]:
    """Split deck text into non-blank card fields."""
    if delimiter is None:
        return [f for f in patterns.WHITESPACE.split(text) if f]
    check_delimiter(delimiter)
    return [f for f in text.split(delimiter) if f.strip()]


def parse_cards(text: str, delimiter: Optional[str] = None) -> List[Card]:
    """Parse delimiter-separated card text, top card first.

    With no delimiter, any run of whitespace separates cards. Blank fields
    (for example from a trailing delimiter) are skipped.
    """
    if not isinstance(text, str):
        raise ParseError(f"Deck text must be a string, got {type(text).__name__}")
    cards = []
    for position, field in enumerate(split_fields(text, delimiter)):
        try:
            cards.append(parse_card(field))
        except ParseError as e:
            raise ParseError(f"Card #{position}: {e}") from e
    return cards


def format_cards(cards: Iterable[Card], delimiter: str = " ") -> str:
    """Join card short-forms; the inverse of :func:`parse_cards`."""
    if delimiter != " ":
        check_delimiter(delimiter)
    return delimiter.join(card.to_short() for card in cards)
