"""Flat deck formats: delimited text, CSV and one-byte-per-card binary."""

import csv
import io
from typing import Iterable, List, Optional

from deckcraft.errors import ParseError
from deckcraft.logging_utils import get_logger
from deckcraft.models.card import Card
from deckcraft.parser.card_parser import format_cards, parse_card, parse_cards

logger = get_logger(__name__)

CSV_HEADER = "card"


def dump_text(cards: Iterable[Card], delimiter: str = " ") -> str:
    return format_cards(cards, delimiter)


def load_text(text: str, delimiter: Optional[str] = None) -> List[Card]:
    return parse_cards(text, delimiter)


def dump_csv(cards: Iterable[Card]) -> str:
    """One card short-form per row under a 'card' header."""
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow([CSV_HEADER])
    for card in cards:
        writer.writerow([card.to_short()])
    return out.getvalue()


def load_csv(text: str) -> List[Card]:
    if not isinstance(text, str):
        raise ParseError(f"CSV input must be a string, got {type(text).__name__}")
    try:
        rows = list(csv.reader(io.StringIO(text)))
    except csv.Error as e:
        raise ParseError(f"Malformed CSV: {e}") from e

    rows = [row for row in rows if any(field.strip() for field in row)]
    if not rows or [field.strip().lower() for field in rows[0]] != [CSV_HEADER]:
        logger.debug("bad CSV header: %r", rows[0] if rows else None)
        raise ParseError(f"CSV must start with a single '{CSV_HEADER}' header column")

    cards = []
    for line_no, row in enumerate(rows[1:], start=2):
        if len(row) != 1:
            raise ParseError(f"CSV row {line_no}: expected 1 field, got {len(row)}")
        try:
            cards.append(parse_card(row[0]))
        except ParseError as e:
            raise ParseError(f"CSV row {line_no}: {e}") from e
    return cards


def encode_bytes(cards: Iterable[Card]) -> bytes:
    """One byte per card, using :meth:`Card.to_index`."""
    return bytes(card.to_index() for card in cards)


def decode_bytes(data: bytes) -> List[Card]:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise ParseError(f"Expected bytes, got {type(data).__name__}")
    cards = []
    for offset, value in enumerate(bytes(data)):
        try:
            cards.append(Card.from_index(value))
        except ParseError as e:
            raise ParseError(f"Byte {offset}: {e}") from e
    return cards
