"""Plain text formatting for terminal output."""

from typing import Iterable, List

from deckcraft.models.card import Card, JOKER_GLYPH
from deckcraft.models.deck import Deck


class TextFormatter:
    """Format cards and decks as plain text for terminal display."""

    def card_face(self, card: Card) -> str:
        """Draw a card as a five-line box.

        ┌─────┐
        │A    │
        │  ♥  │
        │    A│
        └─────┘
        """
        if card.is_joker:
            corner = "JK"
            middle = JOKER_GLYPH
        else:
            corner = card.rank.symbol
            middle = card.suit.symbol
        return "\n".join([
            "┌─────┐",
            f"│{corner:<5}│",
            f"│  {middle}  │",
            f"│{corner:>5}│",
            "└─────┘",
        ])

    def card_faces(self, cards: Iterable[Card], per_row: int = 8) -> str:
        """Draw cards side by side, ``per_row`` to a row."""
        faces = [self.card_face(c).split("\n") for c in cards]
        rows: List[str] = []
        for start in range(0, len(faces), per_row):
            group = faces[start:start + per_row]
            for line in range(5):
                rows.append(" ".join(face[line] for face in group))
        return "\n".join(rows)

    def format_deck(self, deck: Deck, per_line: int = 13) -> str:
        """Short-forms, ``per_line`` cards to a line, top card first."""
        cards = [c.to_short() for c in deck]
        lines = [f"=== Deck ({len(cards)} cards) ==="]
        for start in range(0, len(cards), per_line):
            lines.append(" ".join(f"{c:>3}" for c in cards[start:start + per_line]))
        return "\n".join(lines)
