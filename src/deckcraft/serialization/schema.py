"""Pydantic schema for structured (JSON / YAML) deck documents.

A document looks like::

    {"cards": [{"rank": "A", "suit": "spades"},
               {"rank": "joker", "suit": "hearts"},
               {"rank": "joker", "suit": null}]}
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from deckcraft.models.card import Card, Rank, Suit

JOKER_RANK = "joker"

_RANKS = {rank.value: rank for rank in Rank}
_SUITS = {suit.label: suit for suit in Suit}


class CardRecord(BaseModel):
    """One card: rank symbol ('2'..'10', 'J', 'Q', 'K', 'A' or 'joker') and suit name."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    rank: str = Field(..., description="Rank symbol, or 'joker'")
    suit: Optional[str] = Field(None, description="hearts, diamonds, clubs or spades")

    @field_validator("rank", mode="before")
    @classmethod
    def number_rank_to_str(cls, v):
        # Hand-written YAML reads `rank: 10` as an int
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("rank")
    @classmethod
    def validate_rank(cls, v):
        if v != JOKER_RANK and v not in _RANKS:
            raise ValueError(f"Invalid rank: {v}. Must be one of {sorted(_RANKS) + [JOKER_RANK]}")
        return v

    @field_validator("suit")
    @classmethod
    def validate_suit(cls, v):
        if v is not None and v not in _SUITS:
            raise ValueError(f"Invalid suit: {v}. Must be one of {sorted(_SUITS)}")
        return v

    @model_validator(mode="after")
    def suit_required_unless_joker(self):
        if self.rank != JOKER_RANK and self.suit is None:
            raise ValueError(f"Card with rank {self.rank} needs a suit")
        return self

    @classmethod
    def from_card(cls, card: Card) -> "CardRecord":
        suit = card.suit.label if card.suit is not None else None
        if card.is_joker:
            return cls(rank=JOKER_RANK, suit=suit)
        return cls(rank=card.rank.value, suit=suit)

    def to_card(self) -> Card:
        suit = _SUITS[self.suit] if self.suit is not None else None
        if self.rank == JOKER_RANK:
            return Card.joker(suit)
        return Card(suit, _RANKS[self.rank])


class DeckDocument(BaseModel):
    """A whole deck, top card first."""

    model_config = ConfigDict(extra="forbid")

    cards: List[CardRecord]
