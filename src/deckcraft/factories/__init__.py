"""Deck factories."""

from deckcraft.factories.base import DeckFactory
from deckcraft.factories.standard import Pinochle, Shoe, Standard52, Standard54

FACTORIES = {
    "standard52": Standard52,
    "standard54": Standard54,
    "pinochle": Pinochle,
    "shoe": Shoe,
}

__all__ = ["DeckFactory", "Standard52", "Standard54", "Pinochle", "Shoe", "FACTORIES"]
