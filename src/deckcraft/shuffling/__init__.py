"""Shuffle algorithms and random sources."""

from deckcraft.shuffling.algorithms import cut, fisher_yates, overhand, riffle
from deckcraft.shuffling.rng import get_rng, reseed

SHUFFLES = {
    "fisher-yates": fisher_yates,
    "riffle": riffle,
    "overhand": overhand,
}

__all__ = ["fisher_yates", "riffle", "overhand", "cut", "get_rng", "reseed", "SHUFFLES"]
