"""Shuffle algorithms.

Every function permutes a list of cards in place using the supplied
``random.Random``; none of them adds, drops or copies a card.
"""

import math
import random
from typing import List, TypeVar

from deckcraft import config

T = TypeVar("T")


def fisher_yates(cards: List[T], rng: random.Random) -> None:
    """Uniform random permutation (Durstenfeld's in-place Fisher-Yates)."""
    for i in range(len(cards) - 1, 0, -1):
        j = rng.randint(0, i)
        cards[i], cards[j] = cards[j], cards[i]


def riffle(cards: List[T], rng: random.Random, max_run: int = config.RIFFLE_MAX_RUN) -> None:
    """Riffle shuffle.

    The list is split at ``n // 2`` give or take one card. The two halves are
    then interleaved top-down in runs of 1..max_run cards, alternating
    halves, starting with a randomly chosen half. Whatever is left of one
    half once the other runs out goes to the bottom.
    """
    n = len(cards)
    if n < 2:
        return
    if max_run < 1:
        raise ValueError(f"max_run must be at least 1, got {max_run}")

    split = min(max(n // 2 + rng.choice((-1, 0, 1)), 1), n - 1)
    halves = [cards[:split], cards[split:]]
    positions = [0, 0]
    side = rng.randint(0, 1)
    merged: List[T] = []

    while positions[0] < len(halves[0]) and positions[1] < len(halves[1]):
        run = rng.randint(1, max_run)
        start = positions[side]
        chunk = halves[side][start:start + run]
        merged.extend(chunk)
        positions[side] += len(chunk)
        side = 1 - side

    for half, pos in zip(halves, positions):
        merged.extend(half[pos:])
    cards[:] = merged


def overhand(cards: List[T], rng: random.Random, fraction: float = config.OVERHAND_FRACTION) -> None:
    """Overhand shuffle.

    Chunks of 1..ceil(remaining * fraction) cards are peeled off the top of
    the source and dropped onto the output pile until the source is empty,
    so chunk order reverses while order inside each chunk is kept.
    """
    if not 0 < fraction <= 1:
        raise ValueError(f"fraction must be in (0, 1], got {fraction}")
    source = list(cards)
    pile: List[T] = []
    while source:
        limit = max(1, math.ceil(len(source) * fraction))
        size = rng.randint(1, limit)
        chunk, source = source[:size], source[size:]
        pile[:0] = chunk
    cards[:] = pile


def cut(cards: List[T], position: int) -> List[T]:
    """Return the cards with everything from ``position`` onward moved to the front."""
    return cards[position:] + cards[:position]
