"""Card orderings."""

from deckcraft.ordering.comparators import (
    AceLowComparator, BridgeComparator, CardComparator, StandardComparator,
    TrumpComparator,
)

__all__ = [
    "CardComparator",
    "StandardComparator", "AceLowComparator", "BridgeComparator", "TrumpComparator",
]
