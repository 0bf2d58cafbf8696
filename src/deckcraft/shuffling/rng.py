"""Per-thread random number generators for shuffling.

Shuffles never touch the global ``random`` state. Each thread lazily gets its
own ``random.Random``, seeded from DECKCRAFT_SHUFFLE_SEED when configured.
"""

import random
import threading
from typing import Optional

from deckcraft import config

_local = threading.local()


def get_rng() -> random.Random:
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = random.Random(config.SHUFFLE_SEED)
        _local.rng = rng
    return rng


def reseed(seed: Optional[int] = None) -> random.Random:
    """Replace this thread's generator with a freshly seeded one."""
    _local.rng = random.Random(seed)
    return _local.rng
