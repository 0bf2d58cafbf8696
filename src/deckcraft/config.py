"""Configuration loading from environment variables and defaults."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# Logging
LOG_LEVEL = os.getenv("DECKCRAFT_LOG_LEVEL", "WARNING").upper()

# Shuffling
# Unset means every thread seeds its generator from OS entropy.
_seed = os.getenv("DECKCRAFT_SHUFFLE_SEED", "")
SHUFFLE_SEED = int(_seed) if _seed else None
RIFFLE_MAX_RUN = int(os.getenv("DECKCRAFT_RIFFLE_MAX_RUN", "3"))
OVERHAND_FRACTION = float(os.getenv("DECKCRAFT_OVERHAND_FRACTION", "0.25"))

# Factories
DEFAULT_SHOE_DECKS = int(os.getenv("DECKCRAFT_SHOE_DECKS", "6"))
