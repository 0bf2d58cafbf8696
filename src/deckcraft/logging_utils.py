"""Logging helpers shared by the library and the CLI."""

import logging

from deckcraft.config import LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Call once at program start (cli/main.py)."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def preview_cards(cards, limit: int = 8) -> str:
    """Short card listing for log lines: 'A♠ K♠ ... (+40 more)'."""
    shown = [str(c) for c in list(cards)[:limit]]
    text = " ".join(shown)
    extra = len(cards) - len(shown)
    if extra > 0:
        text += f" ... (+{extra} more)"
    return text
