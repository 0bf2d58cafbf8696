"""Deck serialization: delimited text, CSV, JSON, YAML and bytes.

Every format works on plain card sequences; :class:`deckcraft.models.Deck`
wraps them in its ``to_*`` / ``from_*`` methods.
"""

from pathlib import Path
from typing import Iterable, List

from deckcraft.errors import ParseError
from deckcraft.models.card import Card
from deckcraft.serialization.flat import (
    decode_bytes, dump_csv, dump_text, encode_bytes, load_csv, load_text,
)
from deckcraft.serialization.structured import dump_json, dump_yaml, load_json, load_yaml

DUMPERS = {
    "text": dump_text,
    "csv": dump_csv,
    "json": dump_json,
    "yaml": dump_yaml,
}

LOADERS = {
    "text": load_text,
    "csv": load_csv,
    "json": load_json,
    "yaml": load_yaml,
}

FORMATS = tuple(DUMPERS)

SUFFIXES = {
    ".txt": "text",
    ".deck": "text",
    ".csv": "csv",
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def _lookup(table: dict, fmt: str):
    try:
        return table[fmt.lower()]
    except KeyError:
        raise ParseError(f"Unknown format '{fmt}'. Choose from: {', '.join(FORMATS)}") from None


def dumps(cards: Iterable[Card], fmt: str, **options) -> str:
    """Encode cards in the named format. Options go to the format's dumper."""
    return _lookup(DUMPERS, fmt)(cards, **options)


def loads(text: str, fmt: str, **options) -> List[Card]:
    """Decode cards from the named format."""
    return _lookup(LOADERS, fmt)(text, **options)


def format_for_path(path, default: str = "text") -> str:
    """Guess a format from a file suffix ('deck.json' -> 'json')."""
    return SUFFIXES.get(Path(path).suffix.lower(), default)


__all__ = [
    "dumps", "loads", "format_for_path", "FORMATS",
    "dump_text", "load_text", "dump_csv", "load_csv",
    "dump_json", "load_json", "dump_yaml", "load_yaml",
    "encode_bytes", "decode_bytes",
]
