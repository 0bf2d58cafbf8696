"""Exception types raised by deckcraft."""


class DeckcraftError(Exception):
    """Base class for every error raised by this package."""


class ParseError(DeckcraftError, ValueError):
    """Card or deck input could not be decoded.

    Raised for unknown rank or suit tokens, ambiguous card text, delimiter
    collisions, and malformed CSV, JSON, YAML or byte input.
    """


class DeckIndexError(DeckcraftError, IndexError):
    """A deck position or cut point is out of range."""

    def __init__(self, index: int, length: int, allow_end: bool = False):
        upper = length if allow_end else length - 1
        super().__init__(
            f"Index {index} out of range for deck of {length} cards "
            f"(valid: 0..{upper})"
        )
        self.index = index
        self.length = length
