"""Structured deck formats: JSON and YAML, validated by :mod:`schema`."""

import json
from typing import Any, Iterable, List, Optional

import yaml
from pydantic import ValidationError

from deckcraft.errors import ParseError
from deckcraft.logging_utils import get_logger
from deckcraft.models.card import Card
from deckcraft.serialization.schema import CardRecord, DeckDocument

logger = get_logger(__name__)


def to_document(cards: Iterable[Card]) -> dict:
    doc = DeckDocument(cards=[CardRecord.from_card(card) for card in cards])
    return doc.model_dump()


def from_document(data: Any, source: str = "document") -> List[Card]:
    try:
        doc = DeckDocument.model_validate(data)
    except ValidationError as e:
        logger.debug("%s failed validation: %s", source, e)
        raise ParseError(f"Invalid deck {source}: {e.error_count()} error(s)\n{e}") from e
    return [record.to_card() for record in doc.cards]


def dump_json(cards: Iterable[Card], indent: Optional[int] = None) -> str:
    return json.dumps(to_document(cards), ensure_ascii=False, indent=indent)


def load_json(text: str) -> List[Card]:
    try:
        data = json.loads(text)
    except (TypeError, json.JSONDecodeError) as e:
        raise ParseError(f"Malformed JSON: {e}") from e
    return from_document(data, "JSON")


def dump_yaml(cards: Iterable[Card]) -> str:
    return yaml.safe_dump(to_document(cards), allow_unicode=True, sort_keys=False)


def load_yaml(text: str) -> List[Card]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ParseError(f"Malformed YAML: {e}") from e
    return from_document(data, "YAML")
