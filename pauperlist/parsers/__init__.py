from pauperlist.parsers.decklist import (
    DecklistParser,
    extract_card_names,
    parse_decklist,
)
from pauperlist.parsers.scryfall import parse_card, parse_collection_response

__all__ = [
    "DecklistParser",
    "extract_card_names",
    "parse_card",
    "parse_collection_response",
    "parse_decklist",
]
