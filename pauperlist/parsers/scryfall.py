"""
Scryfall card object parser.

Turns card JSON from the Scryfall API into CardMetadata.

Card objects: https://scryfall.com/docs/api/cards
"""

from typing import Any

from pauperlist.models.card import CardMetadata


def _front_face(card: dict[str, Any]) -> dict[str, Any]:
    """First entry of card_faces, or an empty dict for single-faced cards."""
    faces = card.get("card_faces") or []
    return faces[0] if faces else {}


def parse_card(card: dict[str, Any]) -> CardMetadata:
    """
    Build CardMetadata from a Scryfall card object.

    Multi-faced cards (transform, modal, adventure, split) may carry
    mana_cost and oracle_text only on their faces; the front face is used
    when the top-level field is missing.

    Args:
        card: Card JSON from /cards/collection or /cards/named

    Returns:
        CardMetadata for the card
    """
    face = _front_face(card)

    mana_cost = card.get("mana_cost")
    if mana_cost is None:
        mana_cost = face.get("mana_cost")

    oracle_text = card.get("oracle_text")
    if oracle_text is None:
        oracle_text = face.get("oracle_text", "")

    type_line = card.get("type_line") or face.get("type_line", "")

    return CardMetadata(
        name=str(card["name"]),
        type_line=str(type_line),
        cmc=float(card.get("cmc", 0.0)),
        mana_cost=mana_cost or None,
        oracle_text=str(oracle_text),
        color_identity=tuple(card.get("color_identity", [])),
    )


def parse_collection_response(data: dict[str, Any]) -> tuple[list[CardMetadata], list[str]]:
    """
    Parse a /cards/collection response body.

    Returns:
        (found cards, names echoed back in not_found)
    """
    cards = [parse_card(card) for card in data.get("data", [])]
    not_found = [str(item["name"]) for item in data.get("not_found", []) if "name" in item]
    return cards, not_found
