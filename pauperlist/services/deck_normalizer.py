"""
Decklist normalizer.

Joins parsed entries with resolved Scryfall metadata, assigns sections and
land categories, and sorts every section:

- Lands: by land category, then quantity (most first), then name
- Sideboard: by functional-reprint group size (most first), then group
  name, then quantity (most first), then name
- Everything else: fixed costs by mana value then name, X spells last

Assumptions (Pauper-specific):
- If a card has "Creature" in its type line, it is a Creature
- Adventure cards are always creatures
"""

import logging
from collections import defaultdict

from pauperlist.models.card import (
    LandCategory,
    NormalizedCard,
    ParsedCard,
    ResolutionIndex,
    Section,
)
from pauperlist.models.failure import UnresolvedCardsError
from pauperlist.services.land_classifier import categorize_land, land_category_rank
from pauperlist.services.section_classifier import section_from_type_line

logger = logging.getLogger(__name__)

PRINT_ORDER: tuple[Section, ...] = (
    Section.CREATURE,
    Section.INSTANT,
    Section.SORCERY,
    Section.ARTIFACT,
    Section.ENCHANTMENT,
    Section.LAND,
    Section.SIDEBOARD,
)

# Differently named cards with the same function, grouped in the sideboard.
# Maps each printing to the group's canonical name.
FUNCTIONAL_REPRINTS: dict[str, str] = {
    "Red Elemental Blast": "Red Elemental Blast",
    "Pyroblast": "Red Elemental Blast",
    "Blue Elemental Blast": "Blue Elemental Blast",
    "Hydroblast": "Blue Elemental Blast",
}


def canonical_reprint_name(name: str) -> str:
    """Group name for sideboard sorting; the card's own name if not a reprint."""
    return FUNCTIONAL_REPRINTS.get(name, name)


def normalize_deck(parsed: list[ParsedCard], index: ResolutionIndex) -> list[NormalizedCard]:
    """
    Normalize parsed cards against a resolution index.

    Args:
        parsed: Parsed entries in input order
        index: Resolved metadata for this run

    Returns:
        NormalizedCard entries grouped in print order, each section sorted

    Raises:
        UnresolvedCardsError: Listing EVERY name missing from the index
    """
    normalized: list[NormalizedCard] = []
    missing: list[str] = []

    for card in parsed:
        metadata = index.lookup(card.name)
        if metadata is None:
            if card.name not in missing:
                missing.append(card.name)
            continue

        section = section_from_type_line(metadata.type_line, card.is_sideboard)
        land_category = categorize_land(metadata) if section == Section.LAND else None

        normalized.append(
            NormalizedCard(
                quantity=card.quantity,
                name=card.name,
                is_sideboard=card.is_sideboard,
                section=section,
                cmc=metadata.cmc,
                mana_cost=metadata.mana_cost,
                land_category=land_category,
            )
        )

    if missing:
        logger.warning("Missing card data for %d card(s)", len(missing))
        raise UnresolvedCardsError(missing)

    return sort_deck(normalized)


def sort_deck(cards: list[NormalizedCard]) -> list[NormalizedCard]:
    """Group cards by section in print order and sort each section."""
    ordered: list[NormalizedCard] = []
    for section in PRINT_ORDER:
        ordered.extend(sort_section([c for c in cards if c.section == section], section))
    return ordered


def sort_section(cards: list[NormalizedCard], section: Section) -> list[NormalizedCard]:
    """Sort the cards of one section by that section's rules."""
    if section == Section.LAND:
        return sorted(cards, key=_land_sort_key)
    if section == Section.SIDEBOARD:
        return _sort_sideboard(cards)
    return sorted(cards, key=_spell_sort_key)


def _land_sort_key(card: NormalizedCard) -> tuple[int, int, str]:
    category = card.land_category or LandCategory.OTHER
    return (land_category_rank(category), -card.quantity, card.name)


def _spell_sort_key(card: NormalizedCard) -> tuple[bool, float, str]:
    # X spells after all fixed-cost spells regardless of mana value
    return (card.has_variable_cost, card.cmc or 0.0, card.name)


def _sort_sideboard(cards: list[NormalizedCard]) -> list[NormalizedCard]:
    group_totals: dict[str, int] = defaultdict(int)
    for card in cards:
        group_totals[canonical_reprint_name(card.name)] += card.quantity

    def key(card: NormalizedCard) -> tuple[int, str, int, str]:
        group = canonical_reprint_name(card.name)
        return (-group_totals[group], group, -card.quantity, card.name)

    return sorted(cards, key=key)
