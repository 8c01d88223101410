"""
MTGO-style Deck Printer.

THIS MODULE HANDLES OUTPUT RENDERING ONLY.

Accepts normalized cards and produces the final text block:

    Creatures
    4 Delver of Secrets

    Lands
    16 Island

Sections print in PRINT_ORDER, empty sections are omitted, and sections are
separated by a single blank line. Each section is sorted by its own rules
(sort_section), so callers may pass cards in any order.
"""

from pauperlist.models.card import NormalizedCard, Section
from pauperlist.services.deck_normalizer import PRINT_ORDER, sort_section

# Header labels. Logic never depends on these strings.
SECTION_LABEL: dict[Section, str] = {
    Section.CREATURE: "Creatures",
    Section.INSTANT: "Instants",
    Section.SORCERY: "Sorceries",
    Section.ARTIFACT: "Artifacts",
    Section.ENCHANTMENT: "Enchantment",
    Section.LAND: "Lands",
    Section.SIDEBOARD: "Sideboard",
}


def print_deck(cards: list[NormalizedCard]) -> str:
    """
    Render normalized cards as an MTGO-style decklist.

    Args:
        cards: Normalized cards, in any order

    Returns:
        Formatted decklist text without a trailing newline
    """
    blocks: list[str] = []

    for section in PRINT_ORDER:
        group = [card for card in cards if card.section == section]
        if not group:
            continue

        lines = [SECTION_LABEL[section]]
        lines.extend(_format_card_line(card) for card in sort_section(group, section))
        blocks.append("\n".join(lines))

    return "\n\n".join(blocks)


def _format_card_line(card: NormalizedCard) -> str:
    """Format a single card line."""
    return f"{card.quantity} {card.name}"
