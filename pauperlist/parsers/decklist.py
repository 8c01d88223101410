"""
Decklist Parser.

THIS MODULE HANDLES SYNTAX ONLY.

Turns pasted MTGO-style decklist text into ParsedCard entries:

    4 Lightning Bolt
    20 Mountain

    Sideboard
    3 Pyroblast

Rules:
- Lines are trimmed; blank lines are skipped
- "Sideboard" (any case, optional trailing colon) switches every later line
  to the sideboard; nothing switches it back
- "<quantity> <name>" lines become cards
- Anything else is dropped silently, parsing never raises

Output order equals input order. Duplicate names are NOT merged here.
"""

from __future__ import annotations

import re

from pauperlist.models.card import ParsedCard


class DecklistParser:
    """
    Parser for pasted decklist text.

    Usage:
        parser = DecklistParser()
        cards = parser.parse(raw_text)
    """

    # Pattern to match "4 Card Name"
    _CARD_LINE_PATTERN = re.compile(r"^(\d+)\s+(.+)$")

    # Sideboard marker: "Sideboard" or "Sideboard:"
    _SIDEBOARD_PATTERN = re.compile(r"^sideboard:?$", re.IGNORECASE)

    def parse(self, raw_input: str) -> list[ParsedCard]:
        """
        Parse raw decklist text.

        Args:
            raw_input: Decklist text as pasted by the user

        Returns:
            ParsedCard entries in input order
        """
        cards: list[ParsedCard] = []
        in_sideboard = False

        for line in raw_input.splitlines():
            stripped = line.strip()

            if not stripped:
                continue

            if self._SIDEBOARD_PATTERN.match(stripped):
                in_sideboard = True
                continue

            card = self._parse_card_line(stripped, in_sideboard)
            if card is not None:
                cards.append(card)

        return cards

    def _parse_card_line(self, line: str, in_sideboard: bool) -> ParsedCard | None:
        """Parse a single card line. Returns None if the line is not a card."""
        match = self._CARD_LINE_PATTERN.match(line)
        if not match:
            return None

        qty_str, name = match.groups()
        quantity = int(qty_str)
        if quantity < 1:
            return None

        return ParsedCard(quantity=quantity, name=name, is_sideboard=in_sideboard)


def parse_decklist(raw_input: str) -> list[ParsedCard]:
    """
    Parse raw decklist text.

    Convenience function that creates a parser and parses.
    """
    return DecklistParser().parse(raw_input)


def extract_card_names(cards: list[ParsedCard]) -> list[str]:
    """Distinct card names in first-seen order."""
    return list(dict.fromkeys(card.name for card in cards))
