"""
Pauper deck construction checks.

Advisory only: findings are returned as data and never block normalization.
Works on parsed entries, so it runs even when card resolution fails.

Rules:
- Main deck: fewer than 60 is an error, more than 60 a warning
- Sideboard: 0 or 15 is fine, 1-14 a warning, more than 15 an error
- At most 4 copies of a card across main deck and sideboard combined,
  basic lands excepted
"""

import logging
from collections import Counter

from pauperlist.models.card import ParsedCard
from pauperlist.models.validation import DeckStats, ValidationIssue, ValidationResult

logger = logging.getLogger(__name__)

MAIN_DECK_SIZE = 60
SIDEBOARD_SIZE = 15
MAX_COPIES = 4

BASIC_LAND_NAMES: frozenset[str] = frozenset(
    {
        "Plains",
        "Island",
        "Swamp",
        "Mountain",
        "Forest",
        "Wastes",
        "Snow-Covered Plains",
        "Snow-Covered Island",
        "Snow-Covered Swamp",
        "Snow-Covered Mountain",
        "Snow-Covered Forest",
        "Snow-Covered Wastes",
    }
)


def validate_pauper_deck(cards: list[ParsedCard]) -> ValidationResult:
    """
    Validate a parsed decklist against Pauper construction rules.

    Never raises. Duplicate lines for the same name are summed.

    Args:
        cards: Parsed entries, main deck and sideboard

    Returns:
        ValidationResult with errors, warnings and counts
    """
    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []

    main_count = sum(c.quantity for c in cards if not c.is_sideboard)
    side_count = sum(c.quantity for c in cards if c.is_sideboard)

    if main_count < MAIN_DECK_SIZE:
        errors.append(
            ValidationIssue(
                severity="error",
                message=(
                    f"Main deck must contain at least {MAIN_DECK_SIZE} cards "
                    f"(current: {main_count})"
                ),
                count=main_count,
            )
        )
    elif main_count > MAIN_DECK_SIZE:
        warnings.append(
            ValidationIssue(
                severity="warning",
                message=(
                    f"Main deck contains more than {MAIN_DECK_SIZE} cards "
                    f"(current: {main_count})"
                ),
                count=main_count,
            )
        )

    if side_count > SIDEBOARD_SIZE:
        errors.append(
            ValidationIssue(
                severity="error",
                message=(
                    f"Sideboard cannot contain more than {SIDEBOARD_SIZE} cards "
                    f"(current: {side_count})"
                ),
                count=side_count,
            )
        )
    elif 0 < side_count < SIDEBOARD_SIZE:
        warnings.append(
            ValidationIssue(
                severity="warning",
                message=(
                    f"Sideboard can contain up to {SIDEBOARD_SIZE} cards "
                    f"(current: {side_count})"
                ),
                count=side_count,
            )
        )

    copies: Counter[str] = Counter()
    for card in cards:
        copies[card.name] += card.quantity

    for name, count in copies.items():
        if name in BASIC_LAND_NAMES or count <= MAX_COPIES:
            continue
        errors.append(
            ValidationIssue(
                severity="error",
                message=f'"{name}" exceeds the {MAX_COPIES}-copy limit (current: {count})',
                card_name=name,
                count=count,
            )
        )

    result = ValidationResult(
        stats=DeckStats(main_deck_count=main_count, sideboard_count=side_count),
        errors=errors,
        warnings=warnings,
    )
    logger.debug(
        "Validated deck: %d main, %d sideboard, %d errors, %d warnings",
        main_count,
        side_count,
        len(errors),
        len(warnings),
    )
    return result
