"""
Card name auto-correction.

Some Scryfall fuzzy suggestions are always right: accents users cannot type,
or double-faced cards entered by their front face only. Those pairs are
whitelisted and applied to the decklist text without asking.

Everything here is pure text manipulation; no lookups happen.
"""

import re
from collections.abc import Mapping

from pauperlist.config import settings

# What the user types -> the exact Scryfall name
AUTOCORRECT_WHITELIST: dict[str, str] = {
    # Special characters users commonly type without accents
    "Lorien Revealed": "Lórien Revealed",
    "Troll of Khazad-dum": "Troll of Khazad-dûm",
    "Troll of Khazad dum": "Troll of Khazad-dûm",
    # Double-faced cards typed as their front face only
    "Delver of Secrets": "Delver of Secrets // Insectile Aberration",
    "The Modern Age": "The Modern Age // Vector Glider",
    "Sagu Wildling": "Sagu Wildling // Roost Seek",
    "Tithing Blade": "Tithing Blade // Consuming Sepulcher",
}


def get_autocorrect_whitelist() -> dict[str, str]:
    """Built-in whitelist with configured overrides applied on top."""
    return {**AUTOCORRECT_WHITELIST, **settings.autocorrect_overrides}


def should_auto_apply(
    searched_name: str,
    suggested_name: str,
    corrections: Mapping[str, str],
) -> bool:
    """True if the whitelist maps searched_name to exactly suggested_name."""
    return corrections.get(searched_name) == suggested_name


def _card_line_pattern(card_name: str) -> re.Pattern[str]:
    # "<qty> <name>" where the name runs to the end of the line
    return re.compile(
        rf"^([ \t]*\d+[ \t]+){re.escape(card_name)}(?=[ \t]*\r?$)",
        re.IGNORECASE | re.MULTILINE,
    )


def replace_card_name(text: str, searched_name: str, suggested_name: str) -> str:
    """
    Rewrite every "<qty> <searched_name>" line to "<qty> <suggested_name>".

    Matching is literal and case-insensitive, and the name must end the line,
    so "Bolt" never rewrites "Bolt Bend" and a corrected line is never
    rewritten twice.
    """
    pattern = _card_line_pattern(searched_name)
    return pattern.sub(lambda match: f"{match.group(1)}{suggested_name}", text)


def apply_auto_corrections(text: str, corrections: Mapping[str, str]) -> str:
    """
    Apply every searched -> suggested rewrite in corrections to text.

    Args:
        text: Raw decklist text
        corrections: Mapping of typed name to replacement name

    Returns:
        The rewritten text (unchanged if nothing matched)
    """
    for searched_name, suggested_name in corrections.items():
        text = replace_card_name(text, searched_name, suggested_name)
    return text
