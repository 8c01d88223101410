"""
Land archetype classification.

Lands are ordered in the printed decklist by archetype rather than by mana
value. The category of a land is decided by an ordered chain of checks;
the first match wins:

1. Exact name in a curated set, in this priority:
   Bounceland, ArtifactBi, ArtifactMono, Gate, Fixer,
   TaplandBi (2-color identity only), TaplandMono (1-color identity only),
   Fetch, Basic
2. Text heuristics for lands not in any curated set (new printings)
3. Other

Do not reorder the chain without re-checking the curated sets.
"""

from collections.abc import Callable

from pauperlist.models.card import CardMetadata, LandCategory
from pauperlist.services.land_sets import (
    ARTIFACT_BI,
    ARTIFACT_MONO,
    BASIC,
    BOUNCELAND,
    FETCH,
    FIXER,
    GATES,
    TAPLAND_BI,
    TAPLAND_MONO,
)

CATEGORY_ORDER: tuple[LandCategory, ...] = tuple(LandCategory)

_NamePredicate = Callable[[CardMetadata], bool]

# Curated membership, checked in priority order
_CURATED_RULES: tuple[tuple[LandCategory, _NamePredicate], ...] = (
    (LandCategory.BOUNCELAND, lambda c: c.name in BOUNCELAND),
    (LandCategory.ARTIFACT_BI, lambda c: c.name in ARTIFACT_BI),
    (LandCategory.ARTIFACT_MONO, lambda c: c.name in ARTIFACT_MONO),
    (LandCategory.GATE, lambda c: c.name in GATES),
    (LandCategory.FIXER, lambda c: c.name in FIXER),
    (
        LandCategory.TAPLAND_BI,
        lambda c: c.name in TAPLAND_BI and len(c.color_identity) == 2,
    ),
    (
        LandCategory.TAPLAND_MONO,
        lambda c: c.name in TAPLAND_MONO and len(c.color_identity) == 1,
    ),
    (LandCategory.FETCH, lambda c: c.name in FETCH),
    (LandCategory.BASIC, lambda c: c.name in BASIC),
)


def _contains(text: str | None, match: str) -> bool:
    return match.lower() in (text or "").lower()


def _contains_all(text: str | None, words: list[str]) -> bool:
    lower = (text or "").lower()
    return all(word.lower() in lower for word in words)


def _heuristic_category(card: CardMetadata) -> LandCategory | None:
    """Text-based fallback for lands missing from the curated sets."""
    name = card.name
    type_line = card.type_line or ""
    oracle = card.oracle_text or ""
    colors = card.color_identity

    if "Basic" in type_line:
        return LandCategory.BASIC

    if _contains_all(oracle, ["return a land", "control"]) and _contains(oracle, "enters tapped"):
        return LandCategory.BOUNCELAND

    if "Land" in type_line and "Artifact" in type_line:
        if _contains(name, "bridge"):
            return LandCategory.ARTIFACT_BI
        return LandCategory.ARTIFACT_MONO

    if "Gate" in type_line:
        return LandCategory.GATE

    if _contains(oracle, "any color"):
        return LandCategory.FIXER

    if _contains(oracle, "enters tapped"):
        if len(colors) == 2:
            return LandCategory.TAPLAND_BI
        if len(colors) == 1:
            return LandCategory.TAPLAND_MONO

    if _contains_all(oracle, ["search", "land"]):
        return LandCategory.FETCH

    return None


def categorize_land(card: CardMetadata) -> LandCategory:
    """
    Assign a land archetype.

    Pure function of name, type line, oracle text and color identity.
    """
    for category, matches in _CURATED_RULES:
        if matches(card):
            return category

    return _heuristic_category(card) or LandCategory.OTHER


def land_category_rank(category: LandCategory) -> int:
    """Sort rank of a land category (Bounceland first, Other last)."""
    return CATEGORY_ORDER.index(category)
