"""
PauperList services.

The decklist normalization pipeline: resolution, classification, sorting,
printing and validation.
"""

from pauperlist.services.autocorrect import (
    AUTOCORRECT_WHITELIST,
    apply_auto_corrections,
    get_autocorrect_whitelist,
    replace_card_name,
    should_auto_apply,
)
from pauperlist.services.card_resolver import CardResolver, ResolutionResult
from pauperlist.services.deck_normalizer import (
    FUNCTIONAL_REPRINTS,
    PRINT_ORDER,
    normalize_deck,
    sort_section,
)
from pauperlist.services.deck_printer import SECTION_LABEL, print_deck
from pauperlist.services.deck_validator import validate_pauper_deck
from pauperlist.services.land_classifier import categorize_land, land_category_rank
from pauperlist.services.rate_limit import RateLimitedQueue, get_shared_queue
from pauperlist.services.scryfall_client import (
    CardDataSource,
    CollectionResponse,
    ScryfallClient,
)
from pauperlist.services.section_classifier import section_from_type_line
from pauperlist.services.session import NormalizationOutcome, NormalizationSession

__all__ = [
    "AUTOCORRECT_WHITELIST",
    "CardDataSource",
    "CardResolver",
    "CollectionResponse",
    "FUNCTIONAL_REPRINTS",
    "NormalizationOutcome",
    "NormalizationSession",
    "PRINT_ORDER",
    "RateLimitedQueue",
    "ResolutionResult",
    "SECTION_LABEL",
    "ScryfallClient",
    "apply_auto_corrections",
    "categorize_land",
    "get_autocorrect_whitelist",
    "get_shared_queue",
    "land_category_rank",
    "normalize_deck",
    "print_deck",
    "replace_card_name",
    "section_from_type_line",
    "should_auto_apply",
    "sort_section",
    "validate_pauper_deck",
]
