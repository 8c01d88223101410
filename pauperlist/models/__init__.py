from pauperlist.models.card import (
    CardMetadata,
    CardSuggestion,
    LandCategory,
    NormalizedCard,
    ParsedCard,
    ResolutionIndex,
    Section,
    front_face_name,
)
from pauperlist.models.failure import (
    ApiResponse,
    FailureDetail,
    FailureKind,
    KnownError,
    MissingIndexEntryError,
    OutcomeType,
    TransportError,
    UnresolvedCardsError,
)
from pauperlist.models.validation import (
    DeckStats,
    ValidationIssue,
    ValidationResult,
)

__all__ = [
    "ApiResponse",
    "CardMetadata",
    "CardSuggestion",
    "DeckStats",
    "FailureDetail",
    "FailureKind",
    "KnownError",
    "LandCategory",
    "MissingIndexEntryError",
    "NormalizedCard",
    "OutcomeType",
    "ParsedCard",
    "ResolutionIndex",
    "Section",
    "TransportError",
    "UnresolvedCardsError",
    "ValidationIssue",
    "ValidationResult",
    "front_face_name",
]
