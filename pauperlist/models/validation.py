from dataclasses import dataclass, field
from typing import Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """
    A single deck-construction finding.

    Attributes:
        severity: "error" breaks format rules, "warning" is advisory
        message: Human-readable explanation
        card_name: Card the finding is about, if any
        count: The offending count (deck size or copies)
    """

    severity: Severity
    message: str
    card_name: str | None = None
    count: int | None = None


@dataclass(frozen=True, slots=True)
class DeckStats:
    """Card counts derived from a parsed decklist."""

    main_deck_count: int
    sideboard_count: int

    @property
    def total_cards(self) -> int:
        return self.main_deck_count + self.sideboard_count


@dataclass
class ValidationResult:
    """Outcome of validating a decklist against Pauper construction rules."""

    stats: DeckStats
    errors: list[ValidationIssue] = field(default_factory=list)
    warnings: list[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True if no errors were found (warnings do not invalidate)."""
        return len(self.errors) == 0
