"""
Normalization session.

Holds the state of normalizing ONE decklist: its current text, the
resolution index built for that text, and the suggestions awaiting a
decision. Nothing is shared between sessions; the index is rebuilt on every
resolve() and discarded whenever the text changes.

Typical flow:

    session = NormalizationSession(text, resolver)
    outcome = await session.run()
    if outcome.suggestions:
        session.accept_suggestion("Lightnig Bolt")
        output = session.render()
"""

import logging
from dataclasses import dataclass, field

from pauperlist.models.card import CardSuggestion, ResolutionIndex
from pauperlist.models.failure import MissingIndexEntryError
from pauperlist.models.validation import ValidationResult
from pauperlist.parsers.decklist import extract_card_names, parse_decklist
from pauperlist.services.autocorrect import apply_auto_corrections, replace_card_name
from pauperlist.services.card_resolver import CardResolver
from pauperlist.services.deck_normalizer import normalize_deck
from pauperlist.services.deck_printer import print_deck
from pauperlist.services.deck_validator import validate_pauper_deck

logger = logging.getLogger(__name__)


@dataclass
class NormalizationOutcome:
    """Everything a caller needs after one run."""

    text: str
    """Decklist text after auto-corrections."""

    output: str | None
    """Formatted decklist, None while suggestions are pending."""

    validation: ValidationResult
    suggestions: list[CardSuggestion] = field(default_factory=list)
    auto_corrections: list[CardSuggestion] = field(default_factory=list)


class NormalizationSession:
    """Explicit per-decklist context for the normalization pipeline."""

    def __init__(self, text: str, resolver: CardResolver) -> None:
        self._text = text
        self._resolver = resolver
        self._index: ResolutionIndex | None = None
        self._suggestions: list[CardSuggestion] = []
        self._auto_corrections: list[CardSuggestion] = []

    @property
    def text(self) -> str:
        return self._text

    @property
    def index(self) -> ResolutionIndex | None:
        return self._index

    @property
    def suggestions(self) -> list[CardSuggestion]:
        """Suggestions still awaiting accept or dismiss."""
        return list(self._suggestions)

    @property
    def auto_corrections(self) -> list[CardSuggestion]:
        return list(self._auto_corrections)

    def update_text(self, text: str) -> None:
        """Replace the decklist text; the old index and suggestions are dropped."""
        self._text = text
        self._index = None
        self._suggestions = []
        self._auto_corrections = []

    async def resolve(self) -> ResolutionIndex:
        """
        Resolve every card in the current text and rebuild the index.

        Whitelisted corrections are applied to the text immediately; other
        suggestions are kept for the caller.

        Raises:
            UnresolvedCardsError: If any name matched nothing
            TransportError: If Scryfall failed
        """
        self._index = None
        names = extract_card_names(parse_decklist(self._text))
        result = await self._resolver.resolve(names)

        if result.auto_corrections:
            self._text = apply_auto_corrections(self._text, result.corrections_map)

        self._index = result.index
        self._suggestions = list(result.suggestions)
        self._auto_corrections = list(result.auto_corrections)
        logger.info(
            "Resolved %d cards (%d suggestions, %d auto-corrections)",
            len(self._index),
            len(self._suggestions),
            len(self._auto_corrections),
        )
        return self._index

    def accept_suggestion(self, searched_name: str) -> None:
        """
        Use a suggested card in place of what the user typed.

        Rewrites the text and adds the suggested card to the index.

        Raises:
            KeyError: If there is no pending suggestion for searched_name
        """
        suggestion = self._pop_suggestion(searched_name)
        self._text = replace_card_name(self._text, searched_name, suggestion.suggested_name)
        if self._index is not None:
            self._index.add(suggestion.suggested_card)

    def dismiss_suggestion(self, searched_name: str) -> None:
        """
        Drop a suggestion. The typed name stays unresolved, so render()
        reports it as missing until the text is corrected.

        Raises:
            KeyError: If there is no pending suggestion for searched_name
        """
        self._pop_suggestion(searched_name)

    def render(self) -> str:
        """
        Normalize the current text against the index and print it.

        Raises:
            MissingIndexEntryError: If resolve() has not run for this text
            UnresolvedCardsError: If any card is missing from the index
        """
        if self._index is None:
            raise MissingIndexEntryError()
        normalized = normalize_deck(parse_decklist(self._text), self._index)
        return print_deck(normalized)

    def validate(self) -> ValidationResult:
        """Check the current text against Pauper construction rules."""
        return validate_pauper_deck(parse_decklist(self._text))

    async def run(self) -> NormalizationOutcome:
        """
        Resolve, then render if no suggestions need a decision.

        Validation is always included and never blocks the output.
        """
        await self.resolve()
        output = None if self._suggestions else self.render()
        return NormalizationOutcome(
            text=self._text,
            output=output,
            validation=self.validate(),
            suggestions=self.suggestions,
            auto_corrections=self.auto_corrections,
        )

    def _pop_suggestion(self, searched_name: str) -> CardSuggestion:
        for i, suggestion in enumerate(self._suggestions):
            if suggestion.searched_name == searched_name:
                return self._suggestions.pop(i)
        raise KeyError(f"No pending suggestion for {searched_name!r}")
