"""
Card Resolution Service.

Resolves typed card names to Scryfall metadata and builds the
ResolutionIndex for one normalization run.

INVARIANTS:
1. Names are reduced to their front face before lookup; cards are indexed
   by their front face
2. Lookups are sequential and rate limited (one process-wide queue,
   concurrency 1)
3. A name counts as found in a batch only when a returned card has exactly
   that name; names missing from the batch get one fuzzy lookup each
4. A fuzzy match with a different name is a SUGGESTION, never silently used,
   unless the auto-correct whitelist maps exactly that pair
5. Unresolved names fail the run TOGETHER (no partial results)
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from pauperlist.config import settings
from pauperlist.models.card import (
    CardSuggestion,
    ResolutionIndex,
    front_face_name,
)
from pauperlist.models.failure import UnresolvedCardsError
from pauperlist.services.autocorrect import should_auto_apply
from pauperlist.services.rate_limit import RateLimitedQueue, get_shared_queue
from pauperlist.services.scryfall_client import CardDataSource

logger = logging.getLogger(__name__)


@dataclass
class ResolutionResult:
    """Result of resolving one decklist's card names."""

    index: ResolutionIndex
    """Front-face name -> metadata for every usable card."""

    suggestions: list[CardSuggestion] = field(default_factory=list)
    """Fuzzy matches awaiting a manual accept/dismiss decision."""

    auto_corrections: list[CardSuggestion] = field(default_factory=list)
    """Fuzzy matches accepted automatically through the whitelist."""

    @property
    def corrections_map(self) -> dict[str, str]:
        """searched name -> suggested name for the auto-accepted matches."""
        return {s.searched_name: s.suggested_name for s in self.auto_corrections}


def _batched(items: list[str], size: int) -> Iterable[list[str]]:
    for start in range(0, len(items), size):
        yield items[start : start + size]


class CardResolver:
    """
    Resolves card names against a CardDataSource.

    CONTRACT:
    - Input: distinct names as typed (case preserved)
    - Output: ResolutionResult OR UnresolvedCardsError listing every miss
    - TransportError from the source propagates unchanged
    """

    def __init__(
        self,
        source: CardDataSource,
        queue: RateLimitedQueue | None = None,
        corrections: Mapping[str, str] | None = None,
        batch_size: int | None = None,
    ) -> None:
        """
        Args:
            source: Card lookup service (ScryfallClient in production)
            queue: Request queue. Defaults to the process-wide queue
                shared by every resolver
            corrections: Auto-accept whitelist (typed name -> Scryfall name)
            batch_size: Names per batch lookup. Defaults to
                settings.scryfall_batch_size
        """
        self._source = source
        self._queue = queue or get_shared_queue()
        self._corrections: Mapping[str, str] = corrections or {}
        self._batch_size = batch_size or settings.scryfall_batch_size

    async def resolve(self, names: Iterable[str]) -> ResolutionResult:
        """
        Resolve card names to metadata.

        Args:
            names: Card names as typed; duplicates are ignored

        Returns:
            ResolutionResult with a fresh index, pending suggestions and
            auto-accepted corrections

        Raises:
            UnresolvedCardsError: If any name matched nothing at all
            TransportError: If Scryfall returned a non-success response
        """
        unique_names = list(dict.fromkeys(names))
        index = ResolutionIndex()

        not_found = await self._resolve_batches(unique_names, index)

        result = ResolutionResult(index=index)
        still_not_found: list[str] = []

        for name in not_found:
            searched = front_face_name(name)
            logger.debug("Falling back to fuzzy lookup for %r", name)
            card = await self._queue.submit(self._source.fetch_fuzzy, searched)

            if card is None:
                still_not_found.append(name)
            elif card.name == name:
                index.add(card)
            else:
                suggestion = CardSuggestion(searched_name=name, suggested_card=card)
                self._handle_suggestion(suggestion, result)

        if still_not_found:
            logger.warning("Unresolved cards: %s", ", ".join(still_not_found))
            raise UnresolvedCardsError(still_not_found)

        return result

    async def _resolve_batches(self, names: list[str], index: ResolutionIndex) -> list[str]:
        """
        Run batched exact lookups, filling index.

        Returns:
            Names (as typed) that no returned card matched by full name
        """
        not_found: list[str] = []
        batches = list(_batched(names, self._batch_size))
        logger.info("Resolving %d card names in %d batch(es)", len(names), len(batches))

        for batch in batches:
            lookup_names = list(dict.fromkeys(front_face_name(name) for name in batch))
            response = await self._queue.submit(self._source.fetch_collection, lookup_names)

            # Scryfall also returns multi-faced cards for a front-face query;
            # those only count once the fuzzy step has checked the full name
            requested = set(lookup_names)
            found_names: set[str] = set()
            for card in response.cards:
                if card.name in requested:
                    index.add(card)
                    found_names.add(card.name)

            not_found.extend(name for name in batch if front_face_name(name) not in found_names)

        return not_found

    def _handle_suggestion(self, suggestion: CardSuggestion, result: ResolutionResult) -> None:
        searched, suggested = suggestion.searched_name, suggestion.suggested_name
        if should_auto_apply(searched, suggested, self._corrections):
            logger.info("Auto-correcting %r to %r", searched, suggested)
            result.index.add(suggestion.suggested_card)
            result.auto_corrections.append(suggestion)
        else:
            logger.info("Suggesting %r for %r", suggested, searched)
            result.suggestions.append(suggestion)
