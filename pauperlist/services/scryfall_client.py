"""
Scryfall API client.

Two lookups are used by the resolver:
- POST /cards/collection: exact names, at most 75 per request
- GET /cards/named?fuzzy=: one name, typo and case tolerant

Non-success responses raise TransportError. A 404 from the fuzzy endpoint
means "no card matched" and is returned as None.

API docs: https://scryfall.com/docs/api
"""

import logging
from dataclasses import dataclass, field
from types import TracebackType
from typing import Protocol

import httpx

from pauperlist.config import settings
from pauperlist.models.card import CardMetadata
from pauperlist.models.failure import TransportError
from pauperlist.parsers.scryfall import parse_card, parse_collection_response

logger = logging.getLogger(__name__)


@dataclass
class CollectionResponse:
    """Result of one batched exact-name lookup."""

    cards: list[CardMetadata] = field(default_factory=list)
    not_found: list[str] = field(default_factory=list)


class CardDataSource(Protocol):
    """Name -> metadata lookup service consumed by the resolver."""

    async def fetch_collection(self, names: list[str]) -> CollectionResponse: ...

    async def fetch_fuzzy(self, name: str) -> CardMetadata | None: ...


class ScryfallClient:
    """
    CardDataSource backed by the Scryfall HTTP API.

    Usage:
        async with ScryfallClient() as client:
            response = await client.fetch_collection(["Lightning Bolt"])

    Rate limiting is NOT done here; the resolver queues calls.
    """

    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Args:
            base_url: Scryfall API root. Defaults to settings.scryfall_api_url
            client: Optional httpx client for connection reuse
        """
        self.base_url = (base_url or settings.scryfall_api_url).rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers={
                "User-Agent": settings.scryfall_user_agent,
                "Accept": "application/json",
            },
            timeout=settings.scryfall_timeout,
        )

    async def __aenter__(self) -> "ScryfallClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def fetch_collection(self, names: list[str]) -> CollectionResponse:
        """
        Look up a batch of exact card names.

        Args:
            names: Front-face card names (at most 75)

        Returns:
            CollectionResponse with found cards and not_found echoes

        Raises:
            TransportError: On any non-success response or network error
        """
        context = f"batch of {len(names)} cards starting with {names[0]!r}" if names else "batch"
        payload = {"identifiers": [{"name": name} for name in names]}

        try:
            response = await self._client.post(f"{self.base_url}/cards/collection", json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(context, f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise TransportError(context, str(e) or type(e).__name__) from e

        cards, not_found = parse_collection_response(response.json())
        logger.debug("Collection lookup: %d found, %d not found", len(cards), len(not_found))
        return CollectionResponse(cards=cards, not_found=not_found)

    async def fetch_fuzzy(self, name: str) -> CardMetadata | None:
        """
        Look up one card by fuzzy name.

        Args:
            name: Front-face card name as typed

        Returns:
            CardMetadata, or None if Scryfall found no match (HTTP 404)

        Raises:
            TransportError: On any other non-success response or network error
        """
        try:
            response = await self._client.get(
                f"{self.base_url}/cards/named", params={"fuzzy": name}
            )
            if response.status_code == httpx.codes.NOT_FOUND:
                return None
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(repr(name), f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise TransportError(repr(name), str(e) or type(e).__name__) from e

        return parse_card(response.json())
