"""
Deck API endpoints.

Normalizes pasted decklists, validates them, and applies card name
suggestions the user accepted.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from pauperlist.models.card import CardSuggestion
from pauperlist.models.validation import Severity, ValidationIssue, ValidationResult
from pauperlist.parsers.decklist import parse_decklist
from pauperlist.services.autocorrect import get_autocorrect_whitelist, replace_card_name
from pauperlist.services.card_resolver import CardResolver
from pauperlist.services.deck_validator import validate_pauper_deck
from pauperlist.services.rate_limit import RateLimitedQueue, get_shared_queue
from pauperlist.services.scryfall_client import CardDataSource, ScryfallClient
from pauperlist.services.session import NormalizationSession

router = APIRouter(prefix="/decks", tags=["decks"])


async def get_card_source() -> AsyncGenerator[CardDataSource, None]:
    """Provide a Scryfall client for the duration of one request."""
    async with ScryfallClient() as client:
        yield client


def get_request_queue() -> RateLimitedQueue:
    """The process-wide Scryfall queue; every request waits its turn on it."""
    return get_shared_queue()


class NormalizeRequest(BaseModel):
    """Request body for deck normalization."""

    text: str = Field(..., description="Decklist as pasted, one '<qty> <name>' per line")
    auto_correct: bool = Field(
        default=True,
        description="Apply whitelisted name corrections without asking",
    )


class ValidateRequest(BaseModel):
    """Request body for deck validation."""

    text: str


class ApplySuggestionRequest(BaseModel):
    """Request body for accepting a name suggestion."""

    text: str
    searched_name: str = Field(..., min_length=1)
    suggested_name: str = Field(..., min_length=1)


class SuggestionResponse(BaseModel):
    """A card name Scryfall matched to something else."""

    searched_name: str
    suggested_name: str


class ValidationIssueResponse(BaseModel):
    """A single validation finding."""

    severity: Severity
    message: str
    card_name: str | None = None
    count: int | None = None


class ValidationResponse(BaseModel):
    """Response model for deck validation."""

    is_valid: bool
    errors: list[ValidationIssueResponse] = Field(default_factory=list)
    warnings: list[ValidationIssueResponse] = Field(default_factory=list)
    main_deck_count: int
    sideboard_count: int
    total_cards: int


class NormalizeResponse(BaseModel):
    """Response model for deck normalization."""

    text: str = Field(..., description="Input text after auto-corrections")
    output: str | None = Field(
        default=None,
        description="Formatted decklist; null while suggestions await a decision",
    )
    suggestions: list[SuggestionResponse] = Field(default_factory=list)
    auto_corrections: list[SuggestionResponse] = Field(default_factory=list)
    validation: ValidationResponse


class ApplySuggestionResponse(BaseModel):
    """Response model for an applied suggestion."""

    text: str


def _suggestion_response(suggestion: CardSuggestion) -> SuggestionResponse:
    return SuggestionResponse(
        searched_name=suggestion.searched_name,
        suggested_name=suggestion.suggested_name,
    )


def _issue_response(issue: ValidationIssue) -> ValidationIssueResponse:
    return ValidationIssueResponse(
        severity=issue.severity,
        message=issue.message,
        card_name=issue.card_name,
        count=issue.count,
    )


def _validation_response(result: ValidationResult) -> ValidationResponse:
    return ValidationResponse(
        is_valid=result.is_valid,
        errors=[_issue_response(e) for e in result.errors],
        warnings=[_issue_response(w) for w in result.warnings],
        main_deck_count=result.stats.main_deck_count,
        sideboard_count=result.stats.sideboard_count,
        total_cards=result.stats.total_cards,
    )


def _require_cards(text: str) -> None:
    if not parse_decklist(text):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No valid card lines found. Use one '<quantity> <card name>' per line.",
        )


@router.post("/normalize", response_model=NormalizeResponse)
async def normalize(
    request: NormalizeRequest,
    source: Annotated[CardDataSource, Depends(get_card_source)],
    queue: Annotated[RateLimitedQueue, Depends(get_request_queue)],
) -> NormalizeResponse:
    """
    Normalize a decklist into MTGO format.

    Unresolvable cards fail the whole request with every name listed.
    Suggestions are returned for the caller to accept or dismiss.
    """
    _require_cards(request.text)

    corrections = get_autocorrect_whitelist() if request.auto_correct else {}
    resolver = CardResolver(source, queue=queue, corrections=corrections)
    session = NormalizationSession(request.text, resolver)
    outcome = await session.run()

    return NormalizeResponse(
        text=outcome.text,
        output=outcome.output,
        suggestions=[_suggestion_response(s) for s in outcome.suggestions],
        auto_corrections=[_suggestion_response(s) for s in outcome.auto_corrections],
        validation=_validation_response(outcome.validation),
    )


@router.post("/validate", response_model=ValidationResponse)
async def validate(request: ValidateRequest) -> ValidationResponse:
    """
    Check a decklist against Pauper construction rules.

    No card lookups are made.
    """
    return _validation_response(validate_pauper_deck(parse_decklist(request.text)))


@router.post("/suggestions/apply", response_model=ApplySuggestionResponse)
async def apply_suggestion(request: ApplySuggestionRequest) -> ApplySuggestionResponse:
    """Rewrite every line of searched_name to suggested_name."""
    text = replace_card_name(request.text, request.searched_name, request.suggested_name)
    return ApplySuggestionResponse(text=text)
