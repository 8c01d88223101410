"""
Failure Explanation Envelope.

Defines the exceptions the normalization pipeline raises and the response
envelope the API uses to communicate them.

Error kinds:
- UnresolvedCardsError: one or more names could not be matched at all
- TransportError: Scryfall returned a non-success response
- MissingIndexEntryError: normalization ran before a resolution index existed

Validation findings are NOT exceptions. They are always returned as data.

All resolution failures are AGGREGATED: one exception carries every failing
name, never one exception per name.
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input failures
    INVALID_INPUT = "invalid_input"

    # Resolution failures
    UNRESOLVED_CARDS = "unresolved_cards"

    # Service failures
    EXTERNAL_API_ERROR = "external_api_error"

    # Internal errors
    INVARIANT_VIOLATION = "invariant_violation"

    # Unknown
    UNKNOWN = "unknown"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    SUCCESS = "success"
    KNOWN_FAILURE = "known_failure"
    UNKNOWN_FAILURE = "unknown_failure"


T = TypeVar("T")


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )
    card_names: list[str] = Field(
        default_factory=list,
        description="Card names involved in the failure, for correction prompts",
    )


class ApiResponse(BaseModel, Generic[T]):
    """
    Response envelope for API failures and successes.

    Failures always carry a FailureDetail so the presentation layer can show
    what went wrong without parsing message text.
    """

    outcome: OutcomeType = Field(
        ...,
        description="High-level classification of the result",
    )
    data: T | None = Field(
        default=None,
        description="Response data (present on success)",
    )
    failure: FailureDetail | None = Field(
        default=None,
        description="Failure details (present on non-success)",
    )

    @classmethod
    def success(cls, data: T) -> "ApiResponse[T]":
        """Create a success response."""
        return cls(outcome=OutcomeType.SUCCESS, data=data)

    @classmethod
    def known_failure(
        cls,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        card_names: list[str] | None = None,
    ) -> "ApiResponse[Any]":
        """
        Create a known failure response.

        Use when the system knows exactly why the operation failed.
        Example: cards not found on Scryfall.
        """
        return cls(
            outcome=OutcomeType.KNOWN_FAILURE,
            failure=FailureDetail(
                kind=kind,
                message=message,
                detail=detail,
                suggestion=suggestion,
                card_names=card_names or [],
            ),
        )

    @classmethod
    def unknown_failure(
        cls,
        detail: str | None = None,
    ) -> "ApiResponse[Any]":
        """Create an unknown failure response (catch-all for unexpected exceptions)."""
        return cls(
            outcome=OutcomeType.UNKNOWN_FAILURE,
            failure=FailureDetail(
                kind=FailureKind.UNKNOWN,
                message="I failed and I don't know why. Try again in a moment.",
                detail=detail,
                suggestion="If this persists, please report the issue.",
            ),
        )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    @property
    def card_names(self) -> list[str]:
        """Card names involved in the failure (empty unless a subclass sets them)."""
        return []

    def to_response(self) -> ApiResponse[Any]:
        """Convert to an ApiResponse."""
        return ApiResponse.known_failure(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
            card_names=self.card_names,
        )


class UnresolvedCardsError(KnownError):
    """
    One or more card names could not be matched by any resolution strategy.

    Carries the COMPLETE list of names. Fatal to the normalization run:
    no partial output is ever produced alongside this error.
    """

    def __init__(self, names: list[str], source: str = "Scryfall"):
        self._names = list(names)
        plural = "s" if len(self._names) > 1 else ""
        bullets = "\n".join(f"• {name}" for name in self._names)
        message = f"Could not find the following card{plural} on {source}:\n\n{bullets}"
        super().__init__(
            kind=FailureKind.UNRESOLVED_CARDS,
            message=message,
            detail=", ".join(self._names),
            suggestion=(
                "Please check the spelling or try using the exact card name from Scryfall."
            ),
            status_code=422,
        )

    @property
    def card_names(self) -> list[str]:
        return list(self._names)


class TransportError(KnownError):
    """
    Scryfall returned a non-success response for a batch or single lookup.

    Not retried. The context names which batch or card failed.
    """

    def __init__(self, context: str, reason: str):
        self.context = context
        self.reason = reason
        super().__init__(
            kind=FailureKind.EXTERNAL_API_ERROR,
            message=f"Failed to fetch Scryfall data for {context}: {reason}",
            detail=reason,
            suggestion="Scryfall may be unavailable. Try again in a moment.",
            status_code=502,
        )


class MissingIndexEntryError(KnownError):
    """
    Normalization was invoked before a resolution index existed.

    This is a programming-contract violation and always fatal.
    """

    def __init__(self) -> None:
        super().__init__(
            kind=FailureKind.INVARIANT_VIOLATION,
            message="Resolution index not built yet. Resolve card names before normalizing.",
            status_code=500,
        )
