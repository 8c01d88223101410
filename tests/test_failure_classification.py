"""
Tests for the failure envelope and known error types.

Every failure must be classified and carry a user-facing message.
"""

from pauperlist.models.failure import (
    ApiResponse,
    FailureKind,
    MissingIndexEntryError,
    OutcomeType,
    TransportError,
    UnresolvedCardsError,
)


class TestFailureEnvelope:
    """Tests for the ApiResponse failure envelope."""

    def test_success_response_structure(self) -> None:
        response = ApiResponse.success({"output": "Lands\n20 Island"})

        assert response.outcome == OutcomeType.SUCCESS
        assert response.data == {"output": "Lands\n20 Island"}
        assert response.failure is None

    def test_known_failure_structure(self) -> None:
        response = ApiResponse.known_failure(
            kind=FailureKind.UNRESOLVED_CARDS,
            message="Could not find the following card on Scryfall",
            card_names=["Qwertyuiop"],
        )

        assert response.outcome == OutcomeType.KNOWN_FAILURE
        assert response.data is None
        assert response.failure is not None
        assert response.failure.card_names == ["Qwertyuiop"]

    def test_unknown_failure_structure(self) -> None:
        response = ApiResponse.unknown_failure(detail="boom")

        assert response.outcome == OutcomeType.UNKNOWN_FAILURE
        assert response.failure is not None
        assert response.failure.kind == FailureKind.UNKNOWN


class TestUnresolvedCardsError:
    def test_single_name_message(self) -> None:
        error = UnresolvedCardsError(["Qwertyuiop"])

        assert error.message == "Could not find the following card on Scryfall:\n\n• Qwertyuiop"
        assert error.status_code == 422

    def test_lists_every_name(self) -> None:
        error = UnresolvedCardsError(["Qwertyuiop", "Asdfghjkl"])

        assert error.message.startswith("Could not find the following cards on Scryfall:")
        assert error.message.endswith("• Qwertyuiop\n• Asdfghjkl")
        assert error.card_names == ["Qwertyuiop", "Asdfghjkl"]
        assert error.detail == "Qwertyuiop, Asdfghjkl"

    def test_to_response_carries_names(self) -> None:
        response = UnresolvedCardsError(["Qwertyuiop"]).to_response()

        assert response.outcome == OutcomeType.KNOWN_FAILURE
        assert response.failure.kind == FailureKind.UNRESOLVED_CARDS
        assert response.failure.card_names == ["Qwertyuiop"]


class TestOtherErrors:
    def test_transport_error(self) -> None:
        error = TransportError("'Lightning Bolt'", "HTTP 503")

        assert error.kind == FailureKind.EXTERNAL_API_ERROR
        assert error.status_code == 502
        assert error.message == "Failed to fetch Scryfall data for 'Lightning Bolt': HTTP 503"
        assert error.card_names == []

    def test_missing_index_is_invariant_violation(self) -> None:
        error = MissingIndexEntryError()

        assert error.kind == FailureKind.INVARIANT_VIOLATION
        assert error.status_code == 500
