"""Tests for Pauper deck construction checks."""

import pytest

from pauperlist.models.card import ParsedCard
from pauperlist.parsers.decklist import parse_decklist
from pauperlist.services.deck_validator import validate_pauper_deck


def _main(count: int) -> list[ParsedCard]:
    """A main deck of basic lands only (no copy-limit findings)."""
    return [ParsedCard(quantity=count, name="Island", is_sideboard=False)]


def _sideboard(count: int) -> list[ParsedCard]:
    # Four-ofs of distinct names so the copy limit never triggers
    cards: list[ParsedCard] = []
    for i in range(0, count, 4):
        cards.append(ParsedCard(quantity=min(4, count - i), name=f"Card {i}", is_sideboard=True))
    return cards


class TestMainDeckSize:
    def test_59_is_one_error(self) -> None:
        result = validate_pauper_deck(_main(59))

        assert len(result.errors) == 1
        assert result.warnings == []
        assert "59" in result.errors[0].message
        assert not result.is_valid

    def test_60_is_clean(self) -> None:
        result = validate_pauper_deck(_main(60))

        assert result.errors == []
        assert result.warnings == []
        assert result.is_valid

    def test_61_is_one_warning(self) -> None:
        result = validate_pauper_deck(_main(61))

        assert result.errors == []
        assert len(result.warnings) == 1
        assert result.is_valid


class TestSideboardSize:
    @pytest.mark.parametrize("count", [0, 15])
    def test_empty_or_full_is_clean(self, count: int) -> None:
        result = validate_pauper_deck(_main(60) + _sideboard(count))

        assert result.errors == []
        assert result.warnings == []

    def test_short_sideboard_warns(self) -> None:
        result = validate_pauper_deck(_main(60) + _sideboard(14))

        assert result.errors == []
        assert len(result.warnings) == 1
        assert result.warnings[0].count == 14

    def test_oversized_sideboard_errors(self) -> None:
        result = validate_pauper_deck(_main(60) + _sideboard(16))

        assert len(result.errors) == 1
        assert result.warnings == []
        assert result.errors[0].count == 16


class TestCopyLimit:
    def test_five_copies_is_one_error(self) -> None:
        cards = _main(55) + [ParsedCard(quantity=5, name="Lightning Bolt")]

        result = validate_pauper_deck(cards)

        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.card_name == "Lightning Bolt"
        assert error.count == 5
        assert "Lightning Bolt" in error.message
        assert "5" in error.message

    def test_four_copies_is_fine(self) -> None:
        cards = _main(56) + [ParsedCard(quantity=4, name="Lightning Bolt")]

        assert validate_pauper_deck(cards).errors == []

    def test_counts_span_main_and_sideboard(self) -> None:
        """Copies are summed across duplicate lines and the sideboard."""
        text = "56 Island\n3 Pyroblast\n1 Pyroblast\nSideboard\n1 Pyroblast"

        result = validate_pauper_deck(parse_decklist(text))

        copy_errors = [e for e in result.errors if e.card_name == "Pyroblast"]
        assert len(copy_errors) == 1
        assert copy_errors[0].count == 5

    @pytest.mark.parametrize(
        "name",
        ["Island", "Forest", "Wastes", "Snow-Covered Swamp", "Snow-Covered Mountain"],
    )
    def test_basic_lands_exempt(self, name: str) -> None:
        cards = [ParsedCard(quantity=60, name=name)]

        assert validate_pauper_deck(cards).errors == []


class TestStats:
    def test_counts(self) -> None:
        result = validate_pauper_deck(_main(60) + _sideboard(15))

        assert result.stats.main_deck_count == 60
        assert result.stats.sideboard_count == 15
        assert result.stats.total_cards == 75

    def test_empty_deck_never_raises(self) -> None:
        result = validate_pauper_deck([])

        assert result.stats.total_cards == 0
        assert len(result.errors) == 1
