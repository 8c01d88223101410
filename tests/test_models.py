"""Tests for card models."""

import pytest

from pauperlist.models.card import CardMetadata, ResolutionIndex, front_face_name


class TestFrontFaceName:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Lightning Bolt", "Lightning Bolt"),
            ("Delver of Secrets // Insectile Aberration", "Delver of Secrets"),
            ("Fire//Ice", "Fire"),
            ("  Ponder  ", "Ponder"),
        ],
    )
    def test_front_face(self, name: str, expected: str) -> None:
        assert front_face_name(name) == expected

    def test_empty_front_keeps_whole_name(self) -> None:
        """A malformed "// Back" never yields an empty lookup key."""
        assert front_face_name("// Back") == "// Back"
        assert front_face_name("  // Back ") == "// Back"


class TestResolutionIndex:
    def test_keyed_by_front_face(self) -> None:
        card = CardMetadata(name="Fire // Ice", type_line="Instant // Instant", cmc=4.0)

        index = ResolutionIndex([card])

        assert list(index) == ["Fire"]
        assert index.lookup("Fire // Ice") == card
        assert index.lookup("Fire") == card
        assert index.lookup("Ice") is None

    def test_later_card_replaces_same_key(self) -> None:
        first = CardMetadata(name="Island", type_line="Basic Land — Island", cmc=0.0)
        second = CardMetadata(name="Island", type_line="Basic Land — Island", cmc=1.0)

        index = ResolutionIndex([first, second])

        assert len(index) == 1
        assert index["Island"] == second
