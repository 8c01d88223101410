from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum


def front_face_name(name: str) -> str:
    """
    Reduce a card name to its front face.

    Split, adventure and transform cards are written "Front // Back".
    Scryfall lookups and index keys use the text before the first "//".
    A name with nothing before the "//" is kept whole (trimmed).
    """
    front = name.split("//", 1)[0].strip()
    return front or name.strip()


class Section(str, Enum):
    """Output section of a decklist, in print order."""

    CREATURE = "Creature"
    INSTANT = "Instant"
    SORCERY = "Sorcery"
    ARTIFACT = "Artifact"
    ENCHANTMENT = "Enchantment"
    LAND = "Land"
    SIDEBOARD = "Sideboard"


class LandCategory(str, Enum):
    """Land archetype, used only to order the Lands section.

    Declaration order is the sort order.
    """

    BOUNCELAND = "Bounceland"
    ARTIFACT_BI = "ArtifactBi"
    ARTIFACT_MONO = "ArtifactMono"
    GATE = "Gate"
    FIXER = "Fixer"
    TAPLAND_BI = "TaplandBi"
    TAPLAND_MONO = "TaplandMono"
    FETCH = "Fetch"
    BASIC = "Basic"
    OTHER = "Other"


@dataclass(frozen=True, slots=True)
class ParsedCard:
    """
    One card line from a pasted decklist.

    Attributes:
        quantity: Number of copies (>= 1)
        name: Card name as typed (trimmed line remainder)
        is_sideboard: True if the line appeared after a "Sideboard" marker
    """

    quantity: int
    name: str
    is_sideboard: bool = False


@dataclass(frozen=True, slots=True)
class CardMetadata:
    """
    Card facts fetched from Scryfall.

    Attributes:
        name: Scryfall name ("Front // Back" for multi-faced cards)
        type_line: Full type line (e.g., "Artifact Creature — Golem")
        cmc: Mana value
        mana_cost: Mana cost string (e.g., "{X}{R}"), None for lands
        oracle_text: Rules text
        color_identity: Color identity symbols (e.g., ("U", "W"))
    """

    name: str
    type_line: str
    cmc: float
    mana_cost: str | None = None
    oracle_text: str = ""
    color_identity: tuple[str, ...] = ()

    @property
    def front_face(self) -> str:
        """Index key for this card."""
        return front_face_name(self.name)


@dataclass(frozen=True, slots=True)
class CardSuggestion:
    """A fuzzy match whose name differs from what the user typed."""

    searched_name: str
    suggested_card: CardMetadata

    @property
    def suggested_name(self) -> str:
        return self.suggested_card.name


@dataclass(frozen=True, slots=True)
class NormalizedCard:
    """
    A parsed card enriched with resolved metadata.

    land_category is set only when section is LAND.
    """

    quantity: int
    name: str
    is_sideboard: bool
    section: Section
    cmc: float
    mana_cost: str | None = None
    land_category: LandCategory | None = None

    @property
    def has_variable_cost(self) -> bool:
        """True if the mana cost contains an X."""
        return bool(self.mana_cost) and "{X}" in str(self.mana_cost)


class ResolutionIndex(Mapping[str, CardMetadata]):
    """
    Front-face name -> CardMetadata lookup for one normalization run.

    Keys are unique. Adding a card whose key already exists replaces it.
    Build a fresh index per run; never share one between decklists.
    """

    def __init__(self, cards: Iterable[CardMetadata] = ()) -> None:
        self._cards: dict[str, CardMetadata] = {}
        for card in cards:
            self.add(card)

    def add(self, card: CardMetadata) -> None:
        self._cards[card.front_face] = card

    def lookup(self, name: str) -> CardMetadata | None:
        """Find metadata for a card name as typed (front face is used as key)."""
        return self._cards.get(front_face_name(name))

    def __getitem__(self, key: str) -> CardMetadata:
        return self._cards[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"ResolutionIndex({len(self._cards)} cards)"
