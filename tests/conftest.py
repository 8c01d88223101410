import pytest

from pauperlist.models.card import CardMetadata
from pauperlist.services.card_resolver import CardResolver
from pauperlist.services.rate_limit import RateLimitedQueue
from tests.fakes import FakeCardSource


@pytest.fixture
def card_catalog() -> dict[str, CardMetadata]:
    """Scryfall-like card data for testing."""
    cards = [
        CardMetadata(
            name="Lightning Bolt",
            type_line="Instant",
            cmc=1.0,
            mana_cost="{R}",
            oracle_text="Lightning Bolt deals 3 damage to any target.",
            color_identity=("R",),
        ),
        CardMetadata(
            name="Counterspell",
            type_line="Instant",
            cmc=2.0,
            mana_cost="{U}{U}",
            oracle_text="Counter target spell.",
            color_identity=("U",),
        ),
        CardMetadata(
            name="Delver of Secrets // Insectile Aberration",
            type_line="Creature — Human Wizard // Creature — Human Insect",
            cmc=1.0,
            mana_cost="{U}",
            oracle_text="At the beginning of your upkeep, look at the top card of your library.",
            color_identity=("U",),
        ),
        CardMetadata(
            name="Ninja of the Deep Hours",
            type_line="Creature — Human Ninja",
            cmc=4.0,
            mana_cost="{3}{U}",
            oracle_text="Ninjutsu {1}{U}",
            color_identity=("U",),
        ),
        CardMetadata(
            name="Myr Enforcer",
            type_line="Artifact Creature — Myr",
            cmc=7.0,
            mana_cost="{7}",
            oracle_text="Affinity for artifacts",
        ),
        CardMetadata(
            name="Fireball",
            type_line="Sorcery",
            cmc=1.0,
            mana_cost="{X}{R}",
            oracle_text="Fireball deals X damage divided as you choose.",
            color_identity=("R",),
        ),
        CardMetadata(
            name="Preordain",
            type_line="Sorcery",
            cmc=1.0,
            mana_cost="{U}",
            oracle_text="Scry 2, then draw a card.",
            color_identity=("U",),
        ),
        CardMetadata(
            name="Journey to Nowhere",
            type_line="Enchantment",
            cmc=2.0,
            mana_cost="{1}{W}",
            oracle_text="When this enchantment enters, exile target creature.",
            color_identity=("W",),
        ),
        CardMetadata(
            name="Prophetic Prism",
            type_line="Artifact",
            cmc=2.0,
            mana_cost="{2}",
            oracle_text="When this artifact enters, draw a card.",
        ),
        CardMetadata(
            name="Island",
            type_line="Basic Land — Island",
            cmc=0.0,
            oracle_text="({T}: Add {U}.)",
            color_identity=("U",),
        ),
        CardMetadata(
            name="Dimir Aqueduct",
            type_line="Land",
            cmc=0.0,
            oracle_text=(
                "This land enters tapped. When this land enters, return a land you "
                "control to its owner's hand."
            ),
            color_identity=("B", "U"),
        ),
        CardMetadata(
            name="Evolving Wilds",
            type_line="Land",
            cmc=0.0,
            oracle_text="{T}, Sacrifice this land: Search your library for a basic land card.",
        ),
        CardMetadata(
            name="Pyroblast",
            type_line="Instant",
            cmc=1.0,
            mana_cost="{R}",
            oracle_text="Choose one — Counter target spell if it's blue.",
            color_identity=("R",),
        ),
        CardMetadata(
            name="Red Elemental Blast",
            type_line="Instant",
            cmc=1.0,
            mana_cost="{R}",
            oracle_text="Choose one — Counter target blue spell.",
            color_identity=("R",),
        ),
        CardMetadata(
            name="Hydroblast",
            type_line="Instant",
            cmc=1.0,
            mana_cost="{U}",
            oracle_text="Choose one — Counter target spell if it's red.",
            color_identity=("U",),
        ),
        CardMetadata(
            name="Lórien Revealed",
            type_line="Sorcery",
            cmc=5.0,
            mana_cost="{3}{U}{U}",
            oracle_text="Draw three cards. Islandcycling {1}",
            color_identity=("U",),
        ),
    ]
    return {card.name: card for card in cards}


@pytest.fixture
def fake_source(card_catalog: dict[str, CardMetadata]) -> FakeCardSource:
    """Fake Scryfall with the test catalog."""
    return FakeCardSource(card_catalog)


@pytest.fixture
def instant_queue() -> RateLimitedQueue:
    """Request queue without any delay."""
    return RateLimitedQueue(min_interval=0)


@pytest.fixture
def resolver(fake_source: FakeCardSource, instant_queue: RateLimitedQueue) -> CardResolver:
    """Resolver over the fake source with no whitelist."""
    return CardResolver(fake_source, queue=instant_queue)


@pytest.fixture
def sample_decklist() -> str:
    """Small decklist covering every section."""
    return """4 Delver of Secrets // Insectile Aberration
2 Myr Enforcer
4 Lightning Bolt
4 Counterspell
1 Fireball
4 Preordain
2 Journey to Nowhere
2 Prophetic Prism
12 Island
2 Dimir Aqueduct
1 Evolving Wilds

Sideboard
2 Pyroblast
1 Red Elemental Blast
2 Hydroblast"""
