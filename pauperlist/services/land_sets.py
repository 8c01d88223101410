"""
Curated land name sets for Pauper.

Checked by exact name BEFORE any text heuristic. The land classifier walks
these in a fixed priority order, so a name must appear in only one set.
"""

BOUNCELAND: frozenset[str] = frozenset(
    {
        "Azorius Chancery",
        "Boros Garrison",
        "Dimir Aqueduct",
        "Golgari Rot Farm",
        "Gruul Turf",
        "Izzet Boilerworks",
        "Orzhov Basilica",
        "Rakdos Carnarium",
        "Selesnya Sanctuary",
        "Simic Growth Chamber",
        "Guildless Commons",
    }
)

# Two-color artifact lands (Modern Horizons 2 bridges)
ARTIFACT_BI: frozenset[str] = frozenset(
    {
        "Darkmoss Bridge",
        "Drossforge Bridge",
        "Goldmire Bridge",
        "Mistvault Bridge",
        "Razortide Bridge",
        "Rustvale Bridge",
        "Silverbluff Bridge",
        "Slagwoods Bridge",
        "Tanglepool Bridge",
        "Thornglint Bridge",
    }
)

ARTIFACT_MONO: frozenset[str] = frozenset(
    {
        "Ancient Den",
        "Seat of the Synod",
        "Vault of Whispers",
        "Great Furnace",
        "Tree of Tales",
        "Darksteel Citadel",
    }
)

GATES: frozenset[str] = frozenset(
    {
        "Azorius Guildgate",
        "Boros Guildgate",
        "Dimir Guildgate",
        "Golgari Guildgate",
        "Gruul Guildgate",
        "Izzet Guildgate",
        "Orzhov Guildgate",
        "Rakdos Guildgate",
        "Selesnya Guildgate",
        "Simic Guildgate",
        "Basilisk Gate",
        "Black Dragon Gate",
        "Citadel Gate",
        "Cliffgate",
        "Manor Gate",
    }
)

# Lands that produce any color
FIXER: frozenset[str] = frozenset(
    {
        "Gateway Plaza",
        "Rupture Spire",
        "Shimmering Grotto",
        "Transguild Promenade",
        "Unknown Shores",
    }
)

# Two-color taplands; only counted when color identity has exactly 2 colors
TAPLAND_BI: frozenset[str] = frozenset(
    {
        "Bloodfell Caves",
        "Blossoming Sands",
        "Dismal Backwater",
        "Jungle Hollow",
        "Rugged Highlands",
        "Scoured Barrens",
        "Swiftwater Cliffs",
        "Thornwood Falls",
        "Tranquil Cove",
        "Wind-Scarred Crag",
        "Akoum Refuge",
        "Graypelt Refuge",
        "Jwar Isle Refuge",
        "Kazandu Refuge",
        "Sejiri Refuge",
    }
)

# One-color taplands; only counted when color identity has exactly 1 color
TAPLAND_MONO: frozenset[str] = frozenset(
    {
        "Bojuka Bog",
        "Crypt of Agadeem",
        "Halimar Depths",
        "Kabira Crossroads",
        "Khalni Garden",
        "Mortuary Mire",
        "Sejiri Steppe",
        "Soaring Seacliff",
        "Teetering Peaks",
        "Turntimber Grove",
    }
)

FETCH: frozenset[str] = frozenset(
    {
        "Ash Barrens",
        "Evolving Wilds",
        "Myriad Landscape",
        "Terramorphic Expanse",
    }
)

BASIC: frozenset[str] = frozenset(
    {
        "Plains",
        "Island",
        "Swamp",
        "Mountain",
        "Forest",
        "Wastes",
        "Snow-Covered Plains",
        "Snow-Covered Island",
        "Snow-Covered Swamp",
        "Snow-Covered Mountain",
        "Snow-Covered Forest",
        "Snow-Covered Wastes",
    }
)
