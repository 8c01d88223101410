"""
Section classification from a Scryfall type line.

Priority (first match wins):
    Sideboard > Creature > Land > Instant > Sorcery > Enchantment > Artifact

Sideboard placement is positional and beats every type. Creature beats the
other types so artifact creatures, enchantment creatures and adventure
creatures land in Creatures.
"""

from pauperlist.models.card import Section

# Type keyword -> section, checked in order after the sideboard flag
_TYPE_PRIORITY: tuple[tuple[str, Section], ...] = (
    ("Creature", Section.CREATURE),
    ("Land", Section.LAND),
    ("Instant", Section.INSTANT),
    ("Sorcery", Section.SORCERY),
    ("Enchantment", Section.ENCHANTMENT),
    ("Artifact", Section.ARTIFACT),
)

# Malformed or unexpected type lines
FALLBACK_SECTION = Section.SORCERY


def section_from_type_line(type_line: str, is_sideboard: bool) -> Section:
    """Assign a card to its output section."""
    if is_sideboard:
        return Section.SIDEBOARD

    for keyword, section in _TYPE_PRIORITY:
        if keyword in type_line:
            return section

    return FALLBACK_SECTION
