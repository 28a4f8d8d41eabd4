"""
World of Warcraft data mappings and configurations.

This module contains the game-world tables the parser and collector rely on:
raid boss names, actor GUID prefixes, spell schools and power types. The
tables are module-level so that ``ConfigLoader`` can replace them for other
content patches.
"""

from typing import Dict, List


# Icecrown Citadel raid bosses, matched exactly against target names
BOSS_NAMES: List[str] = [
    "Lord Marrowgar",
    "Lady Deathwhisper",
    "The Skybreaker",
    "Orgrim's Hammer",
    "Deathbringer Saurfang",
    "Rotface",
    "Festergut",
    "Professor Putricide",
    "Valithria Dreamwalker",
    "Sindragosa",
    "The Lich King",
]

# GUID prefixes identifying the kind of actor
ID_PREFIXES: Dict[str, str] = {
    "boss": "0xF15",
    "npc": "0xF13",
    "player": "0x07",
}

SPELL_SCHOOL_NAMES: Dict[int, str] = {
    # Single schools
    1: "Physical",
    2: "Holy",
    4: "Fire",
    8: "Nature",
    16: "Frost",
    32: "Shadow",
    64: "Arcane",

    # Double schools
    3: "Holystrike",
    5: "Flamestrike",
    6: "Radiant",
    9: "Stormstrike",
    10: "Holystorm",
    12: "Volcanic",
    17: "Froststrike",
    18: "Holyfrost",
    20: "Frostfire",
    24: "Froststorm",
    33: "Shadowstrike",
    34: "Twilight",
    36: "Shadowflame",
    40: "Plague",
    48: "Shadowfrost",
    65: "Spellstrike",
    66: "Divine",
    68: "Spellfire",
    72: "Astral",
    80: "Spellfrost",
    96: "Spellshadow",

    # Multi schools
    28: "Elemental",
    62: "Chromatic",
    106: "Cosmic",
    124: "Chaos",
    126: "Magic",
    127: "Fel",
}

POWER_TYPE_NAMES: Dict[int, str] = {
    -2: "Health cost",
    -1: "None",
    0: "Mana",
    1: "Rage",
    2: "Focus",
    3: "Energy",
    4: "Combo Points",
    5: "Runes",
    6: "Runic Power",
    7: "Soul Shards",
}


def is_boss_name(name: str) -> bool:
    """Check if a display name is a known raid boss (exact match)."""
    return name in BOSS_NAMES


def is_boss_id(guid: str) -> bool:
    """Check if a GUID belongs to a raid boss."""
    return guid.startswith(ID_PREFIXES["boss"])


def is_npc_id(guid: str) -> bool:
    """Check if a GUID belongs to a non-player character."""
    return guid.startswith(ID_PREFIXES["npc"])


def is_player_id(guid: str) -> bool:
    """Check if a GUID belongs to a player."""
    return guid.startswith(ID_PREFIXES["player"])


def get_spell_school_name(school: int) -> str:
    """Get the display name for a spell school bitmask."""
    return SPELL_SCHOOL_NAMES.get(school, f"Unknown ({school})")


def get_power_type_name(power_type: int) -> str:
    """Get the display name for a power type."""
    return POWER_TYPE_NAMES.get(power_type, f"Unknown ({power_type})")
