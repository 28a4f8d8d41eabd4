"""
Pytest configuration and shared fixtures for the test suite.
"""

import pytest
from pathlib import Path

import sys

sys.path.insert(0, str(Path(__file__).parent.parent))

from frostparse.config import wow_data


REFERENCE_YEAR = 2023

PLAYER_1 = ("0x0700000000000001", "Jaina")
PLAYER_2 = ("0x0700000000000002", "Uther")
PLAYER_3 = ("0x0700000000000003", "Tirion")
BOSS = ("0xF150008F4600001C", "Lord Marrowgar")
NPC = ("0xF130008F46000123", "Bone Spike")
NOBODY = ("0x0000000000000000", "nil")


def make_line(event_type, *payload, source=PLAYER_1, target=BOSS, ts="10/23 21:14:36.123"):
    """Build a combat log line from an event type and its prefix/suffix fields."""
    fields = [
        event_type,
        source[0],
        f'"{source[1]}"' if source[1] != "nil" else "nil",
        "0x514",
        target[0],
        f'"{target[1]}"' if target[1] != "nil" else "nil",
        "0x10a48",
    ]
    fields.extend(str(p) for p in payload)
    return f"{ts}  {','.join(fields)}"


# One valid payload per layout, keyed by event type
SAMPLE_PAYLOADS = {
    "UNIT_DIED": (),
    "SPELL_INSTAKILL": ("72905", '"Frostbolt Volley"', "0x10"),
    "PARTY_KILL": (),
    "SWING_DAMAGE": ("500", "0", "1", "nil", "nil", "nil", "nil", "nil", "nil"),
    "SWING_MISSED": ("DODGE",),
    "SPELL_DAMAGE": ("42842", '"Frostbolt"', "0x10", "1200", "0", "16", "100", "nil", "nil", "1"),
    "SPELL_PERIODIC_DAMAGE": ("47813", '"Corruption"', "0x20", "800", "0", "32", "0", "0", "0", "nil"),
    "DAMAGE_SHIELD": ("7294", '"Retribution Aura"', "0x2", "112", "0", "2", "0", "0", "0", "nil"),
    "DAMAGE_SPLIT": ("6940", '"Hand of Sacrifice"', "0x2", "300", "0", "1", "0", "0", "0", "nil"),
    "RANGE_DAMAGE": ("75", '"Auto Shot"', "0x1", "2100", "0", "1", "0", "0", "0", "1"),
    "ENVIRONMENTAL_DAMAGE": ("FALLING", "850", "0", "1", "0", "0", "0", "nil", "nil", "nil"),
    "SPELL_DRAIN": ("5138", '"Drain Mana"', "0x20", "900", "0", "0"),
    "SPELL_PERIODIC_LEECH": ("47857", '"Drain Life"', "0x20", "100", "-2", "50"),
    "SPELL_MISSED": ("42842", '"Frostbolt"', "0x10", "RESIST", "512"),
    "SPELL_PERIODIC_MISSED": ("47813", '"Corruption"', "0x20", "IMMUNE"),
    "RANGE_MISSED": ("75", '"Auto Shot"', "0x1", "MISS"),
    "DAMAGE_SHIELD_MISSED": ("7294", '"Retribution Aura"', "0x2", "ABSORB", "112"),
    "SPELL_AURA_APPLIED": ("48161", '"Power Word: Fortitude"', "0x2", "BUFF"),
    "SPELL_AURA_APPLIED_DOSE": ("69065", '"Impaled"', "0x1", "DEBUFF", "2"),
    "SPELL_AURA_REFRESH": ("48161", '"Power Word: Fortitude"', "0x2", "BUFF"),
    "SPELL_AURA_REMOVED": ("48161", '"Power Word: Fortitude"', "0x2", "BUFF"),
    "SPELL_AURA_REMOVED_DOSE": ("69065", '"Impaled"', "0x1", "DEBUFF", "1"),
    "SPELL_HEAL": ("48782", '"Holy Light"', "0x2", "300", "0", "0", "nil"),
    "SPELL_PERIODIC_HEAL": ("48068", '"Renew"', "0x2", "1500", "200", "0", "1"),
    "SPELL_ENERGIZE": ("31786", '"Spiritual Attunement"', "0x2", "120", "0"),
    "SPELL_PERIODIC_ENERGIZE": ("29166", '"Innervate"', "0x8", "450", "0"),
    "SPELL_INTERRUPT": ("2139", '"Counterspell"', "0x40", "69076", '"Bone Storm"', "1"),
    "SPELL_EXTRA_ATTACKS": ("20178", '"Reckoning"', "0x1", "1"),
    "SPELL_DISPEL": ("4987", '"Cleanse"', "0x2", "69065", '"Impaled"', "1", "DEBUFF"),
    "SPELL_CAST_START": ("48782", '"Holy Light"', "0x2"),
    "SPELL_CAST_SUCCESS": ("48782", '"Holy Light"', "0x2"),
    "SPELL_CAST_FAILED": ("48782", '"Holy Light"', "0x2", '"Not yet recovered"'),
    "SPELL_CREATE": ("58887", '"Ritual of Souls"', "0x20"),
    "SPELL_RESURRECT": ("48950", '"Redemption"', "0x2"),
    "SPELL_SUMMON": ("49206", '"Summon Gargoyle"', "0x1"),
    "ENCHANT_APPLIED": ('"Spellpower"', "44467", '"Staff of Antonidas"'),
    "ENCHANT_REMOVED": ('"Spellpower"', "44467", '"Staff of Antonidas"'),
}


@pytest.fixture(autouse=True)
def restore_wow_data():
    """Undo any changes tests make to the boss and ID prefix tables."""
    boss_names = list(wow_data.BOSS_NAMES)
    id_prefixes = dict(wow_data.ID_PREFIXES)
    yield
    wow_data.BOSS_NAMES[:] = boss_names
    wow_data.ID_PREFIXES.clear()
    wow_data.ID_PREFIXES.update(id_prefixes)


@pytest.fixture
def sample_log_lines():
    """A short raid log: melee on a boss, a heal, a buff."""
    return [
        make_line("SWING_DAMAGE", *SAMPLE_PAYLOADS["SWING_DAMAGE"],
                  source=PLAYER_1, target=BOSS, ts="10/23 21:14:36.123"),
        make_line("SPELL_HEAL", *SAMPLE_PAYLOADS["SPELL_HEAL"],
                  source=PLAYER_2, target=PLAYER_3, ts="10/23 21:14:37.456"),
        make_line("SPELL_AURA_APPLIED", *SAMPLE_PAYLOADS["SPELL_AURA_APPLIED"],
                  source=PLAYER_1, target=PLAYER_1, ts="10/23 21:14:38.000"),
    ]


@pytest.fixture
def log_file(tmp_path, sample_log_lines):
    """Write the sample log to a temporary file."""
    path = tmp_path / "WoWCombatLog.txt"
    path.write_text("\n".join(sample_log_lines) + "\n", encoding="utf-8")
    return path
