"""
Unit tests for event categories and actor classification.
"""

from frostparse.config import wow_data
from frostparse.parser.categorizer import (
    EventCategorizer,
    is_damage_event,
    is_healing_event,
    is_overlay_event,
)
from frostparse.parser.events import EventType
from tests.conftest import BOSS, NPC, PLAYER_1


class TestEventCategories:
    """Test event-type categories."""

    def test_damage_events(self):
        assert is_damage_event("SWING_DAMAGE")
        assert is_damage_event(EventType.SPELL_EXTRA_ATTACKS)
        assert is_damage_event("SPELL_INSTAKILL")
        assert not is_damage_event("SPELL_HEAL")
        assert not is_damage_event("ENVIRONMENTAL_DAMAGE")

    def test_healing_events(self):
        assert is_healing_event("SPELL_HEAL")
        assert is_healing_event("SPELL_PERIODIC_HEAL")
        assert not is_healing_event("SPELL_ENERGIZE")

    def test_overlay_events(self):
        assert is_overlay_event("SPELL_AURA_APPLIED")
        assert is_overlay_event("SPELL_INTERRUPT")
        assert is_overlay_event("UNIT_DIED")
        assert not is_overlay_event("SPELL_CAST_SUCCESS")

    def test_leech_is_damage_and_healing(self):
        """SPELL_PERIODIC_LEECH sits in two categories; damage wins."""
        assert is_damage_event("SPELL_PERIODIC_LEECH")
        assert is_healing_event("SPELL_PERIODIC_LEECH")
        assert EventCategorizer.category("SPELL_PERIODIC_LEECH") == "damage"

    def test_category(self):
        assert EventCategorizer.category("SPELL_HEAL") == "healing"
        assert EventCategorizer.category("SPELL_DISPEL") == "overlay"
        assert EventCategorizer.category("SPELL_SUMMON") is None
        assert EventCategorizer.category("NOT_AN_EVENT") is None


class TestActorClassification:
    """Test GUID prefixes and boss names."""

    def test_id_prefixes(self):
        assert wow_data.is_player_id(PLAYER_1[0])
        assert wow_data.is_boss_id(BOSS[0])
        assert wow_data.is_npc_id(NPC[0])

        assert not wow_data.is_player_id(BOSS[0])
        assert not wow_data.is_npc_id(BOSS[0])
        assert not wow_data.is_boss_id("0x0000000000000000")

    def test_actor_kind(self):
        assert EventCategorizer.actor_kind(PLAYER_1[0]) == "player"
        assert EventCategorizer.actor_kind(BOSS[0]) == "boss"
        assert EventCategorizer.actor_kind(NPC[0]) == "npc"
        assert EventCategorizer.actor_kind("0x0000000000000000") is None

    def test_boss_names_are_exact(self):
        assert wow_data.is_boss_name("Lord Marrowgar")
        assert wow_data.is_boss_name("Orgrim's Hammer")
        assert not wow_data.is_boss_name("lord marrowgar")
        assert not wow_data.is_boss_name("Orgrims Hammer")
        assert not wow_data.is_boss_name("Bone Spike")

    def test_display_names(self):
        assert wow_data.get_spell_school_name(16) == "Frost"
        assert wow_data.get_spell_school_name(127) == "Fel"
        assert wow_data.get_spell_school_name(200) == "Unknown (200)"
        assert wow_data.get_power_type_name(6) == "Runic Power"
        assert wow_data.get_power_type_name(-2) == "Health cost"
