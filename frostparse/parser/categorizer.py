"""
Event categorization for routing records to the right aggregation.
"""

from typing import Optional

from .events import EventType
from ..config import wow_data


class EventCategorizer:
    """
    Fixed event-type categories used by the collector.

    The categories are not disjoint: SPELL_PERIODIC_LEECH is both a damage
    and a healing event. Callers check damage first.
    """

    # Event types that represent damage
    DAMAGE_EVENTS = frozenset({
        EventType.DAMAGE_SHIELD,
        EventType.DAMAGE_SPLIT,
        EventType.RANGE_DAMAGE,
        EventType.SPELL_DAMAGE,
        EventType.SPELL_DRAIN,
        EventType.SPELL_EXTRA_ATTACKS,
        EventType.SPELL_INSTAKILL,
        EventType.SPELL_PERIODIC_DAMAGE,
        EventType.SPELL_PERIODIC_LEECH,
        EventType.SWING_DAMAGE,
    })

    # Event types that represent healing
    HEALING_EVENTS = frozenset({
        EventType.SPELL_HEAL,
        EventType.SPELL_PERIODIC_HEAL,
        EventType.SPELL_PERIODIC_LEECH,
    })

    # Non-damage/healing events overlaid on the timeline
    OVERLAY_EVENTS = frozenset({
        EventType.SPELL_AURA_APPLIED,
        EventType.SPELL_AURA_APPLIED_DOSE,
        EventType.SPELL_AURA_REMOVED,
        EventType.SPELL_AURA_REFRESH,
        EventType.SPELL_AURA_REMOVED_DOSE,
        EventType.SPELL_DISPEL,
        EventType.SPELL_INTERRUPT,
        EventType.UNIT_DIED,
    })

    @classmethod
    def category(cls, event_type: str) -> Optional[str]:
        """
        Get the aggregation category of an event type.

        Args:
            event_type: Raw event type tag

        Returns:
            "damage", "healing", "overlay", or None for other events
        """
        if event_type in cls.DAMAGE_EVENTS:
            return "damage"
        if event_type in cls.HEALING_EVENTS:
            return "healing"
        if event_type in cls.OVERLAY_EVENTS:
            return "overlay"
        return None

    @staticmethod
    def actor_kind(guid: str) -> Optional[str]:
        """Classify a GUID as "boss", "npc" or "player"."""
        if wow_data.is_boss_id(guid):
            return "boss"
        if wow_data.is_npc_id(guid):
            return "npc"
        if wow_data.is_player_id(guid):
            return "player"
        return None


def is_damage_event(event_type: str) -> bool:
    return event_type in EventCategorizer.DAMAGE_EVENTS


def is_healing_event(event_type: str) -> bool:
    return event_type in EventCategorizer.HEALING_EVENTS


def is_overlay_event(event_type: str) -> bool:
    return event_type in EventCategorizer.OVERLAY_EVENTS
