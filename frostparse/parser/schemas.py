"""
Field layouts for each event type.

A combat log line is ``EVENT_TYPE,<base fields>,<prefix fields>,<suffix fields>``.
The base fields are always the same; the prefix and suffix present depend
only on the event type and are listed in ``EventSchema.LAYOUTS``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from .events import EventType


class PrefixKind(Enum):
    SPELL = "SPELL"
    ENCHANT = "ENCHANT"
    ENVIRONMENTAL = "ENVIRONMENTAL"


class SuffixKind(Enum):
    DAMAGE = "DAMAGE"
    HEAL = "HEAL"
    MISS = "MISS"
    AURA = "AURA"
    ENERGIZE = "ENERGIZE"
    INTERRUPT = "INTERRUPT"
    EXTRA_ATTACKS = "EXTRA_ATTACKS"
    DISPEL = "DISPEL"
    LEECH = "LEECH"


# Prefix fields always start right after the base fields
PREFIX_OFFSET = 7


@dataclass(frozen=True)
class EventLayout:
    """Prefix and suffix kinds for one event type."""

    prefix: Optional[PrefixKind] = None
    suffix: Optional[SuffixKind] = None

    @property
    def prefix_offset(self) -> int:
        return PREFIX_OFFSET

    @property
    def suffix_offset(self) -> int:
        """Suffix fields begin where the prefix ends (or where it would start)."""
        if self.prefix is None:
            return PREFIX_OFFSET
        return PREFIX_OFFSET + len(EventSchema.PREFIX_PARAMS[self.prefix])

    @property
    def min_field_count(self) -> int:
        """Number of fields a line needs for this layout to be extracted."""
        if self.suffix is not None:
            return self.suffix_offset + len(EventSchema.SUFFIX_PARAMS[self.suffix])
        if self.prefix is not None:
            return self.suffix_offset
        return PREFIX_OFFSET


_SPELL_ONLY = EventLayout(PrefixKind.SPELL)
_EMPTY = EventLayout()


class EventSchema:
    """
    Defines the expected parameter structure for different event types.
    """

    PREFIX_PARAMS: Dict[PrefixKind, List[str]] = {
        PrefixKind.SPELL: ["spell_id", "spell_name", "spell_school"],
        PrefixKind.ENCHANT: ["spell_name", "item_id", "item_name"],
        PrefixKind.ENVIRONMENTAL: ["environmental_type"],
    }

    # Required suffix parameters
    SUFFIX_PARAMS: Dict[SuffixKind, List[str]] = {
        SuffixKind.DAMAGE: [
            "amount", "overkill", "school", "resisted", "blocked",
            "absorbed", "critical",
        ],
        SuffixKind.HEAL: ["amount", "overhealing", "absorbed", "critical"],
        SuffixKind.MISS: ["miss_type"],
        SuffixKind.AURA: ["aura_type"],
        SuffixKind.ENERGIZE: ["amount", "power_type"],
        SuffixKind.INTERRUPT: ["extra_spell_id", "extra_spell_name", "extra_spell_school"],
        SuffixKind.EXTRA_ATTACKS: ["amount"],
        SuffixKind.DISPEL: [
            "extra_spell_id", "extra_spell_name", "extra_spell_school", "aura_type",
        ],
        SuffixKind.LEECH: ["amount", "power_type", "extra_amount"],
    }

    # Trailing parameters read only when the line carries them
    OPTIONAL_SUFFIX_PARAMS: Dict[SuffixKind, List[str]] = {
        SuffixKind.DAMAGE: ["glancing", "crushing"],
        SuffixKind.MISS: ["amount_missed"],
        SuffixKind.AURA: ["stacks"],
    }

    LAYOUTS: Dict[EventType, EventLayout] = {
        EventType.UNIT_DIED: _EMPTY,
        EventType.SPELL_INSTAKILL: _EMPTY,
        EventType.PARTY_KILL: _EMPTY,

        EventType.SWING_DAMAGE: EventLayout(suffix=SuffixKind.DAMAGE),
        EventType.SWING_MISSED: EventLayout(suffix=SuffixKind.MISS),

        EventType.SPELL_DAMAGE: EventLayout(PrefixKind.SPELL, SuffixKind.DAMAGE),
        EventType.SPELL_PERIODIC_DAMAGE: EventLayout(PrefixKind.SPELL, SuffixKind.DAMAGE),
        EventType.DAMAGE_SHIELD: EventLayout(PrefixKind.SPELL, SuffixKind.DAMAGE),
        EventType.DAMAGE_SPLIT: EventLayout(PrefixKind.SPELL, SuffixKind.DAMAGE),
        EventType.RANGE_DAMAGE: EventLayout(PrefixKind.SPELL, SuffixKind.DAMAGE),
        EventType.ENVIRONMENTAL_DAMAGE: EventLayout(PrefixKind.ENVIRONMENTAL, SuffixKind.DAMAGE),

        EventType.SPELL_DRAIN: EventLayout(PrefixKind.SPELL, SuffixKind.LEECH),
        EventType.SPELL_PERIODIC_LEECH: EventLayout(PrefixKind.SPELL, SuffixKind.LEECH),

        EventType.SPELL_MISSED: EventLayout(PrefixKind.SPELL, SuffixKind.MISS),
        EventType.SPELL_PERIODIC_MISSED: EventLayout(PrefixKind.SPELL, SuffixKind.MISS),
        EventType.RANGE_MISSED: EventLayout(PrefixKind.SPELL, SuffixKind.MISS),
        EventType.DAMAGE_SHIELD_MISSED: EventLayout(PrefixKind.SPELL, SuffixKind.MISS),

        EventType.SPELL_AURA_APPLIED: EventLayout(PrefixKind.SPELL, SuffixKind.AURA),
        EventType.SPELL_AURA_APPLIED_DOSE: EventLayout(PrefixKind.SPELL, SuffixKind.AURA),
        EventType.SPELL_AURA_REFRESH: EventLayout(PrefixKind.SPELL, SuffixKind.AURA),
        EventType.SPELL_AURA_REMOVED: EventLayout(PrefixKind.SPELL, SuffixKind.AURA),
        EventType.SPELL_AURA_REMOVED_DOSE: _SPELL_ONLY,

        EventType.SPELL_HEAL: EventLayout(PrefixKind.SPELL, SuffixKind.HEAL),
        EventType.SPELL_PERIODIC_HEAL: EventLayout(PrefixKind.SPELL, SuffixKind.HEAL),

        EventType.SPELL_ENERGIZE: EventLayout(PrefixKind.SPELL, SuffixKind.ENERGIZE),
        EventType.SPELL_PERIODIC_ENERGIZE: EventLayout(PrefixKind.SPELL, SuffixKind.ENERGIZE),

        EventType.SPELL_INTERRUPT: EventLayout(PrefixKind.SPELL, SuffixKind.INTERRUPT),
        EventType.SPELL_EXTRA_ATTACKS: EventLayout(PrefixKind.SPELL, SuffixKind.EXTRA_ATTACKS),
        EventType.SPELL_DISPEL: EventLayout(PrefixKind.SPELL, SuffixKind.DISPEL),

        EventType.SPELL_CAST_START: _SPELL_ONLY,
        EventType.SPELL_CAST_SUCCESS: _SPELL_ONLY,
        EventType.SPELL_CAST_FAILED: _SPELL_ONLY,
        EventType.SPELL_CREATE: _SPELL_ONLY,
        EventType.SPELL_RESURRECT: _SPELL_ONLY,
        EventType.SPELL_SUMMON: _SPELL_ONLY,

        EventType.ENCHANT_APPLIED: EventLayout(PrefixKind.ENCHANT),
        EventType.ENCHANT_REMOVED: EventLayout(PrefixKind.ENCHANT),
    }

    @classmethod
    def get_layout(cls, event_type: str) -> Optional[EventLayout]:
        """
        Look up the layout for an event type.

        Args:
            event_type: Raw event type tag from the log

        Returns:
            EventLayout, or None when the tag is not a known event type
        """
        try:
            return cls.LAYOUTS[EventType(event_type)]
        except (ValueError, KeyError):
            return None
