"""
Event types and record classes for WoW combat log lines.

Every line becomes a ``CombatLogRecord``: a common header plus at most one
prefix shape and at most one suffix shape. Which shapes are present is
decided by the event type (see ``schemas.EventSchema``).
"""

from datetime import datetime
from typing import Optional, Union
from dataclasses import dataclass
from enum import Enum


class EventType(str, Enum):
    """Enumeration of known event types."""

    # Damage events
    SWING_DAMAGE = "SWING_DAMAGE"
    SPELL_DAMAGE = "SPELL_DAMAGE"
    SPELL_PERIODIC_DAMAGE = "SPELL_PERIODIC_DAMAGE"
    RANGE_DAMAGE = "RANGE_DAMAGE"
    DAMAGE_SHIELD = "DAMAGE_SHIELD"
    DAMAGE_SPLIT = "DAMAGE_SPLIT"
    ENVIRONMENTAL_DAMAGE = "ENVIRONMENTAL_DAMAGE"
    SPELL_EXTRA_ATTACKS = "SPELL_EXTRA_ATTACKS"
    SPELL_INSTAKILL = "SPELL_INSTAKILL"

    # Miss events
    SWING_MISSED = "SWING_MISSED"
    SPELL_MISSED = "SPELL_MISSED"
    SPELL_PERIODIC_MISSED = "SPELL_PERIODIC_MISSED"
    RANGE_MISSED = "RANGE_MISSED"
    DAMAGE_SHIELD_MISSED = "DAMAGE_SHIELD_MISSED"

    # Healing and power events
    SPELL_HEAL = "SPELL_HEAL"
    SPELL_PERIODIC_HEAL = "SPELL_PERIODIC_HEAL"
    SPELL_DRAIN = "SPELL_DRAIN"
    SPELL_PERIODIC_LEECH = "SPELL_PERIODIC_LEECH"
    SPELL_ENERGIZE = "SPELL_ENERGIZE"
    SPELL_PERIODIC_ENERGIZE = "SPELL_PERIODIC_ENERGIZE"

    # Aura events
    SPELL_AURA_APPLIED = "SPELL_AURA_APPLIED"
    SPELL_AURA_APPLIED_DOSE = "SPELL_AURA_APPLIED_DOSE"
    SPELL_AURA_REFRESH = "SPELL_AURA_REFRESH"
    SPELL_AURA_REMOVED = "SPELL_AURA_REMOVED"
    SPELL_AURA_REMOVED_DOSE = "SPELL_AURA_REMOVED_DOSE"

    # Cast events
    SPELL_CAST_START = "SPELL_CAST_START"
    SPELL_CAST_SUCCESS = "SPELL_CAST_SUCCESS"
    SPELL_CAST_FAILED = "SPELL_CAST_FAILED"

    # Special events
    SPELL_CREATE = "SPELL_CREATE"
    SPELL_SUMMON = "SPELL_SUMMON"
    SPELL_RESURRECT = "SPELL_RESURRECT"
    SPELL_INTERRUPT = "SPELL_INTERRUPT"
    SPELL_DISPEL = "SPELL_DISPEL"
    ENCHANT_APPLIED = "ENCHANT_APPLIED"
    ENCHANT_REMOVED = "ENCHANT_REMOVED"
    PARTY_KILL = "PARTY_KILL"
    UNIT_DIED = "UNIT_DIED"


class AuraType(str, Enum):
    """Whether an aura is helpful or harmful."""

    BUFF = "BUFF"
    DEBUFF = "DEBUFF"


# Prefix shapes


@dataclass(frozen=True)
class SpellPrefix:
    """Spell metadata for SPELL_, RANGE_ and DAMAGE_ events."""

    spell_id: int
    spell_name: str
    spell_school: int


@dataclass(frozen=True)
class EnchantPrefix:
    """Item enchant metadata for ENCHANT_ events."""

    spell_name: str
    item_id: int
    item_name: str


@dataclass(frozen=True)
class EnvironmentalPrefix:
    """Cause of environmental damage (falling, lava, ...)."""

    environmental_type: str


# Suffix shapes


@dataclass(frozen=True)
class DamageSuffix:
    amount: int
    overkill: int
    school: int
    resisted: int = 0
    blocked: int = 0
    absorbed: int = 0
    critical: bool = False
    glancing: bool = False
    crushing: bool = False


@dataclass(frozen=True)
class HealSuffix:
    amount: int
    overhealing: int
    absorbed: int = 0
    critical: bool = False

    @property
    def effective_healing(self) -> int:
        """Healing that actually landed (excluding overhealing)."""
        return max(0, self.amount - self.overhealing)


@dataclass(frozen=True)
class MissSuffix:
    """Why a swing or spell missed, e.g. DODGE, PARRY, ABSORB."""

    miss_type: str
    amount_missed: int = 0


@dataclass(frozen=True)
class AuraSuffix:
    aura_type: AuraType
    stacks: int = 0


@dataclass(frozen=True)
class EnergizeSuffix:
    """Power gained (or lost, when negative) by the target."""

    amount: int
    power_type: int


@dataclass(frozen=True)
class InterruptSuffix:
    """The spell that was interrupted."""

    extra_spell_id: int
    extra_spell_name: str
    extra_spell_school: int


@dataclass(frozen=True)
class ExtraAttacksSuffix:
    amount: int


@dataclass(frozen=True)
class DispelSuffix:
    """The aura that was dispelled or stolen."""

    extra_spell_id: int
    extra_spell_name: str
    extra_spell_school: int
    aura_type: AuraType


@dataclass(frozen=True)
class LeechSuffix:
    """Power drained or leeched from the target."""

    amount: int
    power_type: int
    extra_amount: int


Prefix = Union[SpellPrefix, EnchantPrefix, EnvironmentalPrefix]
Suffix = Union[
    DamageSuffix,
    HealSuffix,
    MissSuffix,
    AuraSuffix,
    EnergizeSuffix,
    InterruptSuffix,
    ExtraAttacksSuffix,
    DispelSuffix,
    LeechSuffix,
]


@dataclass(frozen=True)
class CombatLogRecord:
    """A single combat log line."""

    timestamp: datetime
    event_type: str
    source_id: str
    source_name: str
    target_id: str
    target_name: str
    prefix: Optional[Prefix] = None
    suffix: Optional[Suffix] = None

    @property
    def is_known_event(self) -> bool:
        return self.event_type in EventType.__members__

    # Typed views over the prefix slot

    @property
    def spell(self) -> Optional[SpellPrefix]:
        return self.prefix if isinstance(self.prefix, SpellPrefix) else None

    @property
    def enchant(self) -> Optional[EnchantPrefix]:
        return self.prefix if isinstance(self.prefix, EnchantPrefix) else None

    @property
    def environmental(self) -> Optional[EnvironmentalPrefix]:
        return self.prefix if isinstance(self.prefix, EnvironmentalPrefix) else None

    # Typed views over the suffix slot

    @property
    def damage(self) -> Optional[DamageSuffix]:
        return self.suffix if isinstance(self.suffix, DamageSuffix) else None

    @property
    def heal(self) -> Optional[HealSuffix]:
        return self.suffix if isinstance(self.suffix, HealSuffix) else None

    @property
    def miss(self) -> Optional[MissSuffix]:
        return self.suffix if isinstance(self.suffix, MissSuffix) else None

    @property
    def aura(self) -> Optional[AuraSuffix]:
        return self.suffix if isinstance(self.suffix, AuraSuffix) else None

    @property
    def energize(self) -> Optional[EnergizeSuffix]:
        return self.suffix if isinstance(self.suffix, EnergizeSuffix) else None

    @property
    def interrupt(self) -> Optional[InterruptSuffix]:
        return self.suffix if isinstance(self.suffix, InterruptSuffix) else None

    @property
    def extra_attacks(self) -> Optional[ExtraAttacksSuffix]:
        return self.suffix if isinstance(self.suffix, ExtraAttacksSuffix) else None

    @property
    def dispel(self) -> Optional[DispelSuffix]:
        return self.suffix if isinstance(self.suffix, DispelSuffix) else None

    @property
    def leech(self) -> Optional[LeechSuffix]:
        return self.suffix if isinstance(self.suffix, LeechSuffix) else None

    def __repr__(self) -> str:
        return (
            f"CombatLogRecord({self.timestamp.isoformat()} {self.event_type} "
            f"{self.source_name!r} -> {self.target_name!r})"
        )
