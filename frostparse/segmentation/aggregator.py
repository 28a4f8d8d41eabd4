"""
Collector that aggregates combat log records into raid metrics.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping

from ..config import wow_data
from ..parser.categorizer import EventCategorizer
from ..parser.events import CombatLogRecord, EventType
from .encounters import Encounter, EncounterTracker, truncate_timestamp

logger = logging.getLogger(__name__)

_HOSTILE = ("boss", "npc")


def _counter() -> Dict[Any, int]:
    return defaultdict(int)


@dataclass
class SummaryStats:
    """
    Raid metrics for one run over a record sequence.

    Over-time mappings are keyed by bucket start time; the rest by actor
    or spell name. ``Collector.run`` freezes the mappings before returning.
    """

    damage_done_over_time: Mapping[datetime, int] = field(default_factory=_counter)
    healing_done_over_time: Mapping[datetime, int] = field(default_factory=_counter)
    damage_taken_over_time: Mapping[datetime, int] = field(default_factory=_counter)
    encounters: Mapping[str, Encounter] = field(default_factory=dict)
    damage_by_source: Mapping[str, int] = field(default_factory=_counter)
    healing_by_source: Mapping[str, int] = field(default_factory=_counter)
    damage_taken_by_source: Mapping[str, int] = field(default_factory=_counter)
    damage_taken_by_spell: Mapping[str, int] = field(default_factory=_counter)
    interrupts_by_source: Mapping[str, int] = field(default_factory=_counter)
    dispels_by_source: Mapping[str, int] = field(default_factory=_counter)
    records_processed: int = 0

    def freeze(self) -> "SummaryStats":
        """Return a copy whose mappings are read-only plain dicts."""
        return SummaryStats(
            damage_done_over_time=MappingProxyType(dict(self.damage_done_over_time)),
            healing_done_over_time=MappingProxyType(dict(self.healing_done_over_time)),
            damage_taken_over_time=MappingProxyType(dict(self.damage_taken_over_time)),
            encounters=MappingProxyType(dict(self.encounters)),
            damage_by_source=MappingProxyType(dict(self.damage_by_source)),
            healing_by_source=MappingProxyType(dict(self.healing_by_source)),
            damage_taken_by_source=MappingProxyType(dict(self.damage_taken_by_source)),
            damage_taken_by_spell=MappingProxyType(dict(self.damage_taken_by_spell)),
            interrupts_by_source=MappingProxyType(dict(self.interrupts_by_source)),
            dispels_by_source=MappingProxyType(dict(self.dispels_by_source)),
            records_processed=self.records_processed,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Render as JSON-serializable data with ISO-8601 time keys."""

        def over_time(values: Mapping[datetime, int]) -> Dict[str, int]:
            return {ts.isoformat(): amount for ts, amount in sorted(values.items())}

        return {
            "damage_done": over_time(self.damage_done_over_time),
            "healing_done": over_time(self.healing_done_over_time),
            "damage_taken": over_time(self.damage_taken_over_time),
            "encounter_overlays": {
                name: encounter.to_dict() for name, encounter in self.encounters.items()
            },
            "damage_by_source": dict(self.damage_by_source),
            "healing_by_source": dict(self.healing_by_source),
            "damage_taken_by_source": dict(self.damage_taken_by_source),
            "damage_taken_by_spell": dict(self.damage_taken_by_spell),
            "interrupts_by_source": dict(self.interrupts_by_source),
            "dispels_by_source": dict(self.dispels_by_source),
            "records_processed": self.records_processed,
        }


class Collector:
    """
    Aggregates a record sequence into SummaryStats.

    Records must be fed in log order: encounter spans and time buckets
    assume non-decreasing timestamps. The collector keeps no state between
    runs besides its settings.
    """

    def __init__(
        self,
        time_resolution: timedelta = timedelta(seconds=30),
        legacy_overlay_counts: bool = True,
    ):
        """
        Initialize the collector.

        Args:
            time_resolution: Bucket size for the over-time metrics
            legacy_overlay_counts: Count every overlay event (auras, deaths,
                interrupts, dispels) as both an interrupt and a dispel. When
                False, only SPELL_INTERRUPT and SPELL_DISPEL are counted.
        """
        if time_resolution <= timedelta(0):
            raise ValueError(f"Time resolution must be positive, got {time_resolution}")
        self.time_resolution = time_resolution
        self.legacy_overlay_counts = legacy_overlay_counts

    def run(self, records: Iterable[CombatLogRecord]) -> SummaryStats:
        """
        Aggregate records into raid metrics.

        Args:
            records: Records in log order

        Returns:
            Frozen SummaryStats
        """
        stats = SummaryStats()
        tracker = EncounterTracker(self.time_resolution)
        stats.encounters = tracker.encounters

        for record in records:
            self._handle_event(stats, tracker, record)
            stats.records_processed += 1

        logger.info(
            f"Aggregated {stats.records_processed} records, "
            f"{len(tracker.encounters)} boss encounters"
        )
        return stats.freeze()

    def _handle_event(
        self, stats: SummaryStats, tracker: EncounterTracker, record: CombatLogRecord
    ):
        """Aggregate one record based on its category and source/target kinds."""
        category = EventCategorizer.category(record.event_type)

        if category == "damage":
            self._process_damage(stats, tracker, record)
        elif category == "healing":
            self._process_heal(stats, record)
        elif category == "overlay":
            self._process_overlay(stats, record)

    def _process_damage(
        self, stats: SummaryStats, tracker: EncounterTracker, record: CombatLogRecord
    ):
        amount = 0
        if record.extra_attacks is not None:
            amount = record.extra_attacks.amount
        elif record.damage is not None:
            amount = record.damage.amount

        if wow_data.is_boss_name(record.target_name):
            tracker.record_hit(record.target_name, record.timestamp)

        bucket = truncate_timestamp(record.timestamp, self.time_resolution)
        source_kind = EventCategorizer.actor_kind(record.source_id)
        target_kind = EventCategorizer.actor_kind(record.target_id)

        if source_kind in _HOSTILE and target_kind == "player":
            # NPC -> player, damage taken
            stats.damage_taken_by_source[record.source_name] += amount
            stats.damage_taken_over_time[bucket] += amount
            if record.spell is not None:
                stats.damage_taken_by_spell[record.spell.spell_name] += amount
        elif source_kind == "player" and target_kind in _HOSTILE:
            # player -> NPC, damage done
            stats.damage_by_source[record.source_name] += amount
            stats.damage_done_over_time[bucket] += amount

    def _process_heal(self, stats: SummaryStats, record: CombatLogRecord):
        if EventCategorizer.actor_kind(record.source_id) != "player":
            return
        amount = record.heal.amount if record.heal is not None else 0
        bucket = truncate_timestamp(record.timestamp, self.time_resolution)
        stats.healing_by_source[record.source_name] += amount
        stats.healing_done_over_time[bucket] += amount

    def _process_overlay(self, stats: SummaryStats, record: CombatLogRecord):
        if self.legacy_overlay_counts:
            stats.dispels_by_source[record.source_name] += 1
            stats.interrupts_by_source[record.source_name] += 1
        elif record.event_type == EventType.SPELL_INTERRUPT:
            stats.interrupts_by_source[record.source_name] += 1
        elif record.event_type == EventType.SPELL_DISPEL:
            stats.dispels_by_source[record.source_name] += 1
