"""
Aggregation of combat log records into raid metrics and encounter windows.
"""

from .aggregator import Collector, SummaryStats
from .encounters import Encounter, EncounterTracker, truncate_timestamp

__all__ = ["Collector", "SummaryStats", "Encounter", "EncounterTracker", "truncate_timestamp"]
