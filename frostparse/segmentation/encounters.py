"""
Boss encounter windows derived from damage dealt to bosses.
"""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Dict


EPOCH = datetime(1970, 1, 1)


def truncate_timestamp(timestamp: datetime, resolution: timedelta) -> datetime:
    """
    Round a timestamp down to a multiple of ``resolution`` since the epoch.

    Args:
        timestamp: Record timestamp
        resolution: Bucket size, must be positive

    Returns:
        Start of the bucket containing ``timestamp``
    """
    if resolution <= timedelta(0):
        raise ValueError(f"Time resolution must be positive, got {resolution}")
    return EPOCH + ((timestamp - EPOCH) // resolution) * resolution


@dataclass(frozen=True)
class Encounter:
    """First and last (bucketed) time a boss took damage."""

    start_time: datetime
    end_time: datetime

    @property
    def duration(self) -> float:
        """Duration in seconds."""
        return (self.end_time - self.start_time).total_seconds()

    def to_dict(self) -> Dict[str, str]:
        return {
            "start_time": self.start_time.isoformat(),
            "end_time": self.end_time.isoformat(),
        }


class EncounterTracker:
    """
    Tracks one encounter span per boss name.

    The first hit opens the span; every later hit moves its end to that
    hit's bucket. Records are expected in timestamp order, an earlier
    timestamp arriving late moves the end backwards.
    """

    def __init__(self, resolution: timedelta):
        self.resolution = resolution
        self.encounters: Dict[str, Encounter] = {}

    def record_hit(self, boss_name: str, timestamp: datetime) -> Encounter:
        now = truncate_timestamp(timestamp, self.resolution)
        encounter = self.encounters.get(boss_name)
        if encounter is None:
            encounter = Encounter(start_time=now, end_time=now)
        else:
            encounter = replace(encounter, end_time=now)
        self.encounters[boss_name] = encounter
        return encounter
