"""
Per-event-type callbacks fired as records are parsed.
"""

from typing import Callable, Dict, Optional

from .events import CombatLogRecord, EventType

RecordCallback = Callable[[CombatLogRecord], None]


class EventListener:
    """
    Stores one callback per event type.

    Registering a second callback for the same event type replaces the first.
    """

    def __init__(self):
        self._callbacks: Dict[str, RecordCallback] = {}

    def add_event_listener(self, event_type: str, callback: RecordCallback):
        """Register ``callback`` for ``event_type``."""
        key = event_type.value if isinstance(event_type, EventType) else event_type
        self._callbacks[key] = callback

    def get(self, event_type: str) -> Optional[RecordCallback]:
        """Return the callback for ``event_type``, if any."""
        key = event_type.value if isinstance(event_type, EventType) else event_type
        return self._callbacks.get(key)

    def dispatch(self, record: CombatLogRecord):
        """Invoke the callback registered for the record's event type."""
        callback = self._callbacks.get(record.event_type)
        if callback is not None:
            callback(record)

    def __len__(self) -> int:
        return len(self._callbacks)
