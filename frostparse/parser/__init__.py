"""
Combat log parser module for processing WoW combat log files.
"""

from .errors import CombatLogParseError
from .events import CombatLogRecord, EventType
from .listeners import EventListener
from .parser import CombatLogParser
from .schemas import EventSchema
from .tokenizer import LineTokenizer

__all__ = [
    "CombatLogParseError",
    "CombatLogParser",
    "CombatLogRecord",
    "EventListener",
    "EventSchema",
    "EventType",
    "LineTokenizer",
]
