"""
Combat log parser for World of Warcraft raid logs.

Turns combat log lines into typed records and aggregates them into raid
metrics: damage and healing by source, damage taken by spell, interrupts,
dispels and boss encounter windows.
"""

__version__ = "0.1.0"
__author__ = "Frostparse Team"
