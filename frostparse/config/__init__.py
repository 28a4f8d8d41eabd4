"""
Configuration module for the combat log parser.

Provides settings loaded from the environment and the game-world tables
(boss names, GUID prefixes) that can be overridden from YAML.
"""

from .settings import (
    ParserSettings,
    get_settings,
    reload_settings,
    settings
)

__all__ = [
    "ParserSettings",
    "get_settings",
    "reload_settings",
    "settings"
]
