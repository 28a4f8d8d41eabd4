"""
Configuration loader for custom WoW data mappings.

Boss names and GUID prefixes change with content patches; this lets users
supply them via YAML instead of editing ``wow_data``.
"""

import yaml
import logging
from pathlib import Path
from typing import Dict, Optional, Any

from . import wow_data

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and applies custom configuration from YAML files."""

    @staticmethod
    def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to custom config file. If None, looks for:
                        1. frostparse.yaml in current directory
                        2. config/frostparse.yaml
                        3. ~/.frostparse/frostparse.yaml

        Returns:
            Configuration dictionary
        """
        search_paths = [
            Path("frostparse.yaml"),
            Path("config/frostparse.yaml"),
            Path.home() / ".frostparse" / "frostparse.yaml",
        ]

        if config_path:
            search_paths.insert(0, Path(config_path))

        for path in search_paths:
            if path.exists():
                try:
                    with open(path, "r") as f:
                        config = yaml.safe_load(f) or {}
                except (OSError, yaml.YAMLError) as e:
                    logger.error(f"Failed to load config from {path}: {e}")
                    continue
                if not isinstance(config, dict):
                    logger.error(f"Ignoring config {path}: top level must be a mapping")
                    continue
                logger.info(f"Loaded configuration from {path}")
                return config

        logger.debug("No custom configuration file found, using defaults")
        return {}

    @staticmethod
    def apply_config(config: Dict[str, Any]) -> None:
        """
        Apply custom configuration to the wow_data module.

        Args:
            config: Configuration dictionary from YAML
        """
        # Replace the boss list
        if "boss_names" in config:
            names = ConfigLoader._string_list(config["boss_names"], "boss_names")
            if names is not None:
                wow_data.BOSS_NAMES[:] = names
                logger.debug(f"Replaced boss names: {len(names)} entries")

        # Extend the boss list
        if "extra_boss_names" in config:
            names = ConfigLoader._string_list(config["extra_boss_names"], "extra_boss_names")
            for name in names or []:
                if name not in wow_data.BOSS_NAMES:
                    wow_data.BOSS_NAMES.append(name)
                    logger.debug(f"Added boss name: {name}")

        # GUID prefixes
        if "id_prefixes" in config:
            prefixes = config["id_prefixes"]
            if not isinstance(prefixes, dict):
                logger.warning(f"Invalid id_prefixes, expected a mapping: {prefixes!r}")
            else:
                for kind, prefix in prefixes.items():
                    if kind not in wow_data.ID_PREFIXES:
                        logger.warning(f"Unknown actor kind in id_prefixes: {kind}")
                    elif not isinstance(prefix, str) or not prefix:
                        logger.warning(f"Invalid {kind} ID prefix: {prefix!r}")
                    else:
                        wow_data.ID_PREFIXES[kind] = prefix
                        logger.debug(f"Set {kind} ID prefix: {prefix}")

        logger.info("Custom configuration applied successfully")

    @staticmethod
    def _string_list(value: Any, key: str) -> Optional[list]:
        if not isinstance(value, list):
            logger.warning(f"Invalid {key}, expected a list: {value!r}")
            return None
        names = []
        for item in value:
            if isinstance(item, str) and item:
                names.append(item)
            else:
                logger.warning(f"Invalid entry in {key}: {item!r}")
        return names


def load_and_apply_config(config_path: Optional[str] = None) -> None:
    """
    Load and apply configuration in one step.

    Args:
        config_path: Optional path to custom config file
    """
    loader = ConfigLoader()
    config = loader.load_config(config_path)
    if config:
        loader.apply_config(config)
