"""
Configuration settings for the combat log parser.

Handles environment variables and logging setup for the parser and CLI.
"""

import os
import logging
from datetime import datetime, timedelta
from typing import List, Optional
from dataclasses import dataclass, field


def _current_year() -> int:
    return datetime.now().year


@dataclass
class ParserSettings:
    """Parser and aggregation settings."""

    log_file: str = ""
    reference_year: int = field(default_factory=_current_year)
    time_resolution_seconds: float = 30.0
    log_level: str = "info"
    skip_malformed: bool = False
    config_path: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ParserSettings":
        """Load parser settings from environment variables."""
        year = os.getenv("FROSTPARSE_YEAR")
        return cls(
            log_file=os.getenv("FROSTPARSE_LOG_FILE", ""),
            reference_year=int(year) if year else _current_year(),
            time_resolution_seconds=float(os.getenv("FROSTPARSE_TIME_RESOLUTION", "30")),
            log_level=os.getenv("LOG_LEVEL", "info").lower(),
            skip_malformed=os.getenv("FROSTPARSE_SKIP_MALFORMED", "false").lower() == "true",
            config_path=os.getenv("FROSTPARSE_CONFIG") or None,
        )

    @property
    def time_resolution(self) -> timedelta:
        return timedelta(seconds=self.time_resolution_seconds)

    def get_log_level(self, verbose: bool = False) -> int:
        """Logging level from ``log_level``; ``verbose`` forces DEBUG."""
        if verbose:
            return logging.DEBUG
        return getattr(logging, self.log_level.upper(), logging.INFO)

    def setup_logging(self, verbose: bool = False, handlers: Optional[List[logging.Handler]] = None):
        """
        Configure logging based on settings.

        Args:
            verbose: Log at DEBUG regardless of ``log_level``
            handlers: Handlers to install instead of the default stream handler
        """
        level = self.get_log_level(verbose)

        if handlers:
            for handler in handlers:
                handler.setLevel(level)
            logging.basicConfig(level=level, format="%(message)s", handlers=handlers)
        else:
            logging.basicConfig(
                level=level,
                format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            )

    def validate(self):
        """Validate configuration settings."""
        errors = []

        if self.time_resolution <= timedelta(0):
            errors.append(f"Time resolution must be positive: {self.time_resolution_seconds}")

        if not (1 <= self.reference_year <= 9999):
            errors.append(f"Invalid reference year: {self.reference_year}")

        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Invalid log level: {self.log_level}")

        if self.config_path and not os.path.exists(self.config_path):
            errors.append(f"Config file not found: {self.config_path}")

        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

    def log_configuration(self):
        """Log current configuration."""
        logger = logging.getLogger(__name__)

        logger.info("=== Parser Configuration ===")
        logger.info(f"Log File: {self.log_file or '(none)'}")
        logger.info(f"Reference Year: {self.reference_year}")
        logger.info(f"Time Resolution: {self.time_resolution_seconds:g}s")
        logger.info(f"Skip Malformed Lines: {self.skip_malformed}")
        logger.info(f"Log Level: {self.log_level}")
        logger.info("=== End Configuration ===")


# Global settings instance
settings = ParserSettings.from_env()


def get_settings() -> ParserSettings:
    """Get the global settings instance."""
    return settings


def reload_settings() -> ParserSettings:
    """Reload settings from environment variables."""
    global settings
    settings = ParserSettings.from_env()
    return settings
