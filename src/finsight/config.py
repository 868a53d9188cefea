"""Configuration management for finsight.

Settings come from environment variables, with defaults under ~/.finsight.
Command-line options override them.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Application configuration."""

    db_path: Path
    log_level: str
    log_dir: Optional[Path]

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        base_dir = Path.home() / ".finsight"
        return cls(
            db_path=base_dir / "finsight.db",
            log_level="WARNING",
            log_dir=None,
        )

    @classmethod
    def from_env(cls) -> "Config":
        """Create a Config from FINSIGHT_* environment variables."""
        config = cls.default()

        db_path = os.environ.get("FINSIGHT_DB_PATH")
        if db_path:
            config.db_path = Path(db_path)

        log_level = os.environ.get("FINSIGHT_LOG_LEVEL")
        if log_level:
            config.log_level = normalize_log_level(log_level)

        log_dir = os.environ.get("FINSIGHT_LOG_DIR")
        if log_dir:
            config.log_dir = Path(log_dir)

        return config


def normalize_log_level(level: str) -> str:
    """Validate and upper-case a log level name.

    Raises:
        ValueError: If the level is not a standard logging level
    """
    normalized = level.strip().upper()
    if normalized not in LOG_LEVELS:
        raise ValueError(
            f"Unknown log level '{level}'. Supported levels: {', '.join(LOG_LEVELS)}"
        )
    return normalized


def load_config(
    db_path: Optional[str] = None, log_level: Optional[str] = None
) -> Config:
    """Load configuration from the environment and apply explicit overrides.

    Args:
        db_path: Optional database path overriding FINSIGHT_DB_PATH
        log_level: Optional log level overriding FINSIGHT_LOG_LEVEL

    Returns:
        Config object
    """
    config = Config.from_env()
    if db_path:
        config.db_path = Path(db_path)
    if log_level:
        config.log_level = normalize_log_level(log_level)
    return config
