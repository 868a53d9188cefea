"""Logging configuration for finsight.

Logs go to stderr and, when a log directory is configured, to a dated file.
"""

import logging
from datetime import date

from finsight.config import Config

LOGGER_NAME = "finsight"


def setup_logging(config: Config) -> logging.Logger:
    """Set up application logging with console and optional file handlers.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)

    # Clear any existing handlers (in case this is called multiple times)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.log_level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    logger.addHandler(console_handler)

    if config.log_dir is not None:
        config.log_dir.mkdir(parents=True, exist_ok=True)
        log_file_path = config.log_dir / f"finsight-{date.today().isoformat()}.log"
        file_handler = logging.FileHandler(log_file_path)
        file_handler.setLevel(config.log_level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Get the application logger or one of its children.

    Args:
        name: Optional child logger name (e.g., "database")

    Returns:
        The finsight logger instance.
    """
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)
