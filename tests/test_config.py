"""Tests for configuration and logging setup."""

import logging
from pathlib import Path

import pytest

from finsight.config import Config, load_config, normalize_log_level
from finsight.logger import LOGGER_NAME, get_logger, setup_logging


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("FINSIGHT_DB_PATH", "FINSIGHT_LOG_LEVEL", "FINSIGHT_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_default_config(clean_env):
    config = Config.from_env()

    assert config.db_path == Path.home() / ".finsight" / "finsight.db"
    assert config.log_level == "WARNING"
    assert config.log_dir is None


def test_config_from_env(clean_env, tmp_path):
    clean_env.setenv("FINSIGHT_DB_PATH", str(tmp_path / "money.db"))
    clean_env.setenv("FINSIGHT_LOG_LEVEL", "debug")
    clean_env.setenv("FINSIGHT_LOG_DIR", str(tmp_path / "logs"))

    config = Config.from_env()

    assert config.db_path == tmp_path / "money.db"
    assert config.log_level == "DEBUG"
    assert config.log_dir == tmp_path / "logs"


def test_load_config_overrides_env(clean_env, tmp_path):
    clean_env.setenv("FINSIGHT_DB_PATH", str(tmp_path / "env.db"))
    clean_env.setenv("FINSIGHT_LOG_LEVEL", "INFO")

    config = load_config(db_path=str(tmp_path / "cli.db"), log_level="error")

    assert config.db_path == tmp_path / "cli.db"
    assert config.log_level == "ERROR"


def test_normalize_log_level():
    assert normalize_log_level(" info ") == "INFO"
    with pytest.raises(ValueError, match="Unknown log level"):
        normalize_log_level("verbose")


def test_setup_logging_console_only(clean_env):
    config = Config.default()
    config.log_level = "INFO"

    logger = setup_logging(config)

    assert logger.name == LOGGER_NAME
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_setup_logging_writes_file(clean_env, tmp_path):
    config = Config.default()
    config.log_level = "DEBUG"
    config.log_dir = tmp_path / "logs"

    logger = setup_logging(config)
    get_logger("database").debug("hello from the database layer")
    for handler in logger.handlers:
        handler.flush()

    log_files = list(config.log_dir.glob("finsight-*.log"))
    assert len(log_files) == 1
    assert "hello from the database layer" in log_files[0].read_text()

    # Calling again replaces handlers instead of stacking them
    config.log_dir = None
    setup_logging(config)
    assert len(logging.getLogger(LOGGER_NAME).handlers) == 1


def test_get_logger_children():
    assert get_logger().name == "finsight"
    assert get_logger("cli").name == "finsight.cli"
