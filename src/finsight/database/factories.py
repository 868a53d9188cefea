"""Database factory functions for creating database instances."""

from pathlib import Path
from typing import Optional

from finsight.config import Config
from finsight.database.sqlalchemy_db import SQLAlchemyDatabase


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks FINSIGHT_DB_PATH
            environment variable, then defaults to ~/.finsight/finsight.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        db_path = Config.from_env().db_path
        db_path.parent.mkdir(parents=True, exist_ok=True)
    else:
        db_path = Path(database_path)

    return SQLAlchemyDatabase(f"sqlite:///{db_path}")
