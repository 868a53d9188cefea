"""Database layer for finsight application."""

from finsight.database.base import Database
from finsight.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
