"""Database layer for payerindex application."""

from payerindex.database.base import Database
from payerindex.database.factories import create_memory_database, create_sqlite_database

__all__ = ["Database", "create_memory_database", "create_sqlite_database"]
