"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from payerindex.database.memory import InMemoryDatabase
from payerindex.database.sqlalchemy_db import SQLAlchemyDatabase


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks PAYERINDEX_DB_PATH
            environment variable, then defaults to ~/.payerindex/payerindex.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("PAYERINDEX_DB_PATH")

    if database_path is None:
        # Default to ~/.payerindex/payerindex.db
        home = Path.home()
        db_dir = home / ".payerindex"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "payerindex.db")

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)


def create_memory_database() -> InMemoryDatabase:
    """Create an empty in-memory database instance."""
    return InMemoryDatabase()
