"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from eggledger.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENV_VAR = "EGGLEDGER_DB_PATH"


def default_database_path() -> str:
    """Return ~/.eggledger/eggledger.db, creating the directory if needed."""
    db_dir = Path.home() / ".eggledger"
    db_dir.mkdir(exist_ok=True)
    return str(db_dir / "eggledger.db")


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks EGGLEDGER_DB_PATH
            environment variable, then defaults to ~/.eggledger/eggledger.db.
            ":memory:" gives a private in-memory database.

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENV_VAR)

    if database_path is None:
        database_path = default_database_path()

    if database_path == ":memory:":
        return SQLAlchemyDatabase("sqlite://")

    return SQLAlchemyDatabase(f"sqlite:///{database_path}")
