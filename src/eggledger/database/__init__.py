"""Database layer for eggledger application."""

from eggledger.database.base import Database
from eggledger.database.factories import create_sqlite_database
from eggledger.database.schema import SchemaManager

__all__ = ["Database", "create_sqlite_database", "SchemaManager"]
