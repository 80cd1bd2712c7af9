"""Schema detection and migration for the daily_records table.

The table has been created by several earlier versions of the application, so
on every start the live column set is inspected and brought up to date by an
ordered list of migration steps. Additive steps are gated only on the column
set and are therefore safe to re-run. Data steps run once: the highest version
applied is kept in SQLite's ``user_version`` pragma.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.schema import CreateTable

from eggledger.database.models import DailyRecord, TABLE_NAME
from eggledger.domain.entities import SchemaReport

logger = logging.getLogger(__name__)

Predicate = Callable[[set[str]], bool]


@dataclass(frozen=True)
class MigrationStep:
    """A single schema change.

    Attributes:
        version: Position in the migration sequence
        name: Name used in logs and in SchemaReport.applied
        applies: Predicate over the live column names
        statement: SQL to execute when the step applies
        once: If True, the step only runs while the stored version is below
            ``version`` (for data changes that must not repeat)
    """

    version: int
    name: str
    applies: Predicate
    statement: str
    once: bool = False


def _missing(column: str) -> Predicate:
    return lambda columns: column not in columns


MIGRATIONS: tuple[MigrationStep, ...] = (
    MigrationStep(
        version=1,
        name="add_sold_eggs",
        applies=_missing("sold_eggs"),
        statement=f"ALTER TABLE {TABLE_NAME} ADD COLUMN sold_eggs INTEGER DEFAULT 0",
    ),
    MigrationStep(
        version=2,
        name="add_credit_amount",
        applies=_missing("credit_amount"),
        statement=f"ALTER TABLE {TABLE_NAME} ADD COLUMN credit_amount REAL DEFAULT 0",
    ),
    MigrationStep(
        version=3,
        name="add_credit_name",
        applies=_missing("credit_name"),
        statement=f"ALTER TABLE {TABLE_NAME} ADD COLUMN credit_name TEXT DEFAULT ''",
    ),
    MigrationStep(
        version=4,
        name="backfill_credit_amount_from_credits",
        applies=lambda columns: "credits" in columns and "credit_amount" in columns,
        statement=(
            f"UPDATE {TABLE_NAME} SET credit_amount = credits "
            "WHERE credit_amount = 0 AND credits IS NOT NULL"
        ),
        once=True,
    ),
)


class SchemaManager:
    """Creates and migrates the daily_records table."""

    def __init__(self, engine: Engine, migrations: tuple[MigrationStep, ...] = MIGRATIONS):
        """Initialize schema manager.

        Args:
            engine: SQLAlchemy engine for a SQLite database
            migrations: Ordered migration steps to apply to an existing table
        """
        self.engine = engine
        self.migrations = migrations
        self.target_version = max((step.version for step in migrations), default=0)

    def table_exists(self) -> bool:
        """Check whether the daily_records table exists."""
        return inspect(self.engine).has_table(TABLE_NAME)

    def get_columns(self) -> set[str]:
        """Get the names of the columns currently on disk."""
        return {col["name"] for col in inspect(self.engine).get_columns(TABLE_NAME)}

    def get_version(self) -> int:
        """Get the stored schema version (0 if never set)."""
        with self.engine.connect() as conn:
            return int(conn.exec_driver_sql("PRAGMA user_version").scalar() or 0)

    def set_version(self, version: int) -> None:
        """Store the schema version."""
        with self.engine.begin() as conn:
            conn.exec_driver_sql(f"PRAGMA user_version = {int(version)}")

    def create_table(self, if_not_exists: bool = False) -> None:
        """Create the table with the full current column set."""
        with self.engine.begin() as conn:
            conn.execute(CreateTable(DailyRecord.__table__, if_not_exists=if_not_exists))

    def ensure_schema(self) -> SchemaReport:
        """Bring the table up to the current schema.

        Safe to call on every start. Failures are logged and reported, never
        raised: if detection or migration fails, the table is re-issued with
        CREATE TABLE IF NOT EXISTS and the caller continues with whatever
        schema resulted.

        Returns:
            SchemaReport describing what was done
        """
        logger.debug("Checking schema of table %s", TABLE_NAME)
        applied: list[str] = []
        try:
            if not self.table_exists():
                logger.info("Creating table %s with full schema", TABLE_NAME)
                self.create_table()
                self.set_version(self.target_version)
                return SchemaReport(created=True)

            applied = self.apply_migrations()
            logger.debug("Schema of table %s is current", TABLE_NAME)
            return SchemaReport(applied=tuple(applied))
        except SQLAlchemyError as e:
            logger.exception("Schema migration failed, re-issuing CREATE TABLE IF NOT EXISTS")
            try:
                self.create_table(if_not_exists=True)
            except SQLAlchemyError as fallback_error:
                logger.error("Could not create table %s: %s", TABLE_NAME, fallback_error)
                return SchemaReport(applied=tuple(applied), error=str(fallback_error))
            return SchemaReport(applied=tuple(applied), error=str(e))

    def apply_migrations(self) -> list[str]:
        """Apply every pending step to an existing table.

        Each statement commits on its own. The column set is re-read after
        each step so later predicates see columns added by earlier ones.

        Returns:
            Names of the steps that ran
        """
        columns = self.get_columns()
        logger.debug("Existing columns: %s", sorted(columns))
        current_version = self.get_version()

        applied = []
        for step in self.migrations:
            if step.once and step.version <= current_version:
                continue
            if not step.applies(columns):
                continue
            logger.info("Applying migration %s", step.name)
            with self.engine.begin() as conn:
                conn.execute(text(step.statement))
            applied.append(step.name)
            columns = self.get_columns()

        if current_version < self.target_version:
            self.set_version(self.target_version)
        return applied

    def reset_schema(self) -> None:
        """Drop the table and recreate it with the current schema.

        All records are lost.

        Raises:
            SQLAlchemyError: If the table cannot be dropped or created
        """
        logger.info("Dropping table %s", TABLE_NAME)
        with self.engine.begin() as conn:
            conn.execute(text(f"DROP TABLE IF EXISTS {TABLE_NAME}"))
        self.create_table()
        self.set_version(self.target_version)
        logger.info("Table %s recreated", TABLE_NAME)
