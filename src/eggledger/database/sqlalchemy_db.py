"""Generic SQLAlchemy database implementation."""

import logging
import threading
from contextlib import contextmanager
from datetime import date
from typing import Iterator, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from eggledger.database.base import Database, DEFAULT_RECENT_LIMIT
from eggledger.database.models import (
    DailyRecord,
    create_db_engine,
    create_session_factory,
)
from eggledger.database.mappers import daily_record_to_domain, date_keys, date_to_key
from eggledger.database.schema import SchemaManager
from eggledger.domain.entities import (
    DailyRecord as DomainDailyRecord,
    SchemaReport,
    SummaryAggregate,
)
from eggledger.domain.errors import (
    ConflictError,
    DomainError,
    StorageError,
    duplicate_record_date,
    storage_failure,
)

logger = logging.getLogger(__name__)


class SQLAlchemyDatabase(Database):
    """SQLAlchemy-based implementation of Database interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy database.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.engine = create_db_engine(database_url)
        self.session_factory = create_session_factory(self.engine)
        self.schema_manager = SchemaManager(self.engine)
        self._session: Optional[Session] = None
        # Serializes read-modify-write sequences on this handle
        self._write_lock = threading.Lock()

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    @contextmanager
    def _storage_errors(self, operation: str) -> Iterator[Session]:
        """Yield the session, turning engine and row conversion failures into StorageError."""
        session = self._get_session()
        try:
            yield session
        except DomainError:
            raise
        except (SQLAlchemyError, ValueError, TypeError) as e:
            session.rollback()
            logger.error("Failed to %s: %s", operation, e)
            raise StorageError(storage_failure(operation, e)) from e

    def _find_by_date(self, session: Session, record_date: date) -> Optional[DailyRecord]:
        """Find the row for a date, also matching old non-padded date text."""
        key = date_to_key(record_date)
        matches = (
            session.query(DailyRecord).filter(DailyRecord.date.in_(date_keys(record_date))).all()
        )
        for record in matches:
            if record.date == key:
                return record
        return matches[0] if matches else None

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None
        self.engine.dispose()

    def initialize_schema(self) -> SchemaReport:
        """Create the table or migrate it to the current schema."""
        report = self.schema_manager.ensure_schema()
        if report.created:
            logger.info("Created new database at %s", self.database_url)
        elif report.applied:
            logger.info("Applied migrations: %s", ", ".join(report.applied))
        if not report.ok:
            logger.warning("Schema may be incomplete: %s", report.error)
        return report

    def reset_schema(self) -> None:
        """Drop all records and recreate the schema."""
        if self._session is not None:
            self._session.close()
            self._session = None
        try:
            self.schema_manager.reset_schema()
        except SQLAlchemyError as e:
            logger.error("Failed to reset database: %s", e)
            raise StorageError(storage_failure("reset database", e)) from e

    # Daily record operations
    def upsert_daily_record(
        self,
        record_date: date,
        produced_eggs: int,
        breakages: int = 0,
        sold_eggs: int = 0,
        price_per_egg: float = 0.0,
        credit_amount: float = 0.0,
        credit_name: str = "",
    ) -> int:
        """Insert or fully replace the record for a date.

        An existing record keeps its ID and creation time; every other field,
        including previously accumulated credit, is overwritten. An old
        non-padded date on the existing row is rewritten in ISO form.

        Returns:
            Number of rows affected (always 1)
        """
        key = date_to_key(record_date)
        with self._write_lock, self._storage_errors("save record") as session:
            record = self._find_by_date(session, record_date)
            if record is None:
                record = DailyRecord(date=key)
                session.add(record)
            record.date = key
            record.produced_eggs = produced_eggs
            record.breakages = breakages
            record.sold_eggs = sold_eggs
            record.price_per_egg = price_per_egg
            record.credit_amount = credit_amount
            record.credit_name = credit_name
            session.commit()
        return 1

    def create_daily_record(
        self,
        record_date: date,
        produced_eggs: int,
        breakages: int = 0,
        sold_eggs: int = 0,
        price_per_egg: float = 0.0,
        credit_amount: float = 0.0,
        credit_name: str = "",
    ) -> int:
        """Insert a record for a date that has none. Returns record ID."""
        with self._storage_errors("create record") as session:
            if self._find_by_date(session, record_date) is not None:
                raise ConflictError(duplicate_record_date(record_date))
            record = DailyRecord(
                date=date_to_key(record_date),
                produced_eggs=produced_eggs,
                breakages=breakages,
                sold_eggs=sold_eggs,
                price_per_egg=price_per_egg,
                credit_amount=credit_amount,
                credit_name=credit_name,
            )
            session.add(record)
            try:
                session.commit()
            except IntegrityError as e:
                session.rollback()
                raise ConflictError(duplicate_record_date(record_date)) from e
            return record.id

    def add_credit_only(self, record_date: date, credit_amount: float, credit_name: str) -> int:
        """Merge a credit into the record for a date.

        If a record exists, the amount is added to its credit and the name is
        appended to its comma-separated customer list; nothing else changes
        apart from an old non-padded date being rewritten in ISO form.
        Otherwise a record with zero production and sales is created.

        Returns:
            Number of rows affected (always 1)
        """
        key = date_to_key(record_date)
        with self._write_lock, self._storage_errors("add credit") as session:
            record = self._find_by_date(session, record_date)
            if record is not None:
                record.date = key
                record.credit_amount = (record.credit_amount or 0) + credit_amount
                if record.credit_name:
                    record.credit_name = f"{record.credit_name}, {credit_name}"
                else:
                    record.credit_name = credit_name
            else:
                session.add(
                    DailyRecord(
                        date=key,
                        produced_eggs=0,
                        breakages=0,
                        sold_eggs=0,
                        price_per_egg=0.0,
                        credit_amount=credit_amount,
                        credit_name=credit_name,
                    )
                )
            session.commit()
        return 1

    def get_record_by_date(self, record_date: date) -> Optional[DomainDailyRecord]:
        """Get the record for a date."""
        with self._storage_errors("load record") as session:
            record = self._find_by_date(session, record_date)
            if record is None:
                return None
            return daily_record_to_domain(record)

    def get_record(self, record_id: int) -> Optional[DomainDailyRecord]:
        """Get record by ID."""
        with self._storage_errors("load record") as session:
            record = session.query(DailyRecord).filter(DailyRecord.id == record_id).first()
            if record is None:
                return None
            return daily_record_to_domain(record)

    def list_records(self, limit: int = DEFAULT_RECENT_LIMIT) -> list[DomainDailyRecord]:
        """List at most ``limit`` records, most recent date first."""
        with self._storage_errors("load records") as session:
            records = (
                session.query(DailyRecord)
                .order_by(DailyRecord.date.desc(), DailyRecord.id.desc())
                .limit(limit)
                .all()
            )
            return [daily_record_to_domain(r) for r in records]

    def delete_record(self, record_id: int) -> int:
        """Delete a record by ID. Returns rows affected (0 if absent)."""
        with self._storage_errors("delete record") as session:
            count = (
                session.query(DailyRecord)
                .filter(DailyRecord.id == record_id)
                .delete(synchronize_session=False)
            )
            session.commit()
            return count

    def compute_summary(self) -> SummaryAggregate:
        """Aggregate totals over all records.

        Cash sales are summed per row (sold * price), not computed from the
        separate totals.
        """
        with self._storage_errors("calculate summary") as session:
            row = session.query(
                func.coalesce(func.sum(DailyRecord.produced_eggs), 0).label("total_produced"),
                func.coalesce(func.sum(DailyRecord.breakages), 0).label("total_breakages"),
                func.coalesce(func.sum(DailyRecord.sold_eggs), 0).label("total_sold"),
                func.coalesce(
                    func.sum(DailyRecord.sold_eggs * DailyRecord.price_per_egg), 0
                ).label("total_cash_sales"),
                func.coalesce(func.sum(DailyRecord.credit_amount), 0).label("total_credits"),
            ).one()
            return SummaryAggregate(
                total_produced=int(row.total_produced),
                total_breakages=int(row.total_breakages),
                total_sold=int(row.total_sold),
                total_cash_sales=float(row.total_cash_sales),
                total_credits=float(row.total_credits),
            )

    def export_all_records(self) -> list[DomainDailyRecord]:
        """List all records, oldest date first."""
        with self._storage_errors("export records") as session:
            records = session.query(DailyRecord).order_by(DailyRecord.date, DailyRecord.id).all()
            return [daily_record_to_domain(r) for r in records]
