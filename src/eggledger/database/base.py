"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date

# Import entities directly to avoid circular import through domain/__init__.py
from eggledger.domain.entities import DailyRecord, SchemaReport, SummaryAggregate

DEFAULT_RECENT_LIMIT = 30


class Database(ABC):
    """Abstract database interface for eggledger.

    Implementations do not re-validate business rules (such as sold eggs not
    exceeding available eggs); callers validate before writing.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> SchemaReport:
        """Create or migrate the schema. Never raises on migration failure."""
        pass

    @abstractmethod
    def reset_schema(self) -> None:
        """Drop all records and recreate the schema."""
        pass

    # Daily record operations
    @abstractmethod
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
        """Insert or fully replace the record for a date. Returns rows affected."""
        pass

    @abstractmethod
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
        """Insert a record for a new date. Returns record ID.

        Raises ConflictError if a record for the date exists.
        """
        pass

    @abstractmethod
    def add_credit_only(self, record_date: date, credit_amount: float, credit_name: str) -> int:
        """Merge a credit into the record for a date. Returns rows affected."""
        pass

    @abstractmethod
    def get_record_by_date(self, record_date: date) -> Optional[DailyRecord]:
        """Get the record for a date."""
        pass

    @abstractmethod
    def get_record(self, record_id: int) -> Optional[DailyRecord]:
        """Get record by ID."""
        pass

    @abstractmethod
    def list_records(self, limit: int = DEFAULT_RECENT_LIMIT) -> list[DailyRecord]:
        """List at most ``limit`` records, most recent date first."""
        pass

    @abstractmethod
    def delete_record(self, record_id: int) -> int:
        """Delete a record by ID. Returns rows affected (0 if absent)."""
        pass

    @abstractmethod
    def compute_summary(self) -> SummaryAggregate:
        """Aggregate totals over all records."""
        pass

    @abstractmethod
    def export_all_records(self) -> list[DailyRecord]:
        """List all records, oldest date first."""
        pass
