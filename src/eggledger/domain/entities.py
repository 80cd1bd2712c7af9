"""Domain model entities for eggledger.

These are pure data classes representing the daily egg ledger, independent of
the database schema, so the business rules stay stable while the on-disk
table keeps evolving through additive migrations.
"""

from dataclasses import dataclass
from datetime import datetime, date
from typing import Optional


@dataclass(frozen=True)
class DailyRecord:
    """One day of egg production, sales and credit.

    ``date`` is None for old rows whose stored date text could not be read;
    ``date_text`` always holds the text as stored.
    """

    id: int
    date: Optional[date]
    produced_eggs: int
    breakages: int
    sold_eggs: int
    price_per_egg: float
    credit_amount: float
    credit_name: str
    created_at: Optional[datetime]
    date_text: str = ""

    @property
    def date_label(self) -> str:
        """The date as shown to users and written to exports."""
        if self.date is not None:
            return self.date.isoformat()
        return self.date_text

    @property
    def remaining_eggs(self) -> int:
        """Eggs neither broken nor sold."""
        return self.produced_eggs - self.breakages - self.sold_eggs

    @property
    def cash_sales(self) -> float:
        """Cash received for the eggs sold on this day."""
        return self.sold_eggs * self.price_per_egg


@dataclass(frozen=True)
class SummaryAggregate:
    """Totals over every stored record."""

    total_produced: int = 0
    total_breakages: int = 0
    total_sold: int = 0
    total_cash_sales: float = 0.0
    total_credits: float = 0.0

    @property
    def total_remaining(self) -> int:
        return self.total_produced - self.total_breakages - self.total_sold


@dataclass(frozen=True)
class SchemaReport:
    """Outcome of a schema check.

    Attributes:
        created: True if the table did not exist and was created
        applied: Names of the migration steps that ran, in order
        error: Message of the last unrecovered failure, if any
    """

    created: bool = False
    applied: tuple[str, ...] = ()
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
