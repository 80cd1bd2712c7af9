"""Daily record domain service."""

from datetime import date
from typing import Optional

from eggledger.database.base import Database, DEFAULT_RECENT_LIMIT
from eggledger.domain.entities import DailyRecord, SummaryAggregate
from eggledger.domain.errors import (
    NotFoundError,
    ValidationError,
    record_not_found,
    sold_exceeds_available,
)


class RecordService:
    """Service for recording daily production, sales and credit.

    The database does not re-check business rules, so every write goes
    through the validation here first.
    """

    def __init__(self, db: Database):
        """Initialize record service.

        Args:
            db: Database instance
        """
        self.db = db

    def save_daily_record(
        self,
        record_date: date,
        produced_eggs: Optional[int],
        price_per_egg: Optional[float],
        breakages: Optional[int] = None,
        sold_eggs: Optional[int] = None,
        credit_amount: Optional[float] = None,
        credit_name: Optional[str] = None,
        overwrite: bool = True,
    ) -> DailyRecord:
        """Save the full record for a date.

        Blank optional fields default to zero (or an empty name). With
        ``overwrite`` an existing record for the date is replaced entirely,
        including its accumulated credit.

        Args:
            record_date: Date of the record
            produced_eggs: Eggs collected (required)
            price_per_egg: Price of one egg (required)
            breakages: Broken eggs
            sold_eggs: Eggs sold for cash
            credit_amount: Amount owed by customers
            credit_name: Customer name(s) for the credit
            overwrite: If False, fail instead of replacing an existing record

        Returns:
            The stored record

        Raises:
            ValidationError: If required fields are missing or counts are inconsistent
            ConflictError: If overwrite is False and the date already has a record
        """
        if produced_eggs is None or price_per_egg is None:
            raise ValidationError("Please fill in produced eggs and price per egg")

        breakages = breakages or 0
        sold_eggs = sold_eggs or 0
        credit_amount = credit_amount or 0.0
        credit_name = (credit_name or "").strip()

        for label, value in (
            ("Produced eggs", produced_eggs),
            ("Breakages", breakages),
            ("Sold eggs", sold_eggs),
            ("Price per egg", price_per_egg),
            ("Credit amount", credit_amount),
        ):
            if value < 0:
                raise ValidationError(f"{label} cannot be negative")

        if breakages > produced_eggs:
            raise ValidationError(
                f"Breakages ({breakages}) cannot exceed produced eggs ({produced_eggs})"
            )

        available_eggs = produced_eggs - breakages
        if sold_eggs > available_eggs:
            raise ValidationError(sold_exceeds_available(sold_eggs, available_eggs))

        values = dict(
            record_date=record_date,
            produced_eggs=int(produced_eggs),
            breakages=int(breakages),
            sold_eggs=int(sold_eggs),
            price_per_egg=float(price_per_egg),
            credit_amount=float(credit_amount),
            credit_name=credit_name,
        )
        if overwrite:
            self.db.upsert_daily_record(**values)
        else:
            self.db.create_daily_record(**values)

        return self.require_record(record_date)

    def add_credit(self, record_date: date, credit_amount: Optional[float], credit_name: Optional[str]) -> DailyRecord:
        """Add a customer credit to a date without touching production or sales.

        Args:
            record_date: Date the credit belongs to
            credit_amount: Amount owed, must be positive
            credit_name: Customer name, must not be blank

        Returns:
            The record after the credit was merged in

        Raises:
            ValidationError: If the amount is not positive or the name is blank
        """
        credit_name = (credit_name or "").strip()
        if credit_amount is None or credit_amount <= 0 or not credit_name:
            raise ValidationError("Please enter credit amount and customer name")

        self.db.add_credit_only(record_date, float(credit_amount), credit_name)
        return self.require_record(record_date)

    def get_record(self, record_date: date) -> Optional[DailyRecord]:
        """Get the record for a date, or None."""
        return self.db.get_record_by_date(record_date)

    def require_record(self, record_date: date) -> DailyRecord:
        """Get the record for a date.

        Raises:
            NotFoundError: If there is no record for the date
        """
        record = self.db.get_record_by_date(record_date)
        if record is None:
            raise NotFoundError(record_not_found(record_date))
        return record

    def list_recent(self, limit: int = DEFAULT_RECENT_LIMIT) -> list[DailyRecord]:
        """List the most recent records, newest date first."""
        if limit <= 0:
            raise ValidationError("Limit must be a positive number")
        return self.db.list_records(limit=limit)

    def delete_record(self, record_id: int) -> int:
        """Delete a record. Returns 1 if it existed, 0 otherwise."""
        return self.db.delete_record(record_id)

    def get_summary(self) -> SummaryAggregate:
        """Get totals over all records."""
        return self.db.compute_summary()
