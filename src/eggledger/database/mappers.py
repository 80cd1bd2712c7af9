"""Mapper functions to convert between domain models and SQLAlchemy models.

Rows written by older versions of the table may carry NULLs in columns that
were added later, so every numeric field is coerced to its zero default here.
Older versions also stored the date as free text, so a stored date is not
always ISO formatted.
"""

import logging
from datetime import date
from typing import Optional

from dateutil import parser as date_parser

from eggledger.domain import entities as domain
from eggledger.database.models import DailyRecord as ORMDailyRecord

logger = logging.getLogger(__name__)


def date_to_key(record_date: date) -> str:
    """Convert a calendar date to the text stored in the date column."""
    return record_date.isoformat()


def date_keys(record_date: date) -> list[str]:
    """All stored spellings of a date, ISO first.

    Older rows may hold months and days without zero padding (2024-1-5).
    """
    months = dict.fromkeys([f"{record_date.month:02d}", str(record_date.month)])
    days = dict.fromkeys([f"{record_date.day:02d}", str(record_date.day)])
    return [f"{record_date.year}-{m}-{d}" for m in months for d in days]


def key_to_date(value: Optional[str]) -> Optional[date]:
    """Convert a stored date column value back to a calendar date.

    Returns None when the stored text is empty or is not a date.
    """
    if value is None or not value.strip():
        return None
    value = value.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return date_parser.parse(value).date()
    except (ValueError, OverflowError):
        logger.warning("Stored date %r is not a date", value)
        return None


def daily_record_to_domain(orm_record: ORMDailyRecord) -> domain.DailyRecord:
    """Convert SQLAlchemy DailyRecord model to domain DailyRecord entity."""
    return domain.DailyRecord(
        id=orm_record.id,
        date=key_to_date(orm_record.date),
        produced_eggs=orm_record.produced_eggs or 0,
        breakages=orm_record.breakages or 0,
        sold_eggs=orm_record.sold_eggs or 0,
        price_per_egg=float(orm_record.price_per_egg or 0),
        credit_amount=float(orm_record.credit_amount or 0),
        credit_name=orm_record.credit_name or "",
        created_at=orm_record.created_at,
        date_text=orm_record.date or "",
    )
