"""Tests for domain entities and ORM mappers."""

import pytest
from datetime import date, datetime

from eggledger.database.mappers import daily_record_to_domain, date_keys, date_to_key, key_to_date
from eggledger.database.models import DailyRecord as ORMDailyRecord
from eggledger.domain.entities import DailyRecord, SchemaReport, SummaryAggregate


def _record(**overrides):
    values = dict(
        id=1,
        date=date(2024, 1, 1),
        produced_eggs=10,
        breakages=1,
        sold_eggs=5,
        price_per_egg=2.0,
        credit_amount=3.0,
        credit_name="Alice",
        created_at=datetime(2024, 1, 1, 8, 0),
        date_text="2024-01-01",
    )
    values.update(overrides)
    return DailyRecord(**values)


def test_derived_record_values():
    record = _record()

    assert record.remaining_eggs == 4
    assert record.cash_sales == pytest.approx(10.0)


def test_record_is_frozen():
    record = _record()

    with pytest.raises(AttributeError):
        record.produced_eggs = 11


def test_summary_remaining():
    summary = SummaryAggregate(total_produced=30, total_breakages=1, total_sold=15)

    assert summary.total_remaining == 14


def test_schema_report_ok():
    assert SchemaReport().ok
    assert not SchemaReport(error="boom").ok


def test_date_key_round_trip():
    assert date_to_key(date(2024, 2, 29)) == "2024-02-29"
    assert key_to_date("2024-02-29") == date(2024, 2, 29)


def test_mapper_converts_orm_row():
    orm = ORMDailyRecord(
        id=7,
        date="2024-01-01",
        produced_eggs=10,
        breakages=1,
        sold_eggs=5,
        price_per_egg=2.0,
        credit_amount=3.0,
        credit_name="Alice",
        created_at=datetime(2024, 1, 1, 8, 0),
    )

    assert daily_record_to_domain(orm) == _record(id=7)


def test_mapper_treats_nulls_from_old_rows_as_zero():
    orm = ORMDailyRecord(id=2, date="2023-06-01", produced_eggs=5)

    record = daily_record_to_domain(orm)

    assert record.breakages == 0
    assert record.sold_eggs == 0
    assert record.price_per_egg == 0.0
    assert record.credit_amount == 0.0
    assert record.credit_name == ""
    assert record.created_at is None


def test_key_to_date_reads_old_date_text():
    assert key_to_date("2024-1-5") == date(2024, 1, 5)
    assert key_to_date(" 2024-01-05 ") == date(2024, 1, 5)
    assert key_to_date("2024-01-05T10:30:00") == date(2024, 1, 5)


def test_key_to_date_returns_none_for_unreadable_text():
    assert key_to_date(None) is None
    assert key_to_date("") is None
    assert key_to_date("unknown") is None


def test_date_keys_include_non_padded_spellings():
    keys = date_keys(date(2024, 1, 5))

    assert keys[0] == "2024-01-05"
    assert set(keys) == {"2024-01-05", "2024-01-5", "2024-1-05", "2024-1-5"}
    assert date_keys(date(2024, 11, 25)) == ["2024-11-25"]


def test_record_with_unreadable_date_keeps_stored_text():
    orm = ORMDailyRecord(id=3, date="sometime", produced_eggs=5)

    record = daily_record_to_domain(orm)

    assert record.date is None
    assert record.date_text == "sometime"
    assert record.date_label == "sometime"


def test_date_label_is_iso_for_readable_dates():
    assert _record(date_text="2024-1-1").date_label == "2024-01-01"
