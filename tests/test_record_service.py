"""Tests for RecordService validation and delegation."""

import pytest
from datetime import date

from eggledger.domain.errors import ConflictError, NotFoundError, ValidationError


def test_save_daily_record_returns_stored_record(record_service):
    saved = record_service.save_daily_record(
        record_date=date(2024, 4, 1),
        produced_eggs=100,
        price_per_egg=0.25,
        breakages=5,
        sold_eggs=90,
        credit_amount=2.0,
        credit_name="  Dan  ",
    )

    assert saved.id is not None
    assert saved.date == date(2024, 4, 1)
    assert saved.remaining_eggs == 5
    assert saved.cash_sales == pytest.approx(22.5)
    assert saved.credit_name == "Dan"


def test_blank_optional_fields_default_to_zero(record_service):
    saved = record_service.save_daily_record(
        record_date=date(2024, 4, 1), produced_eggs=12, price_per_egg=1.0
    )

    assert saved.breakages == 0
    assert saved.sold_eggs == 0
    assert saved.credit_amount == 0
    assert saved.credit_name == ""


@pytest.mark.parametrize(
    "produced, price",
    [(None, 1.0), (10, None), (None, None)],
)
def test_produced_and_price_are_required(record_service, produced, price):
    with pytest.raises(ValidationError, match="produced eggs and price per egg"):
        record_service.save_daily_record(
            record_date=date(2024, 4, 1), produced_eggs=produced, price_per_egg=price
        )


def test_sold_cannot_exceed_available(record_service):
    with pytest.raises(ValidationError, match=r"Sold eggs \(10\) cannot exceed available eggs \(8\)"):
        record_service.save_daily_record(
            record_date=date(2024, 4, 1),
            produced_eggs=10,
            breakages=2,
            sold_eggs=10,
            price_per_egg=1.0,
        )
    assert record_service.get_record(date(2024, 4, 1)) is None


def test_sold_may_equal_available(record_service):
    saved = record_service.save_daily_record(
        record_date=date(2024, 4, 1),
        produced_eggs=10,
        breakages=2,
        sold_eggs=8,
        price_per_egg=1.0,
    )

    assert saved.remaining_eggs == 0


def test_breakages_cannot_exceed_produced(record_service):
    with pytest.raises(ValidationError, match="Breakages"):
        record_service.save_daily_record(
            record_date=date(2024, 4, 1), produced_eggs=3, breakages=4, price_per_egg=1.0
        )


def test_negative_values_rejected(record_service):
    with pytest.raises(ValidationError, match="Price per egg cannot be negative"):
        record_service.save_daily_record(
            record_date=date(2024, 4, 1), produced_eggs=3, price_per_egg=-1.0
        )


def test_save_without_overwrite_conflicts(record_service):
    record_service.save_daily_record(
        record_date=date(2024, 4, 1), produced_eggs=3, price_per_egg=1.0
    )

    with pytest.raises(ConflictError):
        record_service.save_daily_record(
            record_date=date(2024, 4, 1), produced_eggs=4, price_per_egg=1.0, overwrite=False
        )
    assert record_service.get_record(date(2024, 4, 1)).produced_eggs == 3


def test_add_credit_merges(record_service):
    record_service.add_credit(date(2024, 4, 1), 3.0, "X")
    updated = record_service.add_credit(date(2024, 4, 1), 1.5, "Y")

    assert updated.credit_amount == pytest.approx(4.5)
    assert updated.credit_name == "X, Y"


@pytest.mark.parametrize(
    "amount, name",
    [(0, "Alice"), (-2.0, "Alice"), (None, "Alice"), (5.0, ""), (5.0, "   "), (5.0, None)],
)
def test_add_credit_validation(record_service, amount, name):
    with pytest.raises(ValidationError, match="credit amount and customer name"):
        record_service.add_credit(date(2024, 4, 1), amount, name)
    assert record_service.get_record(date(2024, 4, 1)) is None


def test_require_record_raises_not_found(record_service):
    with pytest.raises(NotFoundError, match="2024-04-01"):
        record_service.require_record(date(2024, 4, 1))


def test_list_recent_rejects_non_positive_limit(record_service):
    with pytest.raises(ValidationError):
        record_service.list_recent(limit=0)


def test_list_recent_and_summary(record_service, sample_records):
    records = record_service.list_recent()
    summary = record_service.get_summary()

    assert [r.date for r in records] == [sample_records[1], sample_records[0]]
    assert summary.total_produced == 30
    assert summary.total_remaining == 14


def test_delete_record(record_service, sample_records):
    record = record_service.get_record(sample_records[0])

    assert record_service.delete_record(record.id) == 1
    assert record_service.delete_record(record.id) == 0
