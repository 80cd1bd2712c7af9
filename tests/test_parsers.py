"""Tests for date, amount and count parsing."""

import pytest
from datetime import date, timedelta
from eggledger.utils.date_parser import parse_date
from eggledger.utils.amount_parser import parse_amount, parse_count


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_relative_dates():
    """Test parsing 'today', 'yesterday' and 'tomorrow'."""
    today = date.today()
    assert parse_date("today") == today
    assert parse_date(" Yesterday ") == today - timedelta(days=1)
    assert parse_date("tomorrow") == today + timedelta(days=1)


def test_parse_last_weekday():
    """Test that 'last <weekday>' is within the past week and never today."""
    result = parse_date("last friday")
    days_ago = (date.today() - result).days
    assert result.weekday() == 4
    assert 1 <= days_ago <= 7


def test_parse_invalid_date():
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date")


@pytest.mark.parametrize(
    "value, expected",
    [("12.50", 12.5), ("$12.50", 12.5), ("1,234.5", 1234.5), ("0.1", 0.1), ("7", 7.0)],
)
def test_parse_amount(value, expected):
    assert parse_amount(value) == pytest.approx(expected)


@pytest.mark.parametrize("value", ["", "   ", "abc", "nan", "inf"])
def test_parse_amount_invalid(value):
    with pytest.raises(ValueError):
        parse_amount(value)


def test_parse_count():
    assert parse_count("120") == 120
    assert parse_count(" 1,200 ") == 1200


@pytest.mark.parametrize("value", ["", "-3", "2.5", "ten"])
def test_parse_count_invalid(value):
    with pytest.raises(ValueError):
        parse_count(value)
