"""Amount and count parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str: str) -> float:
    """Parse a money amount string into a float.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "1,234.56"

    Args:
        amount_str: Amount string

    Returns:
        Amount as float, rounded through Decimal so "0.1" stays 0.1

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Remove currency symbols
    amount_str = re.sub(r"[$€£¥]", "", amount_str)

    # Remove commas
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}'") from e
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return float(amount)


def parse_count(count_str: str) -> int:
    """Parse an egg count.

    Args:
        count_str: Whole number, optionally with thousands separators

    Returns:
        Non-negative integer

    Raises:
        ValueError: If the string is not a whole non-negative number
    """
    if not count_str or not count_str.strip():
        raise ValueError("Empty count string")

    cleaned = count_str.strip().replace(",", "")
    if not cleaned.isdigit():
        raise ValueError(f"Could not parse count '{count_str.strip()}': expected a whole number")
    return int(cleaned)
