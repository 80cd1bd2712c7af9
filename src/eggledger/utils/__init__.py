"""Utility functions for eggledger."""

from eggledger.utils.date_parser import parse_date
from eggledger.utils.amount_parser import parse_amount, parse_count

__all__ = ["parse_date", "parse_amount", "parse_count"]
