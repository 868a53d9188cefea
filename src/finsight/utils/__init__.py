"""Utility functions for finsight."""

from finsight.utils.date_parser import parse_date, parse_month, month_key
from finsight.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_month", "month_key", "parse_amount"]
