"""Utility functions for lancamentos."""

from lancamentos.utils.date_parser import parse_date, get_date_range
from lancamentos.utils.amount_parser import parse_amount, format_brl

__all__ = ["parse_date", "get_date_range", "parse_amount", "format_brl"]
