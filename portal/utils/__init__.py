"""Utility functions for Meridian Portal."""

from .formatters import (
    format_with_precision,
    format_currency,
    format_percentage,
    format_compact_number,
    format_address,
    format_timestamp,
    format_time_ago
)
from .parsing import ParseError, ParseResult, parse_numeric

__all__ = [
    "format_with_precision",
    "format_currency",
    "format_percentage",
    "format_compact_number",
    "format_address",
    "format_timestamp",
    "format_time_ago",
    "ParseError",
    "ParseResult",
    "parse_numeric"
]
