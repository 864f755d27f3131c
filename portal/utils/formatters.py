"""
Data formatting utilities.

Every numeric formatter parses its input once through ``parse_numeric``
and falls back to a fixed string when the input is not a finite number.
Output follows en-US conventions regardless of the process locale.
"""

import logging
import math
from datetime import datetime, timezone, tzinfo
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Optional, Union

from portal.models import FormatOptions
from .parsing import NumericInput, parse_numeric

logger = logging.getLogger(__name__)

TimestampInput = Union[int, float, datetime]

FALLBACK = "0"

# en-US currency symbols; any other code is printed as the code itself
CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CAD": "CA$",
    "AUD": "A$",
    "CNY": "CN¥",
    "INR": "₹",
    "KRW": "₩",
    "MXN": "MX$",
    "BRL": "R$",
    "HKD": "HK$",
    "NZD": "NZ$",
    "ILS": "₪",
    "VND": "₫",
    "TWD": "NT$",
    "XAF": "FCFA",
    "PHP": "₱",
}

COMPACT_UNITS = [(12, "T"), (9, "B"), (6, "M"), (3, "K")]

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _round_half_up(amount: Decimal, precision: int) -> Decimal:
    # Wide enough for any float magnitude at any allowed precision
    context = Context(prec=350 + precision)
    return amount.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP, context=context)


def _fixed(number: Decimal, precision: int) -> str:
    return f"{_round_half_up(number, precision):,.{precision}f}"


def format_with_precision(value: NumericInput, precision: int = 2) -> str:
    """
    Format number with exactly ``precision`` fractional digits.

    Args:
        value: Number or numeric string
        precision: Number of decimal places (minimum and maximum)

    Returns:
        Grouped fixed-point string (e.g. "1,234.50"), or "0" when the
        value is not a finite number
    """
    options = FormatOptions(precision=precision)
    parsed = parse_numeric(value)
    if not parsed.ok:
        logger.debug(f"format_with_precision fallback for {value!r}: {parsed.error.reason}")
        return FALLBACK

    return _fixed(parsed.value, options.precision)


def format_currency(
    value: NumericInput,
    currency_code: str = "USD",
    precision: int = 2
) -> str:
    """
    Format value as a currency amount.

    Args:
        value: Number or numeric string
        currency_code: ISO 4217 currency code
        precision: Number of decimal places

    Returns:
        Formatted currency string (e.g. "-$1,234.50"). Unparseable input
        yields a bare "0" without any currency symbol.
    """
    options = FormatOptions(precision=precision, currency_code=currency_code)
    parsed = parse_numeric(value)
    if not parsed.ok:
        logger.debug(f"format_currency fallback for {value!r}: {parsed.error.reason}")
        return FALLBACK

    code = options.currency_code
    symbol = CURRENCY_SYMBOLS.get(code, f"{code}\u00a0")
    amount = _round_half_up(parsed.value, options.precision)
    sign = "-" if amount.is_signed() else ""
    return f"{sign}{symbol}{amount.copy_abs():,.{options.precision}f}"


def format_percentage(value: NumericInput, precision: int = 2) -> str:
    """
    Format value as percentage.

    Args:
        value: Numeric value (already in percentage, not decimal)
        precision: Number of decimal places

    Returns:
        Formatted percentage string, "0%" on fallback
    """
    return f"{format_with_precision(value, precision)}%"


def format_compact_number(value: NumericInput) -> str:
    """
    Format number in compact notation (K, M, B, T).

    At most two fractional digits are kept and trailing zeros dropped,
    so 1500 renders as "1.5K" and 999999 rounds up to "1M".
    """
    parsed = parse_numeric(value)
    if not parsed.ok:
        logger.debug(f"format_compact_number fallback for {value!r}: {parsed.error.reason}")
        return FALLBACK

    amount = parsed.value
    context = Context(prec=400)
    magnitude = amount.copy_abs()

    index = next(
        (i for i, (exponent, _) in enumerate(COMPACT_UNITS) if magnitude >= Decimal(10) ** exponent),
        len(COMPACT_UNITS)
    )

    def scaled_at(position: int) -> Decimal:
        if position == len(COMPACT_UNITS):
            return _round_half_up(amount, 2)
        exponent = COMPACT_UNITS[position][0]
        return _round_half_up(context.divide(amount, Decimal(10) ** exponent), 2)

    scaled = scaled_at(index)
    # Rounding up to 1000 moves to the next unit ("999.999K" -> "1M")
    if index > 0 and scaled.copy_abs() >= 1000:
        index -= 1
        scaled = scaled_at(index)

    suffix = COMPACT_UNITS[index][1] if index < len(COMPACT_UNITS) else ""
    scaled = scaled.normalize(context)
    # Compact notation only groups integer parts of five digits or more
    if scaled.copy_abs() >= 10000:
        return f"{scaled:,f}{suffix}"
    return f"{scaled:f}{suffix}"


def format_address(address: str) -> str:
    """
    Shorten an address or identifier for display.

    No length check is made: inputs shorter than 10 characters come
    back with overlapping head and tail.

    Args:
        address: Wallet address or other identifier

    Returns:
        First 6 characters, "...", last 4 characters; "" for empty input
    """
    if not address:
        return ""
    return f"{address[:6]}...{address[-4:]}"


def _to_datetime(timestamp: TimestampInput) -> datetime:
    """Numbers are epoch seconds; naive datetimes are taken as UTC."""
    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is None:
            return timestamp.replace(tzinfo=timezone.utc)
        return timestamp
    if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
        raise TypeError(f"Unsupported timestamp type: {type(timestamp).__name__}")
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


def format_timestamp(timestamp: TimestampInput, tz: tzinfo = timezone.utc) -> str:
    """
    Format a timestamp as an absolute date and time.

    Args:
        timestamp: Unix timestamp (seconds) or datetime
        tz: Time zone to display in

    Returns:
        Formatted datetime string (e.g. "Oct 18, 2026, 03:45 PM UTC"),
        "" when the timestamp cannot be represented
    """
    try:
        dt = _to_datetime(timestamp).astimezone(tz)
    except (ValueError, TypeError, OverflowError, OSError) as e:
        logger.debug(f"format_timestamp could not convert {timestamp!r}: {e}")
        return ""

    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return (
        f"{MONTHS[dt.month - 1]} {dt.day}, {dt.year}, "
        f"{hour:02d}:{dt.minute:02d} {meridiem} {dt.tzname()}"
    )


def format_time_ago(timestamp: TimestampInput, now: Optional[datetime] = None) -> str:
    """
    Format the time elapsed since ``timestamp`` ("30s ago", "2h ago").

    Elapsed seconds are floored and bucketed into seconds, minutes,
    hours or days; anything a day or older is shown in whole days.
    Future timestamps are not special-cased.

    Args:
        timestamp: Unix timestamp (seconds) or datetime
        now: Reference time, sampled from the clock when omitted

    Returns:
        Relative time string, "" when the timestamp cannot be represented
    """
    try:
        then = _to_datetime(timestamp)
    except (ValueError, TypeError, OverflowError, OSError) as e:
        logger.debug(f"format_time_ago could not convert {timestamp!r}: {e}")
        return ""

    reference = _to_datetime(now) if now is not None else datetime.now(timezone.utc)
    seconds = math.floor((reference - then).total_seconds())

    if seconds < 60:
        return f"{seconds}s ago"
    if seconds < 3600:
        return f"{seconds // 60}m ago"
    if seconds < 86400:
        return f"{seconds // 3600}h ago"
    return f"{seconds // 86400}d ago"
