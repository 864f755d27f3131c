"""
Numeric input parsing for the display formatters.

All string-to-number conversion happens here, once, at the boundary.
Formatters only ever see a finite Decimal.
"""

import math
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

NumericInput = Union[int, float, Decimal, str]

# Longest decimal prefix, the way a browser's parseFloat reads it
_DECIMAL_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


@dataclass(frozen=True)
class ParseError:
    """Why a raw value could not be turned into a finite number."""
    raw: Any
    reason: str


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing a raw numeric input."""
    value: Optional[Decimal] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Decimal) -> "ParseResult":
        return cls(value=value)

    @classmethod
    def failure(cls, raw: Any, reason: str) -> "ParseResult":
        return cls(error=ParseError(raw=raw, reason=reason))


def _parse_string(text: str) -> Optional[Decimal]:
    match = _DECIMAL_PREFIX.match(text.lstrip())
    if not match:
        return None
    return Decimal(match.group(0))


def _to_decimal(value: Union[int, float, Decimal]) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        if math.isnan(value):
            return Decimal("NaN")
        # Shortest round-tripping form, so 2.675 stays 2.675
        return Decimal(repr(value))
    # Python ints are exact, but must still fit a float
    float(value)
    return Decimal(value)


def parse_numeric(value: Any) -> ParseResult:
    """
    Parse a number or numeric string into a finite Decimal.

    Strings use the invariant format: ``.`` as decimal separator and an
    optional leading sign. Only the leading numeric part of a string is
    read, so ``"12.5 USDC"`` parses to 12.5. Floats are taken at their
    shortest decimal form (``repr``), Decimals as given. Values beyond
    the float range count as not finite.

    Args:
        value: Raw input (int, float, Decimal or str)

    Returns:
        ParseResult holding either the value or a ParseError; never raises
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal, str)):
        return ParseResult.failure(value, f"unsupported type {type(value).__name__}")

    try:
        if isinstance(value, str):
            number = _parse_string(value)
            if number is None:
                return ParseResult.failure(value, "not a number")
        else:
            number = _to_decimal(value)
    except OverflowError:
        return ParseResult.failure(value, "out of range")
    except InvalidOperation:
        return ParseResult.failure(value, "not a number")

    if number.is_nan():
        return ParseResult.failure(value, "not a number")
    if number.is_infinite() or math.isinf(float(number)):
        return ParseResult.failure(value, "not finite")

    return ParseResult.success(number)
