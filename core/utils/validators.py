"""Input coercion for cart operations."""
import sys
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

# Decimal exponent above which int() would build an unbounded integer
_MAX_ADJUSTED = 18


def parse_product_id(value: Any) -> Optional[int]:
    """
    Parse a positive numeric product identifier.

    Accepts ints and strings of ASCII digits ("5", " 12 "). Integral floats
    and Decimals are accepted as well. Booleans, zero, negatives, fractions,
    out-of-range values and anything non-numeric give None.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value if value > 0 else None

    if isinstance(value, (float, Decimal)):
        try:
            d = Decimal(str(value))
        except InvalidOperation:
            return None
        if d.is_nan() or d.is_infinite() or d.adjusted() > _MAX_ADJUSTED or d != d.to_integral_value():
            return None
        return int(d) if d > 0 else None

    if isinstance(value, str):
        s = value.strip()
        # isdigit() alone lets through "²" and other Unicode digits
        if not (s.isascii() and s.isdigit()):
            return None
        try:
            parsed = int(s)
        except ValueError:
            return None
        return parsed if parsed > 0 else None

    return None


def coerce_count(value: Any) -> int:
    """
    Coerce a quantity to int by truncation toward zero.

    "3.9" -> 3, 2.7 -> 2, -1.5 -> -1. Unparseable values give 0; huge
    magnitudes saturate at +/- sys.maxsize.
    """
    if value is None or isinstance(value, bool):
        return int(bool(value))

    if isinstance(value, int):
        return value

    try:
        d = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return 0
    if d.is_nan():
        return 0
    if d.is_infinite() or d.adjusted() > _MAX_ADJUSTED:
        return sys.maxsize if d > 0 else -sys.maxsize
    return int(d)
