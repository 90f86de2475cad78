"""
Money Utilities - Safe Decimal operations for prices and weights.

Cart snapshots keep Decimal values so that totals never pick up float
rounding noise. Floats appear only when a response is serialized.
"""
from decimal import Decimal, InvalidOperation
from typing import Union

Numeric = Union[str, int, float, Decimal, None]


def to_decimal(value: Numeric) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        if isinstance(value, float):
            # Go through str so 0.1 stays 0.1
            return Decimal(str(value))
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def multiply(value: Numeric, factor: Numeric) -> Decimal:
    """Safe multiplication of a value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def to_json_number(value: Numeric) -> Union[int, float]:
    """Serialize a Decimal as int when it has no fractional part, else float."""
    d = to_decimal(value)
    if d == d.to_integral_value():
        return int(d)
    return float(d)
