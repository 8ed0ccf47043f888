"""
Small predicates shared by the random helpers
"""
import math
import numbers
from decimal import Decimal


def is_integer(value) -> bool:
    """
    Check whether a value is a finite whole number

    Args:
        value: Anything. Non-numeric values are simply not integers.

    Returns:
        True for ints and for finite reals or Decimals with no fractional
        part (e.g. 2.0, Decimal("2")), False otherwise. Booleans are not
        treated as integers.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Integral):
        return True
    if isinstance(value, Decimal):
        return value.is_finite() and value == value.to_integral_value()
    if isinstance(value, numbers.Real):
        return math.isfinite(value) and value == math.floor(value)
    return False


def not_(value) -> bool:
    """Logical inverse of value"""
    return not value
