"""
Numeric helpers for rendering fluid values.
"""

from decimal import Decimal
from typing import Union

Number = Union[int, float]


def format_number(number: Number) -> str:
    """
    Render a number in its shortest CSS form.

    Integral floats lose their fractional part (16.0 -> "16") and negative
    zero is rendered as "0".

    Args:
        number: Number to render

    Returns:
        str: Text form of the number
    """
    number = float(number)
    if number == 0:
        return "0"
    if number.is_integer() and abs(number) < 1e16:
        return str(int(number))
    return repr(number)


def precision(number: Number) -> int:
    """
    Count the decimal digits of a number.

    Args:
        number: Number to inspect

    Returns:
        int: Digits after the decimal point in the shortest representation
    """
    exponent = Decimal(format_number(number)).as_tuple().exponent
    return -exponent if exponent < 0 else 0


def clamp(minimum: Number, value: Number, maximum: Number) -> Number:
    """Clamp value between minimum and maximum, the way CSS clamp() does."""
    return min(max(value, minimum), maximum)


def to_precision(number: Number, places: int) -> str:
    """
    Round a number to a fixed number of decimal places.

    Trailing zeros are dropped, so to_precision(2.0, 2) is "2".

    Args:
        number: Number to round
        places: Decimal places to keep

    Returns:
        str: Rounded number
    """
    return format_number(round(float(number), places))
