"""Helpers for moving between Numbers and scaled integers.

A Number with coefficient c and exponent e is the integer c scaled down by
10^e. Aligning two Numbers means expressing both as integers over the same
(larger) exponent, after which plain integer arithmetic is exact.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from exact_decimal.number import Number


def to_scaled_int(number: Number, exponent: int) -> int:
    """Return the signed value of number as an integer over 10^exponent.

    Args:
        number: Number to convert
        exponent: Target exponent, must be >= number.exponent

    Returns:
        Signed integer v such that value(number) == v * 10^(-exponent)
    """
    magnitude = int(number.coefficient) * 10 ** (exponent - number.exponent)
    return -magnitude if number.is_negative else magnitude


def align(a: Number, b: Number) -> tuple[int, int, int]:
    """Scale both operands to their common exponent.

    The lower-precision operand is padded; no digits are ever dropped.

    Returns:
        Tuple of (scaled_a, scaled_b, common_exponent)
    """
    exponent = max(a.exponent, b.exponent)
    return to_scaled_int(a, exponent), to_scaled_int(b, exponent), exponent


def from_scaled_int(template: Number, value: int, exponent: int, canonical: bool = True) -> Number:
    """Build a Number of the same class as template from a scaled integer.

    Args:
        template: Operand whose class is used to build the result
        value: Signed integer value over 10^exponent
        exponent: Exponent of value
        canonical: If True, trailing fractional zeros are stripped so the
            result matches what parsing the decimal literal would produce.
            If False, the exponent is kept as given (zero still collapses to
            exponent 0).

    Returns:
        New Number instance
    """
    cls = type(template)
    if value == 0:
        return cls.from_coefficient("0", 0)

    digits = str(abs(value))
    if canonical and exponent > 0:
        trailing = len(digits) - len(digits.rstrip("0"))
        drop = min(trailing, exponent)
        if drop:
            digits = digits[:-drop]
            exponent -= drop

    sign = "-" if value < 0 else ""
    return cls.from_coefficient(sign + digits, exponent)
