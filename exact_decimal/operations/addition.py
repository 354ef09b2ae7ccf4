"""Exact addition of two Numbers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from exact_decimal.operations.scaling import align, from_scaled_int

if TYPE_CHECKING:
    from exact_decimal.number import Number


def add(a: Number, b: Number) -> Number:
    """Return the exact sum a + b in canonical form.

    Operands are aligned to the larger exponent before their magnitudes are
    combined. Operands of opposite sign reduce to a magnitude subtraction
    that takes the sign of the larger magnitude; Python's signed integers
    carry that through directly.

    Args:
        a: First addend
        b: Second addend

    Returns:
        New canonical Number (no trailing fractional zeros, zero unsigned)
    """
    scaled_a, scaled_b, exponent = align(a, b)
    return from_scaled_int(a, scaled_a + scaled_b, exponent)
