"""Three-way comparison of Numbers by mathematical value."""

from __future__ import annotations

from typing import TYPE_CHECKING

from exact_decimal.operations.scaling import align

if TYPE_CHECKING:
    from exact_decimal.number import Number
    from exact_decimal.operations.types import Ordering


def compare(a: Number, b: Number) -> Ordering:
    """Compare two Numbers by value.

    Structural form is ignored: Number("100", 2) compares equal to
    Number("1").

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b
    """
    # Any negative is below any non-negative; skip scaling entirely
    if a.is_negative != b.is_negative:
        return -1 if a.is_negative else 1

    scaled_a, scaled_b, _ = align(a, b)
    if scaled_a < scaled_b:
        return -1
    if scaled_a > scaled_b:
        return 1
    return 0
