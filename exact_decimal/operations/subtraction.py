"""Exact subtraction of two Numbers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from exact_decimal.operations.addition import add

if TYPE_CHECKING:
    from exact_decimal.number import Number


def subtract(a: Number, b: Number) -> Number:
    """Return the exact difference a - b in canonical form.

    Computed as a + (-b).
    """
    return add(a, b.invert())
