"""Arithmetic collaborators for Number.

Every operation is a stateless function over immutable Numbers:
- add / subtract: exact sums and differences in canonical form
- compare: three-way ordering by value
- round_number: precision reduction under a RoundingMode

Usage:
    from exact_decimal.operations import add, compare, round_number, RoundingMode

    total = add(a, b)
    if compare(total, limit) == 1:
        ...
    cents = round_number(total, 2, RoundingMode.HALF_EVEN)
"""

from exact_decimal.operations.addition import add
from exact_decimal.operations.comparison import compare
from exact_decimal.operations.rounding import (
    ROUNDING_STRATEGIES,
    RoundingMode,
    coerce_rounding_mode,
    round_number,
)
from exact_decimal.operations.subtraction import subtract
from exact_decimal.operations.types import (
    BinaryOperation,
    Comparator,
    Ordering,
    Rounder,
    RoundingStrategy,
)

__all__ = [
    # Functions
    "add",
    "subtract",
    "compare",
    "round_number",
    "coerce_rounding_mode",
    # Rounding
    "RoundingMode",
    "ROUNDING_STRATEGIES",
    # Protocols
    "BinaryOperation",
    "Comparator",
    "Rounder",
    "RoundingStrategy",
    "Ordering",
]
