"""Protocols describing the arithmetic collaborators used by Number.

Number holds one collaborator of each shape as a class attribute (adder,
subtractor, comparator, rounder). A subclass swaps one in with
staticmethod(...); any callable that satisfies the protocol will do.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, Protocol

if TYPE_CHECKING:
    from exact_decimal.number import Number
    from exact_decimal.operations.rounding import RoundingMode

Ordering = Literal[-1, 0, 1]


class BinaryOperation(Protocol):
    """Protocol for exact two-operand arithmetic (addition, subtraction)."""

    def __call__(self, a: Number, b: Number) -> Number:
        """Return a new canonical Number computed from a and b."""
        ...


class Comparator(Protocol):
    """Protocol for three-way value comparison."""

    def __call__(self, a: Number, b: Number) -> Ordering:
        """Return -1 if a < b, 0 if equal by value, 1 if a > b."""
        ...


class Rounder(Protocol):
    """Protocol for reducing a Number to a target precision."""

    def __call__(self, number: Number, precision: int, mode: RoundingMode | str) -> Number:
        """Return number with exactly `precision` fractional digits."""
        ...


class RoundingStrategy(Protocol):
    """Protocol for a single rounding policy.

    A strategy only decides whether the kept magnitude must be bumped by one
    unit in the last place. It receives the truncated magnitude, the
    discarded remainder and the scale of that remainder (10^discarded_digits).
    """

    def __call__(self, kept: int, remainder: int, scale: int, negative: bool) -> bool:
        """Return True if the kept magnitude must be incremented."""
        ...
