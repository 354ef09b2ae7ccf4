"""Rounding of Numbers to a target precision.

Each rounding mode maps to a small strategy function in ROUNDING_STRATEGIES.
The strategy only decides whether the truncated magnitude must be bumped by
one unit in the last kept place; the surrounding arithmetic is shared.

Modes (sign-aware where noted):
- TRUNCATE: drop the discarded digits (toward zero)
- CEIL: toward positive infinity
- FLOOR: toward negative infinity
- HALF_UP: nearest, exact half away from zero
- HALF_DOWN: nearest, exact half toward zero
- HALF_EVEN: nearest, exact half to the even last kept digit
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from exact_decimal.errors import InvalidArgument
from exact_decimal.operations.scaling import from_scaled_int

if TYPE_CHECKING:
    from exact_decimal.number import Number
    from exact_decimal.operations.types import RoundingStrategy


class RoundingMode(str, Enum):
    """Rounding policies supported by round_number."""

    TRUNCATE = "truncate"
    CEIL = "ceil"
    FLOOR = "floor"
    HALF_UP = "up"
    HALF_DOWN = "down"
    HALF_EVEN = "even"


def coerce_rounding_mode(mode: RoundingMode | str) -> RoundingMode:
    """Resolve a RoundingMode from an enum member, its value or its name.

    Raises:
        InvalidArgument: If mode does not name a known rounding mode
    """
    if isinstance(mode, RoundingMode):
        return mode
    if isinstance(mode, str):
        try:
            return RoundingMode(mode.lower())
        except ValueError:
            pass
        member = RoundingMode.__members__.get(mode.upper())
        if member is not None:
            return member
    raise InvalidArgument(f"Unknown rounding mode: {mode!r}")


def _truncate(kept: int, remainder: int, scale: int, negative: bool) -> bool:
    return False


def _ceil(kept: int, remainder: int, scale: int, negative: bool) -> bool:
    return remainder != 0 and not negative


def _floor(kept: int, remainder: int, scale: int, negative: bool) -> bool:
    return remainder != 0 and negative


def _half_up(kept: int, remainder: int, scale: int, negative: bool) -> bool:
    return 2 * remainder >= scale


def _half_down(kept: int, remainder: int, scale: int, negative: bool) -> bool:
    return 2 * remainder > scale


def _half_even(kept: int, remainder: int, scale: int, negative: bool) -> bool:
    twice = 2 * remainder
    if twice == scale:
        return kept % 2 == 1
    return twice > scale


ROUNDING_STRATEGIES: dict[RoundingMode, RoundingStrategy] = {
    RoundingMode.TRUNCATE: _truncate,
    RoundingMode.CEIL: _ceil,
    RoundingMode.FLOOR: _floor,
    RoundingMode.HALF_UP: _half_up,
    RoundingMode.HALF_DOWN: _half_down,
    RoundingMode.HALF_EVEN: _half_even,
}


def round_number(
    number: Number,
    precision: int,
    mode: RoundingMode | str = RoundingMode.TRUNCATE,
) -> Number:
    """Reduce number to exactly `precision` fractional digits.

    The result keeps trailing zeros so that its exponent equals precision
    (Number("1.2951") rounded HALF_UP to 2 gives "1.30"). A result of zero
    collapses to exponent 0.

    Args:
        number: Number to round
        precision: Target count of fractional digits (>= 0)
        mode: Rounding policy, as a RoundingMode or its string value/name

    Returns:
        New Number, or number itself when precision >= number.exponent

    Raises:
        InvalidArgument: If precision is negative or mode is unknown
    """
    strategy = ROUNDING_STRATEGIES[coerce_rounding_mode(mode)]
    if precision < 0:
        raise InvalidArgument(f"Precision must be a positive integer or 0, got {precision}")
    if precision >= number.exponent:
        return number

    scale = 10 ** (number.exponent - precision)
    kept, remainder = divmod(int(number.coefficient), scale)
    if strategy(kept, remainder, scale, number.is_negative):
        kept += 1

    value = -kept if number.is_negative else kept
    return from_scaled_int(number, value, precision, canonical=False)
