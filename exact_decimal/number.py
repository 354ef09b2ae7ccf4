"""Arbitrary precision decimal number.

A Number stores a base-10 value exactly as a sign, an unsigned digit string
(the coefficient) and the count of coefficient digits that are fractional
(the exponent):

    value = (-1 if is_negative else 1) * coefficient * 10^(-exponent)

Numbers are immutable. Arithmetic and comparison are delegated to the
stateless functions in exact_decimal.operations and always return new
instances.

Usage pattern:
    from exact_decimal import Number, RoundingMode

    price = Number("19.99")
    tax = Number("1.6")
    total = price + tax                      # Number("21.59")
    total.to_fixed(1, RoundingMode.HALF_UP)  # "21.6"

    # Coefficient + exponent form: 123456 * 10^(-6)
    str(Number("123456", 6))                 # "0.123456"
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, ClassVar

import structlog

from exact_decimal import operations
from exact_decimal.config import DEFAULT_NUMBER_CONFIG, NumberConfig
from exact_decimal.errors import InvalidArgument, InvalidFormat
from exact_decimal.operations.rounding import RoundingMode

if TYPE_CHECKING:
    from exact_decimal.operations.types import BinaryOperation, Comparator, Rounder

logger = structlog.get_logger()

__all__ = ["Number", "DECIMAL_LITERAL_PATTERN", "COEFFICIENT_PATTERN"]

# Decimal literal, e.g. "-007.250"
DECIMAL_LITERAL_PATTERN = re.compile(
    r"(?P<sign>[-+])?(?P<integer>[0-9]+)(?:\.(?P<fraction>[0-9]+))?"
)

# Signed digit string used as a coefficient, e.g. "+123456"
COEFFICIENT_PATTERN = re.compile(r"(?P<sign>[-+])?(?P<integer>[0-9]+)")


class Number:
    """Immutable decimal number with arbitrary precision.

    Can be constructed in two ways:

    1) From a decimal literal (canonical form is derived by stripping
       leading integer zeros and trailing fractional zeros):

        Number("007.250")   # coefficient "725", exponent 2

    2) From a signed integer coefficient and a non-negative exponent
       (trailing zeros are kept, so precision survives):

        Number("100", 2)    # coefficient "100", exponent 2 -> "1.00"

    Zero never carries a sign: Number("-0") equals Number("0").

    Attributes:
        config: NumberConfig used for input limits and the default
            rounding mode (class-level, override in a subclass)
        adder, subtractor, comparator, rounder: Arithmetic collaborators
            (class-level, defaults from exact_decimal.operations; override
            in a subclass with staticmethod(...))
    """

    config: ClassVar[NumberConfig] = DEFAULT_NUMBER_CONFIG

    adder: ClassVar[BinaryOperation] = staticmethod(operations.add)
    subtractor: ClassVar[BinaryOperation] = staticmethod(operations.subtract)
    comparator: ClassVar[Comparator] = staticmethod(operations.compare)
    rounder: ClassVar[Rounder] = staticmethod(operations.round_number)

    __slots__ = ("_negative", "_coefficient", "_exponent")
    _negative: bool
    _coefficient: str
    _exponent: int

    def __init__(self, value: str, exponent: int | None = None) -> None:
        """Create a Number from a decimal literal or a coefficient/exponent pair.

        Args:
            value: Decimal literal (when exponent is None) or signed
                integer coefficient
            exponent: If provided, value is a coefficient scaled by
                10^(-exponent)

        Raises:
            TypeError: If value is not a str or exponent is not an int
            InvalidFormat: If value does not match the expected format
            InvalidArgument: If exponent is negative or a decimal literal is
                longer than config.max_digits
        """
        if not isinstance(value, str):
            raise TypeError(f"Number requires str, got {type(value).__name__}")

        if exponent is None:
            negative, coefficient, exponent = _parse_literal(value, self.config.max_digits)
        else:
            negative, coefficient, exponent = _parse_coefficient(value, exponent)

        self._negative = negative and coefficient != "0"
        self._coefficient = coefficient
        self._exponent = exponent

    @classmethod
    def from_string(cls, text: str) -> Number:
        """Parse a decimal literal such as "-12.50"."""
        return cls(text)

    @classmethod
    def from_coefficient(cls, coefficient: str, exponent: int) -> Number:
        """Create from a signed integer coefficient and exponent (coefficient * 10^-exponent)."""
        return cls(coefficient, exponent)

    @classmethod
    def zero(cls) -> Number:
        """Create a Number with value 0."""
        return cls("0")

    # --- Raw fields ---

    @property
    def is_negative(self) -> bool:
        """True if the number is strictly below zero."""
        return self._negative

    @property
    def is_positive(self) -> bool:
        """True if the number is not negative (zero counts as positive)."""
        return not self._negative

    @property
    def coefficient(self) -> str:
        """Unsigned significant digits, without decimal point.

        The value can be recomputed as coefficient * 10^(-exponent).
        """
        return self._coefficient

    @property
    def exponent(self) -> int:
        """Number of trailing coefficient digits that are fractional (always >= 0)."""
        return self._exponent

    @property
    def precision(self) -> int:
        """Number of digits in the fractional part. Alias of exponent."""
        return self._exponent

    # --- Derived accessors ---

    @property
    def sign(self) -> str:
        """'-' if negative, empty string otherwise."""
        return "-" if self._negative else ""

    @property
    def integer_part(self) -> str:
        """Integer part of the number, without sign."""
        if self._coefficient == "0" or self._exponent == 0:
            return self._coefficient
        if self._exponent >= len(self._coefficient):
            return "0"
        return self._coefficient[: -self._exponent]

    @property
    def fractional_part(self) -> str:
        """Fractional part of the number, without sign.

        Returns "0" when there is no fractional part. Leading zeros are kept
        (Number("5", 3) has fractional part "005").
        """
        if self._exponent == 0 or self._coefficient == "0":
            return "0"
        if self._exponent > len(self._coefficient):
            return self._coefficient.rjust(self._exponent, "0")
        return self._coefficient[-self._exponent :]

    def is_zero(self) -> bool:
        """True if the value is zero."""
        return self._coefficient == "0"

    def is_canonical(self) -> bool:
        """True if this instance is in the form parsing its own string gives.

        Only the coefficient/exponent constructor can produce non-canonical
        instances, by keeping trailing fractional zeros.
        """
        return self._exponent == 0 or not self._coefficient.endswith("0")

    # --- Precision ---

    def to_precision(self, precision: int, mode: RoundingMode | str | None = None) -> Number:
        """Return this number with exactly `precision` fractional digits.

        Increasing the precision pads with zeros and is lossless. Reducing it
        applies the rounding mode to the discarded digits. Zero has no
        fractional digits and is returned as zero.

        Args:
            precision: Target number of fractional digits (>= 0)
            mode: Rounding mode for lossy reductions (default:
                config.default_rounding_mode)

        Raises:
            InvalidArgument: If precision is negative or mode is unknown
        """
        if mode is None:
            mode = self.config.default_rounding_mode
        mode = operations.coerce_rounding_mode(mode)
        if precision < 0:
            raise InvalidArgument(f"Precision must be a positive integer or 0, got {precision}")

        if precision > self._exponent:
            padding = "0" * (precision - self._exponent)
            return type(self)(self.sign + self._coefficient + padding, precision)
        if precision == self._exponent:
            return self

        return self.rounder(self, precision, mode)

    def round(self, precision: int = 0, mode: RoundingMode | str | None = None) -> Number:
        """Round to `precision` fractional digits. Same as to_precision()."""
        return self.to_precision(precision, mode)

    def to_fixed(self, precision: int, mode: RoundingMode | str | None = None) -> str:
        """Format with exactly `precision` fractional digits.

        Unlike str(), the fractional part is always printed, zero included:

            Number("0").to_fixed(2)       # "0.00"
            Number("1.999").to_fixed(2)   # "1.99"

        Raises:
            InvalidArgument: If precision is negative or mode is unknown
        """
        number = self.to_precision(precision, mode)
        if precision == 0:
            return number.sign + number.integer_part

        fractional = number.fractional_part if number.exponent else ""
        return f"{number.sign}{number.integer_part}.{fractional.ljust(precision, '0')}"

    # --- Sign ---

    def invert(self) -> Number:
        """Return the additive inverse of this number (N * -1)."""
        sign = "" if self._negative else "-"
        return type(self)(sign + self._coefficient, self._exponent)

    def to_positive(self) -> Number:
        """Return this number as a positive number."""
        if not self._negative:
            return self
        return self.invert()

    def to_negative(self) -> Number:
        """Return this number as a negative number. Zero stays zero."""
        if self._negative or self.is_zero():
            return self
        return self.invert()

    # --- Arithmetic ---

    def plus(self, addend: Number) -> Number:
        """Return the exact sum of this number and addend."""
        return self.adder(self, addend)

    def minus(self, subtrahend: Number) -> Number:
        """Return the exact result of subtracting subtrahend from this number."""
        return self.subtractor(self, subtrahend)

    # --- Comparison ---

    def compare(self, other: Number) -> int:
        """Compare by value: -1 if self < other, 0 if equal, 1 if self > other."""
        return self.comparator(self, other)

    def is_greater_than(self, other: Number) -> bool:
        return self.compare(other) == 1

    def is_greater_or_equal_than(self, other: Number) -> bool:
        return self.compare(other) >= 0

    def is_lower_than(self, other: Number) -> bool:
        return self.compare(other) == -1

    def is_lower_or_equal_than(self, other: Number) -> bool:
        return self.compare(other) <= 0

    def is_greater_than_zero(self) -> bool:
        return not self._negative and not self.is_zero()

    def is_lower_than_zero(self) -> bool:
        return self._negative

    def equals(self, other: Number) -> bool:
        """Structural equality on (sign, coefficient, exponent).

        Numbers built from decimal literals are canonical, so for them this
        is value equality. Number("100", 2) keeps its trailing zeros and is
        therefore not equal to Number("1"); use compare() for value order.
        """
        return (
            self._negative == other._negative
            and self._coefficient == other._coefficient
            and self._exponent == other._exponent
        )

    # --- Python protocol ---

    def __str__(self) -> str:
        output = self.sign + self.integer_part
        fractional = self.fractional_part
        if fractional != "0":
            output += "." + fractional
        return output

    def __repr__(self) -> str:
        if self.is_canonical():
            return f"Number('{self}')"
        return f"Number('{self.sign}{self._coefficient}', {self._exponent})"

    def __hash__(self) -> int:
        return hash((self._negative, self._coefficient, self._exponent))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self.is_lower_than(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self.is_lower_or_equal_than(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self.is_greater_than(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self.is_greater_or_equal_than(other)

    def __add__(self, other: object) -> Number:
        if not isinstance(other, Number):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> Number:
        if not isinstance(other, Number):
            return NotImplemented
        return self.minus(other)

    def __neg__(self) -> Number:
        return self.invert()

    def __pos__(self) -> Number:
        return self

    def __abs__(self) -> Number:
        return self.to_positive()

    def __bool__(self) -> bool:
        """False only for zero."""
        return not self.is_zero()


def _parse_literal(text: str, max_digits: int | None = None) -> tuple[bool, str, int]:
    """Split a decimal literal into canonical (negative, coefficient, exponent).

    Raises:
        InvalidArgument: If text is longer than max_digits
        InvalidFormat: If text is not a decimal literal
    """
    if max_digits is not None and len(text) > max_digits:
        logger.debug("number_input_too_long", length=len(text), max_digits=max_digits)
        raise InvalidArgument(f"Input is {len(text)} characters long, maximum is {max_digits}")

    match = DECIMAL_LITERAL_PATTERN.fullmatch(text)
    if match is None:
        logger.debug("number_invalid_format", value=text[:32], form="literal")
        raise InvalidFormat(f"'{text}' cannot be interpreted as a number")

    # Leading zeros of the integer part and trailing zeros of the fraction
    # carry no value
    integer = match.group("integer").lstrip("0")
    fraction = (match.group("fraction") or "").rstrip("0")

    coefficient = (integer + fraction).lstrip("0") or "0"
    return match.group("sign") == "-", coefficient, len(fraction)


def _parse_coefficient(digits: str, exponent: int) -> tuple[bool, str, int]:
    """Validate a signed coefficient and exponent pair.

    Only leading zeros are stripped; trailing zeros are kept along with the
    exponent. A zero coefficient resets the exponent to 0.

    Raises:
        TypeError: If exponent is not an int
        InvalidArgument: If exponent is negative
        InvalidFormat: If digits is not a signed integer
    """
    if isinstance(exponent, bool) or not isinstance(exponent, int):
        raise TypeError(f"Exponent must be int, got {type(exponent).__name__}")
    if exponent < 0:
        logger.debug("number_invalid_exponent", value=digits[:32], exponent=exponent)
        raise InvalidArgument(
            f"Invalid value for exponent. Expected a positive integer or 0, but got {exponent}"
        )

    match = COEFFICIENT_PATTERN.fullmatch(digits)
    if match is None:
        logger.debug("number_invalid_format", value=digits[:32], form="coefficient")
        raise InvalidFormat(f"'{digits}' cannot be interpreted as a number")

    coefficient = match.group("integer").lstrip("0")
    if not coefficient:
        return False, "0", 0
    return match.group("sign") == "-", coefficient, exponent
