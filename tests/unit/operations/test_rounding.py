"""Tests for rounding to a target precision."""

import decimal
import itertools

import pytest

from exact_decimal import InvalidArgument, Number, RoundingMode
from exact_decimal.operations import ROUNDING_STRATEGIES, coerce_rounding_mode, round_number
from tests.helpers import DECIMAL_REFERENCE_CONTEXT, DECIMAL_ROUNDING, SAMPLE_LITERALS, to_decimal

T = RoundingMode.TRUNCATE
C = RoundingMode.CEIL
F = RoundingMode.FLOOR
HU = RoundingMode.HALF_UP
HD = RoundingMode.HALF_DOWN
HE = RoundingMode.HALF_EVEN


def assert_rounds_to(result: Number, expected: str, precision: int) -> None:
    """Assert value and exponent of a rounding result."""
    assert result.compare(Number(expected)) == 0, f"{result!r} != {expected}"
    if not result.is_zero():
        assert result.exponent == precision
    else:
        assert not result.is_negative


class TestRoundingMode:
    """Tests for RoundingMode and its coercion."""

    def test_values(self):
        """Mode values are short lowercase names."""
        assert [m.value for m in RoundingMode] == ["truncate", "ceil", "floor", "up", "down", "even"]

    def test_every_mode_has_a_strategy(self):
        """The strategy table covers every mode."""
        assert set(ROUNDING_STRATEGIES) == set(RoundingMode)

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (RoundingMode.CEIL, RoundingMode.CEIL),
            ("ceil", RoundingMode.CEIL),
            ("up", RoundingMode.HALF_UP),
            ("HALF_EVEN", RoundingMode.HALF_EVEN),
            ("half_down", RoundingMode.HALF_DOWN),
            ("Truncate", RoundingMode.TRUNCATE),
        ],
    )
    def test_coerce(self, raw, expected):
        """Modes resolve from members, values and names."""
        assert coerce_rounding_mode(raw) is expected

    @pytest.mark.parametrize("raw", ["", "bankers", "round_half_up", 1, None])
    def test_coerce_unknown_raises(self, raw):
        """Unknown modes raise InvalidArgument."""
        with pytest.raises(InvalidArgument) as exc_info:
            coerce_rounding_mode(raw)
        assert "Unknown rounding mode" in str(exc_info.value)


class TestRoundNumber:
    """Tests for round_number()."""

    @pytest.mark.parametrize(
        ("literal", "precision", "mode", "expected"),
        [
            # Exact half, even kept digit
            ("2.5", 0, T, "2"),
            ("2.5", 0, C, "3"),
            ("2.5", 0, F, "2"),
            ("2.5", 0, HU, "3"),
            ("2.5", 0, HD, "2"),
            ("2.5", 0, HE, "2"),
            # Exact half, odd kept digit
            ("3.5", 0, HD, "3"),
            ("3.5", 0, HE, "4"),
            # Negative exact half
            ("-2.5", 0, T, "-2"),
            ("-2.5", 0, C, "-2"),
            ("-2.5", 0, F, "-3"),
            ("-2.5", 0, HU, "-3"),
            ("-2.5", 0, HD, "-2"),
            ("-2.5", 0, HE, "-2"),
            # Just above half
            ("1.2501", 1, HD, "1.3"),
            ("1.2501", 1, HE, "1.3"),
            # Just below half
            ("1.2499", 1, HU, "1.2"),
            ("1.2499", 1, C, "1.3"),
            # Ties to even on the fractional digit
            ("1.25", 1, HE, "1.2"),
            ("1.35", 1, HE, "1.4"),
            # Carry into the integer part
            ("9.99", 1, C, "10.0"),
            ("-9.99", 1, F, "-10.0"),
            ("0.999", 2, HU, "1.00"),
        ],
    )
    def test_table(self, literal, precision, mode, expected):
        """Each mode handles discarded digits as documented."""
        assert_rounds_to(round_number(Number(literal), precision, mode), expected, precision)

    def test_exponent_equals_precision(self):
        """Trailing zeros produced by rounding are kept."""
        result = round_number(Number("9.99"), 1, C)
        assert result.coefficient == "100"
        assert result.exponent == 1

    @pytest.mark.parametrize("mode", list(RoundingMode))
    def test_rounds_to_unsigned_zero(self, mode):
        """Results that reach zero never carry a sign."""
        result = round_number(Number("-0.0004"), 2, mode)
        if mode == F:
            assert_rounds_to(result, "-0.01", 2)
        else:
            assert result.is_zero()
            assert not result.is_negative

    def test_half_even_to_zero(self):
        """0.05 ties to the even digit 0."""
        result = round_number(Number("0.05"), 1, HE)
        assert result.is_zero()

    def test_precision_not_below_exponent_returns_number(self):
        """Nothing is discarded when the precision is already met."""
        n = Number("1.25")
        assert round_number(n, 2, HU) is n
        assert round_number(n, 5, HU) is n

    def test_negative_precision_raises(self):
        """Precision must be >= 0."""
        with pytest.raises(InvalidArgument):
            round_number(Number("1.5"), -1, T)

    def test_default_mode_truncates(self):
        """TRUNCATE is the default."""
        assert_rounds_to(round_number(Number("1.2399"), 2), "1.23", 2)

    def test_matches_reference(self):
        """Every mode agrees with stdlib decimal quantize."""
        for literal, precision, mode in itertools.product(
            SAMPLE_LITERALS, range(5), list(RoundingMode)
        ):
            number = Number(literal)
            result = round_number(number, precision, mode)
            quantum = decimal.Decimal(1).scaleb(-precision)
            expected = decimal.Decimal(literal).quantize(
                quantum,
                rounding=DECIMAL_ROUNDING[mode],
                context=DECIMAL_REFERENCE_CONTEXT,
            )
            assert to_decimal(result) == expected, f"{literal} @{precision} {mode}"
            if precision < number.exponent and not result.is_zero():
                assert result.exponent == precision
