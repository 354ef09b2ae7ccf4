"""Test helpers module for shared test utilities.

- constants: sample literals and rounding reference tables
- factories: Number factories and conversion helpers
"""

from tests.helpers.constants import (
    DECIMAL_REFERENCE_CONTEXT,
    DECIMAL_ROUNDING,
    SAMPLE_LITERALS,
)
from tests.helpers.factories import assert_canonical, make_number, to_decimal

__all__ = [
    # Constants
    "SAMPLE_LITERALS",
    "DECIMAL_ROUNDING",
    "DECIMAL_REFERENCE_CONTEXT",
    # Factories
    "make_number",
    "to_decimal",
    "assert_canonical",
]
