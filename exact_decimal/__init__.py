"""Exact decimal arithmetic on digit strings."""

from exact_decimal.config import DEFAULT_NUMBER_CONFIG, NumberConfig
from exact_decimal.errors import InvalidArgument, InvalidFormat, NumberError
from exact_decimal.number import Number
from exact_decimal.operations import RoundingMode
from exact_decimal.types import DecimalNumber, validate_number

__version__ = "0.1.0"
__all__ = [
    # Value type
    "Number",
    "RoundingMode",
    # Config
    "NumberConfig",
    "DEFAULT_NUMBER_CONFIG",
    # Errors
    "NumberError",
    "InvalidFormat",
    "InvalidArgument",
    # Pydantic integration
    "DecimalNumber",
    "validate_number",
    "__version__",
]
