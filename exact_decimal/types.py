"""Pydantic field type for Number.

Usage:
    from pydantic import BaseModel
    from exact_decimal.types import DecimalNumber

    class Invoice(BaseModel):
        total: DecimalNumber

    invoice = Invoice.model_validate({"total": "19.990"})
    invoice.total            # Number('19.99')
    invoice.model_dump()     # {"total": "19.99"}
"""

from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from exact_decimal.number import Number

# JSON schema flavor of the decimal literal grammar
DECIMAL_LITERAL_JSON_PATTERN = r"^[-+]?[0-9]+(\.[0-9]+)?$"


def validate_number(value: Any) -> Number:
    """Validate that a value can be used as a Number.

    Accepts Number instances, decimal literal strings and ints. Floats are
    rejected since they may already carry binary rounding error.

    Args:
        value: Value to validate

    Returns:
        Number instance

    Raises:
        ValueError: If value is not an exact decimal representation
    """
    if isinstance(value, Number):
        return value

    # bool is an int subclass but never a meaningful amount
    if isinstance(value, bool):
        raise ValueError("Number cannot be built from a bool")
    if isinstance(value, int):
        return Number(str(value))

    if not isinstance(value, str):
        raise ValueError(f"Number must be a decimal string or int, got {type(value).__name__}")

    # InvalidFormat and InvalidArgument are ValueErrors, pydantic reports them
    return Number(value)


# Decimal number stored as Number, validated from str/int and serialized to str
DecimalNumber = Annotated[
    Number,
    PlainValidator(validate_number),
    PlainSerializer(str, return_type=str),
    WithJsonSchema({"type": "string", "pattern": DECIMAL_LITERAL_JSON_PATTERN}),
]
