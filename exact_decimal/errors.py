"""Error classes for decimal number construction and manipulation.

All errors derive from ValueError so callers that only care about
"bad input" can catch a single built-in type.
"""


class NumberError(ValueError):
    """Base error for exact_decimal operations."""

    pass


class InvalidFormat(NumberError):
    """Input text cannot be interpreted as a number."""

    pass


class InvalidArgument(NumberError):
    """Argument is out of its valid range (negative exponent, unknown mode, ...)."""

    pass
