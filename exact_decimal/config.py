"""Configuration for Number parsing and rounding defaults."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

import structlog

from exact_decimal.errors import InvalidArgument
from exact_decimal.operations.rounding import RoundingMode, coerce_rounding_mode

logger = structlog.get_logger()

ROUNDING_MODE_ENV = "EXACT_DECIMAL_ROUNDING_MODE"
MAX_DIGITS_ENV = "EXACT_DECIMAL_MAX_DIGITS"


@dataclass(frozen=True)
class NumberConfig:
    """Centralized configuration for Number behavior.

    Attributes:
        default_rounding_mode: Mode used by to_precision()/to_fixed() when the
            caller does not pass one (default: TRUNCATE)
        max_digits: Maximum accepted length of decimal literal text, or None
            for no limit (default: None)
    """

    default_rounding_mode: RoundingMode = RoundingMode.TRUNCATE
    max_digits: int | None = None

    def __post_init__(self) -> None:
        if self.max_digits is not None and self.max_digits <= 0:
            raise InvalidArgument(f"max_digits must be positive, got {self.max_digits}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> NumberConfig:
        """Build a config from environment variables.

        Configuration via environment variables:
        - EXACT_DECIMAL_ROUNDING_MODE: mode value or name (default: truncate)
        - EXACT_DECIMAL_MAX_DIGITS: positive integer (default: unlimited)

        Unparseable values are logged and replaced by the defaults.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        rounding_mode = defaults.default_rounding_mode
        raw_mode = env.get(ROUNDING_MODE_ENV)
        if raw_mode:
            try:
                rounding_mode = coerce_rounding_mode(raw_mode)
            except InvalidArgument:
                logger.warning(
                    "config_invalid_env_value",
                    variable=ROUNDING_MODE_ENV,
                    value=raw_mode,
                )

        max_digits = defaults.max_digits
        raw_max = env.get(MAX_DIGITS_ENV)
        if raw_max:
            try:
                parsed = int(raw_max)
            except ValueError:
                parsed = 0
            if parsed > 0:
                max_digits = parsed
            else:
                logger.warning(
                    "config_invalid_env_value",
                    variable=MAX_DIGITS_ENV,
                    value=raw_max,
                )

        return cls(default_rounding_mode=rounding_mode, max_digits=max_digits)


# Default configuration instance, read once at import time
DEFAULT_NUMBER_CONFIG = NumberConfig.from_env()
