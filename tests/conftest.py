"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import LogCapture

from exact_decimal import Number
from tests.helpers import SAMPLE_LITERALS


@pytest.fixture
def zero() -> Number:
    """Return the zero Number."""
    return Number.zero()


@pytest.fixture
def sample_numbers() -> list[Number]:
    """Return one Number per sample literal."""
    return [Number(literal) for literal in SAMPLE_LITERALS]


@pytest.fixture
def log_output() -> Iterator[LogCapture]:
    """Capture structlog events emitted during a test.

    Yields the LogCapture; its `entries` list holds one dict per event.
    """
    capture = LogCapture()
    structlog.configure(processors=[capture])
    yield capture
    structlog.reset_defaults()
