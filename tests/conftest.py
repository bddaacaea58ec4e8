"""
Shared test fixtures for the endeavour test suite.

Resets the global state (structlog configuration, interrupt flag) that
individual tests may touch, so test order never matters.
"""

from __future__ import annotations

from typing import Iterator

import pytest
import structlog

from endeavour import interrupt


@pytest.fixture(autouse=True)
def _reset_global_state() -> Iterator[None]:
    interrupt.clear()
    yield
    interrupt.clear()
    structlog.reset_defaults()
