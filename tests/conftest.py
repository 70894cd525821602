"""Pytest configuration and shared fixtures for debtburn tests."""

from __future__ import annotations

import logging
from datetime import date

import pytest

from debtburn.models import Debt

FIXED_TODAY = date(2026, 1, 15)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep configuration and log files inside the test's temp directory."""

    monkeypatch.setenv("DEBTBURN_DATA_DIR", str(tmp_path / "data"))
    for name in ("DEBTBURN_DEV_MODE", "DEBTBURN_DEFAULT_STRATEGY", "DEBTBURN_SURPLUS_SHARE"):
        monkeypatch.delenv(name, raising=False)
    yield
    logger = logging.getLogger("debtburn")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def today() -> date:
    return FIXED_TODAY


@pytest.fixture
def debt_factory():
    """Build Debt records with sensible defaults."""

    def _create_debt(
        id: str = "card",
        *,
        name: str | None = None,
        balance: float = 1000.0,
        rate: float = 0.12,
        minimum: float = 50.0,
        starting: float | None = None,
        due_day: int = 15,
    ) -> Debt:
        return Debt(
            id=id,
            name=name or id.title(),
            current_balance=balance,
            interest_rate=rate,
            minimum_payment=minimum,
            starting_balance=starting,
            due_day=due_day,
        )

    return _create_debt


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance (default one cent)."""
    assert (
        abs(actual - expected) < tolerance
    ), f"Expected {expected}, got {actual} (diff: {abs(actual - expected)})"
