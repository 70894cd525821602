"""Plain data records consumed by the debtburn services."""

from .debt import (
    AVALANCHE,
    MINIMUMS,
    SNOWBALL,
    STRATEGIES,
    Debt,
    LumpSum,
)
from .household import BIWEEKLY, FREQUENCIES, MONTHLY, WEEKLY, Bill, IncomeSource

__all__ = [
    "AVALANCHE",
    "BIWEEKLY",
    "Bill",
    "Debt",
    "FREQUENCIES",
    "IncomeSource",
    "LumpSum",
    "MINIMUMS",
    "MONTHLY",
    "SNOWBALL",
    "STRATEGIES",
    "WEEKLY",
]
