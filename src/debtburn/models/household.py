"""Income and recurring bill records used for cash-flow estimates."""

from __future__ import annotations

from dataclasses import dataclass

WEEKLY = "weekly"
BIWEEKLY = "biweekly"
MONTHLY = "monthly"
FREQUENCIES = (WEEKLY, BIWEEKLY, MONTHLY)


@dataclass(frozen=True, slots=True)
class IncomeSource:
    """Recurring household income."""

    id: str
    name: str
    amount: float
    frequency: str = MONTHLY
    is_variable: bool = False


@dataclass(frozen=True, slots=True)
class Bill:
    """Recurring household expense."""

    id: str
    name: str
    amount: float
    frequency: str = MONTHLY
    category: str = ""
