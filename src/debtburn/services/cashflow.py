"""Household cash-flow helpers feeding the payoff simulator."""

from __future__ import annotations

import math
from typing import Iterable

from ..models.debt import Debt
from ..models.household import BIWEEKLY, MONTHLY, WEEKLY, Bill, IncomeSource

# Average occurrences per calendar month.
MONTHLY_FACTORS = {
    WEEKLY: 4.33,
    BIWEEKLY: 2.167,
    MONTHLY: 1.0,
}


def to_monthly(amount: float, frequency: str) -> float:
    """Convert a recurring amount to its monthly equivalent."""

    try:
        factor = MONTHLY_FACTORS[frequency]
    except KeyError:
        raise ValueError(f"Unknown frequency: {frequency!r}") from None
    return amount * factor


def monthly_income(sources: Iterable[IncomeSource]) -> float:
    return sum(to_monthly(s.amount, s.frequency) for s in sources)


def monthly_bills(bills: Iterable[Bill]) -> float:
    return sum(to_monthly(b.amount, b.frequency) for b in bills)


def monthly_minimums(debts: Iterable[Debt]) -> float:
    return sum(d.minimum_payment for d in debts)


def monthly_cash_flow(
    sources: Iterable[IncomeSource], bills: Iterable[Bill], debts: Iterable[Debt]
) -> float:
    """Income left after bills and debt minimums (may be negative)."""

    return monthly_income(sources) - monthly_bills(bills) - monthly_minimums(debts)


def suggested_extra(cash_flow: float, share: float = 0.5) -> float:
    """Whole-unit share of positive cash flow to put toward debts."""

    if cash_flow <= 0:
        return 0.0
    return float(math.floor(cash_flow * share))


def total_debt(debts: Iterable[Debt]) -> float:
    return sum(d.current_balance for d in debts)


def total_starting_debt(debts: Iterable[Debt]) -> float:
    return sum(d.origination_balance for d in debts)


def progress_ratio(debts: Iterable[Debt]) -> float:
    """Fraction of the original debt already repaid, 0.0 when nothing was owed."""

    debts = list(debts)
    starting = total_starting_debt(debts)
    if starting <= 0:
        return 0.0
    return (starting - total_debt(debts)) / starting


def debt_progress_ratio(debt: Debt) -> float:
    return progress_ratio([debt])
