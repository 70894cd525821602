"""Debt records and repayment policy inputs."""

from __future__ import annotations

from dataclasses import dataclass

AVALANCHE = "avalanche"
SNOWBALL = "snowball"
MINIMUMS = "minimums"
STRATEGIES = (AVALANCHE, SNOWBALL, MINIMUMS)


@dataclass(frozen=True, slots=True)
class Debt:
    """A liability owned by the caller; the engine only reads it."""

    id: str
    name: str
    current_balance: float
    interest_rate: float  # annual rate as a fraction, 0.2199 == 21.99% APR
    minimum_payment: float
    starting_balance: float | None = None  # falls back to current_balance
    due_day: int = 1  # informational only

    @property
    def origination_balance(self) -> float:
        if self.starting_balance is None:
            return self.current_balance
        return self.starting_balance


@dataclass(frozen=True, slots=True)
class LumpSum:
    """One-time extra payment applied to ``debt_id`` at simulation ``month``."""

    amount: float
    debt_id: str
    month: int
