"""Strategy comparison and what-if scenarios built on the payoff simulator."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Iterable

from ..logging_config import get_logger
from ..models.debt import AVALANCHE, MINIMUMS, SNOWBALL, STRATEGIES, Debt, LumpSum
from .payoff import PayoffResult, round_cents, simulate
from .validation import validate_debts, validate_lump_sum

logger = get_logger("services.scenarios")

# Share of an income change assumed to reach the extra payment.
INCOME_CHANGE_SHARE = 0.5


@dataclass(frozen=True, slots=True)
class StrategyComparison:
    """Avalanche, snowball and minimums-only results for one debt list."""

    avalanche: PayoffResult
    snowball: PayoffResult
    minimums: PayoffResult

    def results(self) -> tuple[PayoffResult, ...]:
        return (self.avalanche, self.snowball, self.minimums)

    @property
    def best(self) -> PayoffResult:
        """Fewest months, then least interest; earlier strategies win ties."""

        return min(self.results(), key=lambda r: (r.months, r.total_interest))


@dataclass(frozen=True, slots=True)
class WhatIf:
    """User-adjusted inputs for a scenario run."""

    extra_monthly: float
    income_change: float = 0.0
    lump_sum: LumpSum | None = None
    strategy: str = AVALANCHE

    @property
    def effective_extra(self) -> float:
        adjusted = self.extra_monthly + math.floor(self.income_change * INCOME_CHANGE_SHARE)
        return float(max(0.0, adjusted))


@dataclass(frozen=True, slots=True)
class ScenarioComparison:
    """Baseline vs. scenario; positive savings favour the scenario."""

    baseline: PayoffResult
    scenario: PayoffResult
    months_saved: int
    interest_saved: float


def compare_strategies(
    debts: Iterable[Debt], extra_monthly: float = 0.0, *, today: date | None = None
) -> StrategyComparison:
    """Run all three strategies; minimums-only never receives the extra payment."""

    debts = validate_debts(debts)
    return StrategyComparison(
        avalanche=simulate(debts, AVALANCHE, extra_monthly, today=today),
        snowball=simulate(debts, SNOWBALL, extra_monthly, today=today),
        minimums=simulate(debts, MINIMUMS, today=today),
    )


def run_scenario(
    debts: Iterable[Debt],
    baseline_extra: float,
    what_if: WhatIf,
    *,
    today: date | None = None,
) -> ScenarioComparison:
    """Compare the current plan against a what-if adjustment."""

    if what_if.strategy not in STRATEGIES:
        raise ValueError(f"Invalid debt payoff strategy: {what_if.strategy!r}")
    debts = validate_debts(debts)
    lump_sum = validate_lump_sum(what_if.lump_sum)

    baseline = simulate(debts, what_if.strategy, baseline_extra, today=today)
    scenario = simulate(debts, what_if.strategy, what_if.effective_extra, lump_sum, today=today)
    comparison = ScenarioComparison(
        baseline=baseline,
        scenario=scenario,
        months_saved=baseline.months - scenario.months,
        interest_saved=round_cents(baseline.total_interest - scenario.total_interest),
    )
    logger.debug(
        "Scenario compared",
        extra={
            "months_saved": comparison.months_saved,
            "interest_saved": comparison.interest_saved,
        },
    )
    return comparison
