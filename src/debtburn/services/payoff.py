"""Debt payoff simulation (avalanche, snowball and minimums-only).

The simulator is a pure function of its inputs. Each month it:

1. applies the optional lump sum to its target debt,
2. accrues monthly interest on every open balance,
3. pays each debt's minimum,
4. pours the extra pool into debts in the priority order fixed at the start,
5. records debts that crossed the one-cent threshold and, for avalanche and
   snowball, rolls their minimum into the extra pool from the next month on.

The loop stops once the total balance is within a cent of zero or after
``MAX_MONTHS`` months, whichever comes first.
"""

from __future__ import annotations

import calendar
import math
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType
from typing import Iterable, Mapping

from ..logging_config import get_logger
from ..models.debt import AVALANCHE, MINIMUMS, SNOWBALL, STRATEGIES, Debt, LumpSum

logger = get_logger("services.payoff")

MAX_MONTHS = 600  # 50 year horizon
PAID_OFF_EPSILON = 0.01


@dataclass(frozen=True, slots=True)
class MonthSnapshot:
    """Post-payment balances at the end of ``month`` (0 is the opening state)."""

    month: int
    total_balance: float
    balances: Mapping[str, float]


@dataclass(frozen=True, slots=True)
class PayoffEvent:
    """A debt reaching zero."""

    id: str
    name: str
    month: int


@dataclass(frozen=True, slots=True)
class PayoffResult:
    """Outcome of a single simulation run."""

    strategy: str
    months: int
    total_interest: float
    payoff_date: date
    timeline: tuple[MonthSnapshot, ...]
    debt_payoff_order: tuple[PayoffEvent, ...]
    interest_by_debt: Mapping[str, float]

    @property
    def converged(self) -> bool:
        """True when every debt reached zero before the month cap."""

        if not self.timeline:
            return True
        return self.timeline[-1].total_balance <= PAID_OFF_EPSILON


@dataclass(slots=True)
class _WorkingDebt:
    """Engine-owned copy of a debt's mutable state."""

    name: str
    balance: float
    monthly_rate: float
    minimum_payment: float
    interest_accrued: float = 0.0
    paid_off: bool = False


def round_cents(amount: float) -> float:
    """Round to cents, halves away from zero; inf and nan pass through."""

    if not math.isfinite(amount):
        return amount
    return float(Decimal(repr(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def add_months(value: date, months: int) -> date:
    """Return ``value`` shifted by ``months``, clamping to the last day of the month."""

    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def priority_order(debts: Iterable[Debt], strategy: str) -> list[str]:
    """Return debt ids in the order extra payments are applied.

    The order is computed once from the opening balances and never re-sorted.
    ``sorted`` is stable so ties keep input order.
    """

    if strategy == AVALANCHE:
        ordered = sorted(debts, key=lambda d: d.interest_rate, reverse=True)
    elif strategy == SNOWBALL:
        ordered = sorted(debts, key=lambda d: d.current_balance)
    elif strategy == MINIMUMS:
        ordered = list(debts)
    else:
        raise ValueError(f"Invalid debt payoff strategy: {strategy!r}")
    # Duplicate ids collapse to one slot, matching the last-write-wins balances.
    return list(dict.fromkeys(d.id for d in ordered))


def _snapshot(month: int, working: dict[str, _WorkingDebt]) -> MonthSnapshot:
    balances = {debt_id: state.balance for debt_id, state in working.items()}
    return MonthSnapshot(
        month=month,
        total_balance=sum(balances.values()),
        balances=MappingProxyType(balances),
    )


def simulate(
    debts: Iterable[Debt],
    strategy: str,
    extra_monthly: float = 0.0,
    lump_sum: LumpSum | None = None,
    *,
    today: date | None = None,
) -> PayoffResult:
    """Project month-by-month balances until every debt is paid or the cap is hit.

    ``extra_monthly`` values at or below zero mean no extra payment, and the
    extra is ignored entirely for the minimums strategy. A ``lump_sum`` aimed
    at an unknown debt, or at a debt already at zero in its month, has no
    effect. Inputs are never mutated and never validated here; see
    :func:`debtburn.services.validation.validate_debts`.
    """

    if strategy not in STRATEGIES:
        raise ValueError(f"Invalid debt payoff strategy: {strategy!r}")

    debts = list(debts)
    start = today or date.today()
    if not debts:
        return PayoffResult(
            strategy=strategy,
            months=0,
            total_interest=0.0,
            payoff_date=start,
            timeline=(),
            debt_payoff_order=(),
            interest_by_debt=MappingProxyType({}),
        )

    order = priority_order(debts, strategy)
    working: dict[str, _WorkingDebt] = {
        d.id: _WorkingDebt(
            name=d.name,
            balance=float(d.current_balance),
            monthly_rate=float(d.interest_rate) / 12,
            minimum_payment=float(d.minimum_payment),
        )
        for d in debts
    }
    rolls_over = strategy != MINIMUMS
    extra_pool = max(float(extra_monthly), 0.0) if rolls_over else 0.0

    logger.debug(
        "Starting payoff simulation",
        extra={"strategy": strategy, "debt_count": len(working), "extra_monthly": extra_pool},
    )

    timeline = [_snapshot(0, working)]
    payoff_order: list[PayoffEvent] = []
    total_interest = 0.0
    month = 0

    while month < MAX_MONTHS:
        if timeline[-1].total_balance <= PAID_OFF_EPSILON:
            break
        month += 1

        if lump_sum is not None and month == lump_sum.month:
            target = working.get(lump_sum.debt_id)
            if target is not None and target.balance > 0:
                target.balance -= min(target.balance, lump_sum.amount)

        for state in working.values():
            if state.balance > 0:
                interest = state.balance * state.monthly_rate
                state.balance += interest
                state.interest_accrued += interest
                total_interest += interest

        for state in working.values():
            if state.balance > 0:
                state.balance -= min(state.balance, state.minimum_payment)

        # Rollovers recorded below only reach the pool from the next month.
        available = extra_pool
        for debt_id in order:
            if available <= 0:
                break
            state = working[debt_id]
            if state.balance > 0:
                payment = min(state.balance, available)
                state.balance -= payment
                available -= payment

        for debt_id in order:
            state = working[debt_id]
            if not state.paid_off and state.balance <= PAID_OFF_EPSILON:
                state.balance = 0.0
                state.paid_off = True
                payoff_order.append(PayoffEvent(id=debt_id, name=state.name, month=month))
                if rolls_over:
                    extra_pool += state.minimum_payment

        timeline.append(_snapshot(month, working))

    if timeline[-1].total_balance > PAID_OFF_EPSILON:
        logger.warning(
            "Payoff simulation hit the month cap",
            extra={"strategy": strategy, "months": month, "remaining": timeline[-1].total_balance},
        )

    result = PayoffResult(
        strategy=strategy,
        months=month,
        total_interest=round_cents(total_interest),
        payoff_date=add_months(start, month),
        timeline=tuple(timeline),
        debt_payoff_order=tuple(payoff_order),
        interest_by_debt=MappingProxyType(
            {debt_id: round_cents(state.interest_accrued) for debt_id, state in working.items()}
        ),
    )
    logger.debug(
        "Finished payoff simulation",
        extra={"strategy": strategy, "months": result.months, "total_interest": result.total_interest},
    )
    return result
