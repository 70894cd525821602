"""Single best next step for a debt list, without running a simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..models.debt import Debt
from .payoff import round_cents

SUGGESTED_EXTRA = 50.0


@dataclass(frozen=True, slots=True)
class ImpactAction:
    """Suggested extra payment and its estimated yearly interest saving."""

    debt_id: str
    debt_name: str
    extra_amount: float
    interest_saved: float


def highest_impact_action(
    debts: Iterable[Debt], extra_amount: float = SUGGESTED_EXTRA
) -> ImpactAction | None:
    """Return the highest-leverage extra payment, or ``None`` for no debts.

    The target is the debt with the highest interest rate (first one wins on
    ties). ``interest_saved`` is a heuristic, not a re-simulation:

        extra × (rate / 12) × (current / starting) × 12

    i.e. one month's interest on the extra amount, scaled by the fraction of
    the debt still outstanding and annualized. It will differ from the
    difference between two :func:`~debtburn.services.payoff.simulate` runs.
    """

    target: Debt | None = None
    for debt in debts:
        if target is None or debt.interest_rate > target.interest_rate:
            target = debt
    if target is None:
        return None

    starting = target.origination_balance
    remaining_fraction = target.current_balance / starting if starting > 0 else 0.0
    interest_saved = extra_amount * (target.interest_rate / 12) * remaining_fraction * 12

    return ImpactAction(
        debt_id=target.id,
        debt_name=target.name,
        extra_amount=extra_amount,
        interest_saved=round_cents(interest_saved),
    )
