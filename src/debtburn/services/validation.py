"""Input checks applied before handing caller data to the engine."""

from __future__ import annotations

import math
from typing import Iterable

from ..models.debt import Debt, LumpSum


class ValidationError(ValueError):
    """Raised when caller-supplied records cannot be simulated reliably."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


def _check_amount(errors: list[str], label: str, value) -> None:
    try:
        number = float(value)
    except (TypeError, ValueError):
        errors.append(f"{label} must be a number")
        return
    if not math.isfinite(number):
        errors.append(f"{label} must be finite")
    elif number < 0:
        errors.append(f"{label} must not be negative")


def validate_debts(debts: Iterable[Debt]) -> list[Debt]:
    """Return ``debts`` as a list, or raise :class:`ValidationError` listing every problem."""

    debts = list(debts)
    errors: list[str] = []
    seen: set[str] = set()
    for index, debt in enumerate(debts):
        label = f"debt {debt.id!r}" if debt.id else f"debt #{index + 1}"
        if not debt.id:
            errors.append(f"{label}: id is required")
        elif debt.id in seen:
            errors.append(f"{label}: duplicate id")
        seen.add(debt.id)

        _check_amount(errors, f"{label}: current_balance", debt.current_balance)
        _check_amount(errors, f"{label}: interest_rate", debt.interest_rate)
        _check_amount(errors, f"{label}: minimum_payment", debt.minimum_payment)
        if debt.starting_balance is not None:
            _check_amount(errors, f"{label}: starting_balance", debt.starting_balance)
        if not 1 <= debt.due_day <= 31:
            errors.append(f"{label}: due_day must be between 1 and 31")

    if errors:
        raise ValidationError(errors)
    return debts


def validate_lump_sum(lump_sum: LumpSum | None) -> LumpSum | None:
    """Check a lump sum's amount and month; ``None`` passes through."""

    if lump_sum is None:
        return None
    errors: list[str] = []
    _check_amount(errors, "lump sum amount", lump_sum.amount)
    if lump_sum.month < 1:
        errors.append("lump sum month must be 1 or later")
    if not lump_sum.debt_id:
        errors.append("lump sum debt_id is required")
    if errors:
        raise ValidationError(errors)
    return lump_sum
