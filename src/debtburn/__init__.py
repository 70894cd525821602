"""Debt payoff projections for household budgets."""

from __future__ import annotations

from .config import BaseConfig, DevConfig
from .models import Debt, LumpSum
from .services.advisor import ImpactAction, highest_impact_action
from .services.payoff import MonthSnapshot, PayoffEvent, PayoffResult, simulate
from .services.validation import ValidationError

__all__ = [
    "BaseConfig",
    "Debt",
    "DevConfig",
    "ImpactAction",
    "LumpSum",
    "MonthSnapshot",
    "PayoffEvent",
    "PayoffResult",
    "ValidationError",
    "highest_impact_action",
    "simulate",
]
