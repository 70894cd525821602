"""Service module exports."""

from . import (
    advisor,
    cashflow,
    export_csv,
    import_csv,
    payoff,
    scenarios,
    validation,
)

__all__ = [
    "advisor",
    "cashflow",
    "export_csv",
    "import_csv",
    "payoff",
    "scenarios",
    "validation",
]
