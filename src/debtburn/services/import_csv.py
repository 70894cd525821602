"""CSV ingestion for debts, income sources and bills."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Mapping, TypeVar

import pandas as pd

from ..logging_config import get_logger
from ..models.debt import Debt
from ..models.household import MONTHLY, Bill, IncomeSource
from .validation import ValidationError

logger = get_logger("services.import_csv")

T = TypeVar("T")

DEBT_COLUMNS = ("id", "name", "current_balance", "interest_rate", "minimum_payment")
INCOME_COLUMNS = ("id", "name", "amount")
BILL_COLUMNS = ("id", "name", "amount")


def normalize_frame(*, file_path: Path, encoding: str = "utf-8") -> pd.DataFrame:
    """Load a CSV file as strings with stripped, lower-cased headers."""

    frame = pd.read_csv(file_path, encoding=encoding, dtype=str, keep_default_na=False)
    frame.columns = [c.strip().lower() for c in frame.columns]
    return frame


def _require_columns(frame: pd.DataFrame, required: tuple[str, ...], file_path: Path) -> None:
    missing = [c for c in required if c not in frame.columns]
    if missing:
        raise ValidationError([f"{file_path.name}: missing column(s) {', '.join(missing)}"])


def _optional(row: Mapping[str, str], column: str) -> str | None:
    value = (row.get(column) or "").strip()
    return value or None


def _parse_rows(
    frame: pd.DataFrame, file_path: Path, build: Callable[[Mapping[str, str]], T]
) -> list[T]:
    records: list[T] = []
    errors: list[str] = []
    for line_no, row in enumerate(frame.to_dict(orient="records"), start=2):
        try:
            records.append(build(row))
        except ValueError as exc:
            errors.append(f"{file_path.name} line {line_no}: {exc}")
    if errors:
        raise ValidationError(errors)
    logger.debug("Parsed CSV rows", extra={"path": str(file_path), "rows": len(records)})
    return records


def _debt_from_row(row: Mapping[str, str]) -> Debt:
    starting = _optional(row, "starting_balance")
    due_day = _optional(row, "due_day")
    return Debt(
        id=row["id"].strip(),
        name=row["name"].strip(),
        current_balance=float(row["current_balance"]),
        interest_rate=float(row["interest_rate"]),
        minimum_payment=float(row["minimum_payment"]),
        starting_balance=float(starting) if starting is not None else None,
        due_day=int(due_day) if due_day is not None else 1,
    )


def _income_from_row(row: Mapping[str, str]) -> IncomeSource:
    variable = (_optional(row, "is_variable") or "").lower()
    return IncomeSource(
        id=row["id"].strip(),
        name=row["name"].strip(),
        amount=float(row["amount"]),
        frequency=(_optional(row, "frequency") or MONTHLY).lower(),
        is_variable=variable in {"1", "true", "yes", "y"},
    )


def _bill_from_row(row: Mapping[str, str]) -> Bill:
    return Bill(
        id=row["id"].strip(),
        name=row["name"].strip(),
        amount=float(row["amount"]),
        frequency=(_optional(row, "frequency") or MONTHLY).lower(),
        category=_optional(row, "category") or "",
    )


def load_debts(csv_path: Path) -> list[Debt]:
    """Read debts from ``csv_path``; ``starting_balance`` and ``due_day`` are optional."""

    csv_path = Path(csv_path)
    frame = normalize_frame(file_path=csv_path)
    _require_columns(frame, DEBT_COLUMNS, csv_path)
    return _parse_rows(frame, csv_path, _debt_from_row)


def load_income_sources(csv_path: Path) -> list[IncomeSource]:
    csv_path = Path(csv_path)
    frame = normalize_frame(file_path=csv_path)
    _require_columns(frame, INCOME_COLUMNS, csv_path)
    return _parse_rows(frame, csv_path, _income_from_row)


def load_bills(csv_path: Path) -> list[Bill]:
    csv_path = Path(csv_path)
    frame = normalize_frame(file_path=csv_path)
    _require_columns(frame, BILL_COLUMNS, csv_path)
    return _parse_rows(frame, csv_path, _bill_from_row)
