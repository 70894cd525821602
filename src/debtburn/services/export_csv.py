"""CSV export helpers for simulation results."""

from __future__ import annotations

import csv
from pathlib import Path

from .payoff import PayoffResult, round_cents


def export_timeline_csv(*, result: PayoffResult, output_path: Path) -> Path:
    """Write one row per month snapshot.

    Columns: month, total_balance, then one column per debt id in input order.
    Amounts are rounded to cents. Returns the path written.
    """

    debt_ids = list(result.timeline[0].balances) if result.timeline else []
    headers = ["month", "total_balance", *debt_ids]
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=headers, quoting=csv.QUOTE_MINIMAL)
        writer.writeheader()
        for snapshot in result.timeline:
            row = {
                "month": snapshot.month,
                "total_balance": f"{round_cents(snapshot.total_balance):.2f}",
            }
            for debt_id in debt_ids:
                row[debt_id] = f"{round_cents(snapshot.balances[debt_id]):.2f}"
            writer.writerow(row)

    return output_path


def export_payoff_order_csv(*, result: PayoffResult, output_path: Path) -> Path:
    """Write the id, name and month each debt reached zero."""

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh)
        writer.writerow(["id", "name", "month"])
        for event in result.debt_payoff_order:
            writer.writerow([event.id, event.name, event.month])
    return output_path
