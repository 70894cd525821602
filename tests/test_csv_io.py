"""CSV import and export tests."""

from __future__ import annotations

import csv

import pytest

from debtburn.models import Debt
from debtburn.services import export_csv, import_csv
from debtburn.services.payoff import simulate
from debtburn.services.validation import ValidationError


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_load_debts_parses_rows(tmp_path):
    csv_path = _write(
        tmp_path / "debts.csv",
        " ID ,Name,Current_Balance,Interest_Rate,Minimum_Payment,Starting_Balance,Due_Day\n"
        "007,Visa,4200.50,0.2199,120,6500,12\n"
        "car,Car loan,9800,0.069,310,,\n",
    )

    debts = import_csv.load_debts(csv_path)

    assert debts == [
        Debt(
            id="007",
            name="Visa",
            current_balance=4200.5,
            interest_rate=0.2199,
            minimum_payment=120.0,
            starting_balance=6500.0,
            due_day=12,
        ),
        Debt(
            id="car",
            name="Car loan",
            current_balance=9800.0,
            interest_rate=0.069,
            minimum_payment=310.0,
        ),
    ]


def test_load_debts_missing_column(tmp_path):
    csv_path = _write(tmp_path / "debts.csv", "id,name,current_balance\n1,Visa,100\n")

    with pytest.raises(ValidationError, match="missing column"):
        import_csv.load_debts(csv_path)


def test_load_debts_reports_bad_rows(tmp_path):
    csv_path = _write(
        tmp_path / "debts.csv",
        "id,name,current_balance,interest_rate,minimum_payment\n"
        "a,Visa,abc,0.2,50\n"
        "b,Loan,100,0.05,25\n"
        "c,Card,100,,25\n",
    )

    with pytest.raises(ValidationError) as excinfo:
        import_csv.load_debts(csv_path)

    assert len(excinfo.value.errors) == 2
    assert excinfo.value.errors[0].startswith("debts.csv line 2:")
    assert excinfo.value.errors[1].startswith("debts.csv line 4:")


def test_load_income_and_bills(tmp_path):
    income_path = _write(
        tmp_path / "income.csv",
        "id,name,amount,frequency,is_variable\n"
        "1,Paycheck,1800,Biweekly,no\n"
        "2,Tips,120,weekly,yes\n"
        "3,Rent share,400,,\n",
    )
    bills_path = _write(
        tmp_path / "bills.csv",
        "id,name,amount,frequency,category\n"
        "r,Rent,1500,monthly,housing\n"
        "p,Phone,60,,\n",
    )

    sources = import_csv.load_income_sources(income_path)
    bills = import_csv.load_bills(bills_path)

    assert [s.frequency for s in sources] == ["biweekly", "weekly", "monthly"]
    assert [s.is_variable for s in sources] == [False, True, False]
    assert [(b.name, b.frequency, b.category) for b in bills] == [
        ("Rent", "monthly", "housing"),
        ("Phone", "monthly", ""),
    ]


def test_export_timeline_csv(tmp_path, debt_factory, today):
    debts = [
        debt_factory("a", balance=100.0, rate=0.0, minimum=50.0),
        debt_factory("b", balance=1000.0, rate=0.0, minimum=50.0),
    ]
    result = simulate(debts, "snowball", 100.0, today=today)

    output_path = export_csv.export_timeline_csv(
        result=result, output_path=tmp_path / "out" / "timeline.csv"
    )

    with output_path.open(newline="", encoding="utf-8") as fh:
        rows = list(csv.DictReader(fh))
    assert len(rows) == result.months + 1
    assert rows[0] == {"month": "0", "total_balance": "1100.00", "a": "100.00", "b": "1000.00"}
    assert rows[1] == {"month": "1", "total_balance": "900.00", "a": "0.00", "b": "900.00"}
    assert rows[-1]["total_balance"] == "0.00"


def test_export_payoff_order_csv(tmp_path, debt_factory, today):
    debts = [
        debt_factory("a", name="Small", balance=100.0, rate=0.0, minimum=50.0),
        debt_factory("b", name="Large", balance=1000.0, rate=0.0, minimum=50.0),
    ]
    result = simulate(debts, "snowball", 100.0, today=today)

    output_path = export_csv.export_payoff_order_csv(result=result, output_path=tmp_path / "order.csv")

    with output_path.open(newline="", encoding="utf-8") as fh:
        rows = list(csv.reader(fh))
    assert rows == [["id", "name", "month"], ["a", "Small", "1"], ["b", "Large", "6"]]
