"""Household cash-flow helper tests."""

from __future__ import annotations

import pytest

from debtburn.models import Bill, IncomeSource
from debtburn.services import cashflow
from tests.conftest import assert_float_equal


def test_frequency_normalization():
    sources = [
        IncomeSource(id="1", name="Paycheck", amount=1000.0, frequency="biweekly"),
        IncomeSource(id="2", name="Side gig", amount=100.0, frequency="weekly"),
        IncomeSource(id="3", name="Rent share", amount=400.0, frequency="monthly"),
    ]

    assert_float_equal(cashflow.monthly_income(sources), 2167.0 + 433.0 + 400.0)


def test_unknown_frequency_raises():
    with pytest.raises(ValueError, match="Unknown frequency"):
        cashflow.to_monthly(10.0, "yearly")


def test_cash_flow_and_suggested_extra(debt_factory):
    sources = [IncomeSource(id="1", name="Salary", amount=4000.0)]
    bills = [
        Bill(id="r", name="Rent", amount=1500.0, category="housing"),
        Bill(id="g", name="Groceries", amount=100.0, frequency="weekly"),
    ]
    debts = [debt_factory("a", minimum=150.0), debt_factory("b", minimum=75.0)]

    assert cashflow.monthly_minimums(debts) == 225.0
    flow = cashflow.monthly_cash_flow(sources, bills, debts)
    assert_float_equal(flow, 4000.0 - 1500.0 - 433.0 - 225.0)
    assert cashflow.suggested_extra(flow) == 921.0
    assert cashflow.suggested_extra(flow, share=0.25) == 460.0


def test_negative_cash_flow_suggests_nothing():
    assert cashflow.suggested_extra(-300.0) == 0.0
    assert cashflow.suggested_extra(0.0) == 0.0


def test_progress_ratio(debt_factory):
    debts = [
        debt_factory("a", balance=250.0, starting=1000.0),
        debt_factory("b", balance=500.0),
    ]

    assert cashflow.total_debt(debts) == 750.0
    assert cashflow.total_starting_debt(debts) == 1500.0
    assert cashflow.progress_ratio(debts) == 0.5
    assert cashflow.debt_progress_ratio(debts[0]) == 0.75
    assert cashflow.progress_ratio([]) == 0.0
