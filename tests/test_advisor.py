"""Impact advisor tests."""

from __future__ import annotations

from debtburn.services.advisor import SUGGESTED_EXTRA, highest_impact_action


def test_no_debts_returns_none():
    assert highest_impact_action([]) is None


def test_selects_highest_rate_regardless_of_balance(debt_factory):
    debts = [
        debt_factory("mortgage", balance=250_000.0, rate=0.05),
        debt_factory("card", name="Store card", balance=800.0, rate=0.18, starting=1600.0),
        debt_factory("auto", balance=12_000.0, rate=0.12),
    ]

    action = highest_impact_action(debts)

    assert action.debt_id == "card"
    assert action.debt_name == "Store card"
    assert action.extra_amount == SUGGESTED_EXTRA == 50.0
    # 50 × (0.18 / 12) × (800 / 1600) × 12
    assert action.interest_saved == 4.5


def test_ties_keep_first_debt(debt_factory):
    debts = [
        debt_factory("first", rate=0.2),
        debt_factory("second", rate=0.2),
    ]

    assert highest_impact_action(debts).debt_id == "first"


def test_missing_starting_balance_uses_current(debt_factory):
    action = highest_impact_action([debt_factory("card", balance=900.0, rate=0.2)])

    # Nothing repaid yet, so the full annualized saving applies.
    assert action.interest_saved == 10.0


def test_zero_starting_balance_saves_nothing(debt_factory):
    action = highest_impact_action([debt_factory("card", balance=0.0, rate=0.2, starting=0.0)])

    assert action.interest_saved == 0.0


def test_custom_extra_amount(debt_factory):
    action = highest_impact_action([debt_factory("card", rate=0.24)], extra_amount=100.0)

    assert action.extra_amount == 100.0
    assert action.interest_saved == 24.0
