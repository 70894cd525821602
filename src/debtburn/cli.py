"""Command line entry points for debtburn."""

from __future__ import annotations

from pathlib import Path

import click

from .config import BaseConfig
from .logging_config import setup_logging
from .models.debt import STRATEGIES, Debt, LumpSum
from .services import cashflow, import_csv
from .services.advisor import highest_impact_action
from .services.export_csv import export_timeline_csv
from .services.payoff import PayoffResult, simulate
from .services.scenarios import WhatIf, compare_strategies, run_scenario
from .services.validation import ValidationError, validate_debts, validate_lump_sum

_csv_path = click.Path(exists=True, dir_okay=False, path_type=Path)


def _money(amount: float) -> str:
    return f"${amount:,.2f}"


def _load_debts(path: Path) -> list[Debt]:
    try:
        return validate_debts(import_csv.load_debts(path))
    except ValidationError as exc:
        raise click.ClickException(str(exc)) from exc


def _lump_sum(amount: float | None, debt_id: str | None, month: int) -> LumpSum | None:
    if amount is None:
        return None
    if not debt_id:
        raise click.UsageError("--lump-debt is required with --lump-sum")
    try:
        return validate_lump_sum(LumpSum(amount=amount, debt_id=debt_id, month=month))
    except ValidationError as exc:
        raise click.ClickException(str(exc)) from exc


def _echo_result(result: PayoffResult) -> None:
    status = "" if result.converged else " (not paid off within the simulation horizon)"
    click.echo(f"Strategy:       {result.strategy}")
    click.echo(f"Months:         {result.months}{status}")
    click.echo(f"Payoff date:    {result.payoff_date.isoformat()}")
    click.echo(f"Total interest: {_money(result.total_interest)}")
    for event in result.debt_payoff_order:
        click.echo(f"  month {event.month:>3}: {event.name} ({event.id})")


def _lump_sum_options(func):
    func = click.option("--lump-month", type=int, default=1, show_default=True)(func)
    func = click.option("--lump-debt", type=str, default=None, help="Debt id receiving the lump sum.")(func)
    func = click.option("--lump-sum", type=float, default=None, help="One-time extra payment.")(func)
    return func


@click.group()
@click.pass_context
def main(ctx: click.Context) -> None:
    """Project debt payoff under avalanche, snowball or minimum payments."""

    config = BaseConfig()
    setup_logging(config)
    ctx.obj = config


@main.command("simulate")
@click.argument("debts_csv", type=_csv_path)
@click.option("--strategy", type=click.Choice(STRATEGIES), default=None, help="Defaults to configuration.")
@click.option("--extra", type=float, default=0.0, show_default=True, help="Extra monthly payment.")
@_lump_sum_options
@click.option("--timeline-out", type=click.Path(dir_okay=False, path_type=Path), default=None)
@click.pass_obj
def simulate_command(
    config: BaseConfig,
    debts_csv: Path,
    strategy: str | None,
    extra: float,
    lump_sum: float | None,
    lump_debt: str | None,
    lump_month: int,
    timeline_out: Path | None,
) -> None:
    """Simulate one strategy and print the payoff summary."""

    debts = _load_debts(debts_csv)
    lump = _lump_sum(lump_sum, lump_debt, lump_month)
    result = simulate(debts, strategy or config.DEFAULT_STRATEGY, extra, lump)
    _echo_result(result)
    if timeline_out is not None:
        path = export_timeline_csv(result=result, output_path=timeline_out)
        click.echo(f"Timeline written: {path}")


@main.command("compare")
@click.argument("debts_csv", type=_csv_path)
@click.option("--extra", type=float, default=0.0, show_default=True, help="Extra monthly payment.")
def compare_command(debts_csv: Path, extra: float) -> None:
    """Compare avalanche, snowball and minimums-only."""

    comparison = compare_strategies(_load_debts(debts_csv), extra)
    for result in comparison.results():
        click.echo(
            f"{result.strategy:<10} {result.months:>4} months  "
            f"{_money(result.total_interest):>14} interest  payoff {result.payoff_date.isoformat()}"
        )
    click.echo(f"Best: {comparison.best.strategy}")


@main.command("advise")
@click.argument("debts_csv", type=_csv_path)
def advise_command(debts_csv: Path) -> None:
    """Suggest the single highest impact extra payment."""

    action = highest_impact_action(_load_debts(debts_csv))
    if action is None:
        click.echo("No debts.")
        return
    click.echo(
        f"Put an extra {_money(action.extra_amount)} toward {action.debt_name}: "
        f"about {_money(action.interest_saved)} interest saved per year (estimate)."
    )


@main.command("scenario")
@click.argument("debts_csv", type=_csv_path)
@click.option("--baseline-extra", type=float, required=True, help="Current extra monthly payment.")
@click.option("--extra", type=float, default=None, help="Scenario extra payment (defaults to baseline).")
@click.option("--income-change", type=float, default=0.0, show_default=True)
@click.option("--strategy", type=click.Choice(STRATEGIES), default=None, help="Defaults to configuration.")
@_lump_sum_options
@click.pass_obj
def scenario_command(
    config: BaseConfig,
    debts_csv: Path,
    baseline_extra: float,
    extra: float | None,
    income_change: float,
    strategy: str | None,
    lump_sum: float | None,
    lump_debt: str | None,
    lump_month: int,
) -> None:
    """Compare the current plan with a what-if adjustment."""

    what_if = WhatIf(
        extra_monthly=baseline_extra if extra is None else extra,
        income_change=income_change,
        lump_sum=_lump_sum(lump_sum, lump_debt, lump_month),
        strategy=strategy or config.DEFAULT_STRATEGY,
    )
    comparison = run_scenario(_load_debts(debts_csv), baseline_extra, what_if)
    click.echo(f"Baseline: {comparison.baseline.months} months, {_money(comparison.baseline.total_interest)} interest")
    click.echo(f"Scenario: {comparison.scenario.months} months, {_money(comparison.scenario.total_interest)} interest")
    click.echo(f"Months saved:   {comparison.months_saved}")
    click.echo(f"Interest saved: {_money(comparison.interest_saved)}")
    click.echo(f"New payoff date: {comparison.scenario.payoff_date.isoformat()}")


@main.command("budget")
@click.option("--income", "income_csv", type=_csv_path, required=True)
@click.option("--bills", "bills_csv", type=_csv_path, required=True)
@click.option("--debts", "debts_csv", type=_csv_path, required=True)
@click.pass_obj
def budget_command(
    config: BaseConfig, income_csv: Path, bills_csv: Path, debts_csv: Path
) -> None:
    """Summarize monthly cash flow and the suggested extra payment."""

    try:
        sources = import_csv.load_income_sources(income_csv)
        bills = import_csv.load_bills(bills_csv)
        income = cashflow.monthly_income(sources)
        bills_total = cashflow.monthly_bills(bills)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    debts = _load_debts(debts_csv)
    minimums = cashflow.monthly_minimums(debts)
    flow = cashflow.monthly_cash_flow(sources, bills, debts)
    click.echo(f"Income:          {_money(income)}")
    click.echo(f"Bills:           {_money(bills_total)}")
    click.echo(f"Debt minimums:   {_money(minimums)}")
    click.echo(f"Cash flow:       {_money(flow)}")
    click.echo(f"Suggested extra: {_money(cashflow.suggested_extra(flow, config.SURPLUS_SHARE))}")
    click.echo(f"Debt repaid:     {cashflow.progress_ratio(debts):.0%}")


if __name__ == "__main__":  # pragma: no cover
    main()
