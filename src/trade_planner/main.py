"""CLI entry point for the trade planner."""

import json
import sys
from pathlib import Path

import click

from trade_planner import __version__
from trade_planner.config import Settings, get_settings
from trade_planner.engine import calculate_trade, inputs_from_stop_price
from trade_planner.preferences.store import PreferenceStore, account_size_as_float
from trade_planner.render.report import render_calculation, risk_label
from trade_planner.schemas import RequestError, TradeRequest, calculation_to_dict
from trade_planner.types import (
    Direction,
    FixedDollarRisk,
    PercentOfAccount,
    RiskBudget,
    TradeInputs,
)
from trade_planner.utils.logging import (
    get_logger,
    log_trade_plan,
    log_trade_rejected,
    setup_logging,
)


@click.group(invoke_without_command=True)
@click.option("--version", "-v", is_flag=True, help="Show the version")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """Trade planner - position size, exit levels and order tickets.

    Turns an entry price, a volatility unit and an account risk budget into
    a sized plan with a stop-limit entry and a target/trailing-stop bracket.
    """
    if version:
        click.echo(f"trade-planner version {__version__}")
        return

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _risk_budget(
    settings: Settings,
    store: PreferenceStore,
    risk_basis: str,
    account_size: str | None,
    risk_percent: float | None,
    fixed_risk: float | None,
) -> RiskBudget:
    if risk_basis == "fixed":
        amount = settings.default_fixed_dollar_risk if fixed_risk is None else fixed_risk
        return FixedDollarRisk(amount=amount)

    if account_size is not None:
        store.save_account_size(account_size)
        account_text = account_size
    else:
        account_text = store.load_account_size(settings.default_account_size)
    return PercentOfAccount(
        account_size=account_size_as_float(account_text),
        risk_percent=settings.default_risk_percent if risk_percent is None else risk_percent,
    )


@cli.command()
@click.option(
    "--input",
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read the whole request from a JSON file",
)
@click.option(
    "--direction",
    "-d",
    type=click.Choice([d.value for d in Direction]),
    default=None,
    help="Trade direction",
)
@click.option("--stop-price", type=float, default=None, help="Infer direction and stop from an observed stop")
@click.option("--entry", "entry_price", type=float, default=None, help="Entry price")
@click.option("--atr", "volatility_unit", type=float, default=None, help="Volatility unit (e.g. ATR)")
@click.option("--account-size", type=str, default=None, help="Account size (saved as the new default)")
@click.option("--risk-percent", type=float, default=None, help="Risk per trade, percent of account")
@click.option("--fixed-risk", type=float, default=None, help="Risk per trade as a fixed dollar amount")
@click.option(
    "--risk-basis",
    type=click.Choice(["percent", "fixed"]),
    default=None,
    help="Risk budget basis; fixed without --fixed-risk uses the configured amount",
)
@click.option("--stop-multiple", type=float, default=None, help="Stop distance in volatility units")
@click.option("--target-r", "target_r_multiple", type=float, default=None, help="Target R-multiple")
@click.option("--trailing-multiple", type=float, default=None, help="Trailing stop in volatility units")
@click.option("--entry-buffer", type=float, default=None, help="Dollar buffer for the entry limit price")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the result as JSON")
def plan(
    input_file: Path | None,
    direction: str | None,
    stop_price: float | None,
    entry_price: float | None,
    volatility_unit: float | None,
    account_size: str | None,
    risk_percent: float | None,
    fixed_risk: float | None,
    risk_basis: str | None,
    stop_multiple: float | None,
    target_r_multiple: float | None,
    trailing_multiple: float | None,
    entry_buffer: float | None,
    as_json: bool,
) -> None:
    """Calculate a trade plan and its order ticket."""
    setup_logging()
    logger = get_logger("trade_planner.main")
    settings = get_settings()
    store = PreferenceStore(settings.preferences_path)

    if input_file is not None:
        try:
            request = TradeRequest.parse_text(input_file.read_text(encoding="utf-8"))
        except RequestError as exc:
            logger.error("request_invalid", path=str(input_file), error=str(exc))
            click.echo(f"[ERROR] {exc}", err=True)
            sys.exit(1)
        inputs = request.to_inputs()
    else:
        if entry_price is None or volatility_unit is None:
            raise click.UsageError("--entry and --atr are required unless --input is given")
        if (direction is None) == (stop_price is None):
            raise click.UsageError("give exactly one of --direction or --stop-price")
        if risk_percent is not None and fixed_risk is not None:
            raise click.UsageError("--risk-percent and --fixed-risk are mutually exclusive")
        if stop_price is not None and stop_multiple is not None:
            raise click.UsageError("--stop-multiple cannot be combined with --stop-price")
        basis = risk_basis or ("fixed" if fixed_risk is not None else "percent")
        if basis == "percent" and fixed_risk is not None:
            raise click.UsageError("--fixed-risk requires the fixed risk basis")
        if basis == "fixed" and risk_percent is not None:
            raise click.UsageError("--risk-percent requires the percent risk basis")

        budget = _risk_budget(settings, store, basis, account_size, risk_percent, fixed_risk)
        target = settings.default_target_r_multiple if target_r_multiple is None else target_r_multiple
        trailing = settings.default_trailing_multiple if trailing_multiple is None else trailing_multiple
        buffer = settings.default_entry_buffer if entry_buffer is None else entry_buffer

        if stop_price is not None:
            resolved, errors = inputs_from_stop_price(
                entry_price,
                stop_price,
                volatility_unit,
                budget,
                target_r_multiple=target,
                trailing_multiple=trailing,
                entry_buffer=buffer,
            )
            if resolved is None:
                log_trade_rejected(logger, errors=errors, warnings=[])
                for error in errors:
                    click.echo(f"[ERROR] {error}", err=True)
                sys.exit(1)
            inputs = resolved
        else:
            inputs = TradeInputs(
                direction=Direction(direction),
                entry_price=entry_price,
                volatility_unit=volatility_unit,
                risk_budget=budget,
                stop_multiple=settings.default_stop_multiple if stop_multiple is None else stop_multiple,
                target_r_multiple=target,
                trailing_multiple=trailing,
                entry_buffer=buffer,
            )

    calculation = calculate_trade(inputs)

    if calculation.is_valid:
        log_trade_plan(
            logger,
            direction=calculation.direction.value,
            entry_price=calculation.entry_price,
            position_size=calculation.position_size,
            has_ticket=calculation.order_ticket is not None,
            warnings=calculation.warnings,
        )
    else:
        log_trade_rejected(logger, errors=calculation.errors, warnings=calculation.warnings)

    if as_json:
        click.echo(json.dumps(calculation_to_dict(calculation), indent=2))
    else:
        for line in render_calculation(calculation):
            click.echo(line)

    if not calculation.is_valid:
        sys.exit(1)


@cli.group()
def account() -> None:
    """Show or change the saved account size."""


@account.command("show")
def account_show() -> None:
    """Print the saved account size."""
    setup_logging()
    settings = get_settings()
    store = PreferenceStore(settings.preferences_path)
    click.echo(store.load_account_size(settings.default_account_size))


@account.command("set")
@click.argument("value")
def account_set(value: str) -> None:
    """Save VALUE as the account size."""
    setup_logging()
    settings = get_settings()
    store = PreferenceStore(settings.preferences_path)
    if not store.save_account_size(value):
        click.echo(f"[ERROR] account size must be a positive number: {value}", err=True)
        sys.exit(1)
    click.echo(f"[OK] account size saved: {value.strip()}")


@cli.command()
def status() -> None:
    """Show configured defaults."""
    setup_logging()
    settings = get_settings()
    store = PreferenceStore(settings.preferences_path)

    click.echo("=" * 50)
    click.echo("Trade Planner - Status")
    click.echo("=" * 50)
    click.echo()

    click.echo("[Account]")
    click.echo(f"   Account size: {store.load_account_size(settings.default_account_size)}")
    click.echo(
        f"   Risk per trade: {settings.default_risk_percent}%"
        f" ({risk_label(settings.default_risk_percent)})"
    )
    click.echo(f"   Fixed dollar risk: {settings.default_fixed_dollar_risk}")
    click.echo()

    click.echo("[Multiples]")
    click.echo(f"   Stop: {settings.default_stop_multiple} x volatility unit")
    click.echo(f"   Target: {settings.default_target_r_multiple}R")
    click.echo(f"   Trailing: {settings.default_trailing_multiple} x volatility unit")
    click.echo(f"   Entry buffer: {settings.default_entry_buffer}")
    click.echo()

    click.echo("[Logging]")
    click.echo(f"   Log level: {settings.log_level}")
    click.echo(f"   Log format: {settings.log_format.value}")
    click.echo(f"   Preferences: {settings.preferences_path}")
    click.echo()
    click.echo("=" * 50)


if __name__ == "__main__":
    cli()
