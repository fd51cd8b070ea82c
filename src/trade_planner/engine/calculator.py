"""Trade calculation pipeline.

validate -> derive prices -> size position -> build order ticket.
Every stage is a pure function, so identical inputs always produce equal
results and calls never share state.
"""

from __future__ import annotations

from trade_planner.engine.pricing import compute_trailing_amount, derive_prices
from trade_planner.engine.sizing import (
    ZERO_POSITION_WARNING,
    compute_exposure,
    max_dollar_risk,
    size_position,
)
from trade_planner.engine.ticket import build_order_ticket
from trade_planner.engine.validation import validate
from trade_planner.types import TradeCalculation, TradeInputs


def calculate_trade(inputs: TradeInputs) -> TradeCalculation:
    """Compute the full trade plan for one input record."""
    validation = validate(inputs)
    if not validation.is_valid:
        return TradeCalculation(
            is_valid=False,
            direction=inputs.direction,
            entry_price=inputs.entry_price,
            r_multiple=inputs.target_r_multiple,
            errors=list(validation.errors),
            warnings=list(validation.warnings),
        )

    prices = derive_prices(
        inputs.entry_price,
        inputs.volatility_unit,
        inputs.stop_multiple,
        inputs.target_r_multiple,
        inputs.direction,
    )
    budget_amount = max_dollar_risk(inputs.risk_budget)
    position_size = size_position(budget_amount, prices.risk_per_unit)
    total_cost, dollar_risk = compute_exposure(
        position_size, inputs.entry_price, prices.risk_per_unit
    )
    trailing_amount = compute_trailing_amount(inputs.volatility_unit, inputs.trailing_multiple)

    warnings = list(validation.warnings)
    if position_size == 0:
        warnings.append(ZERO_POSITION_WARNING)

    ticket = build_order_ticket(
        inputs.entry_price,
        prices.stop_price,
        prices.target_price,
        position_size,
        inputs.direction,
        inputs.entry_buffer,
        trailing_amount,
    )

    return TradeCalculation(
        is_valid=True,
        direction=inputs.direction,
        entry_price=inputs.entry_price,
        stop_price=prices.stop_price,
        target_price=prices.target_price,
        stop_distance=prices.stop_distance,
        risk_per_unit=prices.risk_per_unit,
        target_distance=prices.target_distance,
        trailing_amount=trailing_amount,
        max_dollar_risk=budget_amount,
        position_size=position_size,
        total_cost=total_cost,
        dollar_risk=dollar_risk,
        r_multiple=inputs.target_r_multiple,
        reward_per_unit=prices.target_distance,
        total_reward=position_size * prices.target_distance,
        errors=[],
        warnings=warnings,
        order_ticket=ticket,
    )
