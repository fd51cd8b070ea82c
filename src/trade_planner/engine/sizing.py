"""Risk-based position sizing."""

from __future__ import annotations

import math

from trade_planner.types import FixedDollarRisk, PercentOfAccount, RiskBudget

ZERO_POSITION_WARNING = "position size rounds to zero — risk per unit too large"


def max_dollar_risk(budget: RiskBudget) -> float:
    """Dollar amount the trade may lose at the stop."""
    if isinstance(budget, PercentOfAccount):
        return budget.account_size * budget.risk_percent / 100.0
    if isinstance(budget, FixedDollarRisk):
        return float(budget.amount)
    raise TypeError(f"unsupported_risk_budget: {type(budget).__name__}")


def size_position(risk_budget_amount: float, risk_per_unit: float) -> int:
    """Whole units affordable within the risk budget.

    Floors so the realized risk never exceeds the budget. A zero risk per
    unit means the risk is undefined and yields zero units.
    """
    if risk_per_unit <= 0:
        return 0
    units = max(0, math.floor(risk_budget_amount / risk_per_unit))
    # The quotient can round up to an integer; step back until the risk fits.
    while units > 0 and units * risk_per_unit > risk_budget_amount:
        units -= 1
    return units


def compute_exposure(
    position_size: int,
    entry_price: float,
    risk_per_unit: float,
) -> tuple[float, float]:
    """Return ``(total_cost, dollar_risk)`` for a sized position."""
    return position_size * entry_price, position_size * risk_per_unit
