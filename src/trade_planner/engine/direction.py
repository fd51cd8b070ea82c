"""Adapter resolving a direction from an entry/stop price pair.

The core pipeline only accepts an explicit ``Direction``. Callers that
observe a stop price instead of choosing a direction go through this module,
which either resolves one of the two directions or reports an error.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from trade_planner.types import Direction, RiskBudget, TradeInputs


@dataclass(frozen=True, slots=True)
class DirectionResolution:
    direction: Direction | None
    errors: list[str] = field(default_factory=list)

    @property
    def is_resolved(self) -> bool:
        return self.direction is not None


def resolve_direction(entry_price: float, stop_price: float) -> DirectionResolution:
    """Stop below entry means long, stop above entry means short."""
    if not (math.isfinite(entry_price) and math.isfinite(stop_price)):
        return DirectionResolution(
            direction=None,
            errors=["cannot infer direction: prices must be finite numbers"],
        )
    if stop_price < entry_price:
        return DirectionResolution(direction=Direction.LONG)
    if stop_price > entry_price:
        return DirectionResolution(direction=Direction.SHORT)
    return DirectionResolution(
        direction=None,
        errors=["cannot infer direction: stop price equals entry price"],
    )


def inputs_from_stop_price(
    entry_price: float,
    stop_price: float,
    volatility_unit: float,
    risk_budget: RiskBudget,
    *,
    target_r_multiple: float,
    trailing_multiple: float,
    entry_buffer: float,
) -> tuple[TradeInputs | None, list[str]]:
    """Build inputs whose stop multiple reproduces an observed stop price."""
    resolution = resolve_direction(entry_price, stop_price)
    if resolution.direction is None:
        return None, resolution.errors
    if not math.isfinite(volatility_unit) or volatility_unit <= 0:
        return None, ["volatility unit must be greater than zero"]

    stop_multiple = abs(entry_price - stop_price) / volatility_unit
    inputs = TradeInputs(
        direction=resolution.direction,
        entry_price=entry_price,
        volatility_unit=volatility_unit,
        risk_budget=risk_budget,
        stop_multiple=stop_multiple,
        target_r_multiple=target_r_multiple,
        trailing_multiple=trailing_multiple,
        entry_buffer=entry_buffer,
    )
    return inputs, []
