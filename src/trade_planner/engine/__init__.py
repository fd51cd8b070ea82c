"""Trade planning engine exports."""

from trade_planner.engine.calculator import calculate_trade
from trade_planner.engine.direction import (
    DirectionResolution,
    inputs_from_stop_price,
    resolve_direction,
)
from trade_planner.engine.pricing import DerivedPrices, compute_trailing_amount, derive_prices
from trade_planner.engine.sizing import (
    ZERO_POSITION_WARNING,
    compute_exposure,
    max_dollar_risk,
    size_position,
)
from trade_planner.engine.ticket import build_order_ticket
from trade_planner.engine.validation import validate

__all__ = [
    "DerivedPrices",
    "DirectionResolution",
    "ZERO_POSITION_WARNING",
    "build_order_ticket",
    "calculate_trade",
    "compute_exposure",
    "compute_trailing_amount",
    "derive_prices",
    "inputs_from_stop_price",
    "max_dollar_risk",
    "resolve_direction",
    "size_position",
    "validate",
]
