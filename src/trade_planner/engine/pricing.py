"""Stop, target and trailing levels derived from a volatility unit."""

from __future__ import annotations

from dataclasses import dataclass

from trade_planner.types import Direction


@dataclass(frozen=True, slots=True)
class DerivedPrices:
    """Exit levels for one trade."""

    stop_price: float
    stop_distance: float
    risk_per_unit: float
    target_price: float
    target_distance: float


def compute_stop_price(
    entry_price: float,
    volatility_unit: float,
    stop_multiple: float,
    direction: Direction,
) -> tuple[float, float]:
    """Return ``(stop_price, stop_distance)``.

    LONG:  stop = entry - volatility_unit × stop_multiple
    SHORT: stop = entry + volatility_unit × stop_multiple
    """
    stop_distance = volatility_unit * stop_multiple
    if direction == Direction.SHORT:
        return entry_price + stop_distance, stop_distance
    return entry_price - stop_distance, stop_distance


def compute_target_price(
    entry_price: float,
    risk_per_unit: float,
    target_r_multiple: float,
    direction: Direction,
) -> tuple[float, float]:
    """Return ``(target_price, target_distance)`` on the favorable side."""
    target_distance = risk_per_unit * target_r_multiple
    if direction == Direction.SHORT:
        return entry_price - target_distance, target_distance
    return entry_price + target_distance, target_distance


def compute_trailing_amount(volatility_unit: float, trailing_multiple: float) -> float:
    return volatility_unit * trailing_multiple


def derive_prices(
    entry_price: float,
    volatility_unit: float,
    stop_multiple: float,
    target_r_multiple: float,
    direction: Direction,
) -> DerivedPrices:
    """Derive stop and target levels for validated inputs.

    Risk per unit is measured from the computed stop rather than taken from
    the stop distance, so it matches the price actually used. Multiples of
    zero are not clamped and put the stop on the entry price.
    """
    stop_price, stop_distance = compute_stop_price(
        entry_price, volatility_unit, stop_multiple, direction
    )
    risk_per_unit = abs(entry_price - stop_price)
    target_price, target_distance = compute_target_price(
        entry_price, risk_per_unit, target_r_multiple, direction
    )
    return DerivedPrices(
        stop_price=stop_price,
        stop_distance=stop_distance,
        risk_per_unit=risk_per_unit,
        target_price=target_price,
        target_distance=target_distance,
    )
