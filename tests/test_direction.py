from __future__ import annotations

import math

import pytest

from trade_planner.engine import calculate_trade, inputs_from_stop_price, resolve_direction
from trade_planner.types import Direction, PercentOfAccount


def test_resolve_direction_from_price_pair() -> None:
    assert resolve_direction(50.0, 47.0).direction == Direction.LONG
    assert resolve_direction(50.0, 53.0).direction == Direction.SHORT


def test_equal_prices_are_rejected() -> None:
    resolution = resolve_direction(50.0, 50.0)
    assert not resolution.is_resolved
    assert resolution.errors == ["cannot infer direction: stop price equals entry price"]


def test_non_finite_prices_are_rejected() -> None:
    resolution = resolve_direction(math.nan, 47.0)
    assert resolution.direction is None
    assert resolution.errors


def test_inputs_from_stop_price_reproduces_stop() -> None:
    inputs, errors = inputs_from_stop_price(
        50.0,
        53.0,
        1.5,
        PercentOfAccount(10_000.0, 1.0),
        target_r_multiple=2.0,
        trailing_multiple=1.0,
        entry_buffer=0.05,
    )
    assert errors == []
    assert inputs is not None
    assert inputs.direction == Direction.SHORT
    assert inputs.stop_multiple == pytest.approx(2.0)

    result = calculate_trade(inputs)
    assert result.stop_price == pytest.approx(53.0)
    assert result.target_price == pytest.approx(44.0)


def test_inputs_from_stop_price_rejects_bad_volatility() -> None:
    inputs, errors = inputs_from_stop_price(
        50.0,
        47.0,
        0.0,
        PercentOfAccount(10_000.0, 1.0),
        target_r_multiple=2.0,
        trailing_multiple=1.0,
        entry_buffer=0.05,
    )
    assert inputs is None
    assert errors == ["volatility unit must be greater than zero"]
