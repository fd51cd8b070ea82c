from __future__ import annotations

from dataclasses import replace

from trade_planner.engine import calculate_trade
from trade_planner.render.report import (
    format_currency,
    r_multiple_quality,
    render_calculation,
    risk_label,
)
from trade_planner.types import PercentOfAccount, TradeInputs


def test_format_currency() -> None:
    assert format_currency(1234.5) == "$1,234.50"
    assert format_currency(-1.5) == "-$1.50"
    assert format_currency(0) == "$0.00"


def test_risk_label_thresholds() -> None:
    assert risk_label(0.1) == "Very conservative"
    assert risk_label(1.5) == "Standard"
    assert risk_label(2.0) == "Moderate"
    assert risk_label(2.5) == "Aggressive"


def test_r_multiple_quality() -> None:
    assert r_multiple_quality(2.0) == "good"
    assert r_multiple_quality(1.2) == "marginal"
    assert r_multiple_quality(0.5) == "poor"


def test_render_valid_calculation_includes_ticket(long_inputs: TradeInputs) -> None:
    text = "\n".join(render_calculation(calculate_trade(long_inputs)))
    assert "LONG 33 units @ 50.00" in text
    assert "BUY-STOP-LIMIT x 33" in text
    assert "limit price:  47.05" in text
    assert "(MARK) -1.50" in text
    assert "1st Triggers OCO" in text


def test_render_invalid_calculation(long_inputs: TradeInputs) -> None:
    result = calculate_trade(replace(long_inputs, risk_budget=PercentOfAccount(10_000.0, 0.0)))
    lines = render_calculation(result)
    assert lines[0] == "Trade plan is invalid:"
    assert "  error: risk percent must be greater than zero" in lines
