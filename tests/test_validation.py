from __future__ import annotations

import math
from dataclasses import replace
from decimal import Decimal

from trade_planner.engine.validation import validate
from trade_planner.types import Direction, FixedDollarRisk, PercentOfAccount, TradeInputs


def test_valid_inputs_have_no_errors_or_warnings(long_inputs: TradeInputs) -> None:
    result = validate(long_inputs)
    assert result.is_valid
    assert result.errors == []
    assert result.warnings == []


def test_zero_risk_percent_is_an_error(long_inputs: TradeInputs) -> None:
    inputs = replace(long_inputs, risk_budget=PercentOfAccount(10_000.0, 0.0))
    result = validate(inputs)
    assert not result.is_valid
    assert "risk percent must be greater than zero" in result.errors


def test_risk_percent_warning_thresholds(long_inputs: TradeInputs) -> None:
    at_two = validate(replace(long_inputs, risk_budget=PercentOfAccount(10_000.0, 2.0)))
    assert at_two.warnings == []

    high = validate(replace(long_inputs, risk_budget=PercentOfAccount(10_000.0, 3.0)))
    assert high.warnings == ["risk exceeds 2% per trade - high risk level"]

    at_five = validate(replace(long_inputs, risk_budget=PercentOfAccount(10_000.0, 5.0)))
    assert at_five.warnings == ["risk exceeds 2% per trade - high risk level"]

    excessive = validate(replace(long_inputs, risk_budget=PercentOfAccount(10_000.0, 6.0)))
    assert excessive.warnings == ["risk exceeds 5% per trade - consider reducing"]
    assert excessive.is_valid


def test_account_size_must_be_positive(long_inputs: TradeInputs) -> None:
    result = validate(replace(long_inputs, risk_budget=PercentOfAccount(0.0, 1.0)))
    assert "account size must be greater than zero" in result.errors


def test_fixed_dollar_budget(long_inputs: TradeInputs) -> None:
    assert validate(replace(long_inputs, risk_budget=FixedDollarRisk(250.0))).is_valid

    result = validate(replace(long_inputs, risk_budget=FixedDollarRisk(-5.0)))
    assert result.errors == ["fixed dollar risk must be greater than zero"]


def test_unknown_risk_budget_is_an_error(long_inputs: TradeInputs) -> None:
    result = validate(replace(long_inputs, risk_budget=None))  # type: ignore[arg-type]
    assert not result.is_valid
    assert len(result.errors) == 1


def test_errors_are_accumulated_not_short_circuited() -> None:
    inputs = TradeInputs(
        direction=Direction.SHORT,
        entry_price=0.0,
        volatility_unit=-1.0,
        risk_budget=PercentOfAccount(10_000.0, 0.0),
        stop_multiple=-1.0,
        target_r_multiple=0.0,
        trailing_multiple=-0.5,
        entry_buffer=-0.01,
    )
    result = validate(inputs)
    assert result.errors == [
        "risk percent must be greater than zero",
        "entry price must be greater than zero",
        "volatility unit must be greater than zero",
        "stop multiple cannot be negative",
        "target R-multiple must be greater than zero",
        "trailing multiple cannot be negative",
        "entry buffer cannot be negative",
    ]


def test_target_r_multiple_warnings(long_inputs: TradeInputs) -> None:
    low = validate(replace(long_inputs, target_r_multiple=0.5))
    assert low.warnings == ["target R-multiple below 1:1 - reward less than risk"]

    marginal = validate(replace(long_inputs, target_r_multiple=1.0))
    assert marginal.warnings == ["target R-multiple below 2:1 - consider better setups"]

    assert validate(replace(long_inputs, target_r_multiple=2.0)).warnings == []


def test_zero_multiples_are_accepted(long_inputs: TradeInputs) -> None:
    result = validate(replace(long_inputs, stop_multiple=0.0, trailing_multiple=0.0, entry_buffer=0.0))
    assert result.is_valid


def test_non_finite_values_are_errors(long_inputs: TradeInputs) -> None:
    result = validate(replace(long_inputs, entry_price=math.nan, volatility_unit=math.inf))
    assert result.errors == [
        "entry price must be a finite number",
        "volatility unit must be a finite number",
    ]


def test_unknown_direction_is_an_error(long_inputs: TradeInputs) -> None:
    result = validate(replace(long_inputs, direction="sideways"))  # type: ignore[arg-type]
    assert result.errors == ["direction must be long or short"]


def test_string_values_are_errors_not_crashes(long_inputs: TradeInputs) -> None:
    result = validate(replace(long_inputs, risk_budget=PercentOfAccount(10_000.0, "3")))  # type: ignore[arg-type]
    assert result.errors == ["risk percent must be a finite number"]

    result = validate(replace(long_inputs, target_r_multiple="2"))  # type: ignore[arg-type]
    assert result.errors == ["target R-multiple must be a finite number"]


def test_decimal_and_bool_values_are_errors(long_inputs: TradeInputs) -> None:
    result = validate(
        replace(long_inputs, entry_price=Decimal("50"), entry_buffer=True)  # type: ignore[arg-type]
    )
    assert result.errors == [
        "entry price must be a finite number",
        "entry buffer must be a finite number",
    ]


def test_integer_values_are_accepted(long_inputs: TradeInputs) -> None:
    inputs = replace(long_inputs, entry_price=50, risk_budget=PercentOfAccount(10_000, 1))
    assert validate(inputs).is_valid
