"""Input validation for trade plans.

Every check runs on every call; nothing short-circuits, so one pass reports
all problems. The validator never raises: rejections are entries in
``ValidationResult.errors``.
"""

from __future__ import annotations

import math

from trade_planner.types import (
    Direction,
    FixedDollarRisk,
    PercentOfAccount,
    TradeInputs,
    ValidationResult,
)

RISK_PERCENT_HIGH = 2.0
RISK_PERCENT_EXCESSIVE = 5.0


def _is_finite(value: object) -> bool:
    """Only real int and float values count as numbers; bool, str and Decimal do not."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _check_positive(value: object, label: str, errors: list[str]) -> bool:
    """Append an error unless value is a finite number above zero."""
    if not _is_finite(value):
        errors.append(f"{label} must be a finite number")
        return False
    if float(value) <= 0:  # type: ignore[arg-type]
        errors.append(f"{label} must be greater than zero")
        return False
    return True


def _check_non_negative(value: object, label: str, errors: list[str]) -> bool:
    if not _is_finite(value):
        errors.append(f"{label} must be a finite number")
        return False
    if float(value) < 0:  # type: ignore[arg-type]
        errors.append(f"{label} cannot be negative")
        return False
    return True


def _check_risk_budget(inputs: TradeInputs, errors: list[str], warnings: list[str]) -> None:
    budget = inputs.risk_budget
    if isinstance(budget, PercentOfAccount):
        _check_positive(budget.account_size, "account size", errors)
        if _check_positive(budget.risk_percent, "risk percent", errors):
            if budget.risk_percent > RISK_PERCENT_EXCESSIVE:
                warnings.append("risk exceeds 5% per trade - consider reducing")
            elif budget.risk_percent > RISK_PERCENT_HIGH:
                warnings.append("risk exceeds 2% per trade - high risk level")
    elif isinstance(budget, FixedDollarRisk):
        _check_positive(budget.amount, "fixed dollar risk", errors)
    else:
        errors.append("risk budget must be a percent of account or a fixed dollar amount")


def validate(inputs: TradeInputs) -> ValidationResult:
    """Check a trade input record for logical consistency."""
    errors: list[str] = []
    warnings: list[str] = []

    if not isinstance(inputs.direction, Direction):
        errors.append("direction must be long or short")

    _check_risk_budget(inputs, errors, warnings)

    _check_positive(inputs.entry_price, "entry price", errors)
    _check_positive(inputs.volatility_unit, "volatility unit", errors)

    # A zero stop multiple is a degenerate but valid plan; the sizer reports it.
    _check_non_negative(inputs.stop_multiple, "stop multiple", errors)

    if _check_positive(inputs.target_r_multiple, "target R-multiple", errors):
        if inputs.target_r_multiple < 1:
            warnings.append("target R-multiple below 1:1 - reward less than risk")
        elif inputs.target_r_multiple < 2:
            warnings.append("target R-multiple below 2:1 - consider better setups")

    _check_non_negative(inputs.trailing_multiple, "trailing multiple", errors)
    _check_non_negative(inputs.entry_buffer, "entry buffer", errors)

    return ValidationResult(errors=errors, warnings=warnings)
