"""Request schema for raw trade plan input and JSON-ready result views."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from trade_planner.types import (
    Direction,
    FixedDollarRisk,
    PercentOfAccount,
    RiskBudget,
    TradeCalculation,
    TradeInputs,
)


class RequestError(ValueError):
    """Raised when a raw request does not match the schema."""


class TradeRequest(BaseModel):
    """Raw trade plan request as read from a file or another collaborator.

    Only shape and types are enforced here; value ranges are left to the
    engine validator so every domain problem is reported as data.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    direction: Direction
    entry_price: float
    volatility_unit: float
    risk_basis: Literal["percent", "fixed"] = "percent"
    account_size: float | None = None
    risk_percent: float | None = None
    fixed_dollar_risk: float | None = None
    stop_multiple: float = Field(default=2.0)
    target_r_multiple: float = Field(default=2.0)
    trailing_multiple: float = Field(default=1.0)
    entry_buffer: float = Field(default=0.05)

    @model_validator(mode="after")
    def check_risk_basis(self) -> "TradeRequest":
        if self.risk_basis == "percent":
            if self.account_size is None or self.risk_percent is None:
                raise ValueError("percent risk basis requires account_size and risk_percent")
            if self.fixed_dollar_risk is not None:
                raise ValueError("fixed_dollar_risk is not allowed with percent risk basis")
        else:
            if self.fixed_dollar_risk is None:
                raise ValueError("fixed risk basis requires fixed_dollar_risk")
            if self.risk_percent is not None:
                raise ValueError("risk_percent is not allowed with fixed risk basis")
        return self

    def risk_budget(self) -> RiskBudget:
        if self.risk_basis == "fixed":
            return FixedDollarRisk(amount=float(self.fixed_dollar_risk or 0.0))
        return PercentOfAccount(
            account_size=float(self.account_size or 0.0),
            risk_percent=float(self.risk_percent or 0.0),
        )

    def to_inputs(self) -> TradeInputs:
        return TradeInputs(
            direction=self.direction,
            entry_price=self.entry_price,
            volatility_unit=self.volatility_unit,
            risk_budget=self.risk_budget(),
            stop_multiple=self.stop_multiple,
            target_r_multiple=self.target_r_multiple,
            trailing_multiple=self.trailing_multiple,
            entry_buffer=self.entry_buffer,
        )

    @classmethod
    def parse_strict(cls, payload: dict[str, Any]) -> "TradeRequest":
        """Parse a raw dict, mapping any violation to RequestError."""
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            first = exc.errors()[0]
            location = ".".join(str(part) for part in first.get("loc", ()))
            message = first["msg"]
            raise RequestError(f"{location}: {message}" if location else message) from exc

    @classmethod
    def parse_text(cls, text: str) -> "TradeRequest":
        """Parse JSON text. Non-JSON and non-object documents are rejected."""
        try:
            decoded = json.loads(text)
        except json.JSONDecodeError as exc:
            raise RequestError(f"request_not_json: {exc.msg}") from exc
        if not isinstance(decoded, dict):
            raise RequestError("request_json_not_object")
        return cls.parse_strict(decoded)


def calculation_to_dict(calculation: TradeCalculation) -> dict[str, Any]:
    """Plain mapping of a calculation with enum members as their values."""
    data = asdict(calculation)
    direction = calculation.direction
    data["direction"] = direction.value if isinstance(direction, Direction) else str(direction)
    ticket = data.get("order_ticket")
    if ticket is not None:
        for key in ("entry_order_kind", "profit_target_kind", "trailing_stop_kind"):
            ticket[key] = ticket[key].value
    return data
