"""Shared domain types for the trade planning engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TypeAlias


class Direction(str, Enum):
    """Trade direction. Always supplied by the caller, never inferred."""

    LONG = "long"
    SHORT = "short"


class EntryOrderKind(str, Enum):
    BUY_STOP_LIMIT = "buy-stop-limit"
    SELL_STOP_LIMIT = "sell-stop-limit"


class ProfitTargetKind(str, Enum):
    SELL_LIMIT = "sell-limit"
    BUY_LIMIT = "buy-limit"


class TrailingStopKind(str, Enum):
    SELL_TRAILING_STOP = "sell-trailing-stop"
    BUY_TRAILING_STOP = "buy-trailing-stop"


LINKAGE_POLICY = "entry triggers one-cancels-other bracket of target and trailing stop"
TRAILING_STOP_REFERENCE = "MARK"


@dataclass(frozen=True, slots=True)
class PercentOfAccount:
    """Risk budget expressed as a percent of account size."""

    account_size: float
    risk_percent: float


@dataclass(frozen=True, slots=True)
class FixedDollarRisk:
    """Risk budget expressed as a fixed dollar amount."""

    amount: float


RiskBudget: TypeAlias = PercentOfAccount | FixedDollarRisk


@dataclass(frozen=True, slots=True)
class TradeInputs:
    """Manually observed levels and risk parameters for one trade plan."""

    direction: Direction
    entry_price: float
    volatility_unit: float
    risk_budget: RiskBudget
    stop_multiple: float
    target_r_multiple: float
    trailing_multiple: float
    entry_buffer: float


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Blocking errors and advisory warnings for one input record."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass(frozen=True, slots=True)
class OrderTicket:
    """Broker-agnostic entry order with a one-cancels-other exit bracket."""

    entry_order_kind: EntryOrderKind
    entry_stop_price: float
    entry_limit_price: float
    quantity: int
    profit_target_kind: ProfitTargetKind
    profit_target_price: float
    trailing_stop_kind: TrailingStopKind
    trailing_stop_amount: float
    trailing_stop_reference: str = TRAILING_STOP_REFERENCE
    linkage_policy: str = LINKAGE_POLICY


@dataclass(frozen=True, slots=True)
class TradeCalculation:
    """Full result of one engine run.

    On an invalid result every derived price and amount is zero, the reward
    metrics are None and no order ticket is attached.
    """

    is_valid: bool
    direction: Direction
    entry_price: float
    stop_price: float = 0.0
    target_price: float = 0.0
    stop_distance: float = 0.0
    risk_per_unit: float = 0.0
    target_distance: float = 0.0
    trailing_amount: float = 0.0
    max_dollar_risk: float = 0.0
    position_size: int = 0
    total_cost: float = 0.0
    dollar_risk: float = 0.0
    r_multiple: float = 0.0
    reward_per_unit: float | None = None
    total_reward: float | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    order_ticket: OrderTicket | None = None
