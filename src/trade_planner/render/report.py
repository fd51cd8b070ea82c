"""Plain-text rendering of calculations and order tickets."""

from __future__ import annotations

from trade_planner.types import OrderTicket, TradeCalculation

ADVANCED_ORDER_LABEL = "1st Triggers OCO"


def format_currency(value: float) -> str:
    """US dollar formatting with thousands separators: ``-$1,234.56``."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_price(value: float) -> str:
    return f"{value:.2f}"


def risk_label(percent: float) -> str:
    if percent < 0.25:
        return "Very conservative"
    if percent <= 1.5:
        return "Standard"
    if percent <= 2.0:
        return "Moderate"
    return "Aggressive"


def r_multiple_quality(r_multiple: float) -> str:
    if r_multiple >= 2:
        return "good"
    if r_multiple >= 1:
        return "marginal"
    return "poor"


def render_order_ticket(ticket: OrderTicket) -> list[str]:
    """Order ticket lines in the order they are entered on the broker form."""
    return [
        "Order ticket",
        f"  Entry:          {ticket.entry_order_kind.value.upper()} x {ticket.quantity}",
        f"    stop price:   {format_price(ticket.entry_stop_price)}",
        f"    limit price:  {format_price(ticket.entry_limit_price)}",
        f"  Profit target:  {ticket.profit_target_kind.value.upper()}"
        f" @ {format_price(ticket.profit_target_price)}",
        f"  Trailing stop:  {ticket.trailing_stop_kind.value.upper()}"
        f" ({ticket.trailing_stop_reference}) {ticket.trailing_stop_amount:+.2f}",
        f"  Advanced order: {ADVANCED_ORDER_LABEL}",
        f"                  ({ticket.linkage_policy})",
    ]


def render_calculation(calculation: TradeCalculation) -> list[str]:
    """Human-readable summary of a calculation."""
    lines: list[str] = []
    if not calculation.is_valid:
        lines.append("Trade plan is invalid:")
        lines.extend(f"  error: {error}" for error in calculation.errors)
        lines.extend(f"  warning: {warning}" for warning in calculation.warnings)
        return lines

    direction = calculation.direction.value.upper()
    lines.extend(
        [
            f"{direction} {calculation.position_size} units @ {format_price(calculation.entry_price)}",
            f"  Stop:            {format_price(calculation.stop_price)}"
            f" ({format_price(calculation.stop_distance)} away)",
            f"  Target:          {format_price(calculation.target_price)}"
            f" ({format_price(calculation.target_distance)} away)",
            f"  Trailing amount: {format_price(calculation.trailing_amount)}",
            f"  Risk per unit:   {format_currency(calculation.risk_per_unit)}",
            f"  Max dollar risk: {format_currency(calculation.max_dollar_risk)}",
            f"  Dollar risk:     {format_currency(calculation.dollar_risk)}",
            f"  Total cost:      {format_currency(calculation.total_cost)}",
        ]
    )
    if calculation.total_reward is not None:
        lines.append(f"  Total reward:    {format_currency(calculation.total_reward)}")
    lines.append(
        f"  R-multiple:      {calculation.r_multiple:.2f}R"
        f" ({r_multiple_quality(calculation.r_multiple)})"
    )
    lines.extend(f"  warning: {warning}" for warning in calculation.warnings)
    if calculation.order_ticket is not None:
        lines.append("")
        lines.extend(render_order_ticket(calculation.order_ticket))
    return lines
