"""Order ticket construction for a stop-limit entry with an exit bracket."""

from __future__ import annotations

from trade_planner.types import (
    Direction,
    EntryOrderKind,
    OrderTicket,
    ProfitTargetKind,
    TrailingStopKind,
)


def build_order_ticket(
    entry_price: float,
    stop_price: float,
    target_price: float,
    position_size: int,
    direction: Direction,
    entry_buffer: float,
    trailing_amount: float,
) -> OrderTicket | None:
    """Translate a sized plan into an order ticket.

    Returns None for a zero position. The entry is a stop-limit armed at the
    stop price with the limit offset by the buffer toward the worse fill, and
    the trailing offset is negative for longs and positive for shorts.
    Ticket prices come from the derived levels, not from ``entry_price``.
    """
    if position_size <= 0:
        return None

    if direction == Direction.SHORT:
        return OrderTicket(
            entry_order_kind=EntryOrderKind.SELL_STOP_LIMIT,
            entry_stop_price=stop_price,
            entry_limit_price=stop_price - entry_buffer,
            quantity=position_size,
            profit_target_kind=ProfitTargetKind.BUY_LIMIT,
            profit_target_price=target_price,
            trailing_stop_kind=TrailingStopKind.BUY_TRAILING_STOP,
            trailing_stop_amount=abs(trailing_amount),
        )

    return OrderTicket(
        entry_order_kind=EntryOrderKind.BUY_STOP_LIMIT,
        entry_stop_price=stop_price,
        entry_limit_price=stop_price + entry_buffer,
        quantity=position_size,
        profit_target_kind=ProfitTargetKind.SELL_LIMIT,
        profit_target_price=target_price,
        trailing_stop_kind=TrailingStopKind.SELL_TRAILING_STOP,
        trailing_stop_amount=-abs(trailing_amount),
    )
