from __future__ import annotations

import pytest

from trade_planner.types import Direction, PercentOfAccount, TradeInputs


@pytest.fixture()
def long_inputs() -> TradeInputs:
    return TradeInputs(
        direction=Direction.LONG,
        entry_price=50.0,
        volatility_unit=1.5,
        risk_budget=PercentOfAccount(account_size=10_000.0, risk_percent=1.0),
        stop_multiple=2.0,
        target_r_multiple=2.0,
        trailing_multiple=1.0,
        entry_buffer=0.05,
    )
