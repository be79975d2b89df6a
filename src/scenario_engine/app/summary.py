"""Display strings for a selection result (the result card contents)."""

from __future__ import annotations

from dataclasses import dataclass

from scenario_engine.core.utils.formatting import (
    MISSING,
    format_count,
    format_money,
    format_percent_from_fraction,
    format_percent_raw,
    format_ratio,
)
from scenario_engine.selection.selector import SelectionResult


@dataclass(frozen=True)
class ResultSummary:
    capital: str
    drawdown_ceiling: str
    objective: str

    # Robot parameters
    instrument: str
    risk_per_trade: str
    capital_used_at_sell: str

    # Performance
    gain: str
    drawdown: str
    ratio: str
    win_rate: str
    annualized_return: str
    trade_count: str


def summarize(result: SelectionResult) -> ResultSummary:
    """Format every displayed field of ``result``.

    risk_per_trade is stored in percent units, win_rate, capital_used_at_sell
    and annualized_return as fractions.
    """
    record = result.record
    return ResultSummary(
        capital=format_money(result.capital),
        drawdown_ceiling=format_money(result.drawdown_max),
        objective=result.objective.value,
        instrument=record.asset or MISSING,
        risk_per_trade=format_percent_raw(record.risk_per_trade, 2),
        capital_used_at_sell=format_percent_from_fraction(record.capital_used_at_sell, 0),
        gain=format_money(record.gain),
        drawdown=format_money(record.drawdown_max),
        ratio=format_ratio(record.risk_adjusted_ratio, 2),
        win_rate=format_percent_from_fraction(record.win_rate, 2),
        annualized_return=format_percent_from_fraction(record.annualized_return, 2),
        trade_count=format_count(record.trade_count),
    )
