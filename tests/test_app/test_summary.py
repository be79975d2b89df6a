"""Tests for the result summary display strings."""

from __future__ import annotations

from scenario_engine.app.summary import summarize
from scenario_engine.core.enums import SelectionObjective
from scenario_engine.core.utils.formatting import MISSING
from scenario_engine.selection.selector import SelectionResult


def test_summary_of_fixture_row(scenarios) -> None:
    result = SelectionResult(
        record=scenarios[1],
        capital=10000,
        drawdown_max=1500,
        objective=SelectionObjective.SERENITY,
    )
    summary = summarize(result)

    assert summary.capital == "10 000 €"
    assert summary.drawdown_ceiling == "1 500 €"
    assert summary.objective == "serenite"
    assert summary.instrument == "Allemagne 40 Cash (5 EUR)"
    # pRisque is already in percent units
    assert summary.risk_per_trade == "1,50 %"
    assert summary.capital_used_at_sell == "25 %"
    assert summary.gain == "9 100 €"
    assert summary.drawdown == "1 400 €"
    assert summary.ratio == "6,50"
    assert summary.win_rate == "39,87 %"
    assert summary.annualized_return == "10,34 %"
    assert summary.trade_count == "640"


def test_summary_of_sparse_record(make_record) -> None:
    result = SelectionResult(
        record=make_record(gain=-150, trade_count=0),
        capital=5000,
        drawdown_max=300,
        objective=SelectionObjective.PERFORMANCE,
    )
    summary = summarize(result)

    assert summary.instrument == MISSING
    assert summary.risk_per_trade == MISSING
    assert summary.ratio == MISSING
    assert summary.win_rate == MISSING
    assert summary.gain == "-150 €"
    assert summary.trade_count == "0"
