"""Unit tests for the scenario selector.

Covers the comparison policy (missing -> -inf), first-wins tie breaking,
order independence for unique maxima, and the independent best pair.
"""

from __future__ import annotations

import itertools
import math

import pytest

from scenario_engine.core.enums import SelectionObjective
from scenario_engine.selection.selector import (
    BestPicks,
    objective_key,
    rank,
    score,
    select_best,
    select_best_by,
    select_best_pair,
)


class TestComparisonPolicy:
    def test_none_scores_negative_infinity(self) -> None:
        assert score(None) == -math.inf

    def test_nan_scores_negative_infinity(self) -> None:
        assert score(float("nan")) == -math.inf

    def test_zero_is_not_missing(self) -> None:
        assert score(0.0) == 0.0
        assert score(0.0) > score(None)

    def test_rank_serenity_uses_ratio(self, make_record) -> None:
        record = make_record(gain=500, risk_adjusted_ratio=1.2)
        assert rank(record, SelectionObjective.SERENITY) == pytest.approx(1.2)

    def test_rank_performance_uses_gain(self, make_record) -> None:
        record = make_record(gain=500, risk_adjusted_ratio=1.2)
        assert rank(record, SelectionObjective.PERFORMANCE) == 500

    def test_rank_accepts_objective_value(self, make_record) -> None:
        record = make_record(gain=42)
        assert rank(record, "performance") == 42

    def test_objective_key_returns_raw_value(self, make_record) -> None:
        record = make_record(gain=None)
        assert objective_key(SelectionObjective.PERFORMANCE)(record) is None


class TestSelectBest:
    def test_serenity_skips_missing_ratio(self, make_record) -> None:
        first = make_record(risk_adjusted_ratio=None, gain=500)
        second = make_record(risk_adjusted_ratio=1.2, gain=100)
        assert select_best([first, second], SelectionObjective.SERENITY) is second

    def test_performance_picks_max_gain(self, scenarios) -> None:
        best = select_best(scenarios, SelectionObjective.PERFORMANCE)
        assert best.gain == 11800

    def test_serenity_picks_max_ratio(self, scenarios) -> None:
        best = select_best(scenarios, SelectionObjective.SERENITY)
        assert best.risk_adjusted_ratio == pytest.approx(6.5)

    def test_tie_returns_first_in_order(self, make_record) -> None:
        low = make_record(asset="low", gain=100)
        tied_a = make_record(asset="a", gain=900)
        tied_b = make_record(asset="b", gain=900)
        tied_c = make_record(asset="c", gain=900)
        records = [low, tied_a, tied_b, tied_c]
        assert select_best(records, SelectionObjective.PERFORMANCE) is tied_a

    def test_all_missing_returns_first(self, make_record) -> None:
        records = [make_record(asset="x"), make_record(asset="y")]
        assert select_best(records, SelectionObjective.SERENITY) is records[0]

    def test_negative_gain_beats_missing(self, make_record) -> None:
        missing = make_record(gain=None)
        negative = make_record(gain=-250)
        assert select_best([missing, negative], SelectionObjective.PERFORMANCE) is negative

    def test_zero_ratio_beats_missing(self, make_record) -> None:
        missing = make_record(risk_adjusted_ratio=None)
        zero = make_record(risk_adjusted_ratio=0.0)
        assert select_best([missing, zero], SelectionObjective.SERENITY) is zero

    def test_idempotent(self, scenarios) -> None:
        first = select_best(scenarios, SelectionObjective.SERENITY)
        second = select_best(scenarios, SelectionObjective.SERENITY)
        assert first is second
        assert first == second

    def test_unique_max_independent_of_order(self, make_record) -> None:
        records = [
            make_record(asset="a", gain=10),
            make_record(asset="b", gain=300),
            make_record(asset="c", gain=-5),
            make_record(asset="d", gain=None),
        ]
        for permutation in itertools.permutations(records):
            best = select_best(list(permutation), SelectionObjective.PERFORMANCE)
            assert best.asset == "b"

    def test_single_record(self, make_record) -> None:
        only = make_record(gain=None, risk_adjusted_ratio=None)
        assert select_best([only], SelectionObjective.PERFORMANCE) is only

    def test_empty_is_caller_error(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            select_best([], SelectionObjective.SERENITY)


class TestSelectBestBy:
    def test_custom_accessor(self, scenarios) -> None:
        best = select_best_by(scenarios, lambda record: record.win_rate)
        assert best.win_rate == pytest.approx(0.4125)

    def test_accessor_missing_values(self, make_record) -> None:
        records = [make_record(trade_count=None), make_record(trade_count=3)]
        assert select_best_by(records, lambda r: r.trade_count) is records[1]

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError):
            select_best_by([], lambda r: r.gain)


class TestSelectBestPair:
    def test_picks_are_independent(self, scenarios) -> None:
        picks = select_best_pair(scenarios)
        assert isinstance(picks, BestPicks)
        assert picks.serenity is scenarios[1]
        assert picks.performance is scenarios[2]

    def test_same_record_can_win_both(self, make_record) -> None:
        dominant = make_record(gain=1000, risk_adjusted_ratio=5.0)
        weak = make_record(gain=10, risk_adjusted_ratio=0.1)
        picks = select_best_pair([weak, dominant])
        assert picks.serenity is dominant
        assert picks.performance is dominant
