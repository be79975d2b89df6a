"""Scenario selection: comparison policy, best picks and candidate series."""

from .candidates import ScatterPoint, scatter_points
from .selector import (
    BestPicks,
    SelectionResult,
    objective_key,
    rank,
    score,
    select_best,
    select_best_by,
    select_best_pair,
)

__all__ = [
    "BestPicks",
    "ScatterPoint",
    "SelectionResult",
    "objective_key",
    "rank",
    "score",
    "scatter_points",
    "select_best",
    "select_best_by",
    "select_best_pair",
]
