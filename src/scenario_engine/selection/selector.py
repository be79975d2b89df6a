"""Best-scenario selection under a scoring objective.

Pure computation -- no I/O, no logging, no shared state.

Comparison policy (``rank``):
- SERENITY scores a record by ``risk_adjusted_ratio``
- PERFORMANCE scores a record by ``gain``
- a missing value (None or NaN) scores ``-inf``: strictly worse than any
  finite value, never an error, never coerced to zero

Selection is a single linear scan with a running best that is replaced
only on a strictly greater score, so ties keep the first record in input
order.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from scenario_engine.core.enums import SelectionObjective
from scenario_engine.core.models.scenario import ScenarioRecord

ScoreKey = Callable[[ScenarioRecord], Optional[float]]

_OBJECTIVE_FIELDS: dict[SelectionObjective, str] = {
    SelectionObjective.SERENITY: "risk_adjusted_ratio",
    SelectionObjective.PERFORMANCE: "gain",
}


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class SelectionResult:
    """Chosen record plus the query that produced the candidate set."""

    record: ScenarioRecord
    capital: float
    drawdown_max: float
    objective: SelectionObjective


@dataclass(frozen=True)
class BestPicks:
    """Independent best-by-serenity and best-by-performance picks.

    Both come from the same candidate set and may be the same record.
    """

    serenity: ScenarioRecord
    performance: ScenarioRecord


# ---------------------------------------------------------------------------
# Comparison policy
# ---------------------------------------------------------------------------
def score(value: Optional[float]) -> float:
    """Map a raw comparison value to a float, missing -> -inf."""
    if value is None:
        return -math.inf
    value = float(value)
    if math.isnan(value):
        return -math.inf
    return value


def objective_key(objective: SelectionObjective) -> ScoreKey:
    """Field accessor for the given objective."""
    field_name = _OBJECTIVE_FIELDS[SelectionObjective(objective)]
    return lambda record: getattr(record, field_name)


def rank(record: ScenarioRecord, objective: SelectionObjective) -> float:
    """Score of ``record`` under ``objective`` (higher is better)."""
    return score(objective_key(objective)(record))


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------
def select_best_by(records: Sequence[ScenarioRecord], key: ScoreKey) -> ScenarioRecord:
    """Return the record with the highest ``key`` value; first wins on ties.

    Args:
        records: Non-empty candidate records.
        key: Accessor returning the comparison value (None when missing).

    Raises:
        ValueError: If ``records`` is empty. Callers must branch on an
            empty result set before selecting.
    """
    if not records:
        raise ValueError("Cannot select a best scenario from an empty record set")

    best = records[0]
    best_score = score(key(best))
    for record in records[1:]:
        current = score(key(record))
        if current > best_score:
            best, best_score = record, current
    return best


def select_best(
    records: Sequence[ScenarioRecord], objective: SelectionObjective
) -> ScenarioRecord:
    """Best record under ``objective`` (SERENITY: ratio, PERFORMANCE: gain)."""
    return select_best_by(records, objective_key(objective))


def select_best_pair(records: Sequence[ScenarioRecord]) -> BestPicks:
    """Compute both objective picks over the same candidate set."""
    return BestPicks(
        serenity=select_best(records, SelectionObjective.SERENITY),
        performance=select_best(records, SelectionObjective.PERFORMANCE),
    )
