"""Scatter series of candidate scenarios (drawdown vs gain).

Each candidate becomes one point; the serenity and performance picks are
flagged so the presentation layer can highlight them. Records carry no
primary key, so picks are matched by object identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from scenario_engine.core.models.scenario import ScenarioRecord
from scenario_engine.selection.selector import BestPicks


@dataclass(frozen=True)
class ScatterPoint:
    drawdown: float
    gain: float
    ratio: Optional[float]
    is_best_serenity: bool = False
    is_best_performance: bool = False


def scatter_points(
    records: Sequence[ScenarioRecord], picks: Optional[BestPicks] = None
) -> list[ScatterPoint]:
    """One point per record in input order.

    Records without a drawdown or a gain cannot be placed and are skipped.
    """
    points: list[ScatterPoint] = []
    for record in records:
        if record.drawdown_max is None or record.gain is None:
            continue
        points.append(
            ScatterPoint(
                drawdown=record.drawdown_max,
                gain=record.gain,
                ratio=record.risk_adjusted_ratio,
                is_best_serenity=picks is not None and record is picks.serenity,
                is_best_performance=picks is not None and record is picks.performance,
            )
        )
    return points
