"""Serializable application state with pure reducer-style transitions.

AppState is frozen; every transition returns a new instance through
dataclasses.replace. The selector, formatters and connectors never see
this module, so the core stays callable headlessly.

Error semantics:
- a failed capitals reload keeps the last good selection result
- a failed, empty or invalid selection clears the result, the candidate
  set and both best picks
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any, Optional, Sequence

from scenario_engine.core.config import settings
from scenario_engine.core.enums import ErrorKind, SelectionObjective
from scenario_engine.core.models.scenario import ScenarioRecord
from scenario_engine.selection.selector import BestPicks, SelectionResult

MSG_INVALID_INPUT = "Veuillez remplir le capital et le drawdown max."
MSG_EMPTY_RESULT = "Aucun résultat pour cette configuration."
MSG_CAPITALS_FAILED = (
    "Erreur lors du chargement des capitaux. Veuillez réessayer plus tard."
)
MSG_SELECTION_FAILED_PREFIX = "Erreur Supabase : "


class InvalidInputError(ValueError):
    """Capital or drawdown ceiling missing or not strictly positive."""


def _as_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool) or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


def validate_query(capital: Any, drawdown_max: Any) -> tuple[float, float]:
    """Return ``(capital, drawdown_max)`` as floats, or raise.

    Raises:
        InvalidInputError: If either value is missing, NaN, or <= 0.
    """
    capital_num = _as_number(capital)
    drawdown_num = _as_number(drawdown_max)
    if capital_num is None or capital_num <= 0 or not math.isfinite(capital_num):
        raise InvalidInputError(f"invalid capital: {capital!r}")
    if drawdown_num is None or drawdown_num <= 0 or not math.isfinite(drawdown_num):
        raise InvalidInputError(f"invalid drawdown ceiling: {drawdown_max!r}")
    return capital_num, drawdown_num


def clamp_drawdown(
    value: Any,
    minimum: Optional[float] = None,
    maximum: Optional[float] = None,
) -> float:
    """Coerce raw drawdown input into [minimum, maximum].

    Non-numeric input becomes ``minimum``. Bounds default to the settings.
    """
    low = settings.drawdown_min if minimum is None else minimum
    high = settings.drawdown_max if maximum is None else maximum
    number = _as_number(value)
    if number is None:
        return low
    return min(max(number, low), high)


@dataclass(frozen=True)
class AppState:
    capitals: tuple[float, ...] = ()
    capital: Optional[float] = None
    drawdown_max: float = field(default_factory=lambda: settings.drawdown_default)
    objective: SelectionObjective = SelectionObjective.SERENITY
    dark_mode: bool = False

    loading_capitals: bool = False
    loading_selection: bool = False
    error: str = ""
    error_kind: Optional[ErrorKind] = None

    result: Optional[SelectionResult] = None
    candidates: tuple[ScenarioRecord, ...] = ()
    best_serenity: Optional[ScenarioRecord] = None
    best_performance: Optional[ScenarioRecord] = None

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable snapshot."""

        def dump(record: Optional[ScenarioRecord]) -> Optional[dict[str, Any]]:
            return record.model_dump() if record is not None else None

        result = None
        if self.result is not None:
            result = {
                "record": dump(self.result.record),
                "capital": self.result.capital,
                "drawdown_max": self.result.drawdown_max,
                "objective": self.result.objective.value,
            }

        return {
            "capitals": list(self.capitals),
            "capital": self.capital,
            "drawdown_max": self.drawdown_max,
            "objective": self.objective.value,
            "dark_mode": self.dark_mode,
            "loading_capitals": self.loading_capitals,
            "loading_selection": self.loading_selection,
            "error": self.error,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "result": result,
            "candidates": [dump(record) for record in self.candidates],
            "best_serenity": dump(self.best_serenity),
            "best_performance": dump(self.best_performance),
        }


# ---------------------------------------------------------------------------
# Input transitions
# ---------------------------------------------------------------------------
def set_capital(state: AppState, capital: Any) -> AppState:
    return replace(state, capital=_as_number(capital))


def set_drawdown(state: AppState, value: Any) -> AppState:
    return replace(state, drawdown_max=clamp_drawdown(value))


def set_objective(state: AppState, objective: SelectionObjective) -> AppState:
    return replace(state, objective=SelectionObjective(objective))


def toggle_theme(state: AppState) -> AppState:
    return replace(state, dark_mode=not state.dark_mode)


# ---------------------------------------------------------------------------
# Capitals loading
# ---------------------------------------------------------------------------
def capitals_requested(state: AppState) -> AppState:
    return replace(state, loading_capitals=True, error="", error_kind=None)


def capitals_loaded(state: AppState, capitals: Sequence[float]) -> AppState:
    return replace(state, loading_capitals=False, capitals=tuple(capitals))


def capitals_failed(state: AppState) -> AppState:
    """Loading stopped; previous result and candidates are left untouched."""
    return replace(
        state,
        loading_capitals=False,
        error=MSG_CAPITALS_FAILED,
        error_kind=ErrorKind.TRANSPORT,
    )


# ---------------------------------------------------------------------------
# Selection run
# ---------------------------------------------------------------------------
def _cleared(state: AppState, error: str, kind: ErrorKind) -> AppState:
    return replace(
        state,
        loading_selection=False,
        error=error,
        error_kind=kind,
        result=None,
        candidates=(),
        best_serenity=None,
        best_performance=None,
    )


def selection_requested(state: AppState) -> AppState:
    return replace(state, loading_selection=True, error="", error_kind=None)


def selection_succeeded(
    state: AppState,
    result: SelectionResult,
    candidates: Sequence[ScenarioRecord],
    picks: BestPicks,
) -> AppState:
    return replace(
        state,
        loading_selection=False,
        error="",
        error_kind=None,
        result=result,
        candidates=tuple(candidates),
        best_serenity=picks.serenity,
        best_performance=picks.performance,
    )


def selection_empty(state: AppState) -> AppState:
    return _cleared(state, MSG_EMPTY_RESULT, ErrorKind.EMPTY_RESULT)


def selection_failed(state: AppState, detail: str) -> AppState:
    return _cleared(state, MSG_SELECTION_FAILED_PREFIX + detail, ErrorKind.TRANSPORT)


def selection_invalid(state: AppState) -> AppState:
    return _cleared(state, MSG_INVALID_INPUT, ErrorKind.INVALID_INPUT)
