"""Application layer: explicit state, display summary and service."""

from .service import SimulationService
from .state import AppState, InvalidInputError, clamp_drawdown, validate_query
from .summary import ResultSummary, summarize

__all__ = [
    "AppState",
    "InvalidInputError",
    "ResultSummary",
    "SimulationService",
    "clamp_drawdown",
    "summarize",
    "validate_query",
]
