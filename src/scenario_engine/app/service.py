"""Headless orchestration of the two dashboard operations.

SimulationService drives the state transitions around the connector calls:

1. load_capitals: capitals_requested -> capitals_loaded | capitals_failed
2. run_selection: validate -> selection_requested -> query ->
   selection_succeeded | selection_empty | selection_failed

Nothing is retried; the user adjusts inputs and runs again.
"""

from __future__ import annotations

from typing import Callable

from scenario_engine.app import state as st
from scenario_engine.app.state import AppState, InvalidInputError, validate_query
from scenario_engine.connectors.base import ConnectorError
from scenario_engine.connectors.scenario_store import ScenarioStoreConnector
from scenario_engine.core.utils.logging_config import get_logger
from scenario_engine.selection.selector import (
    SelectionResult,
    select_best,
    select_best_pair,
)

logger = get_logger("scenario_engine.service")


class SimulationService:
    """Runs capitals loading and scenario selection against a connector.

    Args:
        connector_factory: Zero-argument callable returning a fresh
            ScenarioStoreConnector (used as an async context manager).
    """

    def __init__(
        self,
        connector_factory: Callable[[], ScenarioStoreConnector] = ScenarioStoreConnector,
    ) -> None:
        self.connector_factory = connector_factory

    async def load_capitals(self, state: AppState) -> AppState:
        state = st.capitals_requested(state)
        try:
            async with self.connector_factory() as store:
                capitals = await store.list_distinct_capitals()
        except ConnectorError as exc:
            logger.error("capitals_failed", error=str(exc))
            return st.capitals_failed(state)

        logger.info("capitals_loaded", count=len(capitals))
        return st.capitals_loaded(state, capitals)

    async def run_selection(self, state: AppState) -> AppState:
        try:
            capital, drawdown_max = validate_query(state.capital, state.drawdown_max)
        except InvalidInputError as exc:
            logger.warning("selection_invalid", reason=str(exc))
            return st.selection_invalid(state)

        state = st.selection_requested(state)
        try:
            async with self.connector_factory() as store:
                records = await store.list_scenarios(capital, drawdown_max)
        except ConnectorError as exc:
            logger.error(
                "selection_failed",
                capital=capital,
                drawdown_max=drawdown_max,
                error=str(exc),
            )
            return st.selection_failed(state, str(exc))

        if not records:
            logger.info("selection_empty", capital=capital, drawdown_max=drawdown_max)
            return st.selection_empty(state)

        result = SelectionResult(
            record=select_best(records, state.objective),
            capital=capital,
            drawdown_max=drawdown_max,
            objective=state.objective,
        )
        picks = select_best_pair(records)
        logger.info(
            "selection_complete",
            capital=capital,
            drawdown_max=drawdown_max,
            objective=state.objective.value,
            candidates=len(records),
        )
        return st.selection_succeeded(state, result, records, picks)
