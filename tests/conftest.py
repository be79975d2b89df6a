"""Root pytest configuration and shared fixtures.

Provides common test fixtures used across all test modules:
- load_fixture: callable to load JSON fixtures from tests/fixtures/
- scenario_rows: raw backend rows (table column names)
- scenarios: the same rows mapped to ScenarioRecord
- make_record: factory for ad-hoc ScenarioRecord instances
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from scenario_engine.core.models.scenario import ScenarioRecord

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture() -> Any:
    """Return a callable that loads JSON fixtures from tests/fixtures/.

    Usage::

        def test_something(load_fixture):
            rows = load_fixture("scenario_rows.json")
    """
    def _load(filename: str) -> Any:
        filepath = FIXTURES_DIR / filename
        with filepath.open("r", encoding="utf-8") as f:
            return json.load(f)
    return _load


@pytest.fixture
def scenario_rows(load_fixture) -> list[dict[str, Any]]:
    """Four backtest rows for capital 10 000 EUR; the last has no Sharpe."""
    return load_fixture("scenario_rows.json")


@pytest.fixture
def scenarios(scenario_rows) -> list[ScenarioRecord]:
    return [ScenarioRecord.from_row(row) for row in scenario_rows]


@pytest.fixture
def make_record() -> Callable[..., ScenarioRecord]:
    """Factory: make_record(gain=100, risk_adjusted_ratio=None, ...)."""
    def _make(**fields: Any) -> ScenarioRecord:
        fields.setdefault("capital", 10_000)
        return ScenarioRecord(**fields)
    return _make
