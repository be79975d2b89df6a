"""Tests for the pydantic-settings configuration."""

from __future__ import annotations

from scenario_engine.core.config import Settings
from scenario_engine.core.enums import RatioField


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.scenario_store_table == "DataIntradayGrafV4-3"
    assert settings.capital_column == "Capital"
    assert settings.drawdown_column == "Drawdown"
    assert settings.ratio_field is RatioField.SHARPE
    assert settings.drawdown_max == 10_000


def test_endpoint_is_computed() -> None:
    settings = Settings(
        _env_file=None,
        scenario_store_url="https://example.test/",
        scenario_store_rest_path="rest/v1/",
        scenario_store_table="Scenarios",
    )
    assert settings.scenario_store_endpoint == "https://example.test/rest/v1/Scenarios"


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("SCENARIO_STORE_API_KEY", "secret")
    monkeypatch.setenv("RATIO_FIELD", "GainDD")
    settings = Settings(_env_file=None)
    assert settings.scenario_store_api_key == "secret"
    assert settings.ratio_field is RatioField.GAIN_DRAWDOWN
