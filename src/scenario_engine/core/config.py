"""Pydantic-settings configuration for the scenario engine.

Loads the scenario store connection parameters and the drawdown input bounds
from the environment or a .env file, with defaults matching the hosted
IntradayGraf backtest table. Computed fields produce the fully-formed
REST endpoint for the table.
"""

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from scenario_engine.core.enums import RatioField


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Project
    project_name: str = "Simulateur IntradayGraf"
    debug: bool = False

    # Scenario store (PostgREST / Supabase)
    scenario_store_url: str = "https://supabase.olivdef.fr"
    scenario_store_api_key: str = ""
    scenario_store_rest_path: str = "/rest/v1"
    scenario_store_table: str = "DataIntradayGrafV4-3"
    request_timeout_seconds: float = 30.0

    # Column names used by the two queries
    capital_column: str = "Capital"
    drawdown_column: str = "Drawdown"

    # Which ratio column feeds riskAdjustedRatio
    ratio_field: RatioField = RatioField.SHARPE

    # Drawdown ceiling input bounds (EUR)
    drawdown_min: float = 0
    drawdown_max: float = 10_000
    drawdown_step: float = 100
    drawdown_default: float = 1_000

    @computed_field
    @property
    def scenario_store_endpoint(self) -> str:
        """Absolute URL of the scenario table resource."""
        base = self.scenario_store_url.rstrip("/")
        rest_path = "/" + self.scenario_store_rest_path.strip("/")
        return f"{base}{rest_path}/{self.scenario_store_table}"


# Singleton instance
settings = Settings()
