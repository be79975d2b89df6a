"""ScenarioRecord: one backtested parameter combination for a fixed capital.

Records are read-only snapshots of backend rows. Every field is optional:
the backend may leave any column null, and "missing" must stay distinct
from zero. Column names follow the IntradayGraf backtest table; the
risk-adjusted ratio column depends on the configured RatioField.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from scenario_engine.core.enums import RatioField

# Backend column -> model field (ratio column handled separately)
COLUMN_MAP: dict[str, str] = {
    "Actif": "asset",
    "Capital": "capital",
    "Drawdown": "drawdown_max",
    "Gain": "gain",
    "pRisque": "risk_per_trade",
    "pVente": "capital_used_at_sell",
    "pGagnant": "win_rate",
    "RendementAnnuel": "annualized_return",
    "NbTrade": "trade_count",
}


class ScenarioRecord(BaseModel):
    """Immutable backtest row.

    Units:
        capital, drawdown_max, gain: EUR
        risk_per_trade: percent (0-100)
        capital_used_at_sell, win_rate: fraction (0-1)
        annualized_return: fraction, may be negative
        risk_adjusted_ratio: gain / drawdown_max
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    asset: Optional[str] = None
    capital: Optional[float] = Field(None, gt=0)
    drawdown_max: Optional[float] = Field(None, ge=0)
    gain: Optional[float] = None
    risk_per_trade: Optional[float] = Field(None, ge=0, le=100)
    capital_used_at_sell: Optional[float] = Field(None, ge=0, le=1)
    win_rate: Optional[float] = Field(None, ge=0, le=1)
    annualized_return: Optional[float] = None
    risk_adjusted_ratio: Optional[float] = None
    trade_count: Optional[int] = Field(None, ge=0)

    @classmethod
    def from_row(
        cls,
        row: Mapping[str, Any],
        ratio_field: RatioField = RatioField.SHARPE,
    ) -> "ScenarioRecord":
        """Build a record from a backend row, ignoring unknown columns.

        Raises:
            pydantic.ValidationError: If a present value violates a field
                constraint (e.g. negative drawdown).
        """
        data = {field: row.get(column) for column, field in COLUMN_MAP.items()}
        data["risk_adjusted_ratio"] = row.get(RatioField(ratio_field).value)
        return cls.model_validate(data)
