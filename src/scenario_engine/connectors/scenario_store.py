"""Scenario store connector (PostgREST table of backtest rows).

Two read operations against the hosted table:

- ``list_distinct_capitals``: ``GET /rest/v1/<table>?select=Capital``
- ``list_scenarios``: ``GET /rest/v1/<table>?select=*&Capital=eq.<c>&Drawdown=lte.<dd>``

Filtering happens on the backend; this module only builds the query,
authenticates with the static API key (``apikey`` + ``Authorization: Bearer``)
and maps rows to ScenarioRecord.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

import httpx
from pydantic import ValidationError

from scenario_engine.connectors.base import BaseConnector, DataParsingError
from scenario_engine.core.config import settings
from scenario_engine.core.enums import RatioField
from scenario_engine.core.models.scenario import ScenarioRecord


def format_query_number(value: float) -> str:
    """Render a number the way the backend filter expects it.

    Same text as a browser client's ``String(number)``: integral values lose
    their trailing ``.0`` (1000.0 -> "1000"), magnitudes in [1e-6, 1e21)
    stay positional, anything else uses a signed exponent ("1e-7",
    "1.5e+21").
    """
    if isinstance(value, bool) or not math.isfinite(value):
        raise ValueError(f"Cannot use {value!r} in a query filter")
    number = float(value)
    if number == 0:
        return "0"
    if number.is_integer() and abs(number) < 1e21:
        return str(int(number))

    sign, digit_tuple, exponent = Decimal(repr(number)).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    # scientific position: value = 0.<digits> * 10**point
    point = len(digits) + exponent
    if len(digits) <= point <= 21:
        text = digits + "0" * (point - len(digits))
    elif 0 < point <= 21:
        text = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
        power = point - 1
        text = f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"
    return ("-" if sign else "") + text


class ScenarioStoreConnector(BaseConnector):
    """Connector for the IntradayGraf backtest scenario table.

    Defaults come from ``settings``; every parameter can be overridden,
    which tests use to point at a mocked host.

    Usage::

        async with ScenarioStoreConnector() as store:
            capitals = await store.list_distinct_capitals()
            rows = await store.list_scenarios(capitals[0], 1500)
    """

    SOURCE_NAME: str = "SCENARIO_STORE"

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        table: str | None = None,
        rest_path: str | None = None,
        capital_column: str | None = None,
        drawdown_column: str | None = None,
        ratio_field: RatioField | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            base_url if base_url is not None else settings.scenario_store_url,
            timeout_seconds=(
                timeout_seconds
                if timeout_seconds is not None
                else settings.request_timeout_seconds
            ),
            transport=transport,
        )
        self.api_key = api_key if api_key is not None else settings.scenario_store_api_key
        self.table = table or settings.scenario_store_table
        rest_path = rest_path if rest_path is not None else settings.scenario_store_rest_path
        self.rest_path = "/" + rest_path.strip("/") if rest_path.strip("/") else ""
        self.capital_column = capital_column or settings.capital_column
        self.drawdown_column = drawdown_column or settings.drawdown_column
        self.ratio_field = RatioField(ratio_field or settings.ratio_field)

    def auth_headers(self) -> dict[str, str]:
        return {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
        }

    @property
    def resource_path(self) -> str:
        return f"{self.rest_path}/{self.table}"

    # -----------------------------------------------------------------------
    # Query paths
    # -----------------------------------------------------------------------
    def capitals_path(self) -> str:
        return f"{self.resource_path}?select={self.capital_column}"

    def scenarios_path(self, capital: float, drawdown_max: float) -> str:
        return (
            f"{self.resource_path}?select=*"
            f"&{self.capital_column}=eq.{format_query_number(capital)}"
            f"&{self.drawdown_column}=lte.{format_query_number(drawdown_max)}"
        )

    async def _get_rows(self, path: str) -> list[dict[str, Any]]:
        payload = await self.get_json(path)
        if not isinstance(payload, list) or not all(
            isinstance(row, dict) for row in payload
        ):
            raise DataParsingError(
                f"{self.SOURCE_NAME}: expected a JSON array of objects from {path}"
            )
        return payload

    # -----------------------------------------------------------------------
    # Operations
    # -----------------------------------------------------------------------
    async def list_distinct_capitals(self) -> list[float]:
        """Return every capital present in the table, deduplicated, ascending.

        Null capitals are dropped.

        Raises:
            TransportError: On network failure or non-2xx status.
            DataParsingError: On a malformed payload.
        """
        rows = await self._get_rows(self.capitals_path())

        capitals: set[float] = set()
        for row in rows:
            value = row.get(self.capital_column)
            if value is None:
                continue
            try:
                capitals.add(float(value))
            except (TypeError, ValueError) as exc:
                raise DataParsingError(
                    f"{self.SOURCE_NAME}: non-numeric capital {value!r}"
                ) from exc

        result = sorted(capitals)
        self.log.info("capitals_fetched", rows=len(rows), distinct=len(result))
        return result

    async def list_scenarios(
        self, capital: float, drawdown_max: float
    ) -> list[ScenarioRecord]:
        """Return rows with ``capital`` equal and drawdown at or below the ceiling.

        An empty list is a normal outcome, not an error. Rows violating a
        field constraint (e.g. ``Capital`` 0, ``pGagnant`` 41.25) are logged
        and skipped so the remaining rows can still be ranked.

        Raises:
            TransportError: On network failure or non-2xx status.
            DataParsingError: If the payload is not an array of objects.
        """
        rows = await self._get_rows(self.scenarios_path(capital, drawdown_max))

        records: list[ScenarioRecord] = []
        skipped = 0
        for index, row in enumerate(rows):
            try:
                records.append(ScenarioRecord.from_row(row, self.ratio_field))
            except ValidationError as exc:
                skipped += 1
                self.log.warning(
                    "invalid_row_skipped",
                    index=index,
                    fields=[".".join(map(str, err["loc"])) for err in exc.errors()],
                )

        self.log.info(
            "scenarios_fetched",
            capital=capital,
            drawdown_max=drawdown_max,
            count=len(records),
            skipped=skipped,
        )
        return records
